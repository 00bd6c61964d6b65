"""
Request parsing.

A request is read from a buffered byte stream in three steps: the request
line, the header block up to the first empty line, then `content-length`
bytes of body when that header is present. Exactly one request is read per
connection; whatever follows is ignored.
"""

from __future__ import annotations

from dataclasses import dataclass

from anyio import IncompleteRead
from anyio.streams.buffered import BufferedByteReceiveStream

from ..config import ServerConfig
from .errors import BadRequest, FatalRequestError, MethodNotAllowed
from .response import Response
from .routes import dispatch
from .status import Method


HeaderMap = dict[str, str]


@dataclass(frozen=True, slots=True)
class Request:
    method: Method
    path: str
    version: str
    headers: HeaderMap
    body: bytes | None
    config: ServerConfig

    async def handle(self) -> Response:
        """Route the request and pick the response's content encoding."""
        response = await dispatch(self)
        return response.negotiate(self.headers)


async def _read_line(reader: BufferedByteReceiveStream, max_bytes: int) -> str | None:
    """
    Read one line without its terminator.

    At end of stream, returns whatever was buffered, or None if nothing was.
    """
    try:
        raw = await reader.receive_until(b"\n", max_bytes)
    except IncompleteRead:
        raw = reader.buffer
        if not raw:
            return None
        # Drain the leftover so a later read sees a clean end of stream.
        raw = await reader.receive_exactly(len(raw))
    if raw.endswith(b"\r"):
        raw = raw[:-1]
    return raw.decode("utf-8")


def parse_request_line(line: str) -> tuple[Method, str, str]:
    parts = line.split(" ")
    if len(parts) != 3:
        raise BadRequest(f"invalid request line: {line!r}")
    token, path, version = parts

    method = Method.parse(token)
    if method is None:
        raise MethodNotAllowed(f"unsupported method {token!r}")
    return method, path, version


def parse_header_line(line: str) -> tuple[str, str] | None:
    """Split `Name: value`; lines without the separator are ignored."""
    key, sep, value = line.partition(": ")
    if not sep:
        return None
    return key.lower(), value


def parse_content_length(value: str) -> int:
    if not (value.isascii() and value.isdigit()):
        raise FatalRequestError(f"invalid content-length: {value!r}")
    return int(value)


async def parse_request(reader: BufferedByteReceiveStream, config: ServerConfig) -> Request:
    """
    Read a single request from `reader`.

    Raises:
        BadRequest: the request line does not have exactly three tokens
        MethodNotAllowed: the method is neither GET nor POST
        FatalRequestError: the content-length header is not a number
        anyio.IncompleteRead: the stream ended inside the declared body
        anyio.DelimiterNotFound: a line exceeded `config.max_line_bytes`
        UnicodeDecodeError: the head is not valid UTF-8
    """
    line = await _read_line(reader, config.max_line_bytes)
    method, path, version = parse_request_line(line or "")

    headers: HeaderMap = {}
    while True:
        line = await _read_line(reader, config.max_line_bytes)
        if not line:
            break
        header = parse_header_line(line)
        if header is not None:
            key, value = header
            headers[key] = value

    body = None
    if "content-length" in headers:
        length = parse_content_length(headers["content-length"])
        body = await reader.receive_exactly(length)

    return Request(
        method=method,
        path=path,
        version=version,
        headers=headers,
        body=body,
        config=config,
    )
