"""Response builder and wire serializer."""

from __future__ import annotations

from enum import Enum
from typing import Mapping

from ..compression import compress
from .status import Status


TEXT_PLAIN = "text/plain"
OCTET_STREAM = "application/octet-stream"


class Encoding(Enum):
    """Content encodings the server can apply to a body."""
    GZIP = "gzip"


class Response:
    """
    A response under construction.

    Routes create one, `negotiate()` picks the content encoding from the
    request headers, and `to_bytes()` renders it exactly once.
    """

    __slots__ = ("status", "content_type", "content", "encoding", "_wire")

    def __init__(
        self,
        status: Status = Status.OK,
        *,
        content: bytes | None = None,
        content_type: str = "",
    ):
        self.status = status
        self.content = content
        self.content_type = content_type if content is not None else ""
        self.encoding: Encoding | None = None
        self._wire: bytes | None = None

    @classmethod
    def text(cls, text: str) -> "Response":
        return cls(Status.OK, content=text.encode("utf-8"), content_type=TEXT_PLAIN)

    @classmethod
    def octet_stream(cls, data: bytes) -> "Response":
        return cls(Status.OK, content=data, content_type=OCTET_STREAM)

    def negotiate(self, headers: Mapping[str, str]) -> "Response":
        """Use gzip when the client's accept-encoding mentions it."""
        if "gzip" in headers.get("accept-encoding", ""):
            self.encoding = Encoding.GZIP
        else:
            self.encoding = None
        return self

    def to_bytes(self) -> bytes:
        """Serialize to wire bytes. Later calls return the cached result."""
        if self._wire is None:
            self._wire = self._render()
        return self._wire

    def _render(self) -> bytes:
        start = f"HTTP/1.1 {self.status.line}\r\n".encode("ascii")
        if self.content is None:
            return start + b"\r\n"

        body = self.content
        head: list[str] = []
        if self.encoding is Encoding.GZIP:
            # Compress first: Content-Length describes the bytes on the wire.
            body = compress(body)
            head.append(f"Content-Encoding: {self.encoding.value}\r\n")
        head.append(f"Content-Type: {self.content_type}\r\n")
        head.append(f"Content-Length: {len(body)}\r\n")

        return start + "".join(head).encode("latin-1") + b"\r\n" + body

    def __repr__(self) -> str:
        size = None if self.content is None else len(self.content)
        return f"Response(status={self.status.line!r}, content_type={self.content_type!r}, size={size})"
