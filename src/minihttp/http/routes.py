"""
Route table.

Routes are checked in a fixed order and the first matching path wins:

    /              GET   empty 200
    /echo/<rest>   GET   <rest> as text/plain
    /user-agent*   GET   the User-Agent header as text/plain
    /files/<name>  GET   file contents from the configured directory
    /files/<name>  POST  write the request body into the configured directory

A matching path with the wrong method is a 405; an unmatched path is a 404.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

import anyio

from .response import Response
from .status import Method, Status

if TYPE_CHECKING:
    from .request import Request


logger = logging.getLogger(__name__)

ECHO_PREFIX = "/echo/"
USER_AGENT_PREFIX = "/user-agent"
FILES_PREFIX = "/files/"
MISSING_USER_AGENT = "User-Agent header is missing"


async def dispatch(request: Request) -> Response:
    path = request.path
    method = request.method

    if path == "/":
        return _only_get(method) or Response(Status.OK)

    if path.startswith(ECHO_PREFIX):
        return _only_get(method) or Response.text(path[len(ECHO_PREFIX):])

    if path.startswith(USER_AGENT_PREFIX):
        agent = request.headers.get("user-agent", MISSING_USER_AGENT)
        return _only_get(method) or Response.text(agent)

    if path.startswith(FILES_PREFIX):
        name = path[len(FILES_PREFIX):]
        match method:
            case Method.GET:
                return await read_file(request, name)
            case Method.POST:
                return await write_file(request, name)

    return Response(Status.NOT_FOUND)


def _only_get(method: Method) -> Response | None:
    if method is Method.GET:
        return None
    return Response(Status.METHOD_NOT_ALLOWED)


async def _resolve(directory: anyio.Path, name: str) -> anyio.Path | None:
    """Join `name` onto `directory`, refusing anything that escapes it or is not a valid path."""
    root = await directory.resolve()
    try:
        target = await (root / name).resolve()
    except ValueError:
        # e.g. an embedded NUL byte
        return None
    if target == root or not target.is_relative_to(root):
        return None
    return target


async def read_file(request: Request, name: str) -> Response:
    directory = request.config.directory
    if directory is None:
        return Response(Status.NOT_FOUND)

    target = await _resolve(anyio.Path(directory), name)
    if target is None:
        logger.warning("refusing to read %r under %s", name, directory)
        return Response(Status.NOT_FOUND)

    try:
        data = await target.read_bytes()
    except OSError as e:
        logger.info("cannot read %s: %s", target, e)
        return Response(Status.NOT_FOUND)
    return Response.octet_stream(data)


async def write_file(request: Request, name: str) -> Response:
    directory = request.config.directory
    if directory is None:
        return Response(Status.INTERNAL_SERVER_ERROR)

    target = await _resolve(anyio.Path(directory), name)
    if target is None:
        logger.warning("refusing to write %r under %s", name, directory)
        return Response(Status.INTERNAL_SERVER_ERROR)

    try:
        await target.write_bytes(request.body or b"")
    except OSError as e:
        logger.error("cannot write %s: %s", target, e)
        return Response(Status.INTERNAL_SERVER_ERROR)
    return Response(Status.CREATED)
