"""
HTTP/1.1 server on AnyIO sockets.

- One request per connection (the connection is closed after the response)
- Optional Content-Length body (no chunked encoding)
- Every accepted connection runs in its own task in the listener's TaskGroup
"""

from __future__ import annotations

import logging

import anyio
from anyio.abc import SocketAttribute, SocketStream, TaskStatus
from anyio.streams.buffered import BufferedByteReceiveStream

from .config import ServerConfig
from .http.errors import RequestError
from .http.request import parse_request
from .http.response import Response


logger = logging.getLogger(__name__)


class HttpServer:
    """
    Serves the fixed route table on `config.host:config.port`.

    The config is shared by reference with every request; nothing mutates it.
    """

    def __init__(self, config: ServerConfig | None = None):
        self._config = config or ServerConfig()

    @property
    def config(self) -> ServerConfig:
        return self._config

    async def serve(self, *, task_status: TaskStatus[int] = anyio.TASK_STATUS_IGNORED) -> None:
        """
        Bind the listener and serve until cancelled.

        Reports the bound port through `task_status`, so `await tg.start(server.serve)`
        returns it (useful with port 0).
        """
        listener = await anyio.create_tcp_listener(
            local_host=self._config.host,
            local_port=self._config.port,
        )
        port = listener.extra(SocketAttribute.local_port)
        logger.info("listening on %s:%d", self._config.host, port)
        task_status.started(port)

        async with listener:
            await listener.serve(self.handle_connection)

    async def handle_connection(self, stream: SocketStream) -> None:
        """Handle one connection; failures are logged and never reach the listener."""
        async with stream:
            peer = _peer(stream)
            logger.debug("accepted connection from %s", peer)
            try:
                await self._respond(stream, peer)
            except Exception:
                logger.exception("dropping connection from %s", peer)

    async def _respond(self, stream: SocketStream, peer: str) -> None:
        reader = BufferedByteReceiveStream(stream)
        try:
            request = await parse_request(reader, self._config)
        except RequestError as e:
            logger.warning("%s: %s -> %s", peer, e, e.status)
            await stream.send(Response(e.status).to_bytes())
            return

        response = await request.handle()
        logger.info("%s: %s %s -> %s", peer, request.method.value, request.path, response.status)
        await stream.send(response.to_bytes())


def _peer(stream: SocketStream) -> str:
    try:
        address = stream.extra(SocketAttribute.remote_address)
    except anyio.TypedAttributeLookupError:
        return "unknown"
    if isinstance(address, tuple):
        return f"{address[0]}:{address[1]}"
    return str(address)


def run(config: ServerConfig) -> None:
    """Run the server in the foreground until interrupted."""
    anyio.run(HttpServer(config).serve)
