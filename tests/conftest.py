"""Shared fixtures."""

from __future__ import annotations

import math
from contextlib import asynccontextmanager
from pathlib import Path
from typing import AsyncIterator

import anyio
import pytest
from anyio.streams.buffered import BufferedByteReceiveStream

from minihttp import HttpServer, ServerConfig


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def make_reader():
    """Build a buffered reader that yields `data` in `chunk_size` pieces, then ends."""
    def factory(data: bytes, chunk_size: int = 7) -> BufferedByteReceiveStream:
        send, receive = anyio.create_memory_object_stream(max_buffer_size=math.inf)
        for i in range(0, len(data), chunk_size):
            send.send_nowait(data[i:i + chunk_size])
        send.close()
        return BufferedByteReceiveStream(receive)

    return factory


@pytest.fixture
def files_dir(tmp_path: Path) -> Path:
    directory = tmp_path / "files"
    directory.mkdir()
    return directory


class RunningServer:
    """Client side of a server started inside a test's task group."""

    def __init__(self, port: int):
        self.port = port

    async def request(self, payload: bytes) -> bytes:
        """Send raw bytes and read until the server closes the connection."""
        with anyio.fail_after(5):
            async with await anyio.connect_tcp("127.0.0.1", self.port) as stream:
                await stream.send(payload)
                chunks = []
                while True:
                    try:
                        chunks.append(await stream.receive())
                    except (anyio.EndOfStream, anyio.BrokenResourceError):
                        break
                return b"".join(chunks)


@asynccontextmanager
async def running(config: ServerConfig) -> AsyncIterator[RunningServer]:
    async with anyio.create_task_group() as tg:
        port = await tg.start(HttpServer(config).serve)
        yield RunningServer(port)
        tg.cancel_scope.cancel()


@pytest.fixture
async def server(files_dir: Path) -> AsyncIterator[RunningServer]:
    async with running(ServerConfig(port=0, directory=files_dir)) as srv:
        yield srv


@pytest.fixture
async def bare_server() -> AsyncIterator[RunningServer]:
    async with running(ServerConfig(port=0)) as srv:
        yield srv
