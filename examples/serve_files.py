"""
File server example

Runs minihttp in-process with /files/ backed by a temporary directory.

Run:
  python examples/serve_files.py

Then try:
  curl -i http://127.0.0.1:4221/echo/hello
  curl -i -H 'Accept-Encoding: gzip' http://127.0.0.1:4221/echo/hello --output -
  curl -i -X POST http://127.0.0.1:4221/files/note.txt -d 'hello there'
  curl -i http://127.0.0.1:4221/files/note.txt
"""

from __future__ import annotations

import logging
import tempfile
from pathlib import Path

import anyio

from minihttp import HttpServer, ServerConfig


async def main() -> None:
    with tempfile.TemporaryDirectory() as tmp:
        config = ServerConfig(directory=Path(tmp))
        async with anyio.create_task_group() as tg:
            port = await tg.start(HttpServer(config).serve)

            print(f"Listening on http://{config.host}:{port}, files in {tmp}")
            print("Press Ctrl-C to stop.")


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    anyio.run(main)
