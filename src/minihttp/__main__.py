"""
Command line entry point.

    python -m minihttp --directory /tmp/files
    curl -i http://127.0.0.1:4221/echo/hello
"""

from __future__ import annotations

import argparse
import logging
import sys
from pathlib import Path

from .config import ServerConfig
from .server import run


LOG_FORMAT = "%(asctime)s %(levelname)-7s %(name)s: %(message)s"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="minihttp",
        description="Minimal HTTP/1.1 server",
    )
    parser.add_argument(
        "--directory", "-d",
        type=Path,
        default=None,
        help="directory served and written by /files/ (disabled when omitted)",
    )
    parser.add_argument("--host", "-H", default="127.0.0.1", help="address to listen on")
    parser.add_argument("--port", "-p", type=int, default=4221, help="port to listen on")
    parser.add_argument(
        "--log-level", "-l",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        default="INFO",
        help="logging verbosity",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=args.log_level, format=LOG_FORMAT)

    config = ServerConfig(host=args.host, port=args.port, directory=args.directory)
    try:
        run(config)
    except KeyboardInterrupt:
        logging.getLogger(__name__).info("shutting down")
    except OSError as e:
        logging.getLogger(__name__).error("cannot start server on %s:%d: %s", config.host, config.port, e)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
