"""A minimal one-request-per-connection HTTP/1.1 server on AnyIO."""

from .compression import CompressionError, compress
from .config import ServerConfig
from .http import (
    BadRequest,
    Encoding,
    FatalRequestError,
    Method,
    MethodNotAllowed,
    Request,
    RequestError,
    Response,
    Status,
    parse_request,
)
from .server import HttpServer, run

__all__ = [
    # Configuration
    "ServerConfig",
    # Protocol
    "Method",
    "Status",
    "Request",
    "Response",
    "Encoding",
    "parse_request",
    # Errors
    "RequestError",
    "BadRequest",
    "MethodNotAllowed",
    "FatalRequestError",
    "CompressionError",
    # Codec
    "compress",
    # Server
    "HttpServer",
    "run",
]
