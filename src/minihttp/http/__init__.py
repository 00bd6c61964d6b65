"""HTTP/1.1 message handling: parsing, routing and serialization."""

from .errors import BadRequest, FatalRequestError, MethodNotAllowed, RequestError
from .request import Request, parse_request
from .response import Encoding, Response
from .status import Method, Status

__all__ = [
    "BadRequest",
    "Encoding",
    "FatalRequestError",
    "Method",
    "MethodNotAllowed",
    "Request",
    "RequestError",
    "Response",
    "Status",
    "parse_request",
]
