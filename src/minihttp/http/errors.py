"""
Request errors.

Two kinds are recoverable and answered with a status response:
  - BadRequest: the request line is not `METHOD PATH VERSION`
  - MethodNotAllowed: the method is not GET or POST

Everything else (FatalRequestError, stream and decoding errors) drops the
connection without a response.
"""

from __future__ import annotations

from .status import Status


class RequestError(Exception):
    """A protocol error that still gets a response."""

    status: Status = Status.BAD_REQUEST

    def __init__(self, detail: str = ""):
        super().__init__(detail or self.status.phrase)
        self.detail = detail


class BadRequest(RequestError):
    """Malformed request line."""
    status = Status.BAD_REQUEST


class MethodNotAllowed(RequestError):
    """Unsupported request method."""
    status = Status.METHOD_NOT_ALLOWED


class FatalRequestError(Exception):
    """The request cannot be read any further; the connection is dropped."""
    pass
