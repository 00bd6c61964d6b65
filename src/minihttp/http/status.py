"""Supported request methods and response statuses."""

from __future__ import annotations

from enum import Enum


class Method(Enum):
    """HTTP methods the server understands."""
    GET = "GET"
    POST = "POST"

    @classmethod
    def parse(cls, token: str) -> "Method | None":
        """Case-insensitive lookup; None for anything unsupported."""
        try:
            return cls(token.upper())
        except ValueError:
            return None


class Status(Enum):
    """Response statuses, each carrying its code and reason phrase."""
    OK = (200, "OK")
    CREATED = (201, "Created")
    BAD_REQUEST = (400, "Bad Request")
    NOT_FOUND = (404, "Not Found")
    METHOD_NOT_ALLOWED = (405, "Method Not Allowed")
    INTERNAL_SERVER_ERROR = (500, "Internal Server Error")

    @property
    def code(self) -> int:
        return self.value[0]

    @property
    def phrase(self) -> str:
        return self.value[1]

    @property
    def line(self) -> str:
        """Status line text after the version, e.g. `404 Not Found`."""
        return f"{self.code} {self.phrase}"

    def __str__(self) -> str:
        return self.line
