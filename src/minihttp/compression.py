"""gzip codec for response bodies."""

from __future__ import annotations

import gzip


class CompressionError(Exception):
    """Raised when a body cannot be gzip-encoded."""
    pass


def compress(data: bytes) -> bytes:
    """
    Compress `data` into a gzip container at the default level.

    The header mtime is pinned to 0 so equal inputs give equal outputs.
    """
    try:
        return gzip.compress(data, mtime=0)
    except (OSError, TypeError, ValueError) as e:
        raise CompressionError(f"gzip encoding failed: {e!r}") from e
