"""Process-wide server configuration."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True, slots=True)
class ServerConfig:
    """
    Settings fixed at startup and shared read-only by every connection.

    Attributes:
        host: Address to listen on
        port: TCP port to listen on (0 lets the OS pick one)
        directory: Root for the /files/ routes; None disables them
        max_line_bytes: Longest request or header line accepted
    """
    host: str = "127.0.0.1"
    port: int = 4221
    directory: Path | None = None
    max_line_bytes: int = 64 * 1024

    def __post_init__(self):
        if self.directory is not None and not isinstance(self.directory, Path):
            object.__setattr__(self, "directory", Path(self.directory))
        if self.max_line_bytes <= 0:
            raise ValueError("max_line_bytes must be positive")
