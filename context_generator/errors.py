"""Exception types raised by catalog loading, filtering, and scanning.

Everything derives from ``ContextGeneratorError`` so the CLI can turn any
failure into one ``SystemExit`` message.
"""

from __future__ import annotations

from pathlib import Path


class ContextGeneratorError(Exception):
    """Base class for all tool-specific failures."""


class PathNotFoundError(ContextGeneratorError):
    """Scan root does not exist."""

    def __init__(self, path: str | Path) -> None:
        self.path = Path(path)
        super().__init__(f"Directory {str(path)!r} does not exist")


class PathResolutionError(ContextGeneratorError):
    """Scan root exists but could not be canonicalized."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error getting absolute path for {str(path)!r}: {cause}")


class PatternError(ContextGeneratorError, ValueError):
    """An exclude pattern is not a valid glob."""

    def __init__(self, pattern: str, message: str) -> None:
        self.pattern = pattern
        self.message = message
        super().__init__(f"invalid pattern {pattern!r}: {message}")


class ScanIOError(ContextGeneratorError):
    """Open/read failure on one file or directory during a scan."""

    def __init__(self, path: str | Path, cause: OSError) -> None:
        self.path = Path(path)
        self.cause = cause
        super().__init__(f"Error reading {str(path)!r}: {cause}")


class CatalogLoadError(ContextGeneratorError):
    """Catalog source is malformed; recovered locally as an empty catalog."""


__all__ = [
    "ContextGeneratorError",
    "PathNotFoundError",
    "PathResolutionError",
    "PatternError",
    "ScanIOError",
    "CatalogLoadError",
]
