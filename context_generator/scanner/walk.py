"""Depth-first filesystem traversal in natural directory order.

Each directory is listed completely and its handle closed before any child is
visited, so at most one directory handle is open at a time. Entries are not
sorted here; ordering is a presentation concern of the dry-run report.
"""

from __future__ import annotations

import logging
import os
from collections.abc import Iterator
from dataclasses import dataclass
from pathlib import Path

from ..errors import PathNotFoundError, PathResolutionError, ScanIOError
from ..exclusions.filter import relative_posix

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class WalkEntry:
    """One visited filesystem entry below the scan root."""

    path: Path
    rel_path: str
    is_dir: bool
    is_file: bool


@dataclass(frozen=True)
class ScanIssue:
    """Recoverable per-entry problem that was logged and skipped."""

    path: Path
    message: str


def is_vanished(exc: BaseException) -> bool:
    """Return whether ``exc`` means the entry disappeared after being listed."""
    cause = exc.cause if isinstance(exc, ScanIOError) else exc
    return isinstance(cause, (FileNotFoundError, NotADirectoryError))


def record_issue(issues: list[ScanIssue] | None, path: Path, exc: BaseException) -> None:
    logger.warning("Skipping %s: %s", path, exc)
    if issues is not None:
        issues.append(ScanIssue(path=path, message=str(exc)))


def resolve_root(directory: str | Path) -> Path:
    """Return the absolute, canonical scan root.

    Raises ``PathNotFoundError`` when it does not exist and
    ``PathResolutionError`` when it cannot be canonicalized.
    """
    path = Path(directory)
    try:
        exists = path.exists()
    except OSError as exc:
        raise PathResolutionError(directory, exc) from exc
    if not exists:
        raise PathNotFoundError(directory)
    try:
        return path.resolve(strict=True)
    except OSError as exc:
        raise PathResolutionError(directory, exc) from exc


def _list_directory(directory: Path) -> list[os.DirEntry[str]]:
    with os.scandir(directory) as entries:
        return list(entries)


def iter_entries(root: Path, issues: list[ScanIssue] | None = None) -> Iterator[WalkEntry]:
    """Yield every entry below ``root`` depth-first, parents before children.

    ``root`` itself is the base of the walk and is not yielded. Directories
    that vanish between listing and descent are recorded in ``issues`` and
    skipped; any other listing failure raises ``ScanIOError``.
    """

    def listing(directory: Path) -> Iterator[os.DirEntry[str]]:
        try:
            return iter(_list_directory(directory))
        except OSError as exc:
            if is_vanished(exc):
                record_issue(issues, directory, exc)
                return iter(())
            raise ScanIOError(directory, exc) from exc

    # One pending-children iterator per open level; the top is the deepest.
    stack = [listing(root)]
    while stack:
        child = next(stack[-1], None)
        if child is None:
            stack.pop()
            continue

        child_path = Path(child.path)
        try:
            is_dir = child.is_dir(follow_symlinks=False)
            is_file = child.is_file(follow_symlinks=False)
        except OSError:
            is_dir = False
            is_file = False
        yield WalkEntry(
            path=child_path,
            rel_path=relative_posix(child_path, root),
            is_dir=is_dir,
            is_file=is_file,
        )
        if is_dir:
            stack.append(listing(child_path))


__all__ = [
    "WalkEntry",
    "ScanIssue",
    "is_vanished",
    "record_issue",
    "resolve_root",
    "iter_entries",
]
