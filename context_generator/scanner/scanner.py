"""Scan orchestration for content mode and dry-run mode.

Both modes share one traversal: every entry is tested against the exclusion
filter on its own, so an excluded directory is still descended into and its
children are judged independently. Only included files are classified.
"""

from __future__ import annotations

import enum
import logging
from pathlib import Path
from typing import TextIO

from ..errors import ScanIOError
from ..exclusions.filter import ExclusionFilter, display_text
from .classify import ContentType, content_type_of
from .emit import ContentEmitter
from .report import print_dry_run_results
from .tree import FileInfo
from .walk import ScanIssue, is_vanished, iter_entries, record_issue, resolve_root

logger = logging.getLogger(__name__)


class ScanMode(enum.Enum):
    CONTENT = "content"
    PREVIEW = "preview"


class Scanner:
    """Walks a root with one compiled filter and writes either output mode.

    ``issues`` collects recoverable per-entry problems (entries that vanished
    mid-walk) from the most recent run.
    """

    def __init__(self, exclusion_filter: ExclusionFilter) -> None:
        self.filter = exclusion_filter
        self.issues: list[ScanIssue] = []

    def run(self, directory: str | Path, out: TextIO, mode: ScanMode = ScanMode.CONTENT) -> None:
        if mode is ScanMode.PREVIEW:
            self.dry_run(directory, out)
        else:
            self.scan(directory, out)

    def _content_type(self, path: Path) -> ContentType | None:
        """Classify ``path``; ``None`` when it vanished before it could be read."""
        try:
            return content_type_of(path)
        except ScanIOError as exc:
            if is_vanished(exc):
                record_issue(self.issues, path, exc)
                return None
            raise

    def _process_file(self, path: Path, base_dir: Path, emitter: ContentEmitter) -> None:
        content_type = self._content_type(path)
        if content_type is None:
            return
        if not content_type.is_text:
            logger.debug("Skipping binary file %s", path)
            return
        try:
            emitter.emit_file(path, base_dir, content_type)
        except ScanIOError as exc:
            # Open failures happen before the header; only then is a vanished file skippable.
            if is_vanished(exc):
                record_issue(self.issues, path, exc)
                return
            raise

    def scan(self, directory: str | Path, out: TextIO) -> None:
        """Write every included text file as a delimited block, then a separator."""
        self.issues = []
        root = resolve_root(directory)
        emitter = ContentEmitter(out)

        if root.is_file():
            self._process_file(root, root, emitter)
            emitter.finish()
            return

        for entry in iter_entries(root, self.issues):
            if self.filter.should_exclude(entry.path, root):
                logger.debug("Excluded %s", entry.rel_path)
                continue
            if entry.is_file:
                self._process_file(entry.path, root, emitter)
        emitter.finish()
        logger.debug("Emitted %d file(s) from %s", emitter.files_emitted, root)

    def collect(self, root: Path) -> tuple[list[FileInfo], list[FileInfo]]:
        """Classify every entry under an already resolved ``root``.

        Returns ``(included, excluded)`` in traversal order. A single-file root
        is recorded as one entry with relative path ``"."``.
        """
        included: list[FileInfo] = []
        excluded: list[FileInfo] = []

        if root.is_file():
            candidates = [(root, ".", False, True)]
        else:
            candidates = (
                (entry.path, entry.rel_path, entry.is_dir, entry.is_file)
                for entry in iter_entries(root, self.issues)
            )

        for path, rel_path, is_dir, is_file in candidates:
            shown = display_text(rel_path)
            reason = self.filter.exclusion_reason(path, root)
            if reason is not None:
                excluded.append(FileInfo(rel_path=shown, is_dir=is_dir, excluded=True, reason=reason))
                continue

            is_text = False
            if is_file:
                content_type = self._content_type(path)
                if content_type is None:
                    continue
                is_text = content_type.is_text
            included.append(FileInfo(rel_path=shown, is_dir=is_dir, is_text=is_text))

        return included, excluded

    def dry_run(self, directory: str | Path, out: TextIO) -> None:
        """Write the processed/excluded tree report without reading file bodies."""
        self.issues = []
        root = resolve_root(directory)
        included, excluded = self.collect(root)
        print_dry_run_results(included, excluded, directory, out)


__all__ = ["ScanMode", "Scanner"]
