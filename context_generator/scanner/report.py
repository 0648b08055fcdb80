"""Dry-run report: processed and excluded sections rendered as trees."""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path
from typing import TextIO

from ..exclusions.filter import display_text
from .tree import FileInfo, build_file_tree, render_tree

NONE_MARKER = "  (none)"


def _write_section(out: TextIO, files: Sequence[FileInfo], show_reasons: bool) -> None:
    if not files:
        out.write(f"{NONE_MARKER}\n")
        return
    ordered = sorted(files, key=lambda info: info.rel_path)
    for line in render_tree(build_file_tree(ordered), show_reasons=show_reasons):
        out.write(f"{line}\n")


def print_dry_run_results(
    included: Sequence[FileInfo],
    excluded: Sequence[FileInfo],
    directory: str | Path,
    out: TextIO,
) -> None:
    """Write the full dry-run report for ``directory`` as the user named it."""
    out.write(f"Dry run for directory: {display_text(str(directory))}\n\n")
    out.write("Files that would be processed:\n")
    _write_section(out, included, show_reasons=False)
    out.write("\nFiles that would be excluded:\n")
    _write_section(out, excluded, show_reasons=True)


__all__ = ["print_dry_run_results"]
