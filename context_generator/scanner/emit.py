"""Streaming content dump for scan mode.

Output format per file::

    --------------------
    file: <relative path>
    --------------------
        <line>

followed by one closing separator after the last file. Output is streamed;
a read failure leaves whatever was already written in place.
"""

from __future__ import annotations

from pathlib import Path
from typing import TextIO

from ..errors import ScanIOError
from ..exclusions.filter import display_posix
from .classify import ContentType

SEPARATOR = "-" * 20
LINE_INDENT = "    "


class ContentEmitter:
    """Writes delimited, indented file contents to ``out``."""

    def __init__(self, out: TextIO) -> None:
        self.out = out
        self.files_emitted = 0

    def write_header(self, display_path: str) -> None:
        self.out.write(f"{SEPARATOR}\n")
        self.out.write(f"file: {display_path}\n")
        self.out.write(f"{SEPARATOR}\n")

    def emit_file(self, path: Path, base_dir: Path, content_type: ContentType = ContentType.UTF_8) -> None:
        """Write one file block.

        The file is opened before the header is written, so a file that cannot
        be opened leaves no partial block. Line boundaries are ``\\n`` with an
        optional preceding ``\\r``; a ``\\r`` not followed by ``\\n`` is kept.
        Undecodable bytes are replaced.
        """
        encoding = content_type.encoding or "utf-8"
        try:
            handle = path.open("r", encoding=encoding, errors="replace", newline="\n")
        except OSError as exc:
            raise ScanIOError(path, exc) from exc

        with handle:
            self.write_header(display_posix(path, base_dir))
            try:
                for line in handle:
                    if line.endswith("\n"):
                        line = line[:-1].removesuffix("\r")
                    self.out.write(f"{LINE_INDENT}{line}\n")
            except OSError as exc:
                raise ScanIOError(path, exc) from exc
        self.files_emitted += 1

    def finish(self) -> None:
        """Write the closing separator; present even when nothing was emitted."""
        self.out.write(f"{SEPARATOR}\n")


__all__ = ["SEPARATOR", "LINE_INDENT", "ContentEmitter"]
