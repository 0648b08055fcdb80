"""Text/binary classification from a leading byte sample.

The decision looks only at file content, never at the extension: byte-order
marks mark text, a ``%PDF`` header or any NUL byte marks binary, and a sample
dominated by non-whitespace control bytes is binary as well.
"""

from __future__ import annotations

import enum
import re
from pathlib import Path

from ..errors import ScanIOError

CLASSIFY_SAMPLE_BYTES = 1024
CONTROL_BYTE_RATIO_LIMIT = 0.3

_CONTROL_BYTES_RE = re.compile(rb"[\x00-\x08\x0e-\x1a\x1c-\x1f\x7f]")


class ContentType(enum.Enum):
    BINARY = "binary"
    UTF_8 = "utf-8"
    UTF_8_BOM = "utf-8-bom"
    UTF_16LE = "utf-16le"
    UTF_16BE = "utf-16be"
    UTF_32LE = "utf-32le"
    UTF_32BE = "utf-32be"

    @property
    def is_text(self) -> bool:
        return self is not ContentType.BINARY

    @property
    def encoding(self) -> str | None:
        """Python codec that reads the file and drops its BOM, if text."""
        return _ENCODINGS.get(self)


_ENCODINGS = {
    ContentType.UTF_8: "utf-8",
    ContentType.UTF_8_BOM: "utf-8-sig",
    ContentType.UTF_16LE: "utf-16",
    ContentType.UTF_16BE: "utf-16",
    ContentType.UTF_32LE: "utf-32",
    ContentType.UTF_32BE: "utf-32",
}

# UTF-32LE must be probed before UTF-16LE; its BOM starts with the same bytes.
_MAGIC_BYTES: tuple[tuple[bytes, ContentType], ...] = (
    (b"\xef\xbb\xbf", ContentType.UTF_8_BOM),
    (b"\xff\xfe\x00\x00", ContentType.UTF_32LE),
    (b"\x00\x00\xfe\xff", ContentType.UTF_32BE),
    (b"\xff\xfe", ContentType.UTF_16LE),
    (b"\xfe\xff", ContentType.UTF_16BE),
)


def inspect(sample: bytes) -> ContentType:
    """Classify a byte sample. An empty sample is UTF-8 text."""
    for magic, content_type in _MAGIC_BYTES:
        if sample.startswith(magic):
            return content_type
    if sample.startswith(b"%PDF") or b"\x00" in sample:
        return ContentType.BINARY
    if sample and len(_CONTROL_BYTES_RE.findall(sample)) / len(sample) > CONTROL_BYTE_RATIO_LIMIT:
        return ContentType.BINARY
    return ContentType.UTF_8


def read_sample(path: Path, size: int = CLASSIFY_SAMPLE_BYTES) -> bytes:
    """Read up to ``size`` leading bytes; ``OSError`` propagates."""
    with path.open("rb") as handle:
        return handle.read(size)


def content_type_of(path: Path) -> ContentType:
    try:
        sample = read_sample(path)
    except OSError as exc:
        raise ScanIOError(path, exc) from exc
    return inspect(sample)


def is_text_file(path: Path) -> bool:
    """Return whether ``path`` looks like text; raises ``ScanIOError`` on I/O failure."""
    return content_type_of(path).is_text


__all__ = [
    "CLASSIFY_SAMPLE_BYTES",
    "ContentType",
    "inspect",
    "read_sample",
    "content_type_of",
    "is_text_file",
]
