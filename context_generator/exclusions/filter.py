"""Compiled exclusion filter: ordered glob matchers plus category attribution.

A filter is built once per run and only read afterwards. Matching is done per
entry: a path is tested by basename and by its path relative to the scan base,
and the first pattern in construction order that fires is reported.
"""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence
from dataclasses import dataclass
from pathlib import Path

from .catalog import CUSTOM_CATEGORY, ExclusionCategory, get_exclusion_categories
from .globbing import GlobPattern, compile_glob


@dataclass(frozen=True)
class ExclusionReason:
    """Pattern that excluded an entry and the category it is attributed to."""

    pattern: str
    category: str


def relative_posix(path: Path, base_dir: Path) -> str:
    """Return ``path`` relative to ``base_dir`` with ``/`` separators.

    Equal paths give ``"."``; a path outside ``base_dir`` is returned as-is.
    """
    try:
        return path.relative_to(base_dir).as_posix()
    except ValueError:
        return path.as_posix()


def display_text(text: str) -> str:
    """Return ``text`` safe for a UTF-8 stream.

    Names that are not valid UTF-8 arrive from ``os.scandir`` with surrogate
    escapes; their raw bytes are decoded again with replacement characters.
    Matching keeps using the undecoded name.
    """
    return os.fsencode(text).decode("utf-8", "replace")


def display_posix(path: Path, base_dir: Path) -> str:
    """Lossy ``relative_posix`` for headers and reports."""
    return display_text(relative_posix(path, base_dir))


class ExclusionFilter:
    """Ordered glob matchers with a literal-pattern to category-name table."""

    def __init__(self, compiled: Sequence[GlobPattern], pattern_categories: Mapping[str, str]) -> None:
        self._compiled = tuple(compiled)
        self._pattern_categories = dict(pattern_categories)

    @classmethod
    def _from_attributed(cls, attributed: Iterable[tuple[str, str]]) -> ExclusionFilter:
        compiled: list[GlobPattern] = []
        pattern_categories: dict[str, str] = {}
        for pattern, category in attributed:
            compiled.append(compile_glob(pattern))
            # The same literal may sit in several categories; the first one
            # is also the copy that fires first, so it owns the attribution.
            pattern_categories.setdefault(pattern, category)
        return cls(compiled, pattern_categories)

    @classmethod
    def from_patterns(cls, patterns: Iterable[str]) -> ExclusionFilter:
        """Build a filter of user patterns only, all attributed to ``Custom``."""
        return cls._from_attributed((pattern, CUSTOM_CATEGORY) for pattern in patterns)

    @classmethod
    def with_defaults(
        cls,
        additional_patterns: Iterable[str],
        disabled_category_ids: Iterable[str],
        categories: Sequence[ExclusionCategory] | None = None,
    ) -> ExclusionFilter:
        """Build a filter of enabled catalog categories followed by user patterns."""
        if categories is None:
            categories = get_exclusion_categories()
        disabled = set(disabled_category_ids)
        attributed: list[tuple[str, str]] = []
        for category in categories:
            if category.id in disabled:
                continue
            attributed.extend((pattern, category.name) for pattern in category.patterns)
        attributed.extend((pattern, CUSTOM_CATEGORY) for pattern in additional_patterns)
        return cls._from_attributed(attributed)

    @property
    def patterns(self) -> tuple[str, ...]:
        """Source pattern strings in match order."""
        return tuple(compiled.pattern for compiled in self._compiled)

    def category_for(self, pattern: str) -> str:
        return self._pattern_categories.get(pattern, CUSTOM_CATEGORY)

    def exclusion_reason(self, path: Path | str, base_dir: Path | str) -> ExclusionReason | None:
        """Return why ``path`` is excluded, or ``None`` when no pattern fires."""
        path = Path(path)
        name = path.name
        if not name:
            return None
        rel_path = relative_posix(path, Path(base_dir))
        for compiled in self._compiled:
            if compiled.matches(name) or compiled.matches(rel_path):
                return ExclusionReason(pattern=compiled.pattern, category=self.category_for(compiled.pattern))
        return None

    def should_exclude(self, path: Path | str, base_dir: Path | str) -> bool:
        return self.exclusion_reason(path, base_dir) is not None

    def __len__(self) -> int:
        return len(self._compiled)


def build_filter(
    custom_patterns: Iterable[str],
    disabled_category_ids: Iterable[str] = (),
    include_defaults: bool = True,
    categories: Sequence[ExclusionCategory] | None = None,
) -> ExclusionFilter:
    """Construct the run's filter; raises ``PatternError`` on an invalid glob."""
    if not include_defaults:
        return ExclusionFilter.from_patterns(custom_patterns)
    return ExclusionFilter.with_defaults(custom_patterns, disabled_category_ids, categories)


__all__ = [
    "ExclusionReason",
    "ExclusionFilter",
    "build_filter",
    "relative_posix",
    "display_text",
    "display_posix",
]
