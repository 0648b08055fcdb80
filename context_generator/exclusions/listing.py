"""Plain-text listings of the exclusion catalog for ``list-exclusions``."""

from __future__ import annotations

from collections.abc import Sequence
from typing import TextIO

from .catalog import ExclusionCategory, find_category, get_all_patterns, get_exclusion_categories
from .globbing import has_wildcards

_USAGE_LINES = (
    "  --disable-category <id>     Disable a specific category",
    "  --disable-category go,vcs   Disable multiple categories",
)
_EXAMPLE_LINES = (
    "  context-generator --disable-category go     # Include go.sum and Go test files",
    "  context-generator --disable-category vcs    # Include .git directory contents",
    "  context-generator --disable-category logs   # Include log files",
)


def print_exclusions(out: TextIO, categories: Sequence[ExclusionCategory] | None = None) -> None:
    """Write every category with its sorted patterns, then a summary."""
    if categories is None:
        categories = get_exclusion_categories()

    out.write("Default Exclusions by Category\n")
    out.write("==============================\n")
    for idx, category in enumerate(categories):
        if idx > 0:
            out.write("\n")
        out.write(f"ID: {category.id} - {category.name}\n")
        out.write(f"Description: {category.description}\n")
        out.write("Patterns:\n")
        for pattern in sorted(category.patterns):
            out.write(f"  {pattern}\n")

    out.write("\nSummary:\n")
    out.write(f"  Total categories: {len(categories)}\n")
    out.write(f"  Total patterns: {len(get_all_patterns(categories))}\n")
    out.write("\nUsage:\n")
    out.write("".join(f"{line}\n" for line in _USAGE_LINES))
    out.write("\nExamples:\n")
    out.write("".join(f"{line}\n" for line in _EXAMPLE_LINES))


def print_patterns_only(out: TextIO, categories: Sequence[ExclusionCategory] | None = None) -> None:
    """Write all patterns: sorted wildcard patterns first, then sorted literals."""
    patterns = get_all_patterns(categories)
    wildcards = sorted(pattern for pattern in patterns if has_wildcards(pattern))
    literals = sorted(pattern for pattern in patterns if not has_wildcards(pattern))
    for pattern in wildcards + literals:
        out.write(f"{pattern}\n")


def print_category_exclusions(
    out: TextIO,
    category_id: str,
    categories: Sequence[ExclusionCategory] | None = None,
) -> None:
    category = find_category(category_id, categories)
    if category is None:
        out.write(f"Category {category_id} not found\n")
        return
    for pattern in sorted(category.patterns):
        out.write(f"{pattern}\n")


__all__ = ["print_exclusions", "print_patterns_only", "print_category_exclusions"]
