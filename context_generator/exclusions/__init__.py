"""Exclusion catalog, glob compilation, and the compiled per-run filter.

This package contains the non-traversal half of the tool:
- category catalog loading and queries
- glob-to-regex compilation with separator-aware wildcards
- the ordered, first-match-wins exclusion filter
- text listings of the catalog
"""

from __future__ import annotations

from .catalog import (
    CUSTOM_CATEGORY,
    ExclusionCategory,
    clear_catalog_cache,
    find_category,
    get_all_patterns,
    get_category_for_pattern,
    get_exclusion_categories,
    get_filtered_patterns,
    parse_catalog,
    validate_category_ids,
)
from .filter import (
    ExclusionFilter,
    ExclusionReason,
    build_filter,
    display_posix,
    display_text,
    relative_posix,
)
from .globbing import GlobPattern, compile_glob, has_wildcards
from .listing import print_category_exclusions, print_exclusions, print_patterns_only

__all__ = [
    "CUSTOM_CATEGORY",
    "ExclusionCategory",
    "clear_catalog_cache",
    "find_category",
    "get_all_patterns",
    "get_category_for_pattern",
    "get_exclusion_categories",
    "get_filtered_patterns",
    "parse_catalog",
    "validate_category_ids",
    "ExclusionFilter",
    "ExclusionReason",
    "build_filter",
    "relative_posix",
    "display_text",
    "display_posix",
    "GlobPattern",
    "compile_glob",
    "has_wildcards",
    "print_exclusions",
    "print_patterns_only",
    "print_category_exclusions",
]
