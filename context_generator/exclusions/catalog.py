"""Category catalog of default exclusion patterns.

The built-in catalog ships as ``exclusions.yaml`` next to this module. It is
parsed once per process and treated as read-only afterwards. A malformed
catalog never aborts a run: a warning is logged and an empty catalog is used,
so no default patterns are contributed.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from importlib import resources
from pathlib import Path

import yaml

from ..errors import CatalogLoadError

logger = logging.getLogger(__name__)

CATALOG_RESOURCE = "exclusions.yaml"
CUSTOM_CATEGORY = "Custom"


@dataclass(frozen=True)
class ExclusionCategory:
    """Named group of glob patterns sharing one purpose."""

    id: str
    name: str
    description: str
    patterns: tuple[str, ...]


_CATALOG_CACHE: dict[str | None, tuple[ExclusionCategory, ...]] = {}


def clear_catalog_cache() -> None:
    """Forget every parsed catalog."""
    _CATALOG_CACHE.clear()


def _require_str(record: dict, key: str, index: int) -> str:
    value = record.get(key)
    if not isinstance(value, str):
        raise CatalogLoadError(f"category #{index}: {key!r} must be a string")
    return value


def parse_catalog(text: str) -> tuple[ExclusionCategory, ...]:
    """Parse catalog YAML text into categories, in file order.

    Raises ``CatalogLoadError`` for YAML syntax errors and schema violations.
    """
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise CatalogLoadError(str(exc)) from exc

    if not isinstance(data, dict) or not isinstance(data.get("categories"), list):
        raise CatalogLoadError("expected a top-level 'categories' list")

    categories: list[ExclusionCategory] = []
    seen_ids: set[str] = set()
    for index, record in enumerate(data["categories"]):
        if not isinstance(record, dict):
            raise CatalogLoadError(f"category #{index}: expected a mapping")
        category_id = _require_str(record, "id", index).strip()
        if not category_id:
            raise CatalogLoadError(f"category #{index}: empty id")
        if category_id in seen_ids:
            raise CatalogLoadError(f"duplicate category id {category_id!r}")
        seen_ids.add(category_id)

        patterns = record.get("patterns")
        if not isinstance(patterns, list) or not all(isinstance(item, str) for item in patterns):
            raise CatalogLoadError(f"category {category_id!r}: 'patterns' must be a list of strings")

        categories.append(
            ExclusionCategory(
                id=category_id,
                name=_require_str(record, "name", index),
                description=_require_str(record, "description", index),
                patterns=tuple(patterns),
            )
        )
    return tuple(categories)


def _read_catalog_source(catalog_path: Path | None) -> str:
    if catalog_path is None:
        return resources.files(__package__).joinpath(CATALOG_RESOURCE).read_text(encoding="utf-8")
    return catalog_path.read_text(encoding="utf-8")


def get_exclusion_categories(catalog_path: Path | None = None) -> tuple[ExclusionCategory, ...]:
    """Return catalog categories, loading and memoizing them on first use.

    ``catalog_path`` selects an alternate YAML file; ``None`` means the
    built-in catalog. Load failures degrade to an empty tuple with a warning.
    """
    key = None if catalog_path is None else str(catalog_path)
    cached = _CATALOG_CACHE.get(key)
    if cached is not None:
        return cached

    try:
        categories = parse_catalog(_read_catalog_source(catalog_path))
    except (CatalogLoadError, OSError, UnicodeDecodeError) as exc:
        logger.warning("Failed to load exclusion categories: %s", exc)
        categories = ()
    _CATALOG_CACHE[key] = categories
    return categories


def _categories_or_default(categories: Sequence[ExclusionCategory] | None) -> Sequence[ExclusionCategory]:
    return get_exclusion_categories() if categories is None else categories


def get_filtered_patterns(
    disabled_category_ids: Iterable[str],
    categories: Sequence[ExclusionCategory] | None = None,
) -> list[str]:
    """Return patterns of every enabled category, in catalog order."""
    disabled = set(disabled_category_ids)
    patterns: list[str] = []
    for category in _categories_or_default(categories):
        if category.id in disabled:
            continue
        patterns.extend(category.patterns)
    return patterns


def get_all_patterns(categories: Sequence[ExclusionCategory] | None = None) -> list[str]:
    return get_filtered_patterns((), categories)


def get_category_for_pattern(
    pattern: str,
    categories: Sequence[ExclusionCategory] | None = None,
) -> str:
    """Return the display name of the first category listing ``pattern``."""
    for category in _categories_or_default(categories):
        if pattern in category.patterns:
            return category.name
    return CUSTOM_CATEGORY


def find_category(
    category_id: str,
    categories: Sequence[ExclusionCategory] | None = None,
) -> ExclusionCategory | None:
    for category in _categories_or_default(categories):
        if category.id == category_id:
            return category
    return None


def validate_category_ids(
    ids: Iterable[str],
    categories: Sequence[ExclusionCategory] | None = None,
) -> list[str]:
    """Return the subset of ``ids`` that name no catalog category, in input order."""
    valid_ids = {category.id for category in _categories_or_default(categories)}
    return [category_id for category_id in ids if category_id not in valid_ids]


__all__ = [
    "CUSTOM_CATEGORY",
    "ExclusionCategory",
    "clear_catalog_cache",
    "parse_catalog",
    "get_exclusion_categories",
    "get_filtered_patterns",
    "get_all_patterns",
    "get_category_for_pattern",
    "find_category",
    "validate_category_ids",
]
