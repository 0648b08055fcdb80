"""Persistent JSON config helpers.

Stores default scan options: extra exclude patterns, disabled categories,
the no-defaults switch, and an alternate catalog path. The file is only ever
read. All access is defensive: malformed or missing config falls back safely.
"""

from __future__ import annotations

import json
from dataclasses import dataclass
from pathlib import Path

from platformdirs import user_config_dir

APP_NAME = "context-generator"
CONFIG_FILENAME = "config.json"
CONFIG_PATH = Path(user_config_dir(APP_NAME, appauthor=False)) / CONFIG_FILENAME


@dataclass(frozen=True)
class ScanDefaults:
    """Scan options taken from the config file before CLI flags apply."""

    exclude: tuple[str, ...] = ()
    disable_categories: tuple[str, ...] = ()
    no_defaults: bool = False
    catalog_path: Path | None = None


def load_config(path: Path | None = None) -> dict[str, object]:
    """Load the JSON config object.

    Returns an empty dict when the file is missing, unreadable, malformed, or
    does not decode to a top-level JSON object.
    """
    config_path = CONFIG_PATH if path is None else path
    try:
        data = json.loads(config_path.read_text(encoding="utf-8"))
    except (OSError, ValueError):
        return {}
    return data if isinstance(data, dict) else {}


def _load_string_list(data: dict[str, object], key: str) -> tuple[str, ...]:
    """Read a list of strings; non-string items are dropped, other types ignored."""
    value = data.get(key)
    if not isinstance(value, list):
        return ()
    return tuple(item for item in value if isinstance(item, str) and item)


def load_scan_defaults(path: Path | None = None) -> ScanDefaults:
    """Return validated scan defaults from config."""
    data = load_config(path)

    no_defaults = data.get("no_defaults")
    catalog_value = data.get("catalog_path")
    catalog_path: Path | None = None
    if isinstance(catalog_value, str) and catalog_value.strip():
        catalog_path = Path(catalog_value.strip()).expanduser()

    return ScanDefaults(
        exclude=_load_string_list(data, "exclude"),
        disable_categories=_load_string_list(data, "disable_categories"),
        no_defaults=no_defaults if isinstance(no_defaults, bool) else False,
        catalog_path=catalog_path,
    )


__all__ = [
    "APP_NAME",
    "CONFIG_PATH",
    "ScanDefaults",
    "load_config",
    "load_scan_defaults",
]
