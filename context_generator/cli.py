"""Command-line front door for context-generator.

Parses CLI options, merges them over config-file defaults, validates category
ids, and builds the exclusion filter. Then dispatches into the scanner in
content or dry-run mode, or prints the catalog for ``list-exclusions``.
"""

from __future__ import annotations

import argparse
import logging
import sys
from collections.abc import Iterable, Sequence
from pathlib import Path

from . import __version__
from .config import ScanDefaults, load_scan_defaults
from .errors import ContextGeneratorError
from .exclusions import (
    build_filter,
    get_exclusion_categories,
    print_category_exclusions,
    print_exclusions,
    print_patterns_only,
    validate_category_ids,
)
from .scanner import Scanner, ScanMode

LIST_COMMAND = "list-exclusions"


def split_category_ids(values: Iterable[str]) -> list[str]:
    """Flatten comma-separated ``--disable-category`` values, trimming blanks."""
    ids: list[str] = []
    for value in values:
        for part in value.split(","):
            part = part.strip()
            if part:
                ids.append(part)
    return ids


def _configure_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s: %(message)s",
        stream=sys.stderr,
    )


def _build_scan_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="context-generator",
        description="Generate copy-pastable context from your source code for AI assistants.",
        epilog=f"Run '%(prog)s {LIST_COMMAND} --help' to inspect the default exclusion categories.",
    )
    parser.add_argument("directory", nargs="?", default=None, help="Directory to scan. Defaults to current directory.")
    parser.add_argument(
        "--exclude",
        action="append",
        default=[],
        metavar="PATTERN",
        help="Exclude files/folders matching this glob pattern (repeatable).",
    )
    parser.add_argument(
        "--disable-category",
        action="append",
        default=[],
        metavar="ID",
        help="Disable default exclusion categories by id; comma-separated or repeated.",
    )
    parser.add_argument("--no-defaults", action="store_true", help="Disable all default exclusions.")
    parser.add_argument("--dry-run", action="store_true", help="Show which files would be processed or excluded.")
    parser.add_argument("--catalog", metavar="PATH", default=None, help="Read exclusion categories from this YAML file.")
    parser.add_argument("--no-config", action="store_true", help="Ignore the user config file.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Log debug details to stderr.")
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return parser


def _build_list_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog=f"context-generator {LIST_COMMAND}",
        description="List all default exclusions organized by category.",
    )
    parser.add_argument("--category", metavar="ID", default=None, help="Show patterns for one category id only.")
    parser.add_argument(
        "--patterns-only",
        action="store_true",
        help="Show only patterns (wildcards first, then literals).",
    )
    parser.add_argument("--catalog", metavar="PATH", default=None, help="Read exclusion categories from this YAML file.")
    parser.add_argument("--no-config", action="store_true", help="Ignore the user config file.")
    return parser


def _resolve_catalog_path(cli_value: str | None, defaults: ScanDefaults) -> Path | None:
    if cli_value is not None:
        return Path(cli_value).expanduser()
    return defaults.catalog_path


def run_list_exclusions(argv: Sequence[str]) -> None:
    args = _build_list_parser().parse_args(list(argv))
    _configure_logging(verbose=False)
    defaults = ScanDefaults() if args.no_config else load_scan_defaults()
    categories = get_exclusion_categories(_resolve_catalog_path(args.catalog, defaults))
    out = sys.stdout

    if args.category is not None:
        invalid = validate_category_ids([args.category], categories)
        if invalid:
            raise SystemExit(
                f"Error: Invalid category ID: {', '.join(invalid)}. Use '{LIST_COMMAND}' to see valid IDs"
            )
        print_category_exclusions(out, args.category, categories)
    elif args.patterns_only:
        print_patterns_only(out, categories)
    else:
        print_exclusions(out, categories)


def main(argv: Sequence[str] | None = None, default_path: Path | None = None) -> None:
    """Parse CLI arguments and scan a directory or file.

    ``default_path`` is primarily for tests; when omitted the current working
    directory is used. Any tool error ends the process with ``Error: ...``.
    """
    arg_list = sys.argv[1:] if argv is None else list(argv)
    if arg_list and arg_list[0] == LIST_COMMAND:
        run_list_exclusions(arg_list[1:])
        return

    args = _build_scan_parser().parse_args(arg_list)
    _configure_logging(args.verbose)
    defaults = ScanDefaults() if args.no_config else load_scan_defaults()

    exclude = [*defaults.exclude, *args.exclude]
    disabled = split_category_ids([*defaults.disable_categories, *args.disable_category])
    no_defaults = defaults.no_defaults or args.no_defaults
    categories = get_exclusion_categories(_resolve_catalog_path(args.catalog, defaults))

    if disabled:
        invalid = validate_category_ids(disabled, categories)
        if invalid:
            raise SystemExit(
                f"Error: Invalid category IDs: {', '.join(invalid)}. Use '{LIST_COMMAND}' to see valid IDs"
            )

    if default_path is None:
        default_path = Path(".")
    directory = args.directory or str(default_path)
    mode = ScanMode.PREVIEW if args.dry_run else ScanMode.CONTENT

    try:
        exclusion_filter = build_filter(exclude, disabled, include_defaults=not no_defaults, categories=categories)
        scanner = Scanner(exclusion_filter)
        scanner.run(directory, sys.stdout, mode)
    except ContextGeneratorError as exc:
        sys.stdout.flush()
        raise SystemExit(f"Error: {exc}") from exc


if __name__ == "__main__":
    main()
