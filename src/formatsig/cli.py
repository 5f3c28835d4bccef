"""Command-line interface for formatsig."""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Optional

from .config import settings
from .consistency import ConsistencyChecker
from .placeholders import FormatStringParser, PlaceholderConflictError


def _add_conflict_mode_arguments(parser: argparse.ArgumentParser):
    group = parser.add_mutually_exclusive_group()
    group.add_argument(
        "--strict",
        dest="conflict_mode",
        action="store_const",
        const="strict",
        help="Fail when a position is used with two different types",
    )
    group.add_argument(
        "--lenient",
        dest="conflict_mode",
        action="store_const",
        const="lenient",
        help="Keep the first type when a position is used with two different types",
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="formatsig",
        description="formatsig - Extract placeholder signatures from localized format strings",
    )
    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # Extract command
    extract_parser = subparsers.add_parser(
        "extract", help="Print the placeholder types of a format string"
    )
    extract_parser.add_argument("format_string", help="The format string to analyze")
    extract_parser.add_argument(
        "--json", action="store_true", help="Print the result as JSON"
    )
    _add_conflict_mode_arguments(extract_parser)

    # Check command
    check_parser = subparsers.add_parser(
        "check", help="Compare placeholder signatures across locales"
    )
    check_parser.add_argument(
        "table", type=Path, help="JSON file mapping key -> {locale: format string}"
    )
    check_parser.add_argument(
        "--base-locale", help=f"Reference locale (default: {settings.base_locale})"
    )
    _add_conflict_mode_arguments(check_parser)

    return parser


def main(argv=None) -> int:
    """Main entry point for the CLI."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command == "extract":
        return run_extract(args.format_string, args.conflict_mode, args.json)
    elif args.command == "check":
        return run_check(args.table, args.conflict_mode, args.base_locale)

    parser.print_help()
    return 1


def run_extract(
    format_string: str, conflict_mode: Optional[str] = None, as_json: bool = False
) -> int:
    """Print the signature of a single format string."""
    extractor = FormatStringParser(conflict_mode)

    try:
        result = extractor.extract(format_string)
    except PlaceholderConflictError as e:
        print(f"Error: {e}", file=sys.stderr)
        return 2

    if as_json:
        print(
            json.dumps(
                {
                    "format_string": result.format_string,
                    "types": [t.value for t in result.types],
                    "parameter_types": result.parameter_types,
                    "conflicts": [c.model_dump(mode="json") for c in result.conflicts],
                },
                indent=2,
            )
        )
    else:
        for placeholder_type in result.types:
            print(placeholder_type.value)
        for conflict in result.conflicts:
            print(f"Warning: {conflict}", file=sys.stderr)

    return 0


def _is_string_table(table) -> bool:
    if not isinstance(table, dict):
        return False
    return all(
        isinstance(variants, dict)
        and all(isinstance(template, str) for template in variants.values())
        for variants in table.values()
    )


def run_check(
    table_path: Path, conflict_mode: Optional[str] = None, base_locale: Optional[str] = None
) -> int:
    """Check a JSON string table for cross-locale signature mismatches."""
    try:
        table = json.loads(table_path.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"Error: could not read {table_path}: {e}", file=sys.stderr)
        return 1

    if not _is_string_table(table):
        print(
            f"Error: {table_path} must map each key to an object of locale -> format string",
            file=sys.stderr,
        )
        return 1

    checker = ConsistencyChecker(conflict_mode, base_locale)
    report = checker.check_table(table, base_locale)

    for result in report.results:
        for locale, conflicts in result.conflicts.items():
            for conflict in conflicts:
                print(f"{result.key} [{locale}]: {conflict}")
        for mismatch in result.mismatches:
            print(f"{result.key} {mismatch}")

    print(report.summary())
    return 0 if report.is_consistent else 1


if __name__ == "__main__":
    sys.exit(main())
