"""Searchschemer CLI: flatten mapping documents into field listings."""

import argparse
import json
import logging
import sys
from importlib.metadata import version as get_version, PackageNotFoundError
from pathlib import Path


TABLE_COLUMNS = (
    "name",
    "type",
    "stored",
    "analyzed",
    "omit_norms",
    "omit_term_freq_and_positions",
    "boost",
)


def dumps_fields(rows) -> str:
    """Stable JSON for a field listing: sorted keys, compact, list order kept."""
    return json.dumps(rows, sort_keys=True, separators=(",", ":"), ensure_ascii=False)


def _format_cell(value) -> str:
    if value is None:
        return "-"
    if isinstance(value, bool):
        return "yes" if value else "no"
    return str(value)


def format_table(rows) -> str:
    """Render field dicts as tab-separated lines with a header."""
    lines = ["\t".join(TABLE_COLUMNS)]
    for row in rows:
        lines.append("\t".join(_format_cell(row[col]) for col in TABLE_COLUMNS))
    return "\n".join(lines)


def main():
    """Main CLI entry point for searchschemer commands."""
    try:
        searchschemer_version = get_version("searchschemer")
    except PackageNotFoundError:
        searchschemer_version = "dev"

    parser = argparse.ArgumentParser(
        prog="searchschemer",
        description="Searchschemer: flatten search index mappings into field attribute listings"
    )
    parser.add_argument("--version", action="version", version=f"searchschemer {searchschemer_version}")
    # Common arguments
    parent_parser = argparse.ArgumentParser(add_help=False)
    parent_parser.add_argument(
        "--quiet",
        action="store_true",
        help="Suppress all non-error output except the listing itself."
    )
    parent_parser.add_argument(
        "--verbose",
        action="store_true",
        help="Enable debug logging."
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # fields command
    fields_parser = subparsers.add_parser(
        "fields",
        help="List the flattened fields of a mapping document",
        parents=[parent_parser]
    )
    fields_parser.add_argument(
        "mapping_path",
        type=Path,
        help="Path to mapping JSON"
    )
    fields_parser.add_argument(
        "--format",
        choices=["json", "table"],
        default="json",
        help="Output format: json (canonical JSON list) or table (tab-separated)"
    )
    fields_parser.add_argument(
        "--output",
        type=Path,
        default=None,
        help="Write the listing to this file instead of stdout"
    )
    fields_parser.add_argument(
        "--strict",
        action="store_true",
        help="Fail when a type declares no properties block"
    )
    fields_parser.add_argument(
        "--no-object-fields",
        dest="object_fields",
        action="store_false",
        help="Do not descend into nested properties of object fields"
    )

    args = parser.parse_args()

    if not args.command:
        parser.print_help()
        sys.exit(1)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s - %(name)s - %(message)s",
    )

    if args.command == "fields":
        # Lazy import: only load the reader when a command runs
        from .api import read_fields, fields_to_dicts
        from .contracts import ReaderOptions

        try:
            options = ReaderOptions(
                mode="strict" if args.strict else "permissive",
                expand_object_fields=args.object_fields,
            )
            fields = read_fields(args.mapping_path.resolve(), options)
            rows = fields_to_dicts(fields)
            if args.format == "table":
                content = format_table(rows)
            else:
                content = dumps_fields(rows)

            if args.output is not None:
                args.output.parent.mkdir(parents=True, exist_ok=True)
                args.output.write_text(content + "\n", encoding="utf-8")
                if not args.quiet:
                    print(f"[OK] {len(rows)} fields written")
                    print(f"  Output: {args.output}")
            else:
                print(content)
                if not args.quiet:
                    print(f"[OK] {len(rows)} fields", file=sys.stderr)
            sys.exit(0)
        except (OSError, ValueError) as e:
            print(f"Error: {e}", file=sys.stderr)
            sys.exit(1)


if __name__ == "__main__":
    main()
