"""Command-line entry point.

Usage:
    testgen <file> [--fixtures-root DIR] [--meta] [--dry-run | --check]
"""

import argparse
import sys

from testgen_engine.cli.regen import cmd_regen
from testgen_engine.errors import TestgenError, UsageError


class _Parser(argparse.ArgumentParser):
    """ArgumentParser that raises instead of exiting with status 2."""

    def error(self, message: str):
        raise UsageError(message)


def build_parser() -> argparse.ArgumentParser:
    parser = _Parser(
        prog="testgen",
        description="Regenerate fixture-driven tests inside a Rust source file",
    )
    parser.add_argument("file", help="Source file with TESTGEN regions, e.g. ./tests/commonmark.rs")
    parser.add_argument(
        "--fixtures-root", default=None,
        help="Directory fixture groups are resolved against "
             "(default: $TESTGEN_FIXTURES_DIR or the current directory)",
    )
    parser.add_argument(
        "--meta", action="store_true",
        help="Parse YAML front matter in fixture files",
    )
    mode = parser.add_mutually_exclusive_group()
    mode.add_argument(
        "--dry-run", action="store_true",
        help="Report changes without writing",
    )
    mode.add_argument(
        "--check", action="store_true",
        help="Exit 1 if the file is out of date; never writes",
    )
    return parser


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    try:
        args = parser.parse_args(argv)
    except UsageError as e:
        print(parser.format_usage(), file=sys.stderr, end="")
        print(f"{parser.prog}: error: {e}", file=sys.stderr)
        return 1

    try:
        return cmd_regen(args)
    except (TestgenError, OSError) as e:
        print(f"ERROR: {args.file}: {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
