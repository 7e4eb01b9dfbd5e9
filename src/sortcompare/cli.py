#!/usr/bin/env python3
"""
sortcompare CLI — sort a JSON array with the mixed-kind comparator.
Reads from a file or stdin, writes the ordered JSON to a file or stdout.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import json
import os
import sys
import time
from pathlib import Path
from typing import Any, List, NoReturn
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

from sortcompare.core.comparator import compare
from sortcompare.core.options import CompareOptions
from sortcompare.core.sorter import Sorter
from sortcompare.utils.convert_utils import ConvertUtils
from sortcompare.aliases import (
    DIRECTION_ALIASES, DIRECTION_CHOICES, DIRECTION_HELP_TEXT,
    KIND_CHOICES, TYPE_ORDER_HELP_TEXT, IGNORE_DIRECTION_HELP_TEXT,
    EPILOG_TEXT
)

logger = logging.getLogger(__name__)


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

        # Fix encoding for Windows consoles to prevent UnicodeEncodeError
        sys.stdout.reconfigure(encoding='utf-8')
        sys.stderr.reconfigure(encoding='utf-8')

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            description="sortcompare — sort JSON arrays of mixed values deterministically",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Input / output
        parser.add_argument(
            "--input", "-i",
            default=None,
            type=str,
            help="JSON file holding the array to sort. Default: stdin"
        )
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            help="File to write the sorted JSON to. Default: stdout"
        )

        # Ordering options
        parser.add_argument(
            "--direction", "-d",
            choices=DIRECTION_CHOICES,
            default="asc",
            type=str,
            help=DIRECTION_HELP_TEXT
        )
        parser.add_argument(
            "--deep",
            action="store_true",
            help="Sort nested arrays first, innermost before outermost"
        )
        parser.add_argument(
            "--type-order",
            nargs="+",
            default=None,
            type=str,
            metavar='KIND',
            dest="type_order",
            help=TYPE_ORDER_HELP_TEXT
        )
        parser.add_argument(
            "--ignore-direction-of",
            nargs="*",
            default=None,
            type=str,
            metavar='KIND',
            dest="ignore_direction_of",
            help=IGNORE_DIRECTION_HELP_TEXT
        )
        parser.add_argument(
            "--parse-dates",
            action="store_true",
            help="Treat ISO-8601 strings (2019-01-01, 2019-01-01T10:30:00Z) as dates"
        )

        # Output options
        parser.add_argument(
            "--indent",
            default=None,
            type=int,
            metavar='N',
            help="Pretty-print the output with N spaces of indentation"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress the summary line on stderr"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Show debug logging and timing"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.input is not None:
            input_path = Path(args.input)
            if not input_path.exists():
                self.error_exit(f"Input file not found: {args.input}")
            if not input_path.is_file():
                self.error_exit(f"Input path is not a file: {args.input}")

        if args.indent is not None and args.indent < 0:
            self.error_exit("Indent cannot be negative")

        if args.type_order is not None:
            self._validate_kinds(args.type_order, "--type-order")
            duplicates = sorted({kind for kind in args.type_order if args.type_order.count(kind) > 1})
            if duplicates:
                self.error_exit(f"Kind listed more than once in --type-order: {', '.join(duplicates)}")

        if args.ignore_direction_of:
            self._validate_kinds(args.ignore_direction_of, "--ignore-direction-of")
            if args.type_order is not None:
                for kind in args.ignore_direction_of:
                    if kind not in args.type_order:
                        self.warning(f"'{kind}' is not in --type-order; --ignore-direction-of has no effect on it")

    def _validate_kinds(self, kinds: List[str], flag: str) -> None:
        unknown = [kind for kind in kinds if kind not in KIND_CHOICES]
        if unknown:
            self.error_exit(
                f"Unknown kind(s) for {flag}: {', '.join(unknown)}.\n"
                f"Valid options: {', '.join(KIND_CHOICES)}"
            )

    def create_options(self, args: argparse.Namespace) -> CompareOptions:
        """Create CompareOptions from CLI arguments."""
        config = {"direction": DIRECTION_ALIASES[args.direction]}
        if args.type_order is not None:
            config["type_order"] = tuple(args.type_order)
        if args.ignore_direction_of is not None:
            config["ignore_direction_of_types"] = frozenset(args.ignore_direction_of)
        try:
            return CompareOptions.from_config(config)
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def load_values(self, args: argparse.Namespace) -> List[Any]:
        """Read and decode the JSON array to sort."""
        try:
            if args.input is None:
                text = sys.stdin.read()
            else:
                text = Path(args.input).read_text(encoding="utf-8")
        except OSError as e:
            self.error_exit(f"Cannot read input: {e}")

        try:
            values = json.loads(text)
        except json.JSONDecodeError as e:
            self.error_exit(f"Invalid JSON: {e}")

        if not isinstance(values, list):
            self.error_exit(f"Top-level JSON value must be an array, got {type(values).__name__}")

        if args.parse_dates:
            values = ConvertUtils.parse_dates(values)
        return values

    def sort_values(self, values: List[Any], options: CompareOptions, deep: bool) -> List[Any]:
        """Sort values in place with a comparator built from options."""
        comparator = compare(options)
        if deep:
            return Sorter.sort_deep(values, comparator)
        return Sorter.sort(values, comparator)

    def write_output(self, values: List[Any], args: argparse.Namespace) -> None:
        """Write the sorted JSON to the output file or stdout."""
        text = ConvertUtils.to_json(values, indent=args.indent)
        if args.output is None:
            print(text)
            return
        try:
            Path(args.output).write_text(text + "\n", encoding="utf-8")
        except OSError as e:
            self.error_exit(f"Cannot write output: {e}")

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"Warning: {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        if self.verbose:
            logging.getLogger().setLevel(logging.DEBUG)

        self.validate_args(args)
        options = self.create_options(args)
        values = self.load_values(args)
        logger.debug(f"Loaded {len(values)} top-level values")

        self.sort_values(values, options, deep=args.deep)
        self.write_output(values, args)

        if not self.quiet:
            mode = "deep" if args.deep else "shallow"
            print(
                f"Sorted {len(values)} values ({options.direction.display_name.lower()}, {mode})",
                file=sys.stderr
            )

        elapsed = time.time() - self.start_time
        if self.verbose:
            print(f"Completed in {elapsed:.3f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\nOperation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
