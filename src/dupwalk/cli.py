#!/usr/bin/env python3
"""
dupwalk CLI — walk a directory tree concurrently and report duplicate files.
Thin layer over ScanCommand: argument parsing, validation, printing.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, NoReturn, Optional
import logging

logging.basicConfig(
    level=logging.ERROR,
    format="%(levelname)-8s | %(name)-25s | %(message)s"
)

# === EARLY DEPENDENCY VALIDATION ===
try:
    import xxhash  # noqa: F401
except ImportError:
    print("❌ Missing required dependency: xxhash", file=sys.stderr)
    print("   pip install xxhash", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from dupwalk.aliases import EPILOG_TEXT, HASH_CHOICES, HASH_HELP_TEXT
from dupwalk.commands import ScanCommand
from dupwalk.core.exceptions import ConfigError, WalkError
from dupwalk.core.fingerprint import DEFAULT_FINGERPRINT
from dupwalk.core.models import ScanParams, default_workers
from dupwalk.core.results import WalkResults
from dupwalk.utils.convert_utils import ConvertUtils


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="dupwalk",
            description="dupwalk — concurrent directory walker and duplicate file finder",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        parser.add_argument(
            "--input", "-i",
            required=True,
            type=str,
            help="Root directory to walk"
        )

        # Walker options
        parser.add_argument(
            "--workers", "-w",
            default=default_workers(),
            type=int,
            metavar='',
            help="Maximum number of concurrent directory/file tasks. Default: 2 x CPU count"
        )
        parser.add_argument(
            "--hash",
            choices=HASH_CHOICES,
            default=DEFAULT_FINGERPRINT,
            type=str,
            dest="fingerprint",
            help=HASH_HELP_TEXT
        )
        parser.add_argument(
            "--skip", "-s",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            dest="skip_dirs",
            help="Directory names (space separated) to skip, in addition to hidden ones"
        )
        parser.add_argument(
            "--no-default-skip",
            action="store_true",
            help="Also walk node_modules, venv, Android, ... (skipped by default)"
        )

        # Filtering options
        parser.add_argument(
            "--min-size", "-m",
            default=None,
            type=str,
            metavar='',
            help="Only report files of at least this size (e.g., 500KB, 1MB)"
        )
        parser.add_argument(
            "--max-size", "-M",
            default=None,
            type=str,
            metavar='',
            help="Only report files of at most this size (e.g., 10MB, 1GB)"
        )
        parser.add_argument(
            "--extensions", "-x",
            nargs="+",
            default=[],
            type=str,
            metavar='',
            help="File extensions (space separated) to report (e.g., .jpg .png)"
        )

        # Output options
        parser.add_argument(
            "--all",
            action="store_true",
            dest="list_all",
            help="Print every file (one path per line) instead of duplicate groups"
        )
        parser.add_argument(
            "--output", "-o",
            default=None,
            type=str,
            metavar='',
            help="Write the report to this file instead of stdout"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Suppress non-essential output"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log skipped/visited directories and show statistics"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        root_path = Path(args.input).resolve()
        if not root_path.exists():
            self.error_exit(f"Directory not found: {args.input}")
        if not root_path.is_dir():
            self.error_exit(f"Path is not a directory: {args.input}")

        if args.workers < 1:
            self.error_exit("Workers must be at least 1")

        for option, value in (("--min-size", args.min_size), ("--max-size", args.max_size)):
            if value is not None and not ConvertUtils.is_valid_size_format(value):
                self.error_exit(f"Invalid {option} format: {value}")

        if args.min_size is not None and args.max_size is not None:
            if ConvertUtils.human_to_bytes(args.max_size) < ConvertUtils.human_to_bytes(args.min_size):
                self.error_exit("Maximum size cannot be less than minimum size")

        if args.output:
            parent = Path(args.output).resolve().parent
            if not parent.is_dir():
                self.error_exit(f"Output directory not found: {parent}")

    def create_params(self, args: argparse.Namespace) -> ScanParams:
        """Create ScanParams from CLI arguments."""
        try:
            return ScanParams(
                root_dir=str(Path(args.input).resolve()),
                workers=args.workers,
                fingerprint=args.fingerprint,
                skip_dirs=args.skip_dirs,
                no_default_skip=args.no_default_skip,
                min_size_bytes=ConvertUtils.human_to_bytes(args.min_size) if args.min_size else None,
                max_size_bytes=ConvertUtils.human_to_bytes(args.max_size) if args.max_size else None,
                extensions=args.extensions,
                verbose=args.verbose,
            )
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def run_scan(self, params: ScanParams) -> WalkResults:
        """Execute the walk."""
        command = ScanCommand()
        try:
            results, stats = command.execute(params)
        except (ConfigError, WalkError) as e:
            self.error_exit(f"Scan failed: {e}")

        if self.verbose:
            print(stats.summary(), file=sys.stderr)
        return results

    @staticmethod
    def format_duplicates(results: WalkResults) -> List[str]:
        """Duplicate groups, biggest files first."""
        lines = []
        for group in results.duplicate_groups():
            lines.append(f"{group.fingerprint} ---> {group.duplicate_count} files")
            for file in group.files:
                lines.append(f"    {file.path} [{ConvertUtils.bytes_to_human(file.size)}]")
            lines.append("")
        return lines

    @staticmethod
    def format_all(results: WalkResults) -> List[str]:
        return [f.path for f in results.flatten()]

    def output_results(self, results: WalkResults, list_all: bool = False, output: Optional[str] = None) -> None:
        lines = self.format_all(results) if list_all else self.format_duplicates(results)

        if output:
            with open(output, "w", encoding="utf-8") as f:
                f.write("\n".join(lines))
                if lines:
                    f.write("\n")
            if not self.quiet:
                print(f"Report written to {output}")
            return

        if self.quiet and not list_all:
            return

        if not lines and not list_all:
            print("No duplicate groups found.")
            return

        if not list_all:
            groups = results.duplicate_groups()
            wasted = sum(g.wasted_bytes for g in groups)
            print(f"Found {len(groups)} duplicate groups "
                  f"({ConvertUtils.bytes_to_human(wasted)} reclaimable)\n")

        for line in lines:
            print(line)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv=None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet

        if self.verbose:
            logging.getLogger("dupwalk").setLevel(logging.INFO)

        self.validate_args(args)
        params = self.create_params(args)

        if self.verbose and not self.quiet:
            print(f"Walking directory: {params.root_dir}", file=sys.stderr)

        results = self.run_scan(params)
        self.output_results(results, list_all=args.list_all, output=args.output)

        if self.verbose:
            elapsed = time.time() - self.start_time
            print(f"✅ Completed in {elapsed:.2f} seconds", file=sys.stderr)


def main() -> None:
    """Application entry point."""
    app = CLIApplication()
    try:
        app.run()
    except KeyboardInterrupt:
        print("\n⚠️  Operation cancelled by user (Ctrl+C)", file=sys.stderr)
        sys.exit(130)
    except Exception as e:
        if os.environ.get("DEBUG"):
            raise
        print(f"❌ Unexpected error: {e}", file=sys.stderr)
        sys.exit(1)


if __name__ == "__main__":
    main()
