#!/usr/bin/env python3
"""
onelink CLI — link every unique file from the input trees into a content-addressed store.
Input files are only read; the store gains hard links, never copies.
"""
from __future__ import annotations  # Enable postponed evaluation of annotations (PEP 563)
import argparse
import sys
import os
import time
from pathlib import Path
from typing import List, Optional, NoReturn
import logging

LOG_FORMAT = "%(levelname)-8s | %(name)-25s | %(message)s"

logging.basicConfig(
    level=logging.WARNING,
    format=LOG_FORMAT
)

# === EARLY DEPENDENCY VALIDATION ===
_MISSING_DEPS = []
try:
    import blake3  # noqa: F401
except ImportError:
    _MISSING_DEPS.append("blake3")

if _MISSING_DEPS:
    print("❌ Missing required dependencies:", file=sys.stderr)
    print(f"   pip install {' '.join(_MISSING_DEPS)}", file=sys.stderr)
    print("\nOr install the package with its dependencies:", file=sys.stderr)
    print("   pip install .", file=sys.stderr)
    sys.exit(1)

# === NORMAL IMPORTS (after validation) ===
from onelink.core.errors import LinkError
from onelink.core.models import (
    LinkParams, LinkStats,
    DEFAULT_EXTENSION_PATTERN, DEFAULT_SKIP_FILE_PATTERN, DEFAULT_SKIP_DIR_PATTERN,
    DEFAULT_PARALLELISM,
)
from onelink.commands import LinkCommand
from onelink.utils.convert_utils import ConvertUtils
from onelink.aliases import (
    ALGORITHM_ALIASES, ALGORITHM_CHOICES, ALGORITHM_HELP_TEXT,
    EPILOG_TEXT
)


def positive_int(value: str) -> int:
    """argparse type for --parallelism."""
    try:
        number = int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid integer value: '{value}'")
    if number < 1:
        raise argparse.ArgumentTypeError(f"must be a positive integer, got {number}")
    return number


class CLIApplication:
    """Main CLI application controller."""

    def __init__(self):
        self.start_time: float = time.time()
        self.verbose: bool = False
        self.quiet: bool = False
        self.show_progress: bool = False

    @staticmethod
    def parse_args(args=None) -> argparse.Namespace:
        """Parse command-line arguments."""
        parser = argparse.ArgumentParser(
            prog="onelink",
            description="onelink — hard-link every unique file into a content-addressed store",
            formatter_class=argparse.RawTextHelpFormatter,
            epilog=EPILOG_TEXT
        )

        # Required arguments
        parser.add_argument(
            "output",
            type=str,
            help="Existing store directory that receives the hard links"
        )
        parser.add_argument(
            "inputs",
            nargs="+",
            type=str,
            metavar="input",
            help="One or more existing directories to deduplicate"
        )

        # Pipeline options
        parser.add_argument(
            "--parallelism", "-j",
            default=DEFAULT_PARALLELISM,
            type=positive_int,
            metavar='N',
            help=f"Number of hashing workers. Default: {DEFAULT_PARALLELISM}"
        )
        parser.add_argument(
            "--algorithm",
            choices=ALGORITHM_CHOICES,
            default="sha256",
            type=str,
            help=ALGORITHM_HELP_TEXT
        )
        parser.add_argument(
            "--chunk-size",
            default="1MB",
            type=str,
            metavar='SIZE',
            dest="chunk_size",
            help="Read size used while hashing (e.g., 64KB, 1MB). Default: 1MB"
        )

        # Filtering options
        parser.add_argument(
            "--extension",
            default=DEFAULT_EXTENSION_PATTERN,
            type=str,
            metavar='REGEX',
            help="Regex searched in the lowercase extension, dot included.\n"
                 f"Default: {DEFAULT_EXTENSION_PATTERN}"
        )
        parser.add_argument(
            "--skip-file",
            default=DEFAULT_SKIP_FILE_PATTERN,
            type=str,
            metavar='REGEX',
            dest="skip_file",
            help=f"Regex searched in file names to ignore. Default: {DEFAULT_SKIP_FILE_PATTERN}"
        )
        parser.add_argument(
            "--skip-dir",
            default=DEFAULT_SKIP_DIR_PATTERN,
            type=str,
            metavar='REGEX',
            dest="skip_dir",
            help="Regex searched in directory names; matching subtrees are ignored.\n"
                 f"Default: {DEFAULT_SKIP_DIR_PATTERN}"
        )

        # Output options
        parser.add_argument(
            "--progress",
            action="store_true",
            help="Show a running count of linked files on stderr"
        )
        parser.add_argument(
            "--quiet", "-q",
            action="store_true",
            help="Only log errors"
        )
        parser.add_argument(
            "--verbose", "-v",
            action="store_true",
            help="Log every skipped and linked file"
        )

        return parser.parse_args(args)

    def validate_args(self, args: argparse.Namespace) -> None:
        """Validate command-line arguments before execution."""
        if args.verbose and args.quiet:
            self.error_exit("--verbose and --quiet cannot be used together")

        output_path = Path(args.output).resolve()
        if not output_path.exists():
            self.error_exit(f"Output directory not found: {args.output}")
        if not output_path.is_dir():
            self.error_exit(f"Output path is not a directory: {args.output}")

        for item in args.inputs:
            input_path = Path(item).resolve()
            if not input_path.exists():
                self.error_exit(f"Input directory not found: {item}")
            if not input_path.is_dir():
                self.error_exit(f"Input path is not a directory: {item}")
            if input_path == output_path:
                self.error_exit(f"Input directory is the output directory: {item}")

            # Hard links cannot cross filesystems; the run would fail on the first file
            if input_path.stat().st_dev != output_path.stat().st_dev:
                self.warning(f"Input directory is on a different filesystem than the output: {item}")

        try:
            ConvertUtils.human_to_bytes(args.chunk_size)
        except ValueError as e:
            self.error_exit(f"Invalid chunk size: {e}")

    def create_params(self, args: argparse.Namespace) -> LinkParams:
        """Create LinkParams from CLI arguments, compiling every pattern once."""
        try:
            return LinkParams.from_patterns(
                output_dir=str(Path(args.output).resolve()),
                input_dirs=[str(Path(item).resolve()) for item in args.inputs],
                extension=args.extension,
                skip_file=args.skip_file,
                skip_dir=args.skip_dir,
                parallelism=args.parallelism,
                algorithm=ALGORITHM_ALIASES[args.algorithm],
                chunk_size=ConvertUtils.human_to_bytes(args.chunk_size),
            )
        except LinkError as e:
            self.error_exit(f"Configuration error: {e}")
        except ValueError as e:
            self.error_exit(f"Parameter error: {e}")

    def configure_logging(self) -> None:
        if self.verbose:
            level = logging.INFO
        elif self.quiet:
            level = logging.ERROR
        else:
            level = logging.WARNING
        logging.getLogger().setLevel(level)

    def progress_callback(self, stage: str, current: int, total: Optional[int]) -> None:
        """CLI progress callback - shows progress in console."""
        if not self.show_progress:
            return

        if total and total > 0:
            percent = (current / total) * 100
            sys.stderr.write(f"\r  [{stage}] {current}/{total} ({percent:.1f}%)")
        else:
            sys.stderr.write(f"\r  [{stage}] {current} files done...")
        sys.stderr.flush()

    def run_link(self, params: LinkParams) -> LinkStats:
        """Execute the link workflow. Any LinkError ends the process without a summary."""
        command = LinkCommand()
        try:
            stats = command.execute(
                params,
                progress_callback=self.progress_callback if self.show_progress else None
            )
        except LinkError as e:
            if self.show_progress:
                sys.stderr.write("\n")
            self.error_exit(str(e))

        if self.show_progress:
            sys.stderr.write("\n")
        return stats

    def warning(self, message: str) -> None:
        """Print a warning message to stderr."""
        if not self.quiet:
            print(f"⚠️  {message}", file=sys.stderr)

    @staticmethod
    def error_exit(message: str, code: int = 1) -> NoReturn:
        """Print error and exit."""
        print(f"❌ Error: {message}", file=sys.stderr)
        sys.exit(code)

    def run(self, argv: Optional[List[str]] = None) -> None:
        """Main entry point."""
        args = self.parse_args(argv)
        self.verbose = args.verbose
        self.quiet = args.quiet
        self.show_progress = args.progress and not args.quiet

        self.validate_args(args)
        params = self.create_params(args)
        self.configure_logging()

        stats = self.run_link(params)
        print(stats.summary_line())

        elapsed = time.time() - self.start_time
        logging.getLogger(__name__).info(f"Completed in {elapsed:.2f} seconds")


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
