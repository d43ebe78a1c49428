"""
HTML Keyword Scanner CLI

Recursively scans a directory for .html/.htm files and lists, per keyword,
every file whose text contains that keyword (ASCII case-insensitive).

Usage:
    html-scanner ./site form gallery
    html-scanner ./site /o results.txt form gallery
    html-scanner ./site gallery form /o results.txt

Set HTML_SCANNER_LOG_LEVEL=DEBUG to trace every file as it is scanned.
"""
import os
import sys
from typing import Optional, Sequence

from loguru import logger

from .arguments import format_usage, parse_arguments
from .config import RunConfig
from .errors import ConfigurationError, OutputOpenError, UsageError
from .log import configure_logging, echo
from .report import write_report
from .scanner import run_scan

DEFAULT_PROG = "html-scanner"


def print_plan(config: RunConfig) -> None:
    """Print the scan header to stdout before traversal starts."""
    quoted = ", ".join(f'"{k}"' for k in config.keywords)
    echo(f"Scanning directory: {os.path.abspath(config.scan_root)}")
    echo(f"Output file: {config.output_path}")
    echo(f"Looking for keywords: {quoted}")
    echo()


def main(argv: Optional[Sequence[str]] = None, prog: Optional[str] = None) -> int:
    """
    Run one scan.

    Args:
        argv: Arguments after the program name (defaults to sys.argv[1:])
        prog: Program name shown in the usage banner

    Returns:
        Process exit code: 0 when the report was written, 1 otherwise
    """
    if argv is None:
        argv = sys.argv[1:]
    if prog is None:
        prog = os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else DEFAULT_PROG

    configure_logging()

    try:
        config = parse_arguments(list(argv))
    except ConfigurationError as e:
        if not isinstance(e, UsageError):
            logger.error(f"Error: {e}")
        print(format_usage(prog), file=sys.stderr)
        return 1

    print_plan(config)

    result = run_scan(config)
    stats = result.stats
    logger.info(
        f"Visited {stats.entries_visited} entries: {stats.candidates} HTML files, "
        f"{stats.matched_files} with matches, {stats.unreadable} unreadable"
    )
    if result.traversal_error is not None:
        logger.warning("Scan stopped early; the report covers the files visited so far")

    try:
        write_report(config.scan_root, result.index, config.output_path)
    except OutputOpenError as e:
        logger.error(f"Error: {e}")
        return 1

    echo()
    echo(f"Scan complete. Results saved to {config.output_path}")
    return 0


def run(prog: Optional[str] = None) -> None:
    """Console-script entry point."""
    try:
        code = main(prog=prog)
    except KeyboardInterrupt:
        print("\nScan interrupted by user", file=sys.stderr)
        code = 1
    sys.exit(code)

