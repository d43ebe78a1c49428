"""
Command line grammar for the scanner.

    <directory> [/o <output_path>] <keyword> [<keyword> ...]

The directory is always the first argument. Anywhere after it, /o (or /O)
takes the next token as the output path; everything else is a keyword,
including unknown flags.
"""
import os
from typing import List, Optional, Sequence

from loguru import logger

from .config import DEFAULT_OUTPUT_PATH, OUTPUT_FLAGS, RunConfig
from .errors import InvalidDirectory, MissingOutputName, NoKeywords, UsageError


def format_usage(prog: str) -> str:
    """Usage banner printed to stderr on every configuration error."""
    return "\n".join([
        f"Usage: {prog} <directory_to_scan> <keyword1> [keyword2] [keyword3] ...",
        f'Example: {prog} "C:\\MyWebsite" form gallery table',
        "An optional output file can be specified with the /o flag.",
        f'Example with output file: {prog} "C:\\MyWebsite" /o "results.txt" form gallery',
    ])


def parse_arguments(args: Sequence[str]) -> RunConfig:
    """
    Turn the arguments after the program name into a RunConfig.

    Args:
        args: Argument vector without the program name

    Returns:
        RunConfig with the scan root, output path and keywords

    Raises:
        UsageError: Fewer than two arguments
        InvalidDirectory: First argument is not an existing directory
        MissingOutputName: /o was the last argument
        NoKeywords: No keyword tokens remain
    """
    if len(args) < 2:
        raise UsageError()

    scan_root = args[0]
    output_path = DEFAULT_OUTPUT_PATH
    keywords: List[str] = []
    pending_flag: Optional[str] = None

    for arg in args[1:]:
        if pending_flag is not None:
            # Token after /o is always the file name, even if it looks like a flag
            output_path = arg
            pending_flag = None
            continue

        if arg in OUTPUT_FLAGS:
            pending_flag = arg
            continue

        if not arg:
            logger.warning("Ignoring empty keyword argument")
            continue

        keywords.append(arg)

    if not scan_root or not os.path.isdir(scan_root):
        raise InvalidDirectory(scan_root)

    # A dangling /o is reported even when it also left no keywords behind
    if pending_flag is not None:
        raise MissingOutputName(pending_flag)

    if not keywords:
        raise NoKeywords()

    return RunConfig(
        scan_root=scan_root,
        output_path=output_path,
        keywords=tuple(keywords),
    )
