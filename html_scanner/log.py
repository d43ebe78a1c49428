"""
Logging setup for the scanner CLI

Warnings and errors go to stderr through loguru. Progress lines and the
final summary go to stdout through echo().

Usage:
    from html_scanner.log import configure_logging
    configure_logging()  # Call once at startup
"""
import os
import sys
from typing import Optional, TextIO

from loguru import logger

from .config import ScannerSettings

STDERR_FORMAT = "<level>{level: <8}</level> | <level>{message}</level>"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss} | {level: <8} | {name}:{function}:{line} - {message}"


def configure_logging(settings: Optional[ScannerSettings] = None) -> None:
    """
    Replace loguru's default handler with the scanner's sinks.

    Args:
        settings: Diagnostics settings; read from the environment when omitted
    """
    if settings is None:
        settings = ScannerSettings.from_env()

    logger.remove()
    logger.add(
        sys.stderr,
        format=STDERR_FORMAT,
        level=settings.log_level,
    )

    if settings.log_file:
        logger.add(
            settings.log_file,
            format=FILE_FORMAT,
            rotation="10 MB",
            retention="7 days",
            level="DEBUG",
        )


def echo(line: str = "", stream: Optional[TextIO] = None) -> None:
    """
    Write one line of progress output to stdout.

    Paths from the walk may carry surrogate escapes for bytes that are not
    valid in the filesystem encoding; those are written back as the
    original bytes instead of failing the scan.
    """
    if stream is None:
        stream = sys.stdout
    try:
        stream.write(line + "\n")
    except UnicodeEncodeError:
        buffer = getattr(stream, "buffer", None)
        if buffer is None:
            stream.write(line.encode("ascii", "backslashreplace").decode("ascii") + "\n")
            return
        stream.flush()
        buffer.write(os.fsencode(line) + b"\n")
        buffer.flush()
