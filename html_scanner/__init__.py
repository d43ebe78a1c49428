"""
HTML Keyword Scanner: walks a directory tree, reads every .html/.htm file,
and writes a text report grouping the matching file paths under each keyword.

Usage:
    html-scanner <directory> [/o <output_path>] <keyword> [<keyword> ...]
    python -m html_scanner <directory> [/o <output_path>] <keyword> ...
"""

from .config import RunConfig, ScannerSettings
from .errors import (
    HtmlScannerError,
    ConfigurationError,
    UsageError,
    InvalidDirectory,
    NoKeywords,
    MissingOutputName,
    OutputOpenError,
    TraversalError,
    FileOpenWarning,
)
from .scanner import MatchIndex, ScanResult, ScanStats, Scanner, run_scan
from .report import render_report, write_report

__all__ = [
    'RunConfig',
    'ScannerSettings',
    'HtmlScannerError',
    'ConfigurationError',
    'UsageError',
    'InvalidDirectory',
    'NoKeywords',
    'MissingOutputName',
    'OutputOpenError',
    'TraversalError',
    'FileOpenWarning',
    'MatchIndex',
    'ScanResult',
    'ScanStats',
    'Scanner',
    'run_scan',
    'render_report',
    'write_report',
]
