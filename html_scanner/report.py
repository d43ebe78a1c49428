"""
Report writer: renders the match index as a grouped text report and saves
it to the output path.
"""
import os
from typing import List

from loguru import logger

from .errors import OutputOpenError
from .scanner import MatchIndex

RULE = "=" * 50
NO_MATCHES = "No files were found containing the specified keywords."


def render_report(scan_root: str, index: MatchIndex) -> str:
    """
    Build the report text.

    Lines are joined with "\\n"; the platform line terminator is applied
    when the text is written in text mode.

    Args:
        scan_root: Directory that was scanned (made absolute for the header)
        index: Keyword -> matching file paths

    Returns:
        The report as a string, ending with a newline
    """
    lines: List[str] = [f"Scan results for directory: {os.path.abspath(scan_root)}"]

    if not index:
        lines.append("")
        lines.append(NO_MATCHES)
    else:
        for keyword, paths in index.items():
            lines.append("")
            lines.append(RULE)
            lines.append(f'Files containing keyword: "{keyword}"')
            lines.append(RULE)
            lines.extend(paths)

    return "\n".join(lines) + "\n"


def write_report(scan_root: str, index: MatchIndex, output_path: str) -> str:
    """
    Render the report and write it to output_path.

    The text is rendered before the file is opened, so a failed open
    leaves nothing behind.

    Raises:
        OutputOpenError: output_path cannot be opened for writing
    """
    report = render_report(scan_root, index)

    try:
        f = open(output_path, "w", encoding="utf-8", errors="surrogateescape")
    except OSError as e:
        raise OutputOpenError(output_path, e) from e

    with f:
        f.write(report)

    logger.debug(f"Report written to {output_path} ({len(index)} keywords)")
    return report
