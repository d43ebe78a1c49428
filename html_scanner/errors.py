"""
Exception hierarchy for the HTML keyword scanner.

Configuration errors are fatal and make the CLI print the usage banner.
Traversal and per-file problems are recovered from inside the scanner.
"""
from typing import Optional


class HtmlScannerError(Exception):
    """Base class for all scanner errors"""


class ConfigurationError(HtmlScannerError):
    """Command line could not be turned into a RunConfig"""


class UsageError(ConfigurationError):
    """Fewer than two arguments after the program name"""

    def __init__(self, message: str = "Not enough arguments."):
        super().__init__(message)


class InvalidDirectory(ConfigurationError):
    """Scan root is missing or is not a directory"""

    def __init__(self, path: str):
        super().__init__("The first argument must be a valid directory.")
        self.path = path


class NoKeywords(ConfigurationError):
    """No keyword tokens were left after option processing"""

    def __init__(self):
        super().__init__("No keywords were provided.")


class MissingOutputName(ConfigurationError):
    """/o was the last argument"""

    def __init__(self, flag: str = "/o"):
        super().__init__(f"{flag} flag specified without a filename.")
        self.flag = flag


class OutputOpenError(HtmlScannerError):
    """Report file could not be opened for writing"""

    def __init__(self, path: str, cause: Optional[OSError] = None):
        super().__init__(f"Could not open output file for writing: {path}")
        self.path = path
        self.cause = cause


class TraversalError(HtmlScannerError):
    """Directory walk failed part way through"""

    def __init__(self, root: str, cause: OSError):
        super().__init__(f"Filesystem error: {cause}")
        self.root = root
        self.cause = cause


class FileOpenWarning(HtmlScannerError):
    """A single candidate file could not be read"""

    def __init__(self, path: str, cause: Optional[OSError] = None):
        super().__init__(f"Could not open file: {path}")
        self.path = path
        self.cause = cause
