"""
Scanner Configuration
"""
import os
from typing import Optional, Tuple

from dotenv import load_dotenv
from pydantic import BaseModel, ConfigDict

load_dotenv()

DEFAULT_OUTPUT_PATH = "output.txt"
HTML_EXTENSIONS: Tuple[str, ...] = (".html", ".htm")
OUTPUT_FLAGS: Tuple[str, ...] = ("/o", "/O")


class RunConfig(BaseModel):
    """Validated command line for a single scan"""
    scan_root: str
    output_path: str = DEFAULT_OUTPUT_PATH
    keywords: Tuple[str, ...]

    model_config = ConfigDict(frozen=True)


class ScannerSettings(BaseModel):
    """
    Diagnostics settings read from the environment (and .env, if present).

    None of these change what is scanned or what the report contains.
    """
    log_level: str = "INFO"
    log_file: Optional[str] = None

    @classmethod
    def from_env(cls) -> "ScannerSettings":
        return cls(
            log_level=os.getenv("HTML_SCANNER_LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("HTML_SCANNER_LOG_FILE") or None,
        )
