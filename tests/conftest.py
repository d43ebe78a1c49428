"""
Shared test fixtures for the HTML keyword scanner tests.

Provides on-disk sample sites, an in-memory filesystem for the scanner's
walker / line-source seams, and a loguru sink that collects messages.
"""

import os
import sys
from contextlib import contextmanager
from pathlib import Path
from typing import Dict, List

import pytest
from loguru import logger

from html_scanner.scanner import WalkEntry


# ============================================================
# Logging fixtures
# ============================================================

@pytest.fixture(autouse=True)
def reset_loguru():
    """Drop any sinks a test (or the CLI) installed."""
    yield
    logger.remove()


@pytest.fixture
def log_messages():
    """Collect loguru output as 'LEVEL|message' strings."""
    messages: List[str] = []
    handler_id = logger.add(
        lambda m: messages.append(str(m).rstrip("\n")),
        format="{level}|{message}",
        level="DEBUG",
    )
    yield messages
    try:
        logger.remove(handler_id)
    except ValueError:
        pass


# ============================================================
# On-disk sample sites
# ============================================================

def write(path: Path, text: str) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path


@pytest.fixture
def gallery_site(tmp_path):
    """
    The form/gallery site used by the end-to-end scenarios.

    a.html mentions gallery, b.html mentions Form and GALLERY, c.txt mentions
    both but is not HTML.
    """
    site = tmp_path / "site"
    site.mkdir()
    write(site / "a.html", "<html>\n<div class='gallery'></div>\n</html>\n")
    write(site / "b.html", "<html>\n<h1>Form</h1>\n<p>GALLERY</p>\n</html>\n")
    write(site / "c.txt", "form gallery\n")
    return site


@pytest.fixture
def form_site(tmp_path):
    """a.html holds a FORM tag, b.htm only a div."""
    site = tmp_path / "site"
    site.mkdir()
    write(site / "a.html", "<html>\n<FORM action=\"/post\">\n</FORM>\n</html>\n")
    write(site / "b.htm", "<html>\n<div>nothing here</div>\n</html>\n")
    return site


@pytest.fixture
def undecodable_site(tmp_path):
    """site/caf\xe9.html: a file name that is not valid UTF-8."""
    site = tmp_path / "site"
    site.mkdir()
    raw_path = os.path.join(os.fsencode(str(site)), b"caf\xe9.html")
    try:
        with open(raw_path, "wb") as f:
            f.write(b"<form>\n")
    except OSError:
        pytest.skip("filesystem rejects non-UTF-8 file names")
    return site


@pytest.fixture
def deep_site(tmp_path):
    """
    site/d/d/.../a.html, nested deeper than the interpreter recursion limit.

    Yields (site, depth). Torn down bottom-up so cleanup does not recurse.
    """
    depth = sys.getrecursionlimit() + 100
    if len(str(tmp_path)) + 2 * depth + 32 > 4000:
        pytest.skip("nested path would exceed PATH_MAX")

    site = tmp_path / "site"
    site.mkdir()
    levels = []
    current = site
    for _ in range(depth):
        current = current / "d"
        current.mkdir()
        levels.append(current)
    page = write(current / "a.html", "<form>\n")

    yield site, depth

    page.unlink()
    for level in reversed(levels):
        level.rmdir()


# ============================================================
# In-memory filesystem
# ============================================================

class MemoryTree:
    """
    Minimal stand-in for a directory tree.

    Entries are given in traversal order; a file's content is bytes, a
    directory's is None. Paths listed in `unreadable` fail to open.
    """

    def __init__(self, entries: Dict[str, object], unreadable=()):
        self.entries = entries
        self.unreadable = set(unreadable)
        self.opened: List[str] = []

    def walk(self, root: str):
        for path, content in self.entries.items():
            yield WalkEntry(path=path, is_file=content is not None)

    @contextmanager
    def open(self, path: str):
        if path in self.unreadable:
            raise PermissionError(13, "Permission denied", path)
        self.opened.append(path)
        data = self.entries[path]
        yield iter(data.splitlines(keepends=True))


@pytest.fixture
def memory_tree():
    return MemoryTree
