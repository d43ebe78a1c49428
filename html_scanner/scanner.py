"""
Core scanner: walks the scan root, picks out HTML candidates, reads each
one line by line and records which keywords it contains.

The filesystem is reached only through two seams so the scanner can run
against an in-memory tree:

    walker(root)       -> iterable of WalkEntry, depth-first pre-order
    line_source(path)  -> context manager yielding byte lines
"""

import os
from dataclasses import dataclass, field
from typing import (
    Callable,
    ContextManager,
    Dict,
    Iterable,
    Iterator,
    List,
    Optional,
    Sequence,
    Set,
    Tuple,
)

from loguru import logger

from .config import HTML_EXTENSIONS, RunConfig
from .errors import FileOpenWarning, TraversalError
from .log import echo


@dataclass(frozen=True)
class WalkEntry:
    """One entry surfaced by the directory walk."""
    path: str
    is_file: bool


Walker = Callable[[str], Iterable[WalkEntry]]
LineSource = Callable[[str], ContextManager[Iterable[bytes]]]
MatchCallback = Callable[[str, str], None]


# ── Filesystem seams ──────────────────────────────────────────────────────────

def walk_tree(root: str) -> Iterator[WalkEntry]:
    """
    Yield every entry under root, depth-first pre-order.

    Directory symlinks are reported but never entered; file symlinks count
    as files when their target is a regular file. Each directory is listed
    in full and closed before its children are visited.
    """
    pending: List[Iterator[os.DirEntry]] = [_list_dir(root)]
    while pending:
        entry = next(pending[-1], None)
        if entry is None:
            pending.pop()
            continue
        yield WalkEntry(path=entry.path, is_file=entry.is_file())
        if entry.is_dir(follow_symlinks=False):
            pending.append(_list_dir(entry.path))


def _list_dir(path: str) -> Iterator[os.DirEntry]:
    with os.scandir(path) as entries:
        return iter(list(entries))


def open_binary(path: str) -> ContextManager[Iterable[bytes]]:
    """Open a file for sequential reading; iteration splits on b"\\n"."""
    return open(path, "rb")


# ── Match index ───────────────────────────────────────────────────────────────

class MatchIndex:
    """
    Keyword -> file paths, iterated in ascending keyword order.

    Paths keep the order they were added in and a path is stored at most
    once per keyword.
    """

    def __init__(self):
        self._files: Dict[str, List[str]] = {}
        self._seen: Dict[str, Set[str]] = {}

    def add(self, keyword: str, path: str) -> bool:
        """Record a match; returns False if the pair was already present."""
        seen = self._seen.setdefault(keyword, set())
        if path in seen:
            return False
        seen.add(path)
        self._files.setdefault(keyword, []).append(path)
        return True

    def keywords(self) -> List[str]:
        return sorted(self._files)

    def items(self) -> Iterator[Tuple[str, List[str]]]:
        for keyword in self.keywords():
            yield keyword, list(self._files[keyword])

    def __getitem__(self, keyword: str) -> List[str]:
        return list(self._files[keyword])

    def __contains__(self, keyword: object) -> bool:
        return keyword in self._files

    def __iter__(self) -> Iterator[str]:
        return iter(self.keywords())

    def __len__(self) -> int:
        return len(self._files)

    def __repr__(self) -> str:
        return f"MatchIndex({dict(self.items())!r})"


# ── Results ───────────────────────────────────────────────────────────────────

@dataclass
class ScanStats:
    """Counters collected while scanning."""
    entries_visited: int = 0
    candidates: int = 0
    unreadable: int = 0
    matched_files: int = 0


@dataclass
class ScanResult:
    """Everything a scan produced."""
    index: MatchIndex = field(default_factory=MatchIndex)
    stats: ScanStats = field(default_factory=ScanStats)
    warnings: List[FileOpenWarning] = field(default_factory=list)
    traversal_error: Optional[TraversalError] = None


def print_match(keyword: str, path: str) -> None:
    echo(f'Found "{keyword}" in: {path}')


# ── Scanner ───────────────────────────────────────────────────────────────────

class Scanner:
    """
    Multi-keyword substring scanner over HTML files.

    Matching folds ASCII letters only, so non-ASCII bytes compare literally
    and no file encoding is assumed.
    """

    def __init__(
        self,
        keywords: Sequence[str],
        walker: Walker = walk_tree,
        line_source: LineSource = open_binary,
        on_match: Optional[MatchCallback] = None,
        case_sensitive: bool = False,
        ignore_extension_case: bool = False,
    ):
        self.keywords = list(keywords)
        self.walker = walker
        self.line_source = line_source
        self.on_match = on_match
        self.case_sensitive = case_sensitive
        self.ignore_extension_case = ignore_extension_case

        # Duplicate keywords collapse to one needle
        self._needles: Dict[str, bytes] = {}
        for keyword in self.keywords:
            if keyword not in self._needles:
                self._needles[keyword] = self._fold(os.fsencode(keyword))

    def _fold(self, data: bytes) -> bytes:
        return data if self.case_sensitive else data.lower()

    def is_candidate(self, path: str) -> bool:
        """True when the file name ends in exactly .html or .htm."""
        ext = os.path.splitext(path)[1]
        if self.ignore_extension_case:
            ext = ext.lower()
        return ext in HTML_EXTENSIONS

    def match_lines(self, lines: Iterable[bytes]) -> Set[str]:
        """Return the keywords that occur in any of the lines."""
        found: Set[str] = set()
        remaining = dict(self._needles)

        for line in lines:
            hay = self._fold(line)
            for keyword, needle in list(remaining.items()):
                if needle in hay:
                    found.add(keyword)
                    del remaining[keyword]
            if not remaining:
                break

        return found

    def scan_file(self, path: str) -> Set[str]:
        """
        Read one candidate and return the keywords it contains.

        Raises:
            FileOpenWarning: The file could not be opened or read
        """
        logger.debug(f"Scanning file: {path}")
        try:
            with self.line_source(path) as lines:
                return self.match_lines(lines)
        except OSError as e:
            raise FileOpenWarning(path, e) from e

    def scan(self, root: str) -> ScanResult:
        """
        Walk root and build the match index.

        Traversal errors stop the walk but keep whatever was collected;
        unreadable files are skipped with a warning.
        """
        result = ScanResult()

        try:
            for entry in self.walker(root):
                result.stats.entries_visited += 1
                if not entry.is_file or not self.is_candidate(entry.path):
                    continue

                result.stats.candidates += 1
                try:
                    found = self.scan_file(entry.path)
                except FileOpenWarning as warning:
                    logger.warning(f"Warning: {warning}")
                    result.warnings.append(warning)
                    result.stats.unreadable += 1
                    continue

                if found:
                    result.stats.matched_files += 1
                for keyword in sorted(found):
                    if result.index.add(keyword, entry.path) and self.on_match:
                        self.on_match(keyword, entry.path)

        except OSError as e:
            error = TraversalError(root, e)
            logger.error(str(error))
            result.traversal_error = error

        return result


def run_scan(
    config: RunConfig,
    walker: Walker = walk_tree,
    line_source: LineSource = open_binary,
    on_match: Optional[MatchCallback] = print_match,
) -> ScanResult:
    """Scan config.scan_root for config.keywords."""
    scanner = Scanner(
        config.keywords,
        walker=walker,
        line_source=line_source,
        on_match=on_match,
    )
    return scanner.scan(config.scan_root)
