import enum
import logging
import os
import stat
import sys
from typing import NamedTuple

from .entry import Text, format_value
from .hashing import digest_file
from .output import write_text
from .table import HashTable


class Options(NamedTuple):
    count_only: bool = False
    quiet: bool = False


class FileStatus(enum.Enum):
    ORIGINAL = "original"
    DUPLICATE = "duplicate"
    UNREADABLE = "unreadable"


class Classification(NamedTuple):
    status: FileStatus
    path: str
    of: str | None = None

    @property
    def is_duplicate(self) -> bool:
        return self.status is FileStatus.DUPLICATE


def is_directory(path) -> bool:
    """Return True if ``path`` is a directory; False if it cannot be stat'ed."""
    try:
        return stat.S_ISDIR(os.stat(path).st_mode)
    except OSError:
        return False


class DuplicateScanner:
    """Walk paths depth-first and classify each file by content digest.

    The table maps digest -> first path seen with that content. The first
    occupant of a digest is never replaced during a run.
    """

    def __init__(self, table: HashTable, options: Options = Options()):
        self.table = table
        self.options = options
        self.files_seen = 0
        self.unreadable = 0

    @property
    def reporting(self) -> bool:
        return not (self.options.count_only or self.options.quiet)

    def classify_file(self, path) -> Classification:
        path = os.fspath(path)
        self.files_seen += 1
        try:
            digest = digest_file(path)
        except OSError as e:
            self.unreadable += 1
            logging.debug(f"[DEBUG] Skipping unreadable file {path}: {e}")
            return Classification(FileStatus.UNREADABLE, path)

        found = self.table.search(digest)
        if found is None:
            self.table.insert(digest, Text(path))
            return Classification(FileStatus.ORIGINAL, path)

        original = format_value(found)
        if self.reporting:
            write_text(sys.stdout, f"{path} is a duplicate of {original}\n")
        return Classification(FileStatus.DUPLICATE, path, original)

    def scan_directory(self, root) -> int:
        """Return the number of duplicates found under ``root`` (recursively)."""
        # depth-first over a stack of open directories
        stack = []
        count = 0
        try:
            self._open_directory(stack, os.fspath(root))
            while stack:
                parent, entries = stack[-1]
                entry = next(entries, None)
                if entry is None:
                    stack.pop()
                    entries.close()
                    continue
                child = os.path.join(parent, entry.name)
                if is_directory(child):
                    self._open_directory(stack, child)
                elif self.classify_file(child).is_duplicate:
                    count += 1
        finally:
            for _, entries in stack:
                entries.close()
        return count

    @staticmethod
    def _open_directory(stack, path) -> None:
        try:
            stack.append((path, os.scandir(path)))
        except OSError as e:
            logging.error(f"[x] Unable to open directory on {path}: {e.strerror}")

    def scan(self, paths) -> int:
        """Scan every supplied path and return the total duplicate count."""
        count = 0
        for path in paths:
            if is_directory(path):
                count += self.scan_directory(path)
            elif self.classify_file(path).is_duplicate:
                count += 1
        logging.debug(
            f"[DEBUG] Scanned {self.files_seen} file(s): {count} duplicate(s), "
            f"{self.unreadable} unreadable"
        )
        return count
