"""Recursive directory walking over a pluggable entry enumerator.

The enumerator is any callable ``walk_entries(path, consumer)`` that calls
``consumer.consume(child_path, is_directory)`` once per direct child of
`path`. The POSIX default is `platform_posix.for_each_directory_entry`; tests
pass an in-memory tree instead.

Usage:
    files: list[str] = []
    get_all_files_under("src", files)
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Callable, List, Optional


class DirectoryEntryConsumer(ABC):
    """Receives one notification per directory entry found by an enumerator."""

    @abstractmethod
    def consume(self, path: str, is_directory: bool) -> None:
        """Handle a single entry."""


ForEachDirectoryEntry = Callable[[str, DirectoryEntryConsumer], None]


class DirectoryTreeWalker(DirectoryEntryConsumer):
    """Collects every non-directory entry below a directory.

    Subdirectories are walked as soon as they are reported, so files land in
    `files` in depth-first enumeration order. Nothing is sorted.
    """

    def __init__(self, files: List[str], walk_entries: ForEachDirectoryEntry):
        self._files = files
        self._walk_entries = walk_entries

    def consume(self, path: str, is_directory: bool) -> None:
        if is_directory:
            self.walk(path)
        else:
            self._files.append(path)

    def walk(self, path: str) -> None:
        """Enumerate `path`; it is expected to be a directory."""
        self._walk_entries(path, self)


def get_all_files_under(
    path: str,
    result: List[str],
    walk_entries: Optional[ForEachDirectoryEntry] = None,
) -> None:
    """Append every file reachable below directory `path` to `result`.

    Args:
        path: Directory to walk
        result: Caller-owned list; only appended to
        walk_entries: Entry enumerator (default: the platform's)
    """
    if walk_entries is None:
        from pathstream.infrastructure.storage.platform_posix import (
            for_each_directory_entry as walk_entries,
        )

    DirectoryTreeWalker(result, walk_entries).walk(path)
