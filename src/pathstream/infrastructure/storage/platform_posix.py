"""POSIX platform layer for pathstream.

Supplies the pieces the portable helpers defer to: splitting a path into its
directory and final element, listing a directory's entries, and the
descriptor-level open/read/write/close cycle behind file reads and writes.
"""

from __future__ import annotations

import os
from typing import TYPE_CHECKING, Optional, Tuple

import structlog

from pathstream.domain.errors import StreamIOError
from pathstream.infrastructure.storage.path_ops import SEPARATOR, join_path
from pathstream.infrastructure.storage.stream_io import read_from, write_to

if TYPE_CHECKING:
    from pathstream.infrastructure.storage.tree_walker import DirectoryEntryConsumer

logger = structlog.get_logger()


def split_path(path: str) -> Tuple[str, str]:
    """Split `path` at its last separator.

    "foo/bar" -> ("foo", "bar"), "/foo" -> ("/", "foo"), "foo" -> ("", "foo").
    A trailing separator yields an empty final element: "foo/" -> ("foo", "").
    """
    pos = path.rfind(SEPARATOR)
    if pos == -1:
        return "", path
    if pos == 0:
        # Keep the root separator as the directory part.
        return path[:1], path[1:]
    return path[:pos], path[pos + 1:]


def is_absolute(path: str) -> bool:
    return path.startswith(SEPARATOR)


def path_exists(path: str) -> bool:
    return os.path.exists(path)


def is_directory(path: str) -> bool:
    return os.path.isdir(path)


def for_each_directory_entry(path: str, consumer: DirectoryEntryConsumer) -> None:
    """Report every direct child of `path` to `consumer`.

    Entries come in the order the OS lists them. Symlinks are classified by
    the link itself, so a link to a directory is reported as a non-directory.
    A directory that cannot be opened reports nothing; a listing that fails
    partway reports the entries seen before the failure.
    """
    try:
        scanner = os.scandir(path)
    except OSError as e:
        logger.warning("directory_unreadable", path=path, error=str(e))
        return

    with scanner:
        while True:
            try:
                entry = next(scanner)
            except StopIteration:
                break
            except OSError as e:
                logger.warning("directory_listing_failed", path=path, error=str(e))
                break
            try:
                entry_is_dir = entry.is_dir(follow_symlinks=False)
            except OSError:
                entry_is_dir = False
            consumer.consume(join_path(path, entry.name), entry_is_dir)


def _open_descriptor(filename: str, flags: int, mode: int, operation: str) -> int:
    try:
        return os.open(filename, flags, mode)
    except OSError as e:
        raise StreamIOError(e.strerror or str(e), filename, operation) from e


def _close_descriptor(fd: int, filename: str) -> bool:
    try:
        os.close(fd)
    except OSError as e:
        logger.warning("close_failed", path=filename, error=str(e))
        return False
    return True


def read_file(filename: str, content: bytearray, max_size: int = 0) -> bool:
    """Read up to `max_size` bytes of `filename` into `content` (0 = all).

    Returns:
        False if the file cannot be opened or a read fails
    """
    try:
        fd = _open_descriptor(filename, os.O_RDONLY, 0, "read")
    except StreamIOError as e:
        logger.warning("open_failed", path=filename, error=str(e))
        return False
    try:
        return read_from(lambda size: os.read(fd, size), content, max_size)
    finally:
        # Bytes already in `content` stay valid even if close fails.
        _close_descriptor(fd, filename)


def write_file_bytes(
    data: bytes,
    size: int,
    filename: str,
    perm: Optional[int] = None,
) -> bool:
    """Create or truncate `filename` and write the first `size` bytes of `data`.

    Args:
        data: Bytes to write
        size: Number of bytes expected to land in the file
        filename: Target path
        perm: Mode for a newly created file (default: `settings.file_mode`)

    Returns:
        False if the open fails, the single write is short or the close fails
    """
    if perm is None:
        from pathstream.config import settings

        perm = settings.file_mode

    flags = os.O_CREAT | os.O_WRONLY | os.O_TRUNC
    try:
        fd = _open_descriptor(filename, flags, perm, "write")
    except StreamIOError as e:
        logger.warning("open_failed", path=filename, error=str(e))
        return False
    try:
        result = write_to(lambda chunk: os.write(fd, chunk), data, size)
    finally:
        closed = _close_descriptor(fd, filename)
    result = result and closed
    if not result:
        logger.warning("write_file_failed", path=filename, size=size)
    return result
