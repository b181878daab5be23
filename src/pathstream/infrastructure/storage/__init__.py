"""Storage infrastructure for pathstream.

Provides path string operations, bounded stream I/O, directory walking and
the POSIX platform layer they delegate to.
"""

from .path_ops import (
    basename,
    dirname,
    join_path,
    normalize_path,
)
from .stream_io import (
    READ_CHUNK_SIZE,
    read_from,
    write_file,
    write_to,
)
from .platform_posix import (
    for_each_directory_entry,
    is_absolute,
    is_directory,
    path_exists,
    read_file,
    split_path,
    write_file_bytes,
)
from .tree_walker import (
    DirectoryEntryConsumer,
    DirectoryTreeWalker,
    ForEachDirectoryEntry,
    get_all_files_under,
)

__all__ = [
    # Path operations
    "basename",
    "dirname",
    "join_path",
    "normalize_path",
    # Stream I/O
    "READ_CHUNK_SIZE",
    "read_from",
    "write_file",
    "write_to",
    # Platform layer
    "for_each_directory_entry",
    "is_absolute",
    "is_directory",
    "path_exists",
    "read_file",
    "split_path",
    "write_file_bytes",
    # Tree walking
    "DirectoryEntryConsumer",
    "DirectoryTreeWalker",
    "ForEachDirectoryEntry",
    "get_all_files_under",
]
