"""Path string operations for pathstream.

All functions here work on plain `/`-separated strings and never touch the
filesystem, except that `dirname`/`basename` defer the split itself to the
platform layer.

Examples:
    >>> normalize_path("a/./b/../c")
    'a/c'
    >>> join_path("foo/", "/bar")
    'foo/bar'
"""

from __future__ import annotations

from typing import List


SEPARATOR = "/"
_DOT = "."
_DOTDOT = ".."


def normalize_path(path: str) -> str:
    """Resolve "." and ".." segments and collapse repeated separators.

    A leading "/" is kept if and only if `path` starts with one. A ".." with
    nothing left to pop is dropped, so "/.." normalizes to "/" and "a/../../b"
    to "b". No trailing separator is emitted unless the result is "/".

    Args:
        path: Any path string, possibly empty or degenerate

    Returns:
        The normalized path ("" for empty input)
    """
    if not path:
        return ""

    segments: List[str] = []
    for segment in path.split(SEPARATOR):
        if not segment or segment == _DOT:
            continue
        if segment == _DOTDOT:
            if segments:
                segments.pop()
            continue
        segments.append(segment)

    absolute = path.startswith(SEPARATOR)
    if not segments and absolute:
        return SEPARATOR

    joined = SEPARATOR.join(segments)
    return SEPARATOR + joined if absolute else joined


def join_path(path1: str, path2: str) -> str:
    """Join two path strings with exactly the separators they need.

    Only a trailing "/" on `path1` meeting a leading "/" on `path2` is merged;
    nothing else is normalized.

    Args:
        path1: Left-hand path; returned `path2` untouched when empty
        path2: Right-hand path

    Returns:
        The joined path
    """
    if not path1:
        # "" + "/bar"
        return path2

    if path1.endswith(SEPARATOR):
        if path2.startswith(SEPARATOR):
            # foo/ + /bar
            return path1 + path2[1:]
        # foo/ + bar
        return path1 + path2

    if path2.startswith(SEPARATOR):
        # foo + /bar
        return path1 + path2
    # foo + bar
    return path1 + SEPARATOR + path2


def dirname(path: str) -> str:
    """Directory part of `path` as defined by the platform split."""
    from pathstream.infrastructure.storage.platform_posix import split_path

    return split_path(path)[0]


def basename(path: str) -> str:
    """Final element of `path` as defined by the platform split."""
    from pathstream.infrastructure.storage.platform_posix import split_path

    return split_path(path)[1]
