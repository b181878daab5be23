"""Domain types for pathstream."""

from .errors import PathStreamError, StreamIOError

__all__ = [
    "PathStreamError",
    "StreamIOError",
]
