"""pathstream - path and byte-stream primitives.

A foundation layer for tools that need to:
- Normalize, join and split `/`-separated path strings
- Move bytes through injected read/write primitives with retry and size bounds
- Enumerate every file under a directory through a pluggable entry walker
"""

__version__ = "0.1.0"
