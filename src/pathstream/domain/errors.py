"""Domain errors."""


class PathStreamError(Exception):
    """Base error."""
    pass


class StreamIOError(PathStreamError):
    """Descriptor-level I/O error with context."""

    def __init__(self, message: str, path: str = "", operation: str = ""):
        self.path = path
        self.operation = operation
        super().__init__(f"[{operation}] {path}: {message}" if operation else message)
