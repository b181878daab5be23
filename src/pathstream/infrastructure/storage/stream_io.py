"""Byte stream helpers over injected read/write primitives.

Primitives follow the raw-I/O conventions of `os.read` / `os.write`:

- read:  ``read_func(size) -> bytes | None``; ``b""`` is end of input,
  ``None`` means no data is available yet
- write: ``write_func(data) -> int | None``; returns the byte count written

Both signal failure by raising `OSError`. Results are reported as booleans so
callers decide on recovery themselves.
"""

from __future__ import annotations

import errno
from typing import Callable, Optional, Union

import structlog

logger = structlog.get_logger()

READ_CHUNK_SIZE = 4096

ReadFunc = Callable[[int], Optional[bytes]]
WriteFunc = Callable[[bytes], Optional[int]]

_RETRYABLE_ERRNOS = frozenset({errno.EINTR, errno.EAGAIN, errno.EWOULDBLOCK})


def _is_retryable(exc: OSError) -> bool:
    if isinstance(exc, (InterruptedError, BlockingIOError)):
        return True
    return exc.errno in _RETRYABLE_ERRNOS


def read_from(read_func: ReadFunc, content: bytearray, max_size: int = 0) -> bool:
    """Read everything `read_func` yields into `content`.

    Args:
        read_func: Read primitive, called with the number of bytes wanted
        content: Output buffer; cleared first, then extended in place
        max_size: Stop after this many bytes (0 or negative = unbounded);
            bytes past the limit in an oversized chunk are dropped

    Returns:
        True on end of input or once `max_size` bytes were read, False on a
        non-retryable error (bytes read before the error stay in `content`)
    """
    content.clear()
    remaining = max_size if max_size > 0 else None

    while True:
        wanted = READ_CHUNK_SIZE if remaining is None else min(READ_CHUNK_SIZE, remaining)
        try:
            chunk = read_func(wanted)
        except OSError as e:
            if _is_retryable(e):
                logger.debug("read_retry", errno=e.errno)
                continue
            logger.warning("read_failed", errno=e.errno, error=str(e), bytes_read=len(content))
            return False

        if chunk is None:
            continue
        if not chunk:
            break

        if remaining is None:
            content.extend(chunk)
            continue

        chunk = chunk[:remaining]
        content.extend(chunk)
        remaining -= len(chunk)
        if remaining <= 0:
            break

    return True


def write_to(
    write_func: WriteFunc,
    data: Union[bytes, bytearray, memoryview],
    size: Optional[int] = None,
) -> bool:
    """Write `data` with a single call of `write_func`.

    A short write is a failure; there is no retry loop.

    Args:
        write_func: Write primitive
        data: Bytes to write
        size: Number of leading bytes of `data` to write (default: all)

    Returns:
        True only if `write_func` reports exactly `size` bytes written
    """
    if size is None:
        size = len(data)
    try:
        written = write_func(bytes(data[:size]))
    except OSError as e:
        logger.warning("write_failed", errno=e.errno, error=str(e), size=size)
        return False

    if written != size:
        logger.warning("short_write", size=size, written=written)
        return False
    return True


def write_file(
    content: Union[str, bytes, bytearray],
    filename: str,
    perm: Optional[int] = None,
) -> bool:
    """Write `content` to `filename`, replacing any previous contents.

    Text is encoded as UTF-8. The open/write/close cycle is handled by the
    platform layer.
    """
    from pathstream.infrastructure.storage.platform_posix import write_file_bytes

    data = content.encode("utf-8") if isinstance(content, str) else bytes(content)
    return write_file_bytes(data, len(data), filename, perm)
