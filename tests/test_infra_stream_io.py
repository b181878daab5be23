"""Tests for stream I/O helpers."""

import errno

import pytest

from pathstream.infrastructure.storage import stream_io
from pathstream.infrastructure.storage.stream_io import (
    READ_CHUNK_SIZE,
    read_from,
    write_file,
    write_to,
)


class ScriptedReader:
    """Read primitive double that replays a script of results.

    Each script item is bytes or None (returned as is), or an
    OSError instance (raised). An exhausted script reads as end of input.
    """

    def __init__(self, script):
        self.script = list(script)
        self.requests = []

    def __call__(self, size):
        self.requests.append(size)
        if not self.script:
            return b""
        item = self.script.pop(0)
        if isinstance(item, OSError):
            raise item
        return item


class StreamReader:
    """Read primitive double serving a byte string honoring the requested size."""

    def __init__(self, data):
        self.data = data
        self.pos = 0
        self.requests = []

    def __call__(self, size):
        self.requests.append(size)
        chunk = self.data[self.pos:self.pos + size]
        self.pos += len(chunk)
        return chunk


class TestReadFrom:
    """read_from behavior."""

    def test_reads_until_end_of_input(self):
        reader = StreamReader(b"x" * 10000)
        content = bytearray()
        assert read_from(reader, content) is True
        assert bytes(content) == b"x" * 10000
        assert reader.requests[0] == READ_CHUNK_SIZE
        assert all(size == READ_CHUNK_SIZE for size in reader.requests)

    def test_clears_buffer_first(self):
        content = bytearray(b"stale data")
        assert read_from(StreamReader(b"fresh"), content) is True
        assert bytes(content) == b"fresh"

    def test_empty_input(self):
        content = bytearray(b"old")
        assert read_from(StreamReader(b""), content) is True
        assert content == bytearray()

    def test_max_size_bounds_request_and_total(self):
        reader = StreamReader(b"abcdefghij")
        content = bytearray()
        assert read_from(reader, content, max_size=4) is True
        assert bytes(content) == b"abcd"
        assert reader.requests == [4]

    def test_max_size_never_exceeded_by_oversized_chunk(self):
        reader = ScriptedReader([b"0123456789"])
        content = bytearray()
        assert read_from(reader, content, max_size=3) is True
        assert bytes(content) == b"012"

    def test_unbounded_read_keeps_oversized_chunk(self):
        reader = ScriptedReader([b"q" * 5000, b"tail"])
        content = bytearray()
        assert read_from(reader, content) is True
        assert bytes(content) == b"q" * 5000 + b"tail"

    def test_max_size_spanning_several_chunks(self):
        reader = StreamReader(b"y" * 9000)
        content = bytearray()
        assert read_from(reader, content, max_size=5000) is True
        assert len(content) == 5000
        assert reader.requests == [READ_CHUNK_SIZE, 5000 - READ_CHUNK_SIZE]

    def test_max_size_larger_than_input(self):
        content = bytearray()
        assert read_from(StreamReader(b"short"), content, max_size=100) is True
        assert bytes(content) == b"short"

    def test_negative_max_size_is_unbounded(self):
        content = bytearray()
        assert read_from(StreamReader(b"z" * 5000), content, max_size=-1) is True
        assert len(content) == 5000

    def test_short_reads_are_accumulated(self):
        reader = ScriptedReader([b"ab", b"c", b"def"])
        content = bytearray()
        assert read_from(reader, content, max_size=5) is True
        assert bytes(content) == b"abcde"
        assert reader.requests == [5, 3, 2]

    @pytest.mark.parametrize(
        "transient",
        [
            InterruptedError(errno.EINTR, "interrupted"),
            BlockingIOError(errno.EAGAIN, "try again"),
            OSError(errno.EINTR, "interrupted"),
            OSError(errno.EAGAIN, "try again"),
        ],
    )
    def test_transient_errors_are_retried(self, transient):
        reader = ScriptedReader([b"ab", transient, b"cd"])
        content = bytearray()
        assert read_from(reader, content) is True
        assert bytes(content) == b"abcd"

    def test_none_result_is_retried(self):
        reader = ScriptedReader([None, b"data", None])
        content = bytearray()
        assert read_from(reader, content) is True
        assert bytes(content) == b"data"

    def test_hard_error_fails_and_keeps_partial_content(self):
        reader = ScriptedReader([b"part", OSError(errno.EIO, "I/O error"), b"never"])
        content = bytearray()
        assert read_from(reader, content, max_size=100) is False
        assert bytes(content) == b"part"
        assert reader.script == [b"never"]

    def test_hard_error_on_first_read(self):
        reader = ScriptedReader([OSError(errno.EBADF, "bad descriptor")])
        content = bytearray(b"old")
        assert read_from(reader, content) is False
        assert content == bytearray()


class TestWriteTo:
    """write_to behavior."""

    def test_full_write_succeeds(self):
        calls = []

        def writer(data):
            calls.append(data)
            return len(data)

        assert write_to(writer, b"hello") is True
        assert calls == [b"hello"]

    def test_short_write_fails_without_retry(self):
        calls = []

        def writer(data):
            calls.append(data)
            return 2

        assert write_to(writer, b"hello") is False
        assert len(calls) == 1

    def test_error_fails(self):
        def writer(data):
            raise OSError(errno.ENOSPC, "no space left")

        assert write_to(writer, b"hello") is False

    def test_none_result_fails(self):
        assert write_to(lambda data: None, b"hello") is False

    def test_explicit_size_writes_prefix(self):
        calls = []

        def writer(data):
            calls.append(data)
            return len(data)

        assert write_to(writer, b"hello world", 5) is True
        assert calls == [b"hello"]

    def test_result_must_match_requested_size(self):
        assert write_to(lambda data: 11, b"hello world", 5) is False

    def test_empty_write(self):
        assert write_to(lambda data: len(data), b"") is True


class TestWriteFile:
    """write_file delegates to the platform layer."""

    def test_text_is_encoded(self, monkeypatch):
        captured = {}

        def fake_write_file_bytes(data, size, filename, perm=None):
            captured.update(data=data, size=size, filename=filename, perm=perm)
            return True

        monkeypatch.setattr(
            "pathstream.infrastructure.storage.platform_posix.write_file_bytes",
            fake_write_file_bytes,
        )
        assert write_file("héllo", "out.txt") is True
        assert captured == {
            "data": "héllo".encode("utf-8"),
            "size": len("héllo".encode("utf-8")),
            "filename": "out.txt",
            "perm": None,
        }

    def test_bytes_written_to_disk(self, tmp_path):
        target = tmp_path / "data.bin"
        assert write_file(b"\x00\x01\x02", str(target), 0o644) is True
        assert target.read_bytes() == b"\x00\x01\x02"

    def test_failure_reported(self, tmp_path):
        target = tmp_path / "missing_dir" / "data.bin"
        assert write_file("x", str(target)) is False


def test_chunk_size_constant():
    assert stream_io.READ_CHUNK_SIZE == 4096
