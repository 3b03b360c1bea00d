"""Pytest configuration and shared fixtures."""

from __future__ import annotations

import io

import pytest

from protolog import MultiTypeWriter

FOO_TYPE_ID = 0
BAR_TYPE_ID = 1
BAZ_TYPE_ID = 2


class LimitedSink:
    """Sink that stops accepting bytes after ``limit`` bytes in total."""

    def __init__(self, limit: int) -> None:
        self.limit = limit
        self.data = bytearray()

    def write(self, data: bytes) -> int:
        n = max(0, min(len(data), self.limit - len(self.data)))
        self.data.extend(bytes(data[:n]))
        return n


class TrickleSink:
    """Sink that accepts at most ``chunk`` bytes per write call."""

    def __init__(self, chunk: int) -> None:
        self.chunk = chunk
        self.data = bytearray()
        self.calls = 0

    def write(self, data: bytes) -> int:
        self.calls += 1
        n = min(len(data), self.chunk)
        self.data.extend(bytes(data[:n]))
        return n


class TrickleSource:
    """Source without readinto() that returns at most ``chunk`` bytes per read."""

    def __init__(self, data: bytes, chunk: int) -> None:
        self._data = data
        self._pos = 0
        self.chunk = chunk
        self.reads = 0

    def read(self, size: int = -1) -> bytes:
        self.reads += 1
        if size < 0:
            size = len(self._data) - self._pos
        n = min(size, self.chunk)
        chunk = self._data[self._pos : self._pos + n]
        self._pos += len(chunk)
        return chunk


class FailingSource:
    """Source whose reads raise OSError."""

    def read(self, size: int = -1) -> bytes:
        raise OSError("device not ready")


@pytest.fixture
def sample_payload() -> bytes:
    """Sample binary payload for testing."""
    return b"Hello, record log!"


@pytest.fixture
def sample_type_id() -> int:
    """Sample type ID for testing."""
    return 42


@pytest.fixture
def three_records() -> list[tuple[int, bytes]]:
    """Records written with increasing type IDs."""
    return [(FOO_TYPE_ID, b"first"), (BAR_TYPE_ID, b"second"), (BAZ_TYPE_ID, b"third")]


@pytest.fixture
def three_record_stream(three_records: list[tuple[int, bytes]]) -> io.BytesIO:
    """A stream holding three_records, rewound to the start."""
    buf = io.BytesIO()
    writer = MultiTypeWriter(buf)
    for type_id, payload in three_records:
        writer.write(type_id, payload)
    buf.seek(0)
    return buf
