"""Property-based tests using hypothesis."""

from __future__ import annotations

import io

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from protolog import END_OF_STREAM, Reader, RecordView, Scanner, encode_record
from protolog.exceptions import ChecksumMismatchError
from protolog.framing import HEADER_SIZE
from protolog.stream import MultiTypeWriter
from protolog.utils.crc import crc32c, verify_crc32c

type_ids = st.integers(min_value=0, max_value=65535)
payloads = st.binary(min_size=0, max_size=512)
records = st.lists(st.tuples(type_ids, payloads), min_size=0, max_size=12)


def _write(items: list[tuple[int, bytes]]) -> io.BytesIO:
    buf = io.BytesIO()
    writer = MultiTypeWriter(buf)
    for type_id, payload in items:
        writer.write(type_id, payload)
    buf.seek(0)
    return buf


class TestRecordProperties:
    """Property-based tests for writing and reading records."""

    @given(type_id=type_ids, payload=payloads)
    def test_roundtrip(self, type_id: int, payload: bytes) -> None:
        """Test a written record reads back unchanged."""
        view = Reader(_write([(type_id, payload)])).next()

        assert isinstance(view, RecordView)
        assert view.type_id == type_id
        assert bytes(view.payload) == payload

    @given(items=records)
    def test_reader_preserves_order(self, items: list[tuple[int, bytes]]) -> None:
        """Test Reader yields every record in write order, then ends."""
        reader = Reader(_write(items))
        decoded = [(view.type_id, bytes(view.payload)) for view in reader]

        assert decoded == items
        assert reader.next() is END_OF_STREAM

    @given(items=records)
    def test_scanner_preserves_order(self, items: list[tuple[int, bytes]]) -> None:
        """Test Scanner yields every record in write order, then ends cleanly."""
        scanner = Scanner(_write(items))
        decoded = []
        while scanner.scan():
            decoded.append((scanner.type_id(), bytes(scanner.bytes())))

        assert decoded == items
        assert scanner.error() is None

    @given(items=records)
    def test_stream_size(self, items: list[tuple[int, bytes]]) -> None:
        """Test each record costs exactly a header plus its payload."""
        buf = _write(items)

        assert len(buf.getvalue()) == sum(HEADER_SIZE + len(p) for _, p in items)

    @settings(max_examples=50)
    @given(type_id=type_ids, payload=st.binary(min_size=1, max_size=256), data=st.data())
    def test_any_bit_flip_detected(self, type_id: int, payload: bytes, data: st.DataObject) -> None:
        """Test flipping any payload bit causes a checksum mismatch."""
        encoded = bytearray(encode_record(type_id, payload))
        index = data.draw(st.integers(min_value=0, max_value=len(payload) - 1))
        bit = data.draw(st.integers(min_value=0, max_value=7))
        encoded[HEADER_SIZE + index] ^= 1 << bit

        with pytest.raises(ChecksumMismatchError):
            Reader(io.BytesIO(bytes(encoded))).next()

    @given(sizes=st.lists(st.integers(min_value=0, max_value=300), min_size=1, max_size=10))
    def test_buffer_reuse_never_leaks(self, sizes: list[int]) -> None:
        """Test payloads never include bytes from earlier, larger records."""
        items = [(i, bytes([i % 256]) * size) for i, size in enumerate(sizes)]
        reader = Reader(_write(items))

        for (type_id, payload), view in zip(items, reader):
            assert view.type_id == type_id
            assert bytes(view.payload) == payload

        assert reader.capacity == max(sizes)


class TestCRCProperties:
    """Property-based tests for CRC-32C."""

    @given(data=st.binary(min_size=0, max_size=1000))
    def test_verify_roundtrip(self, data: bytes) -> None:
        """Test CRC-32C verification round-trip."""
        assert verify_crc32c(data, crc32c(data)) is True

    @given(a=st.binary(max_size=200), b=st.binary(max_size=200))
    def test_incremental_matches_whole(self, a: bytes, b: bytes) -> None:
        """Test chunked computation equals one-shot computation."""
        assert crc32c(b, crc32c(a)) == crc32c(a + b)
