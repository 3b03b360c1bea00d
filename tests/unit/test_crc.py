"""Unit tests for CRC-32C utilities."""

from __future__ import annotations

import pytest

from protolog.utils.crc import crc32c, crc32c_bytes, verify_crc32c


class TestCRC32C:
    """Test CRC-32C functionality."""

    def test_check_value(self) -> None:
        """Test the standard CRC-32C check value."""
        assert crc32c(b"123456789") == 0xE3069283

    def test_known_vectors(self) -> None:
        """Test iSCSI (RFC 3720) test vectors."""
        assert crc32c(b"\x00" * 32) == 0x8A9136AA
        assert crc32c(b"\xff" * 32) == 0x62A8AB43
        assert crc32c(bytes(range(32))) == 0x46DD794E
        assert crc32c(bytes(range(31, -1, -1))) == 0x113FDB5C

    def test_empty_data(self) -> None:
        """Test CRC of empty data."""
        assert crc32c(b"") == 0

    def test_incremental(self) -> None:
        """Test checksum can be computed over several chunks."""
        assert crc32c(b"6789", crc32c(b"12345")) == crc32c(b"123456789")

    def test_accepts_buffers(self) -> None:
        """Test bytearray and memoryview inputs."""
        data = b"Test data"
        expected = crc32c(data)

        assert crc32c(bytearray(data)) == expected
        assert crc32c(memoryview(data)) == expected
        assert crc32c(memoryview(b"xxTest dataxx")[2:-2]) == expected

    def test_differs_from_ieee_crc32(self) -> None:
        """Test that the Castagnoli polynomial is used, not IEEE 802.3."""
        import zlib

        assert crc32c(b"123456789") != zlib.crc32(b"123456789")

    def test_crc32c_bytes(self) -> None:
        """Test CRC-32C as little-endian bytes."""
        crc_bytes = crc32c_bytes(b"123456789")

        assert crc_bytes == bytes([0x83, 0x92, 0x06, 0xE3])

    def test_verify_success(self) -> None:
        """Test successful verification."""
        data = b"Test data"

        assert verify_crc32c(data, crc32c(data)) is True
        assert verify_crc32c(data, crc32c_bytes(data)) is True

    def test_verify_failure(self) -> None:
        """Test failed verification."""
        assert verify_crc32c(b"Test data", 0x12345678) is False

    def test_verify_wrong_byte_length(self) -> None:
        """Test error on a checksum of the wrong size."""
        with pytest.raises(ValueError, match="CRC-32C must be 4 bytes"):
            verify_crc32c(b"Test data", b"\x00\x01")
