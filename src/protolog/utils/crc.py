"""CRC-32C (Castagnoli) checksum implementation.

Every record payload is protected by a CRC-32C, the same checksum used by
iSCSI, ext4 and many log formats. The table-driven implementation below uses
the reflected form of polynomial 0x1EDC6F41.
"""

from __future__ import annotations

import struct

CASTAGNOLI_POLY = 0x1EDC6F41
_REFLECTED_POLY = 0x82F63B78


def _make_table() -> tuple[int, ...]:
    table = []
    for i in range(256):
        crc = i
        for _ in range(8):
            if crc & 1:
                crc = (crc >> 1) ^ _REFLECTED_POLY
            else:
                crc >>= 1
        table.append(crc)
    return tuple(table)


_TABLE = _make_table()


def crc32c(data: bytes | bytearray | memoryview, crc: int = 0) -> int:
    """Calculate CRC-32C checksum.

    Args:
        data: Data to checksum
        crc: Previous checksum, for computing a checksum over several chunks

    Returns:
        32-bit CRC value

    Example:
        >>> hex(crc32c(b"123456789"))
        '0xe3069283'
        >>> crc32c(b"6789", crc32c(b"12345")) == crc32c(b"123456789")
        True
    """
    table = _TABLE
    crc ^= 0xFFFFFFFF
    for byte in memoryview(data).cast("B"):
        crc = table[(crc ^ byte) & 0xFF] ^ (crc >> 8)
    return crc ^ 0xFFFFFFFF


def crc32c_bytes(data: bytes | bytearray | memoryview) -> bytes:
    """Calculate CRC-32C checksum and return as 4 bytes (little-endian, as on the wire).

    Example:
        >>> len(crc32c_bytes(b"Hello"))
        4
    """
    return struct.pack("<I", crc32c(data))


def verify_crc32c(data: bytes | bytearray | memoryview, expected_crc: int | bytes) -> bool:
    """Verify CRC-32C checksum.

    Args:
        data: Data to verify
        expected_crc: Expected CRC value (int or 4 little-endian bytes)

    Returns:
        True if CRC matches, False otherwise

    Raises:
        ValueError: If expected_crc is given as bytes of the wrong length
    """
    if isinstance(expected_crc, bytes):
        if len(expected_crc) != 4:
            raise ValueError(f"CRC-32C must be 4 bytes, got {len(expected_crc)}")
        expected_crc = struct.unpack("<I", expected_crc)[0]

    return crc32c(data) == expected_crc
