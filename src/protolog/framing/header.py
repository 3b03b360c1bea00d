"""Fixed 10-byte record header codec.

The header layout is (little-endian, fixed offsets):
- [Payload length (4 bytes)] at offset 0
- [CRC-32C of payload (4 bytes)] at offset 4
- [Type ID (2 bytes)] at offset 8

There is no magic number or version field. The format is identified
out-of-band by whoever hands us the stream.
"""

from __future__ import annotations

import struct

from ..exceptions import HeaderError
from ..models import UINT16_MAX, UINT32_MAX, Header

HEADER_SIZE = 10

_HEADER_STRUCT = struct.Struct("<IIH")


def encode_header(type_id: int, length: int, checksum: int) -> bytes:
    """Encode a record header.

    Args:
        type_id: Record type ID (0-65535)
        length: Payload length in bytes (0-4294967295)
        checksum: CRC-32C of the payload

    Returns:
        10 header bytes

    Raises:
        ValueError: If any field is out of range

    Example:
        >>> encode_header(type_id=1, length=5, checksum=0)
        b'\\x05\\x00\\x00\\x00\\x00\\x00\\x00\\x00\\x01\\x00'
    """
    if not 0 <= type_id <= UINT16_MAX:
        raise ValueError(f"Type ID must be 0-65535, got {type_id}")
    if not 0 <= length <= UINT32_MAX:
        raise ValueError(f"Payload length must be 0-{UINT32_MAX}, got {length}")
    if not 0 <= checksum <= UINT32_MAX:
        raise ValueError(f"Checksum must be 0-{UINT32_MAX}, got {checksum}")

    return _HEADER_STRUCT.pack(length, checksum, type_id)


def decode_header(data: bytes | bytearray | memoryview) -> Header:
    """Decode a record header.

    The declared length is not checked against any limit here; readers
    enforce their own configured maximum.

    Args:
        data: Exactly 10 header bytes

    Returns:
        Decoded Header

    Raises:
        HeaderError: If data is not exactly 10 bytes
    """
    if len(data) != HEADER_SIZE:
        raise HeaderError(f"Header must be {HEADER_SIZE} bytes, got {len(data)} bytes")

    length, checksum, type_id = _HEADER_STRUCT.unpack(data)
    return Header(length=length, checksum=checksum, type_id=type_id)
