"""Single-record encoding shared by all writers."""

from __future__ import annotations

from typing import Union

from ..exceptions import OversizedPayloadError
from ..models import UINT32_MAX
from ..utils.crc import crc32c
from .header import HEADER_SIZE, encode_header

# 2^32 - 1 is reserved as invalid, so the largest payload is 2^32 - 2 bytes.
MAX_PAYLOAD_SIZE = UINT32_MAX - 1

Payload = Union[bytes, bytearray, memoryview]


def as_byte_view(payload: Payload) -> Payload:
    """Return the payload with lengths counted in bytes.

    A memoryview over a multi-byte format (e.g. ``array("I")``) has ``len()``
    in items, so it is flattened to an unsigned-byte view.
    """
    if isinstance(payload, memoryview):
        return payload.cast("B")
    return payload


def check_payload_size(payload: Payload) -> int:
    """Return the payload length, rejecting payloads that do not fit a record.

    Raises:
        OversizedPayloadError: If len(payload) >= 2^32 - 1
    """
    length = len(payload)
    if length > MAX_PAYLOAD_SIZE:
        raise OversizedPayloadError(length)
    return length


def record_header(type_id: int, payload: Payload) -> bytes:
    """Build the header for a payload.

    Raises:
        OversizedPayloadError: If the payload is too large
        ValueError: If type_id is out of range
    """
    payload = as_byte_view(payload)
    length = check_payload_size(payload)
    return encode_header(type_id, length, crc32c(payload))


def encode_record(type_id: int, payload: Payload) -> bytes:
    """Encode a complete record (header followed by payload).

    Args:
        type_id: Record type ID (0-65535)
        payload: Record payload

    Returns:
        Record bytes, 10 + len(payload) long

    Example:
        >>> data = encode_record(7, b"hello")
        >>> len(data)
        15
    """
    payload = as_byte_view(payload)
    return record_header(type_id, payload) + bytes(payload)


def record_size(payload: Payload) -> int:
    """Return the encoded size of a record carrying this payload."""
    return HEADER_SIZE + len(as_byte_view(payload))
