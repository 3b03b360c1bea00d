"""Record framing for protolog.

This module provides the fixed 10-byte header codec and the single-record
encoding routine that every writer delegates to.
"""

from __future__ import annotations

from .header import HEADER_SIZE, decode_header, encode_header
from .record import MAX_PAYLOAD_SIZE, as_byte_view, encode_record, record_header, record_size

__all__ = [
    "HEADER_SIZE",
    "MAX_PAYLOAD_SIZE",
    "encode_header",
    "decode_header",
    "as_byte_view",
    "encode_record",
    "record_header",
    "record_size",
]
