"""Record decoding shared by Reader and Scanner.

Decoding one record:
1. Read exactly 10 header bytes. Zero bytes means a clean end of stream;
   one to nine bytes is a truncated record.
2. Decode the header and check the declared length against the configured
   limit before allocating anything.
3. Grow the payload buffer if it is too small. Capacity never shrinks.
4. Read exactly ``length`` payload bytes into the buffer.
5. Verify the CRC-32C of those bytes against the header checksum.
"""

from __future__ import annotations

import logging
from typing import Optional

from ..exceptions import ChecksumMismatchError, PayloadTooLargeError, TruncatedRecordError
from ..framing.header import HEADER_SIZE, decode_header
from ..models import Header
from ..utils.crc import crc32c
from .config import ReaderConfig
from .source import ByteSource, read_exactly, read_into

logger = logging.getLogger(__name__)


class RecordDecoder:
    """Decodes records from a byte source into a reusable payload buffer.

    Growing the buffer allocates a new bytearray rather than resizing the old
    one, so memoryviews handed out for earlier records stay valid objects
    (their contents are simply stale).
    """

    def __init__(self, source: ByteSource, config: Optional[ReaderConfig] = None) -> None:
        self.config = config if config is not None else ReaderConfig()
        self.source = source
        self._buf = bytearray(self.config.initial_capacity)
        self.offset = 0

    @property
    def capacity(self) -> int:
        """Current payload buffer capacity in bytes."""
        return len(self._buf)

    def view(self, length: int) -> memoryview:
        """Return a view of the first ``length`` bytes of the payload buffer."""
        return memoryview(self._buf)[:length]

    def decode(self) -> Optional[Header]:
        """Decode the next record into the payload buffer.

        Returns:
            The record header, or None on a clean end of stream

        Raises:
            TruncatedRecordError: If the source ends inside a record
            PayloadTooLargeError: If the header exceeds config.max_payload_size
            ChecksumMismatchError: If the payload is corrupt
        """
        raw = read_exactly(self.source, HEADER_SIZE)
        if not raw:
            return None
        if len(raw) < HEADER_SIZE:
            raise TruncatedRecordError("header", HEADER_SIZE, len(raw))

        header = decode_header(raw)
        length = header.length

        if length > self.config.max_payload_size:
            raise PayloadTooLargeError(length, self.config.max_payload_size)

        if length > len(self._buf):
            logger.debug("Growing payload buffer from %d to %d bytes", len(self._buf), length)
            self._buf = bytearray(length)

        payload = self.view(length)
        received = read_into(self.source, payload)
        if received < length:
            raise TruncatedRecordError("payload", length, received)

        actual = crc32c(payload)
        if actual != header.checksum:
            raise ChecksumMismatchError(header.checksum, actual)

        self.offset += HEADER_SIZE + length
        return header
