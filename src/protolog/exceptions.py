"""Exception hierarchy for protolog.

All exceptions inherit from ProtologError so callers can catch any
protolog-specific failure in one place. Every error is fatal for the stream
it was raised on: nothing is retried and corrupt records are never skipped.
"""

from __future__ import annotations


class ProtologError(Exception):
    """Base exception for all protolog errors."""

    pass


class DecodeError(ProtologError):
    """Raised when a record cannot be decoded from a byte source.

    Examples:
        - Source ends in the middle of a header or payload
        - Payload does not match its declared checksum
        - Header declares a payload larger than the configured limit
    """

    pass


class HeaderError(DecodeError):
    """Raised when header bytes handed to the header codec are malformed."""

    pass


class TruncatedRecordError(DecodeError):
    """Raised when the source ends before a declared header or payload is complete."""

    def __init__(self, what: str, expected: int, received: int) -> None:
        self.what = what
        self.expected = expected
        self.received = received
        super().__init__(
            f"Truncated record {what}: expected {expected} bytes, got {received} bytes"
        )


class ChecksumMismatchError(DecodeError):
    """Raised when a payload's CRC-32C does not match the header checksum."""

    def __init__(self, expected: int, actual: int) -> None:
        self.expected = expected
        self.actual = actual
        super().__init__(
            f"Bad checksum detected while reading data: "
            f"expected 0x{expected:08x}, got 0x{actual:08x}"
        )


class PayloadTooLargeError(DecodeError):
    """Raised when a header declares a payload above the reader's size limit.

    This is checked before any buffer is allocated, so a corrupted length
    field cannot trigger a huge allocation.
    """

    def __init__(self, length: int, limit: int) -> None:
        self.length = length
        self.limit = limit
        super().__init__(f"Record declares {length} payload bytes, limit is {limit}")


class EncodeError(ProtologError):
    """Raised when a record cannot be written to a byte sink."""

    pass


class OversizedPayloadError(EncodeError):
    """Raised when a payload is too large for the 32-bit length field.

    The caller must shrink or split the payload. Nothing has been written.
    """

    def __init__(self, length: int) -> None:
        self.length = length
        super().__init__(f"Cannot write data record exceeding 4 GiB in size ({length} bytes)")


class ShortWriteError(EncodeError):
    """Raised when the sink accepts fewer bytes than requested.

    The stream now ends in a partial record. ``written`` is the number of
    bytes of this record the sink did accept; callers should truncate back to
    the last good offset before appending again.
    """

    def __init__(self, written: int, expected: int) -> None:
        self.written = written
        self.expected = expected
        super().__init__(f"Short write: only {written} of {expected} record bytes written")


class ScannerStateError(ProtologError):
    """Raised when scanner accessors are used without a current record."""

    pass
