"""protolog: checksummed record logs

A minimal binary container for a sequence of opaque blobs, each tagged with
a 16-bit type ID and protected by a CRC-32C checksum. It is intended for
append-only logging of serialized messages (e.g. protobuf payloads) and is
simple enough that a reader or writer in another language is a few dozen
lines.

Wire format, per record (little-endian):
    [length: u32] [crc32c(payload): u32] [type_id: u16] [payload: length bytes]

There is no file header, magic number or trailer; the stream simply ends.

Quick Start:
    >>> import io
    >>> from protolog import MultiTypeWriter, Scanner
    >>>
    >>> buf = io.BytesIO()
    >>> writer = MultiTypeWriter(buf)
    >>> writer.write(0, b"first")
    15
    >>> writer.write(1, b"second")
    16
    >>> _ = buf.seek(0)
    >>> scanner = Scanner(buf)
    >>> while scanner.scan():
    ...     print(scanner.type_id(), bytes(scanner.bytes()))
    0 b'first'
    1 b'second'
    >>> scanner.error() is None
    True

Payload views returned by Reader and Scanner alias an internal buffer and
are overwritten by the next read. Use ``view.copy()``, ``bytes(view)`` or
``iter_records()`` to keep records around.
"""

from __future__ import annotations

from .exceptions import (
    ChecksumMismatchError,
    DecodeError,
    EncodeError,
    HeaderError,
    OversizedPayloadError,
    PayloadTooLargeError,
    ProtologError,
    ScannerStateError,
    ShortWriteError,
    TruncatedRecordError,
)
from .framing import (
    HEADER_SIZE,
    MAX_PAYLOAD_SIZE,
    decode_header,
    encode_header,
    encode_record,
)
from .models import END_OF_STREAM, EndOfStream, Header, Record, RecordView
from .stream import (
    FixedTypeWriter,
    MultiTypeWriter,
    Reader,
    ReaderConfig,
    Scanner,
    ScannerState,
    iter_records,
    read_all,
    write_record,
    write_records,
)
from .utils import crc32c, crc32c_bytes, verify_crc32c

__version__ = "0.1.0"

__all__ = [
    # Core API
    "FixedTypeWriter",
    "MultiTypeWriter",
    "Reader",
    "Scanner",
    "ScannerState",
    "ReaderConfig",
    "write_record",
    # Whole-stream helpers
    "iter_records",
    "read_all",
    "write_records",
    # Models
    "Header",
    "Record",
    "RecordView",
    "EndOfStream",
    "END_OF_STREAM",
    # Exceptions
    "ProtologError",
    "DecodeError",
    "HeaderError",
    "TruncatedRecordError",
    "ChecksumMismatchError",
    "PayloadTooLargeError",
    "EncodeError",
    "OversizedPayloadError",
    "ShortWriteError",
    "ScannerStateError",
    # Framing
    "HEADER_SIZE",
    "MAX_PAYLOAD_SIZE",
    "encode_header",
    "decode_header",
    "encode_record",
    # CRC
    "crc32c",
    "crc32c_bytes",
    "verify_crc32c",
    # Version
    "__version__",
]
