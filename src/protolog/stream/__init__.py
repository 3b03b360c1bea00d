"""Reading and writing record streams.

This module provides:
- Writers: FixedTypeWriter, MultiTypeWriter (and the shared write_record)
- Pull-style decoding: Reader.next() returns a RecordView or END_OF_STREAM
- Iterator-style decoding: Scanner.scan() / type_id() / bytes() / error()
- Whole-stream helpers returning owned Record objects
"""

from __future__ import annotations

from .api import iter_records, read_all, write_records
from .config import ReaderConfig
from .reader import Reader
from .scanner import Scanner, ScannerState
from .source import ByteSink, ByteSource
from .writer import FixedTypeWriter, MultiTypeWriter, write_record

__all__ = [
    "ByteSink",
    "ByteSource",
    "FixedTypeWriter",
    "MultiTypeWriter",
    "Reader",
    "ReaderConfig",
    "Scanner",
    "ScannerState",
    "iter_records",
    "read_all",
    "write_record",
    "write_records",
]
