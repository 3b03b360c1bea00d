"""Iterator-style record scanner.

A Scanner walks a stream record by record and stops at the first error or
at the end of the stream:

    scanner = Scanner(f)
    while scanner.scan():
        handle(scanner.type_id(), scanner.bytes())
    if scanner.error() is not None:
        raise scanner.error()

A clean end of stream is not an error, so ``error()`` returns None after it.
"""

from __future__ import annotations

import enum
import logging
from typing import Iterator, Optional

from ..exceptions import ChecksumMismatchError, ProtologError, ScannerStateError
from ..models import Header, RecordView
from .config import ReaderConfig
from .decoder import RecordDecoder
from .source import ByteSource

logger = logging.getLogger(__name__)


class ScannerState(enum.Enum):
    """Scanner lifecycle. EXHAUSTED and FAILED are terminal."""

    READY = "ready"
    EXHAUSTED = "exhausted"
    FAILED = "failed"


class Scanner:
    """Scans records sequentially, reusing one payload buffer.

    Attributes:
        state: Current ScannerState
    """

    def __init__(self, source: ByteSource, config: Optional[ReaderConfig] = None) -> None:
        """Initialize scanner.

        Args:
            source: Open byte source. The scanner never closes it.
            config: Reader configuration. If None, uses default config.
        """
        self._decoder = RecordDecoder(source, config)
        self._header: Optional[Header] = None
        self._size = 0
        self._error: Optional[Exception] = None
        self.state = ScannerState.READY

    @property
    def capacity(self) -> int:
        """Current payload buffer capacity in bytes."""
        return self._decoder.capacity

    @property
    def size(self) -> int:
        """Payload size of the current record (0 when there is none)."""
        return self._size

    @property
    def offset(self) -> int:
        """Bytes consumed by successfully scanned records so far."""
        return self._decoder.offset

    def scan(self) -> bool:
        """Advance to the next record.

        Returns:
            True if a record is available through type_id() and bytes().
            False at end of stream or on error; check error() to tell them
            apart. Once False, every later call returns False too.
        """
        if self.state is not ScannerState.READY:
            return False

        self._header = None
        self._size = 0

        try:
            header = self._decoder.decode()
        except ChecksumMismatchError as e:
            logger.warning("Expected checksum 0x%08x, got 0x%08x", e.expected, e.actual)
            self._fail(e)
            return False
        except (ProtologError, OSError) as e:
            self._fail(e)
            return False

        if header is None:
            self.state = ScannerState.EXHAUSTED
            return False

        self._header = header
        self._size = header.length
        return True

    def _fail(self, error: Exception) -> None:
        self._error = error
        self.state = ScannerState.FAILED

    def type_id(self) -> int:
        """Type ID of the most recently scanned record.

        Raises:
            ScannerStateError: If there is no current record
        """
        if self._header is None:
            raise ScannerStateError("No current record: call scan() first")
        return self._header.type_id

    def bytes(self) -> memoryview:
        """Payload of the most recently scanned record.

        The view is overwritten by the next scan(); copy it if it must
        outlive that call.

        Raises:
            ScannerStateError: If there is no current record
        """
        if self._header is None:
            raise ScannerStateError("No current record: call scan() first")
        return self._decoder.view(self._size)

    def record(self) -> RecordView:
        """The current record as a RecordView."""
        return RecordView(self.type_id(), self.bytes())

    def error(self) -> Optional[Exception]:
        """The error that stopped the scanner, or None if it ended cleanly or is still running."""
        return self._error

    def __iter__(self) -> Iterator[RecordView]:
        while self.scan():
            yield self.record()
