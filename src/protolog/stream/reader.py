"""Pull-style record reader."""

from __future__ import annotations

from typing import Iterator, Optional, Union

from ..exceptions import ProtologError
from ..models import END_OF_STREAM, EndOfStream, RecordView
from .config import ReaderConfig
from .decoder import RecordDecoder
from .source import ByteSource


class Reader:
    """Reads records one at a time from a byte source.

    Each ``next()`` call decodes exactly one record. The returned payload is
    a view into a buffer the reader reuses, so it is only valid until the
    following ``next()`` call. Copy it (``view.copy()``) to keep it.

    Decode errors are fatal for the stream: once one is raised, every later
    ``next()`` call raises the same error without reading the source again.

    Examples:
        ```python
        from protolog import END_OF_STREAM, Reader

        with open("events.log", "rb") as f:
            reader = Reader(f)
            while True:
                result = reader.next()
                if result is END_OF_STREAM:
                    break
                type_id, payload = result
                handlers[type_id](bytes(payload))
        ```
    """

    def __init__(self, source: ByteSource, config: Optional[ReaderConfig] = None) -> None:
        """Initialize reader.

        Args:
            source: Open byte source. The reader never closes it.
            config: Reader configuration. If None, uses default config.
        """
        self._decoder = RecordDecoder(source, config)
        self._error: Optional[Exception] = None

    @property
    def config(self) -> ReaderConfig:
        return self._decoder.config

    @property
    def capacity(self) -> int:
        """Current payload buffer capacity in bytes."""
        return self._decoder.capacity

    @property
    def offset(self) -> int:
        """Bytes consumed by successfully decoded records so far."""
        return self._decoder.offset

    def next(self) -> Union[RecordView, EndOfStream]:
        """Decode the next record.

        Returns:
            RecordView(type_id, payload), or END_OF_STREAM if the source
            ended cleanly on a record boundary

        Raises:
            TruncatedRecordError: If the source ends inside a record
            PayloadTooLargeError: If a header exceeds the configured limit
            ChecksumMismatchError: If a payload is corrupt
        """
        if self._error is not None:
            raise self._error

        try:
            header = self._decoder.decode()
        except (ProtologError, OSError) as e:
            self._error = e
            raise

        if header is None:
            return END_OF_STREAM
        return RecordView(header.type_id, self._decoder.view(header.length))

    def __iter__(self) -> Iterator[RecordView]:
        while True:
            result = self.next()
            if isinstance(result, EndOfStream):
                return
            yield result
