"""Record writers.

Two writers share one encoding routine, ``write_record``:

- FixedTypeWriter: every record gets the type ID given at construction
- MultiTypeWriter: the type ID is passed with each record

Writers never flush or close the sink; durability is whatever the sink
provides.
"""

from __future__ import annotations

import logging

from ..exceptions import ShortWriteError
from ..framing.header import HEADER_SIZE
from ..framing.record import Payload, as_byte_view, record_header, record_size
from ..models import UINT16_MAX
from .source import ByteSink, write_all

logger = logging.getLogger(__name__)


def write_record(sink: ByteSink, type_id: int, payload: Payload) -> int:
    """Write one record (header, then payload) to a sink.

    A sink that accepts only part of a write is asked again for the rest.
    ShortWriteError is raised only once the sink accepts nothing (0 or None)
    rather than on the first partial write, since raw streams may legally
    write less than requested.

    Args:
        sink: Open byte sink
        type_id: Record type ID (0-65535)
        payload: Record payload, shorter than 2^32 - 1 bytes

    Returns:
        Number of bytes written, always 10 + len(payload)

    Raises:
        OversizedPayloadError: If the payload is too large (nothing is written)
        ValueError: If type_id is out of range (nothing is written)
        ShortWriteError: If the sink stopped accepting bytes part way; its
            ``written`` attribute counts the bytes of this record that made it
    """
    payload = as_byte_view(payload)
    header = record_header(type_id, payload)
    expected = record_size(payload)

    n = write_all(sink, header)
    if n != HEADER_SIZE:
        logger.debug("Couldn't write record header, only %d of %d bytes", n, HEADER_SIZE)
        raise ShortWriteError(n, expected)

    n = write_all(sink, payload)
    if n != len(payload):
        logger.debug("Only able to write %d of %d payload bytes", n, len(payload))
        raise ShortWriteError(HEADER_SIZE + n, expected)

    return expected


class FixedTypeWriter:
    """Writes records that all share one type ID.

    Example:
        ```python
        writer = FixedTypeWriter(STATUS_TYPE_ID, f)
        writer.write(status.SerializeToString())
        ```
    """

    def __init__(self, type_id: int, sink: ByteSink) -> None:
        if not 0 <= type_id <= UINT16_MAX:
            raise ValueError(f"Type ID must be 0-65535, got {type_id}")
        self._type_id = type_id
        self.sink = sink

    @property
    def type_id(self) -> int:
        return self._type_id

    def write(self, payload: Payload) -> int:
        """Write a record with this writer's type ID. See write_record()."""
        return write_record(self.sink, self._type_id, payload)


class MultiTypeWriter:
    """Writes records whose type ID is chosen per record.

    Example:
        ```python
        writer = MultiTypeWriter(f)
        writer.write(STATUS_TYPE_ID, status.SerializeToString())
        writer.write(COMMAND_TYPE_ID, command.SerializeToString())
        ```
    """

    def __init__(self, sink: ByteSink) -> None:
        self.sink = sink

    def write(self, type_id: int, payload: Payload) -> int:
        """Write a record with the given type ID. See write_record()."""
        return write_record(self.sink, type_id, payload)
