"""Whole-stream helpers built on Reader and MultiTypeWriter.

These return owned Record objects, so unlike Reader and Scanner the
payloads stay valid after iteration moves on.
"""

from __future__ import annotations

from typing import Iterable, Iterator, Optional, Tuple, Union

from ..framing.record import Payload
from ..models import Record
from .config import ReaderConfig
from .reader import Reader
from .source import ByteSink, ByteSource
from .writer import MultiTypeWriter


def iter_records(source: ByteSource, config: Optional[ReaderConfig] = None) -> Iterator[Record]:
    """Yield owned copies of every record in a stream.

    Raises:
        DecodeError: On the first truncated, oversized or corrupt record
    """
    for view in Reader(source, config):
        yield view.copy()


def read_all(source: ByteSource, config: Optional[ReaderConfig] = None) -> list[Record]:
    """Read every record in a stream into a list."""
    return list(iter_records(source, config))


def write_records(
    sink: ByteSink, records: Iterable[Union[Record, Tuple[int, Payload]]]
) -> int:
    """Write records in order.

    Args:
        sink: Open byte sink
        records: Record objects or (type_id, payload) pairs

    Returns:
        Total number of bytes written

    Example:
        >>> import io
        >>> buf = io.BytesIO()
        >>> write_records(buf, [(0, b"first"), Record(type_id=1, payload=b"second")])
        31
    """
    writer = MultiTypeWriter(sink)
    total = 0
    for record in records:
        if isinstance(record, Record):
            total += writer.write(record.type_id, record.payload)
        else:
            type_id, payload = record
            total += writer.write(type_id, payload)
    return total
