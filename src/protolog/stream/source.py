"""Byte source and sink interfaces.

protolog never opens or closes streams. Readers accept any object with a
``read(n)`` method (files, sockets via ``makefile('rb')``, ``io.BytesIO``);
writers accept any object with a ``write(data)`` method. A ``readinto``
method is used when present to fill the reusable buffer without copying.
Sources are used as given: they are never wrapped, so nothing reads past
the last record consumed and the caller keeps an accurate stream position.
"""

from __future__ import annotations

from typing import Optional, Protocol, runtime_checkable


@runtime_checkable
class ByteSource(Protocol):
    """Anything records can be read from."""

    def read(self, size: int = -1, /) -> bytes: ...


@runtime_checkable
class ByteSink(Protocol):
    """Anything records can be written to.

    ``write`` returns the number of bytes accepted. Raw non-blocking streams
    may return None when nothing could be written.
    """

    def write(self, data: bytes, /) -> Optional[int]: ...


def read_into(source: ByteSource, view: memoryview) -> int:
    """Fill ``view`` from ``source``, stopping early only at end of stream.

    Args:
        source: Byte source to read from
        view: Writable byte view to fill

    Returns:
        Number of bytes read. Less than ``len(view)`` means the source ended.
    """
    wanted = len(view)
    filled = 0
    readinto = getattr(source, "readinto", None)

    while filled < wanted:
        if readinto is not None:
            n = readinto(view[filled:])
            if not n:
                break
        else:
            chunk = source.read(wanted - filled)
            if not chunk:
                break
            n = len(chunk)
            view[filled : filled + n] = chunk
        filled += n

    return filled


def read_exactly(source: ByteSource, size: int) -> bytes:
    """Read up to ``size`` bytes, retrying short reads until the source ends.

    Returns:
        The bytes read. Shorter than ``size`` only if the source ended.
    """
    buf = bytearray(size)
    n = read_into(source, memoryview(buf))
    del buf[n:]
    return bytes(buf)


def write_all(sink: ByteSink, data: bytes | bytearray | memoryview) -> int:
    """Write ``data`` to ``sink``, retrying partial writes.

    Stops as soon as the sink accepts nothing.

    Returns:
        Number of bytes the sink accepted.
    """
    view = memoryview(data)
    total = len(view)
    written = 0

    while written < total:
        n = sink.write(view[written:])
        if not n:
            break
        written += n

    return written
