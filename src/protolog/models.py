"""Record models shared by the header codec, readers and writers.

Three shapes of a record exist:

- ``Header``: the fixed fields decoded from the first 10 bytes of a record.
- ``RecordView``: what readers hand back. Its payload is a memoryview into
  the reader's reusable buffer and is only valid until the next decode call
  on the same reader. Call ``copy()`` to keep it.
- ``Record``: an owned, immutable record with its own payload bytes.

Pull-style reads return either a ``RecordView`` or ``END_OF_STREAM``; fatal
conditions are raised as exceptions.
"""

from __future__ import annotations

from typing import NamedTuple

from pydantic import BaseModel, ConfigDict, Field

UINT16_MAX = 0xFFFF
UINT32_MAX = 0xFFFFFFFF


class Header(BaseModel):
    """Decoded record header.

    Attributes:
        length: Payload length in bytes
        checksum: CRC-32C of the payload
        type_id: Caller-defined record type tag
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    length: int = Field(ge=0, le=UINT32_MAX)
    checksum: int = Field(ge=0, le=UINT32_MAX)
    type_id: int = Field(ge=0, le=UINT16_MAX)


class Record(BaseModel):
    """A record that owns its payload.

    Example:
        >>> record = Record(type_id=3, payload=b"hello")
        >>> record.type_id, record.payload
        (3, b'hello')
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    type_id: int = Field(ge=0, le=UINT16_MAX)
    payload: bytes


class RecordView(NamedTuple):
    """A decoded record whose payload aliases a reader's buffer.

    The payload is overwritten by the next ``Reader.next()`` or
    ``Scanner.scan()`` call. Use ``copy()`` or ``bytes(view.payload)`` to
    retain it.
    """

    type_id: int
    payload: memoryview

    def copy(self) -> Record:
        """Return an owned copy of this record."""
        return Record(type_id=self.type_id, payload=bytes(self.payload))


class EndOfStream:
    """Clean end of a record stream.

    There is a single instance, ``END_OF_STREAM``. It is falsy so that
    ``while (view := reader.next()):`` loops end naturally.
    """

    _instance: EndOfStream | None = None

    def __new__(cls) -> EndOfStream:
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool:
        return False

    def __repr__(self) -> str:
        return "END_OF_STREAM"


END_OF_STREAM = EndOfStream()
