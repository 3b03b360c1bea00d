#!/usr/bin/env python3
"""Message logging example for protolog.

This example demonstrates:
1. Appending serialized messages of several types to a log file
2. Reading them back and dispatching on the type ID
3. Corruption detection with CRC-32C checksums
"""

from __future__ import annotations

import tempfile
from pathlib import Path

from pydantic import BaseModel, Field

from protolog import MultiTypeWriter, Reader, ReaderConfig, Scanner
from protolog.framing import HEADER_SIZE


class StatusReport(BaseModel):
    """Status report message."""

    vehicle_id: int = Field(ge=0, le=255)
    depth_cm: int = Field(ge=0, le=10000)
    battery_pct: int = Field(ge=0, le=100)


class CommandMessage(BaseModel):
    """Command message."""

    target_depth_cm: int = Field(ge=0, le=10000)
    emergency_surface: bool


STATUS_TYPE_ID = 10
COMMAND_TYPE_ID = 20

MESSAGE_TYPES: dict[int, type[BaseModel]] = {
    STATUS_TYPE_ID: StatusReport,
    COMMAND_TYPE_ID: CommandMessage,
}


def main() -> None:
    """Run the message log example."""
    print("=" * 60)
    print("protolog Message Log Example")
    print("=" * 60)
    print()

    log_path = Path(tempfile.mkdtemp()) / "vehicle.log"

    # 1. Write
    print(f"1. Appending messages to {log_path}...")
    with open(log_path, "ab") as f:
        writer = MultiTypeWriter(f)
        total = 0
        total += writer.write(
            STATUS_TYPE_ID,
            StatusReport(vehicle_id=5, depth_cm=3000, battery_pct=75).model_dump_json().encode(),
        )
        total += writer.write(
            COMMAND_TYPE_ID,
            CommandMessage(target_depth_cm=2000, emergency_surface=False)
            .model_dump_json()
            .encode(),
        )
        total += writer.write(
            STATUS_TYPE_ID,
            StatusReport(vehicle_id=5, depth_cm=2000, battery_pct=74).model_dump_json().encode(),
        )
    print(f"   Wrote 3 records, {total} bytes ({3 * HEADER_SIZE} bytes of headers)")
    print()

    # 2. Read with the pull-style reader
    print("2. Reading records back...")
    with open(log_path, "rb") as f:
        for type_id, payload in Reader(f, ReaderConfig(max_payload_size=64 * 1024)):
            message = MESSAGE_TYPES[type_id].model_validate_json(bytes(payload))
            print(f"   [{type_id}] {message!r}")
    print()

    # 3. Corrupt one byte and scan again
    print("3. Flipping one payload bit and scanning...")
    data = bytearray(log_path.read_bytes())
    data[HEADER_SIZE + 3] ^= 0x01
    log_path.write_bytes(bytes(data))

    with open(log_path, "rb") as f:
        scanner = Scanner(f)
        count = 0
        while scanner.scan():
            count += 1
    print(f"   Good records before error: {count}")
    print(f"   Error: {scanner.error()}")
    print()

    print("=" * 60)
    print("Example complete!")
    print("=" * 60)


if __name__ == "__main__":
    main()
