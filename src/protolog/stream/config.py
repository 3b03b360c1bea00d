"""Configuration for record readers and scanners."""

from __future__ import annotations

from dataclasses import dataclass

from ..framing.record import MAX_PAYLOAD_SIZE


@dataclass
class ReaderConfig:
    """Configuration shared by Reader and Scanner.

    The record format carries no sync markers, so a corrupted length field
    is only noticed once the payload checksum fails. Lowering
    ``max_payload_size`` makes the reader reject such a header before it
    allocates a buffer for it.

    Attributes:
        max_payload_size: Largest payload a header may declare (default: the
            format maximum, 2^32 - 2 bytes). Larger headers raise
            PayloadTooLargeError.
        initial_capacity: Bytes to preallocate for the payload buffer
            (default 0, the first record triggers the first allocation).

    Examples:
        ```python
        from protolog import Reader, ReaderConfig

        # Log of small protobuf messages: anything over 1 MiB is corruption
        config = ReaderConfig(max_payload_size=1 << 20)
        with open("events.log", "rb") as f:
            for type_id, payload in Reader(f, config):
                ...
        ```
    """

    max_payload_size: int = MAX_PAYLOAD_SIZE
    initial_capacity: int = 0

    def __post_init__(self) -> None:
        """Validate configuration parameters."""
        if not 0 <= self.max_payload_size <= MAX_PAYLOAD_SIZE:
            raise ValueError(
                f"max_payload_size must be 0-{MAX_PAYLOAD_SIZE}, got {self.max_payload_size}"
            )

        if self.initial_capacity < 0:
            raise ValueError(f"initial_capacity must be >= 0, got {self.initial_capacity}")

        if self.initial_capacity > self.max_payload_size:
            raise ValueError(
                f"initial_capacity must not exceed max_payload_size "
                f"({self.initial_capacity} > {self.max_payload_size})"
            )
