"""Utility functions for protolog.

This module provides the CRC-32C checksum used to protect record payloads.
"""

from __future__ import annotations

from .crc import CASTAGNOLI_POLY, crc32c, crc32c_bytes, verify_crc32c

__all__ = [
    "CASTAGNOLI_POLY",
    "crc32c",
    "crc32c_bytes",
    "verify_crc32c",
]
