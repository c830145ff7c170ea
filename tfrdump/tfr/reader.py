"""Low-level byte access for TIE Fighter pilot files (*.TFR).

The pilot file stores multi-byte integers the way the DOS platform wrote
them: the byte at the highest offset of a field carries the most significant
bits. In struct terms that is "<", so the helpers below are thin wrappers
around precompiled structs with an explicit bounds check in front.
"""
from __future__ import annotations

import struct
from pathlib import Path

from tfrdump.tfr.constants import TFR_SIZE
from tfrdump.tfr.errors import OffsetOutOfRange


_UINT16 = struct.Struct("<H")
_UINT32 = struct.Struct("<I")


def _check(buffer: bytes, offset: int, width: int) -> None:
    if offset < 0 or offset + width > len(buffer):
        raise OffsetOutOfRange(offset, width, len(buffer))


def read_u8(buffer: bytes, offset: int) -> int:
    _check(buffer, offset, 1)
    return buffer[offset]


def read_u16(buffer: bytes, offset: int) -> int:
    """Read an unsigned 16-bit value (MSB at offset+1)."""
    _check(buffer, offset, 2)
    return _UINT16.unpack_from(buffer, offset)[0]


def read_u32(buffer: bytes, offset: int) -> int:
    """Read an unsigned 32-bit value (MSB at offset+3)."""
    _check(buffer, offset, 4)
    return _UINT32.unpack_from(buffer, offset)[0]


READERS = {
    1: read_u8,
    2: read_u16,
    4: read_u32,
}


def pad_buffer(data: bytes, size: int = TFR_SIZE) -> bytes:
    """Zero-extend `data` to `size` bytes. Longer input is returned unchanged."""
    if len(data) >= size:
        return bytes(data)
    return bytes(data) + b"\x00" * (size - len(data))


def read_pilot_bytes(path: Path) -> bytes:
    """Read a pilot file from disk without padding or truncation."""
    with open(path, "rb") as f:
        return f.read()
