"""Shared fixtures: build synthetic pilot file buffers."""
from __future__ import annotations

import struct

import pytest

from tfrdump.tfr.constants import TFR_SIZE


class PilotBuffer:
    """Mutable pilot file image with little helpers for the on-disk byte order."""

    def __init__(self, size: int = TFR_SIZE):
        self.data = bytearray(size)

    def u8(self, offset: int, value: int) -> "PilotBuffer":
        self.data[offset] = value
        return self

    def u16(self, offset: int, value: int) -> "PilotBuffer":
        struct.pack_into("<H", self.data, offset, value)
        return self

    def u32(self, offset: int, value: int) -> "PilotBuffer":
        struct.pack_into("<I", self.data, offset, value)
        return self

    def u32_array(self, offset: int, values: list[int]) -> "PilotBuffer":
        for i, v in enumerate(values):
            self.u32(offset + i * 4, v)
        return self

    def bytes(self) -> bytes:
        return bytes(self.data)


@pytest.fixture
def pilot():
    return PilotBuffer()


@pytest.fixture
def write_pilot(tmp_path):
    """Write buffer contents to a .TFR file and return its path."""
    def _write(data: bytes, name: str = "PILOT.TFR"):
        path = tmp_path / name
        path.write_bytes(data)
        return path
    return _write
