"""Exceptions raised while decoding and translating pilot files."""
from __future__ import annotations


class DecodeError(ValueError):
    """Base class for structural decode failures. No partial record is produced."""


class OffsetOutOfRange(DecodeError):
    """A read of `width` bytes at `offset` runs past the end of the buffer."""

    def __init__(self, offset: int, width: int, size: int, field: str | None = None):
        self.offset = offset
        self.width = width
        self.size = size
        self.field = field
        where = f" for field '{field}'" if field else ""
        super().__init__(
            f"read of {width} byte(s) at offset {offset}{where} exceeds buffer size {size}"
        )


class UnknownCode(KeyError):
    """An enum-coded value has no label in its table."""

    def __init__(self, table: str, code: int):
        self.table = table
        self.code = code
        super().__init__(table, code)

    def __str__(self) -> str:
        return f"unknown {self.table} code: {self.code}"
