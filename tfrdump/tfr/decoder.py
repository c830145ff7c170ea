"""Decode a raw pilot file buffer into a PilotRecord using the field map."""
from __future__ import annotations

from tfrdump.tfr.constants import TFR_SIZE
from tfrdump.tfr.errors import OffsetOutOfRange
from tfrdump.tfr.fields import FIELD_MAP, RAW, Field
from tfrdump.tfr.reader import READERS, pad_buffer
from tfrdump.tfr.records import PilotRecord


def decode_field(buffer: bytes, f: Field):
    """Decode one field map entry.

    Scalars come back as int, arrays as a tuple of ints, grouped arrays as a
    tuple of row tuples, and RAW regions as bytes.
    """
    for start, end in f.spans():
        if end > len(buffer):
            raise OffsetOutOfRange(start, end - start, len(buffer), f.name)

    if f.role == RAW:
        return bytes(buffer[f.offset:f.end])

    read = READERS[f.width]
    values = [read(buffer, off) for off in f.element_offsets()]

    if not f.is_array:
        return values[0]
    if f.rows == 1:
        return tuple(values)
    return tuple(
        tuple(values[row * f.count:(row + 1) * f.count])
        for row in range(f.rows)
    )


def decode(buffer: bytes, fields: tuple[Field, ...] = FIELD_MAP,
           size: int = TFR_SIZE) -> PilotRecord:
    """Decode a pilot file buffer.

    Buffers shorter than `size` are zero-extended first, matching fresh
    pilots whose file is all zeros. Raises OffsetOutOfRange if any field
    still reads past the end; no partial record is returned.
    """
    return PilotRecord(**decode_fields(buffer, fields, size))


def decode_fields(buffer: bytes, fields: tuple[Field, ...] = FIELD_MAP,
                  size: int = TFR_SIZE) -> dict[str, object]:
    """Decode into a plain field name -> value dict."""
    data = pad_buffer(buffer, size)
    return {f.name: decode_field(data, f) for f in fields}
