"""Static layout of every known region in a TFR pilot file.

Offsets are decimal, as in the community notes on the format. Regions not
listed here have no known purpose and are not decoded.
"""
from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, Optional

from tfrdump.tfr.constants import (
    BATTLE_COUNT,
    BATTLE_POINT_SLOTS,
    KILL_SLOTS,
    SIM_MISSIONS,
    SIM_STRIDE,
    TFR_SIZE,
    TRAINABLE_CRAFT_COUNT,
    TRAINING_SLOTS,
    UNUSED_CERT_COUNT,
)
from tfrdump.tfr.errors import OffsetOutOfRange

# Semantic roles
SCALAR = "scalar"
ENUM = "enum"
FLAGS = "flags"          # one status byte per entity
COUNTERS = "counters"    # repeated counter array
STATUS = "status"        # repeated status array
RAW = "raw"              # opaque bytes, kept verbatim


@dataclass(frozen=True, slots=True)
class Field:
    """One entry of the field map.

    Arrays hold `count` elements of `width` bytes laid out back to back.
    Grouped arrays repeat that block `rows` times, `row_stride` bytes apart.
    """
    name: str
    offset: int
    width: int
    role: str = SCALAR
    count: int = 1
    rows: int = 1
    row_stride: int = 0
    alias_of: Optional[str] = None

    @property
    def is_array(self) -> bool:
        return self.count > 1 or self.rows > 1

    @property
    def encoding(self) -> str:
        if self.role == RAW:
            return "bytes"
        return {1: "u8", 2: "u16", 4: "u32"}[self.width]

    def element_offsets(self) -> Iterator[int]:
        """Yield the offset of every element, row by row."""
        for row in range(self.rows):
            base = self.offset + row * self.row_stride
            for i in range(self.count):
                yield base + i * self.width

    def spans(self) -> list[tuple[int, int]]:
        """Byte ranges [start, end) covered by this field, one per row."""
        block = self.count * self.width
        return [
            (self.offset + row * self.row_stride, self.offset + row * self.row_stride + block)
            for row in range(self.rows)
        ]

    @property
    def end(self) -> int:
        return self.spans()[-1][1]


FIELD_MAP: tuple[Field, ...] = (
    # Identity / progress
    Field("pilot_status", 0, 1, ENUM),                  # 0 alive, 1 captured, 2 killed
    Field("rank", 2, 1, ENUM),                          # 0-5 Cadet .. General
    Field("difficulty", 3, 1, ENUM),                    # 0 easy, 1 medium, 2 hard
    Field("points", 4, 4),
    Field("level", 8, 2),
    Field("secret_rank", 10, 1, ENUM),                  # 0-9 None .. Emperor's Reach

    # Training certificates, default 2, completed 4
    Field("certificates", 90, 1, FLAGS, count=TRAINABLE_CRAFT_COUNT),
    Field("unused_certificates", 97, 1, RAW, count=UNUSED_CERT_COUNT),

    # Combat simulator, 4 counters per craft in 8-byte blocks
    Field("sim_counters", 520, 1, COUNTERS,
          count=SIM_MISSIONS, rows=TRAINABLE_CRAFT_COUNT, row_stride=SIM_STRIDE),

    # Tour of duty
    Field("active_battle", 616, 1),
    Field("battle_status", 617, 1, STATUS, count=BATTLE_COUNT),
    Field("battle_last_mission", 637, 1, COUNTERS, count=BATTLE_COUNT),

    # Repeats the pilot status byte; the two copies are not reconciled
    Field("pilot_status_repeat", 1628, 1, ENUM, alias_of="pilot_status"),

    # Kills, ordered like the craft table
    Field("kills", 1632, 2, COUNTERS, count=KILL_SLOTS),

    # Weapons
    Field("lasers_fired", 1908, 4),
    Field("laser_hits", 1912, 4),
    Field("warheads_fired", 1920, 2),
    Field("warhead_hits", 1922, 2),

    # Mission scores, 0 means never flown
    Field("training_points", 2064, 4, COUNTERS, count=TRAINING_SLOTS),
    Field("battle_points", 2914, 4, COUNTERS, count=BATTLE_POINT_SLOTS),

    # Totals
    Field("total_kills", 3554, 2),
    Field("ships_captured", 3556, 2),
    Field("ships_lost", 3854, 1),                       # last byte of the file
)


def field_by_name(name: str, fields: tuple[Field, ...] = FIELD_MAP) -> Field:
    for f in fields:
        if f.name == name:
            return f
    raise KeyError(name)


def validate_field_map(fields: tuple[Field, ...] = FIELD_MAP, size: int = TFR_SIZE) -> None:
    """Check that every field fits in `size` bytes and no two fields overlap.

    Raises OffsetOutOfRange for a field that reads past the end, ValueError
    for overlapping regions or a dangling alias.
    """
    names = {f.name for f in fields}
    covered: list[tuple[int, int, str]] = []
    for f in fields:
        if f.width not in (1, 2, 4):
            raise ValueError(f"field '{f.name}' has unsupported width {f.width}")
        if f.alias_of is not None and f.alias_of not in names:
            raise ValueError(f"field '{f.name}' aliases unknown field '{f.alias_of}'")
        for start, end in f.spans():
            if start < 0 or end > size:
                raise OffsetOutOfRange(start, end - start, size, f.name)
            covered.append((start, end, f.name))

    covered.sort()
    for (s1, e1, n1), (s2, e2, n2) in zip(covered, covered[1:]):
        if s2 < e1:
            raise ValueError(f"fields '{n1}' and '{n2}' overlap at offset {s2}")
