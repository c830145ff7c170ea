import pytest

from tfrdump.tfr.constants import (
    BATTLE_COUNT,
    BATTLE_POINT_SLOTS,
    CERT_DEFAULT,
    KILL_SLOTS,
    TFR_SIZE,
    TRAINING_SLOTS,
)
from tfrdump.tfr.decoder import decode, decode_field, decode_fields
from tfrdump.tfr.errors import DecodeError, OffsetOutOfRange
from tfrdump.tfr.fields import Field


def test_all_zero_buffer(pilot):
    rec = decode(pilot.bytes())
    assert rec.rank == 0
    assert rec.difficulty == 0
    assert rec.secret_rank == 0
    assert rec.points == 0
    assert rec.kills == (0,) * KILL_SLOTS
    assert rec.training_points == (0,) * TRAINING_SLOTS
    assert rec.battle_points == (0,) * BATTLE_POINT_SLOTS
    assert rec.battle_status == (0,) * BATTLE_COUNT
    assert rec.sim_counters == ((0, 0, 0, 0),) * 7


def test_scalars(pilot):
    pilot.u8(2, 3).u8(3, 2).u32(4, 123456).u16(8, 517).u8(10, 6)
    pilot.u32(1908, 100).u32(1912, 37).u16(1920, 12).u16(1922, 5)
    pilot.u16(3554, 412).u16(3556, 9).u8(3854, 2)
    rec = decode(pilot.bytes())
    assert (rec.rank, rec.difficulty, rec.secret_rank) == (3, 2, 6)
    assert rec.points == 123456
    assert rec.level == 517
    assert (rec.lasers_fired, rec.laser_hits) == (100, 37)
    assert (rec.warheads_fired, rec.warhead_hits) == (12, 5)
    assert (rec.total_kills, rec.ships_captured, rec.ships_lost) == (412, 9, 2)


def test_arrays_keep_file_order_and_zero_slots(pilot):
    pilot.u32_array(2064, [0, 150, 0, 300])
    pilot.u16(1632, 11).u16(1632 + 2 * 67, 4)
    rec = decode(pilot.bytes())
    assert rec.training_points[:5] == (0, 150, 0, 300, 0)
    assert rec.kills[0] == 11
    assert rec.kills[-1] == 4


def test_certificates_and_raw_region(pilot):
    for i in range(12):
        pilot.u8(90 + i, CERT_DEFAULT)
    pilot.u8(90, 4).u8(96, 4)
    rec = decode(pilot.bytes())
    assert rec.certificates == (4, 2, 2, 2, 2, 2, 4)
    assert rec.unused_certificates == bytes([CERT_DEFAULT] * 5)
    assert rec.certified_craft == [0, 6]


def test_sim_counters_skip_reserved_bytes(pilot):
    for i in range(4):
        pilot.u8(528 + i, 1)
    pilot.u8(524, 9)  # reserved byte after the T/F block
    rec = decode(pilot.bytes())
    assert rec.sim_counters[0] == (0, 0, 0, 0)
    assert rec.sim_counters[1] == (1, 1, 1, 1)
    assert rec.medal_sums[:2] == [0, 4]


def test_battle_progress(pilot):
    pilot.u8(616, 2).u8(617, 3).u8(618, 1).u8(637, 6).u8(638, 2)
    rec = decode(pilot.bytes())
    assert rec.active_battle == 2
    assert rec.battle_status[:3] == (3, 1, 0)
    assert rec.battle_last_mission[:3] == (6, 2, 0)


def test_pilot_status_copies_decode_independently(pilot):
    pilot.u8(0, 0).u8(1628, 1)
    rec = decode(pilot.bytes())
    assert rec.pilot_status == 0
    assert rec.pilot_status_repeat == 1
    assert rec.pilot_status_conflict


def test_short_buffer_is_zero_extended(pilot):
    pilot.u8(2, 5).u32(4, 99)
    rec = decode(pilot.bytes()[:16])
    assert rec.rank == 5
    assert rec.points == 99
    assert rec.ships_lost == 0
    assert rec.kills == (0,) * KILL_SLOTS


def test_empty_buffer_decodes():
    assert decode(b"").points == 0


def test_long_buffer_ignores_trailing_bytes(pilot):
    assert decode(pilot.bytes() + b"\xff" * 10) == decode(pilot.bytes())


def test_decode_is_deterministic(pilot):
    pilot.u32(4, 77).u16(1640, 3)
    assert decode(pilot.bytes()) == decode(bytes(pilot.data))


def test_record_is_immutable(pilot):
    rec = decode(pilot.bytes())
    with pytest.raises(AttributeError):
        rec.points = 5


def test_schema_longer_than_buffer_aborts():
    with pytest.raises(OffsetOutOfRange) as exc:
        decode(b"", size=100)
    assert isinstance(exc.value, DecodeError)


def test_decode_field_past_end():
    with pytest.raises(OffsetOutOfRange):
        decode_field(bytes(10), Field("x", 8, 4))


def test_decode_fields_returns_every_field(pilot):
    values = decode_fields(pilot.bytes())
    assert values["ships_lost"] == 0
    assert len(values["battle_points"]) == BATTLE_POINT_SLOTS
    assert len(pilot.bytes()) == TFR_SIZE
