"""PilotRecord dataclass: one decoded TFR pilot file."""
from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from tfrdump.tfr.constants import CERT_COMPLETED


def accuracy(hits: int, fired: int) -> Optional[int]:
    """Whole percentage of hits, or None if nothing was fired."""
    if not fired:
        return None
    return (100 * hits) // fired


@dataclass(frozen=True, slots=True)
class PilotRecord:
    """Decoded pilot file. Enum-coded fields hold raw codes, not labels."""
    # Identity / progress
    pilot_status: int
    rank: int
    difficulty: int
    points: int
    level: int
    secret_rank: int

    # Training and simulator, indexed like TRAINABLE_CRAFT
    certificates: tuple[int, ...]
    unused_certificates: bytes
    sim_counters: tuple[tuple[int, ...], ...]

    # Tour of duty
    active_battle: int
    battle_status: tuple[int, ...]
    battle_last_mission: tuple[int, ...]
    pilot_status_repeat: int

    # Combat
    kills: tuple[int, ...]          # indexed like UNIT_NAMES
    lasers_fired: int
    laser_hits: int
    warheads_fired: int
    warhead_hits: int

    # Scores; a zero slot was never flown
    training_points: tuple[int, ...]
    battle_points: tuple[int, ...]

    # Totals
    total_kills: int
    ships_captured: int
    ships_lost: int

    @property
    def certified_craft(self) -> list[int]:
        """Indices of craft whose training certificate is complete."""
        return [i for i, flag in enumerate(self.certificates) if flag == CERT_COMPLETED]

    @property
    def medal_sums(self) -> list[int]:
        return [sum(row) for row in self.sim_counters]

    @property
    def laser_accuracy(self) -> Optional[int]:
        return accuracy(self.laser_hits, self.lasers_fired)

    @property
    def warhead_accuracy(self) -> Optional[int]:
        return accuracy(self.warhead_hits, self.warheads_fired)

    @property
    def pilot_status_conflict(self) -> bool:
        """True when the two copies of the pilot status disagree."""
        return self.pilot_status != self.pilot_status_repeat
