"""Label tables for integer-coded fields in TFR pilot files."""
from __future__ import annotations

from dataclasses import dataclass, field

from tfrdump.tfr.constants import (
    BATTLE_ACTIVE,
    BATTLE_CAPTURED,
    BATTLE_COMPLETED,
    BATTLE_KILLED,
    PILOT_ALIVE,
    PILOT_CAPTURED,
    PILOT_KILLED,
)
from tfrdump.tfr.errors import UnknownCode


def lookup_enum(table: dict[int, str], value: int, table_name: str) -> str:
    """Return the label for `value`, raising UnknownCode when it has none."""
    try:
        return table[value]
    except KeyError:
        raise UnknownCode(table_name, value) from None


# Imperial Navy rank (offset 2)
NAVY_RANK: dict[int, str] = {
    0: "Cadet",
    1: "Officer",
    2: "Lieutenant",
    3: "Captain",
    4: "Commander",
    5: "General",
}

# Difficulty (offset 3)
DIFFICULTY: dict[int, str] = {
    0: "easy",
    1: "medium",
    2: "hard",
}

# Emperor's secret order (offset 10)
SECRET_RANK: dict[int, str] = {
    0: "None",
    1: "First Initiate",
    2: "Second Circle",
    3: "Third Circle",
    4: "Fourth Circle",
    5: "Inner Circle",
    6: "Emperor's Hand",
    7: "Emperor's Eyes",
    8: "Emperor's Voice",
    9: "Emperor's Reach",
}

PILOT_STATUS: dict[int, str] = {
    PILOT_ALIVE: "alive",
    PILOT_CAPTURED: "captured",
    PILOT_KILLED: "killed",
}

BATTLE_STATUS: dict[int, str] = {
    BATTLE_ACTIVE: "active",
    BATTLE_CAPTURED: "captured or killed",
    BATTLE_COMPLETED: "completed",
    BATTLE_KILLED: "captured or killed",
}

# Completed simulator missions per craft -> medal
MEDAL_TIER: dict[int, str] = {
    0: "none",
    1: "none",
    2: "bronze",
    3: "silver",
    4: "gold",
}

# Craft with training certificates and simulator medals, in file order
TRAINABLE_CRAFT: tuple[str, ...] = (
    "T/F",
    "T/I",
    "T/B",
    "T/A",
    "Gunboat",
    "T/D",
    "Missile Boat",
)

# Kill counter slots (offset 1632, 2 bytes each). Several slots belong to
# craft cut from the released game and always stay at zero.
UNIT_NAMES: tuple[str, ...] = (
    "X-W",              # 0 Rebel fighters
    "Y-W",
    "A-W",
    "B-W",
    "T/F",              # Imperial fighters
    "T/I",              # 5
    "T/B",
    "T/A",
    "T/D",
    "TIE New 1",        # cut
    "TIE New 2",        # 10, cut
    "MIS",              # Missile Boat
    "T-W",
    "Z-95",
    "R-41",
    "GUN",              # 15
    "SHU",
    "E/S",
    "SPC",
    "SCT",
    "TRN",              # 20
    "ATR",
    "ETR",
    "TUG",
    "CUV",
    "CN/A",             # 25
    "CN/B",
    "CN/C",
    "CN/D",
    "HLF",
    "Heavy Freighter",  # 30
    "FRT",
    "Cargo Ferry",
    "MTRN",
    "CTRN",
    "New Freighter 3",  # 35, cut
    "MUTR",
    "CORT",
    "Millennium",       # cut
    "CRV",
    "M/CRV",            # 40
    "FRG",
    "M/FRG",
    "LINER",
    "CRCK",
    "STRKC",            # 45
    "ESC",
    "DREAD",
    "CRS",
    "INT",
    "VSD",              # 50
    "ISD",
    "SSD",              # cut
    "CN/E",
    "CN/F",
    "CN/G",             # 55
    "CN/H",
    "CN/I",
    "PLT/1",
    "PLT/2",
    "PLT/3",            # 60
    "PLT/4",
    "PLT/5",
    "PLT/6",
    "Station 7",
    "Station 8",        # 65
    "Station 9",
    "FAC/1",
)


def medal_tier(total: int) -> str:
    """Medal for a craft's summed simulator counters. Anomalous sums get no medal."""
    return MEDAL_TIER.get(total, "none")


@dataclass(frozen=True)
class EnumTranslator:
    """Resolves the raw codes kept in a PilotRecord into display labels.

    Every method raises UnknownCode for a code outside its table, except
    medal_tier which always answers.
    """
    ranks: dict[int, str] = field(default_factory=lambda: NAVY_RANK)
    difficulties: dict[int, str] = field(default_factory=lambda: DIFFICULTY)
    secret_ranks: dict[int, str] = field(default_factory=lambda: SECRET_RANK)
    pilot_statuses: dict[int, str] = field(default_factory=lambda: PILOT_STATUS)
    battle_statuses: dict[int, str] = field(default_factory=lambda: BATTLE_STATUS)
    craft: tuple[str, ...] = TRAINABLE_CRAFT
    unit_names: tuple[str, ...] = UNIT_NAMES

    def rank_name(self, code: int) -> str:
        return lookup_enum(self.ranks, code, "rank")

    def difficulty_name(self, code: int) -> str:
        return lookup_enum(self.difficulties, code, "difficulty")

    def secret_rank_name(self, code: int) -> str:
        return lookup_enum(self.secret_ranks, code, "secret rank")

    def pilot_status_name(self, code: int) -> str:
        return lookup_enum(self.pilot_statuses, code, "pilot status")

    def battle_status_name(self, code: int) -> str:
        return lookup_enum(self.battle_statuses, code, "battle status")

    def medal_tier(self, total: int) -> str:
        return medal_tier(total)

    def unit_name(self, index: int) -> str:
        if 0 <= index < len(self.unit_names):
            return self.unit_names[index]
        raise UnknownCode("unit", index)


def label_or(resolve, code: int, default: str = "unknown") -> str:
    """Call a translator method, falling back to `default` for unknown codes."""
    try:
        return resolve(code)
    except UnknownCode:
        return default


DEFAULT_TRANSLATOR = EnumTranslator()
