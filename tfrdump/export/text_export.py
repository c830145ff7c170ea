"""Render a PilotRecord as human-readable text lines."""
from __future__ import annotations

from typing import Optional

from tfrdump.tfr.enums import DEFAULT_TRANSLATOR, EnumTranslator, label_or
from tfrdump.tfr.records import PilotRecord


def _shots(fired: int, hits: int, pct: Optional[int], weapon: str) -> str:
    line = f"{fired} {weapon} fired, {hits} {weapon} hit"
    if pct is not None:
        line += f" ({pct}%)"
    return line


def _scores(points: tuple[int, ...], label: str) -> list[str]:
    """One line per flown mission, numbered by rendered entries only."""
    lines = []
    seq = 1
    for value in points:
        if value:
            lines.append(f"{label} {seq}: {value} points")
            seq += 1
    return lines


def render(record: PilotRecord, translator: EnumTranslator = DEFAULT_TRANSLATOR) -> list[str]:
    """Render all sections in a fixed order. Unknown codes render as "unknown"."""
    t = translator
    lines = [
        f"Pilot status: {label_or(t.pilot_status_name, record.pilot_status)}",
    ]
    if record.pilot_status_conflict:
        repeat = label_or(t.pilot_status_name, record.pilot_status_repeat)
        lines.append(f"Pilot status (repeat): {repeat}")

    lines += [
        f"Navyrank: {label_or(t.rank_name, record.rank)}",
        f"Secret order: {label_or(t.secret_rank_name, record.secret_rank)}",
        f"Difficulty: {label_or(t.difficulty_name, record.difficulty)}",
        f"Points: {record.points}",
        f"Level: {record.level}",
    ]

    certified = [t.craft[i] for i in record.certified_craft if i < len(t.craft)]
    lines.append("Training Certificates: " + (" ".join(certified) if certified else "(none)"))

    lines.append("Ship Medals:")
    for name, total in zip(t.craft, record.medal_sums):
        lines.append(f"\t{name}: {t.medal_tier(total)}")

    lines.append(f"Active Battle: {record.active_battle + 1}")
    for i, (status, last) in enumerate(zip(record.battle_status, record.battle_last_mission), start=1):
        lines.append(
            f"Battle {i} status: {label_or(t.battle_status_name, status)}. Last mission: {last}"
        )

    lines.append(_shots(record.lasers_fired, record.laser_hits, record.laser_accuracy, "Lasers"))
    lines.append(_shots(record.warheads_fired, record.warhead_hits, record.warhead_accuracy, "Warheads"))
    lines += [
        f"Total kills: {record.total_kills}",
        f"Ships Captured: {record.ships_captured}",
        f"Ships Lost: {record.ships_lost}",
    ]

    lines.append("Killdetails:")
    for i, count in enumerate(record.kills):
        lines.append(f"{label_or(t.unit_name, i)}: {count}")

    lines += _scores(record.training_points, "Training")
    lines += _scores(record.battle_points, "Battlemission")
    return lines


def export_text(record: PilotRecord, translator: EnumTranslator = DEFAULT_TRANSLATOR) -> str:
    """Render and join into a single string."""
    return "\n".join(render(record, translator))
