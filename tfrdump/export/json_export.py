"""Export a pilot record as JSON."""
from __future__ import annotations

import json
from dataclasses import asdict

from tfrdump.tfr.enums import DEFAULT_TRANSLATOR, EnumTranslator, label_or
from tfrdump.tfr.records import PilotRecord


def record_to_dict(record: PilotRecord, translator: EnumTranslator = DEFAULT_TRANSLATOR) -> dict:
    """Raw field values plus a `labels` block with resolved names."""
    t = translator
    data = asdict(record)
    data["unused_certificates"] = record.unused_certificates.hex()

    data["labels"] = {
        "pilot_status": label_or(t.pilot_status_name, record.pilot_status),
        "pilot_status_repeat": label_or(t.pilot_status_name, record.pilot_status_repeat),
        "rank": label_or(t.rank_name, record.rank),
        "difficulty": label_or(t.difficulty_name, record.difficulty),
        "secret_rank": label_or(t.secret_rank_name, record.secret_rank),
        "certificates": [t.craft[i] for i in record.certified_craft if i < len(t.craft)],
        "medals": {
            name: t.medal_tier(total)
            for name, total in zip(t.craft, record.medal_sums)
        },
        "battle_status": [label_or(t.battle_status_name, s) for s in record.battle_status],
        "laser_accuracy": record.laser_accuracy,
        "warhead_accuracy": record.warhead_accuracy,
        # list of pairs, not a dict: unit names are not guaranteed unique
        "kills": [
            [label_or(t.unit_name, i), count]
            for i, count in enumerate(record.kills)
        ],
    }
    return data


def export_json(record: PilotRecord, translator: EnumTranslator = DEFAULT_TRANSLATOR) -> str:
    """Export a record as a JSON string."""
    return json.dumps(record_to_dict(record, translator), indent=2)
