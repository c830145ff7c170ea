"""Export a pilot record as CSV rows of decoded fields."""
from __future__ import annotations

import csv
import io

from tfrdump.tfr.fields import FIELD_MAP, Field
from tfrdump.tfr.records import PilotRecord


def decoded_rows(record: PilotRecord, fields: tuple[Field, ...] = FIELD_MAP) -> list[tuple]:
    """Flatten a record into (field_name, value, type) rows in field map order."""
    rows = []
    for f in fields:
        value = getattr(record, f.name)
        if isinstance(value, bytes):
            rows.append((f.name, value.hex(), f.encoding))
        elif f.rows > 1:
            for r, row in enumerate(value):
                for i, v in enumerate(row):
                    rows.append((f"{f.name}_{r}_{i}", v, f.encoding))
        elif f.is_array:
            for i, v in enumerate(value):
                rows.append((f"{f.name}_{i}", v, f.encoding))
        else:
            rows.append((f.name, value, f.encoding))
    return rows


def export_csv(record: PilotRecord) -> str:
    """Export a record as CSV string."""
    output = io.StringIO()
    writer = csv.writer(output)

    # Header
    writer.writerow(["field", "value", "type"])
    writer.writerows(decoded_rows(record))

    return output.getvalue()
