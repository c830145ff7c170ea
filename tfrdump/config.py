"""Default paths and constants for TIE Fighter pilot file dumping."""
from pathlib import Path

from tfrdump.tfr.constants import TFR_SIZE  # noqa: F401

TFR_SUFFIX = ".TFR"

# Output formats understood by the CLI
FORMATS = ("text", "json", "csv")
DEFAULT_FORMAT = "text"


def derive_pilot_candidates(name: str, pilot_dir: Path | None = None) -> list[Path]:
    """Paths to try for a pilot argument, most specific first.

    The argument itself comes first. With a pilot directory configured, the
    bare name is also tried there with and without the .TFR suffix, since the
    game stores pilots as <NAME>.TFR next to TIE.EXE.
    """
    candidates = [Path(name)]
    if pilot_dir is not None:
        base = pilot_dir / name
        candidates.append(base)
        if not name.upper().endswith(TFR_SUFFIX):
            candidates.append(pilot_dir / f"{name}{TFR_SUFFIX}")
            candidates.append(pilot_dir / f"{name}{TFR_SUFFIX.lower()}")
    return candidates
