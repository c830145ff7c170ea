"""User settings stored in a TOML config file."""
from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path

import click

from tfrdump.config import DEFAULT_FORMAT, FORMATS, derive_pilot_candidates

if sys.version_info >= (3, 11):
    import tomllib
else:
    import tomli as tomllib


@dataclass
class Settings:
    pilot_dir: Path | None = None
    format: str = DEFAULT_FORMAT


def get_config_path() -> Path:
    """Return the TOML config file path via click.get_app_dir."""
    return Path(click.get_app_dir("tfrdump")) / "config.toml"


def load_settings(path: Path | None = None) -> Settings:
    """Read TOML config. Returns default Settings if the file is missing.

    Example config.toml:

        pilot_dir = 'C:\\GAMES\\TIECD'
        format = "text"
    """
    path = path or get_config_path()
    if not path.exists():
        return Settings()

    with open(path, "rb") as f:
        try:
            data = tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise click.UsageError(f"Invalid config file {path}: {e}") from e

    fmt = data.get("format", DEFAULT_FORMAT)
    if fmt not in FORMATS:
        raise click.UsageError(
            f"Invalid format '{fmt}' in {path}. Choose one of: {', '.join(FORMATS)}"
        )

    pilot_dir = data.get("pilot_dir")
    return Settings(
        pilot_dir=Path(pilot_dir) if pilot_dir else None,
        format=fmt,
    )


def resolve_pilot(name: str, settings: Settings) -> Path:
    """Resolve the pilot argument: literal path first, then pilot_dir.

    Raises click.UsageError with a helpful message if nothing resolves.
    """
    candidates = derive_pilot_candidates(name, settings.pilot_dir)
    for p in candidates:
        if p.is_file():
            return p

    if settings.pilot_dir is None:
        raise click.UsageError(f"Pilot file not found: {name}")
    tried = "\n".join(f"  {p}" for p in candidates)
    raise click.UsageError(f"Pilot file not found: {name}\nTried:\n{tried}")
