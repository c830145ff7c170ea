from pathlib import Path

import click
import pytest

from tfrdump.config import derive_pilot_candidates
from tfrdump.settings import Settings, load_settings, resolve_pilot


def test_missing_config_gives_defaults(tmp_path):
    s = load_settings(tmp_path / "config.toml")
    assert s == Settings()
    assert s.format == "text"


def test_load_config(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("pilot_dir = '/games/tie'\nformat = \"json\"\n", encoding="utf-8")
    s = load_settings(path)
    assert s.pilot_dir == Path("/games/tie")
    assert s.format == "json"


def test_invalid_format(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("format = \"xml\"\n", encoding="utf-8")
    with pytest.raises(click.UsageError, match="Invalid format"):
        load_settings(path)


def test_invalid_toml(tmp_path):
    path = tmp_path / "config.toml"
    path.write_text("format = \n", encoding="utf-8")
    with pytest.raises(click.UsageError, match="Invalid config"):
        load_settings(path)


def test_candidates():
    base = Path("/games/tie")
    assert derive_pilot_candidates("MAAREK", base) == [
        Path("MAAREK"),
        base / "MAAREK",
        base / "MAAREK.TFR",
        base / "MAAREK.tfr",
    ]
    assert derive_pilot_candidates("MAAREK.TFR") == [Path("MAAREK.TFR")]


def test_resolve_literal_path(tmp_path):
    path = tmp_path / "P.TFR"
    path.write_bytes(b"")
    assert resolve_pilot(str(path), Settings()) == path


def test_resolve_lists_tried_paths(tmp_path):
    with pytest.raises(click.UsageError, match="Tried"):
        resolve_pilot("NOBODY", Settings(pilot_dir=tmp_path))
