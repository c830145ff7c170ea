"""Click CLI for dumping TIE Fighter pilot files."""
from __future__ import annotations

from pathlib import Path
from typing import Optional

import click

from tfrdump.config import FORMATS, TFR_SIZE
from tfrdump.settings import load_settings, resolve_pilot


@click.command()
@click.argument("pilot")
@click.option("--format", "fmt", type=click.Choice(FORMATS), default=None,
              help="Output format (default: from config, else text)")
@click.option("--output", "-o", "output_path", type=click.Path(dir_okay=False), default=None,
              help="Write output to a file instead of stdout")
@click.version_option(package_name="tfrdump")
def cli(pilot: str, fmt: Optional[str], output_path: Optional[str]):
    """tfrdump - TIE Fighter pilot file (*.TFR) dumper.

    Reads PILOT, decodes every known field, and prints rank, medals,
    battle progress, kills and mission scores.
    """
    from tfrdump.tfr.decoder import decode
    from tfrdump.tfr.errors import DecodeError
    from tfrdump.tfr.reader import read_pilot_bytes

    settings = load_settings()
    path = resolve_pilot(pilot, settings)
    fmt = fmt or settings.format

    try:
        data = read_pilot_bytes(path)
    except OSError as e:
        raise click.FileError(str(path), hint=e.strerror or str(e)) from e

    if len(data) < TFR_SIZE:
        click.echo(f"Warning: {path.name} is {len(data)} bytes, zero-padded to {TFR_SIZE}.", err=True)
    elif len(data) > TFR_SIZE:
        click.echo(f"Warning: {path.name} is {len(data)} bytes, ignoring bytes past {TFR_SIZE}.", err=True)

    try:
        record = decode(data)
    except DecodeError as e:
        raise click.ClickException(f"Cannot decode {path}: {e}") from e

    if fmt == "json":
        from tfrdump.export.json_export import export_json
        output = export_json(record)
    elif fmt == "csv":
        from tfrdump.export.csv_export import export_csv
        output = export_csv(record)
    else:
        from tfrdump.export.text_export import export_text
        output = export_text(record)

    if output_path:
        Path(output_path).write_text(output, encoding="utf-8")
        click.echo(f"Written to {output_path}", err=True)
    else:
        click.echo(output)


if __name__ == "__main__":
    cli()
