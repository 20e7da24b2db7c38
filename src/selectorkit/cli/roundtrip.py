"""CLI command: selectorkit json-roundtrip -- parse, bind and re-serialize JSON."""

from __future__ import annotations

import sys
from pathlib import Path
from types import SimpleNamespace

import click

from selectorkit.errors import SelectorkitError
from selectorkit.serde import ParseError, from_json, to_json


@click.command("json-roundtrip")
@click.argument("jsonfile", type=click.Path(exists=True))
def json_roundtrip(jsonfile: str) -> None:
    """Bind a JSON object to a plain namespace and print it back compactly."""
    try:
        source = Path(jsonfile).read_text(encoding="utf-8")
        obj = from_json(SimpleNamespace, source)
    except (ParseError, UnicodeDecodeError) as exc:
        click.echo(f"Parse error: {exc}", err=True)
        sys.exit(1)
    except SelectorkitError as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)
    click.echo(to_json(obj))
