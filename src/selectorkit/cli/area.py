"""CLI command: selectorkit area -- print a rectangle's area."""

from __future__ import annotations

import click

from selectorkit.model import Rectangle


@click.command()
@click.argument("width", type=float)
@click.argument("height", type=float)
def area(width: float, height: float) -> None:
    """Print the area of a WIDTH x HEIGHT rectangle."""
    value = Rectangle(width, height).area()
    # Whole areas print without a trailing ".0".
    click.echo(str(int(value)) if value.is_integer() else repr(value))
