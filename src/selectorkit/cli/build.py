"""CLI command: selectorkit build -- evaluate builder expressions."""

from __future__ import annotations

import sys

import click

from selectorkit.errors import SelectorkitError
from selectorkit.parser import parse_selector_expression


@click.command()
@click.argument("expressions", nargs=-1, required=True)
def build(expressions: tuple[str, ...]) -> None:
    """Evaluate each builder expression and print the resulting selector.

    Example:

        selectorkit build "element('a').attr('href').pseudoClass('focus')"
    """
    for source in expressions:
        try:
            selector = parse_selector_expression(source)
        except SelectorkitError as exc:
            click.echo(f"Error: {exc}", err=True)
            sys.exit(1)
        click.echo(selector.stringify())
