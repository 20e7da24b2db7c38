"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__
from selectorkit.config import LOG_LEVELS, SelectorkitConfig
from selectorkit.errors import ConfigurationError


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option(
    "--log-level",
    default=None,
    type=click.Choice(LOG_LEVELS, case_sensitive=False),
    help="Logging level (default: $SELECTORKIT_LOG_LEVEL or WARNING)",
)
def cli(log_level: str | None) -> None:
    """selectorkit - build CSS-like selectors and play with object models."""
    if log_level is None:
        try:
            log_level = SelectorkitConfig.from_env().log_level
        except ConfigurationError as exc:
            raise click.UsageError(str(exc)) from exc
    logging.basicConfig(
        level=log_level.upper(),
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.area import area  # noqa: E402
from selectorkit.cli.roundtrip import json_roundtrip  # noqa: E402

cli.add_command(build)
cli.add_command(area)
cli.add_command(json_roundtrip)
