"""css-selector CLI entry point: Click group with subcommands."""

import logging

import click

from css_selector import __version__
from css_selector.config import SelectorConfig


@click.group()
@click.version_option(version=__version__, prog_name="css-selector")
@click.option(
    "--log-level",
    default="WARNING",
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging level for diagnostic output",
)
@click.pass_context
def cli(ctx: click.Context, log_level: str) -> None:
    """css-selector - build CSS selectors with order and uniqueness checks."""
    config = SelectorConfig(log_level=log_level.upper())
    logging.basicConfig(level=config.log_level)
    ctx.obj = config


# Import and register subcommands
from css_selector.cli.build import build  # noqa: E402

cli.add_command(build)
