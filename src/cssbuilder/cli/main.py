"""cssbuilder CLI entry point: Click group with subcommands."""

import logging

import click

from cssbuilder import __version__
from cssbuilder.config import DEFAULT_CONFIG


@click.group()
@click.version_option(version=__version__, prog_name="cssbuilder")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def cli(verbose: bool) -> None:
    """cssbuilder - build CSS compound selectors from the command line."""
    level = logging.DEBUG if verbose else DEFAULT_CONFIG.log_level
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")


# Import and register subcommands
from cssbuilder.cli.build import build  # noqa: E402
from cssbuilder.cli.rect import rect  # noqa: E402

cli.add_command(build)
cli.add_command(rect)
