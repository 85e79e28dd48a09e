"""selectorkit CLI entry point: Click group with subcommands."""

import logging

import click

from selectorkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="selectorkit")
@click.option("--verbose", "-v", is_flag=True, help="Log rejected fragments.")
def cli(verbose: bool) -> None:
    """selectorkit - build CSS selector strings from typed fragments."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG)


# Import and register subcommands
from selectorkit.cli.build import build  # noqa: E402
from selectorkit.cli.rules import rules  # noqa: E402

cli.add_command(build)
cli.add_command(rules)
