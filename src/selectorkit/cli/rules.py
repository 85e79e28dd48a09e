"""CLI command: selectorkit rules -- show the rule set in force."""

from __future__ import annotations

import click

from selectorkit.rules import DEFAULT_RULES


@click.command()
def rules() -> None:
    """Print the fragment priority order and the single-occurrence kinds."""
    click.echo("Order:")
    for position, kind in enumerate(DEFAULT_RULES.order, start=1):
        marker = " (once)" if kind in DEFAULT_RULES.single else ""
        click.echo(f"  {position}. {kind.value}{marker}")
