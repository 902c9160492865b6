"""CLI command: elementary macros -- list the registered macros."""

from __future__ import annotations

import click

from elementary.expansion import create_default_registry, macro_roles


@click.command()
def macros() -> None:
    """List every registered macro with its roles."""
    for spelling, macro in create_default_registry().entries():
        roles = ", ".join(macro_roles(macro))
        click.echo(f"{spelling:<20} {type(macro).__name__:<24} {roles}")
