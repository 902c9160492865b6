"""CLI command: elementary expand -- write a Swift file with its macros expanded."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from elementary.cli.options import build_config, config_options
from elementary.expansion import expand_source


@click.command()
@click.argument("swiftfile", type=click.Path(exists=True, dir_okay=False))
@click.option("-o", "--output", type=click.Path(dir_okay=False), default=None, help="Write here instead of stdout")
@click.option("--in-place", is_flag=True, help="Overwrite SWIFTFILE")
@config_options
def expand(
    swiftfile: str,
    output: str | None,
    in_place: bool,
    composition: str,
    color_type: str,
) -> None:
    """Expand the macros in a Swift file.

    Prints the expanded source (or writes it with -o / --in-place) and the
    diagnostics on stderr. Exits with code 1 if any diagnostic is an error.
    """
    path = Path(swiftfile)
    if output and in_place:
        click.echo("Error: --output and --in-place are mutually exclusive", err=True)
        sys.exit(2)

    source = path.read_text(encoding="utf-8")
    result = expand_source(source, config=build_config(composition, color_type))

    for diag in result.diagnostics:
        click.echo(f"{path.name}:{diag}", err=True)

    if in_place:
        path.write_text(result.source, encoding="utf-8")
    elif output:
        Path(output).write_text(result.source, encoding="utf-8")
    else:
        click.echo(result.source, nl=False)

    if result.has_errors:
        sys.exit(1)
