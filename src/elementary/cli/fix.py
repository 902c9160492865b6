"""CLI command: elementary fix -- apply the fix-its suggested by macro diagnostics."""

from __future__ import annotations

from pathlib import Path

import click

from elementary.expansion import apply_fix_its, expand_source


@click.command()
@click.argument("swiftfile", type=click.Path(exists=True, dir_okay=False))
@click.option("--in-place", is_flag=True, help="Overwrite SWIFTFILE")
def fix(swiftfile: str, in_place: bool) -> None:
    """Apply every non-conflicting fix-it to a Swift file.

    The macros themselves are left unexpanded.
    """
    path = Path(swiftfile)
    source = path.read_text(encoding="utf-8")
    result = expand_source(source)

    fix_count = sum(len(d.fix_its) for d in result.diagnostics)
    fixed = apply_fix_its(source, result.diagnostics)

    if in_place:
        path.write_text(fixed, encoding="utf-8")
    else:
        click.echo(fixed, nl=False)
    click.echo(f"{path.name}: {fix_count} fix-it(s) available", err=True)
