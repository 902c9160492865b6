"""CLI command: elementary check -- report macro diagnostics without writing."""

from __future__ import annotations

import json
import sys
from pathlib import Path

import click

from elementary.cli.options import build_config, config_options
from elementary.expansion import expand_source
from elementary.model.diagnostic import Diagnostic


@click.command()
@click.argument("swiftfiles", nargs=-1, required=True, type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["text", "json"]),
    default="text",
    show_default=True,
)
@config_options
def check(swiftfiles: tuple[str, ...], output_format: str, composition: str, color_type: str) -> None:
    """Expand Swift files in memory and print their diagnostics.

    Exits with code 0 if no errors are found, or code 1 if there are errors.
    """
    config = build_config(composition, color_type)
    results: list[tuple[Path, list[Diagnostic]]] = []
    for swiftfile in swiftfiles:
        path = Path(swiftfile)
        result = expand_source(path.read_text(encoding="utf-8"), config=config)
        results.append((path, result.diagnostics))

    diagnostics = [d for _, diags in results for d in diags]
    errors = [d for d in diagnostics if d.is_error]
    warnings = [d for d in diagnostics if d.is_warning]
    notes = [d for d in diagnostics if d.is_note]

    if output_format == "json":
        payload = {
            "files": [
                {"path": str(path), "diagnostics": [d.to_dict() for d in diags]}
                for path, diags in results
            ],
            "summary": {
                "errors": len(errors),
                "warnings": len(warnings),
                "notes": len(notes),
            },
        }
        click.echo(json.dumps(payload, indent=2))
    elif not diagnostics:
        click.echo(f"OK: {len(results)} file(s) checked (0 diagnostics)")
    else:
        for path, diags in results:
            for diag in diags:
                click.echo(f"{path.name}:{diag}")
        click.echo()
        click.echo(
            f"Summary: {len(errors)} error(s), {len(warnings)} warning(s), {len(notes)} note(s)"
        )

    if errors:
        sys.exit(1)
    sys.exit(0)
