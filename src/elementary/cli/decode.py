"""CLI command: elementary decode -- decode a hex color string."""

from __future__ import annotations

import sys

import click

from elementary.hexcolor import HexColorDecoderError, decode as decode_hex, decode_or_default


@click.command()
@click.argument("hex")
@click.option("--normalized", is_flag=True, help="Print channels scaled to 0..1")
@click.option("--lenient", is_flag=True, help="Fall back to opaque white instead of failing")
def decode(hex: str, normalized: bool, lenient: bool) -> None:
    """Decode HEX (RRGGBB or RRGGBBAA, optional leading #) into RGBA channels."""
    if lenient:
        color = decode_or_default(hex)
    else:
        try:
            color = decode_hex(hex)
        except HexColorDecoderError as exc:
            click.echo(f"Error: {exc.message}", err=True)
            sys.exit(1)

    names = ("red", "green", "blue", "opacity")
    if normalized:
        values = [f"{v:.4f}" for v in color.normalized()]
    else:
        values = [str(v) for v in color.as_tuple()]
    click.echo(" ".join(f"{name}={value}" for name, value in zip(names, values)))
