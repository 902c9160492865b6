"""Options shared by the commands that run the expander."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import click

from elementary.config import ExpansionConfig, StyleComposition


def config_options(command: Callable[..., Any]) -> Callable[..., Any]:
    """Add ``--composition`` and ``--color-type`` to *command*."""
    command = click.option(
        "--color-type",
        default="Color",
        show_default=True,
        help="Type constructed by #color and #unsafeColor",
    )(command)
    command = click.option(
        "--composition",
        type=click.Choice([c.value for c in StyleComposition]),
        default=StyleComposition.STYLE_INNERMOST.value,
        show_default=True,
        help="Layering of styles in the generated AggregatedStyle",
    )(command)
    return command


def build_config(composition: str, color_type: str) -> ExpansionConfig:
    return ExpansionConfig(
        style_composition=StyleComposition(composition),
        color_type=color_type,
    )
