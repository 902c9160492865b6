"""Elementary CLI entry point: Click group with subcommands."""

import logging

import click

from elementary import __version__


@click.group()
@click.version_option(version=__version__, prog_name="elementary")
@click.option("--verbose", "-v", is_flag=True, help="Log every macro site and phase")
def cli(verbose: bool) -> None:
    """Elementary - expand the Elementary Swift UI macros in Swift sources."""
    if verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(levelname)s: %(message)s")


# Import and register subcommands
from elementary.cli.expand import expand  # noqa: E402
from elementary.cli.check import check  # noqa: E402
from elementary.cli.fix import fix  # noqa: E402
from elementary.cli.decode import decode  # noqa: E402
from elementary.cli.macros import macros  # noqa: E402

cli.add_command(expand)
cli.add_command(check)
cli.add_command(fix)
cli.add_command(decode)
cli.add_command(macros)
