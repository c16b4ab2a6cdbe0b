"""textkit CLI entry point: Click group with subcommands."""

import logging

import click

from textkit import __version__


@click.group()
@click.version_option(version=__version__, prog_name="textkit")
@click.option("-v", "--verbose", is_flag=True, help="Log resolution details to stderr.")
def cli(verbose: bool) -> None:
    """textkit - text utilities and text style components from a theme."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from textkit.cli.generate import generate  # noqa: E402
from textkit.cli.validate import validate  # noqa: E402
from textkit.cli.inspect import inspect  # noqa: E402

cli.add_command(generate)
cli.add_command(validate)
cli.add_command(inspect)
