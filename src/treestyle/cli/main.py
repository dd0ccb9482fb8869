"""treestyle CLI entry point: Click group with subcommands."""

import logging

import click

from treestyle import __version__


@click.group()
@click.version_option(version=__version__, prog_name="treestyle")
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """treestyle - generate CSS from styles defined with treestyle.create()."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


# Import and register subcommands
from treestyle.cli.compile import compile_command  # noqa: E402
from treestyle.cli.inspect import inspect  # noqa: E402

cli.add_command(compile_command)
cli.add_command(inspect)
