"""CLI command: treestyle compile -- print the CSS for all registered styles."""

from __future__ import annotations

import sys
from pathlib import Path

import click

from treestyle.cli.loader import EntryLoadError, load_entries
from treestyle.compiler.css import compile_registry
from treestyle.errors import StyleError
from treestyle.model.config import CompileOptions


@click.command("compile")
@click.argument("entries", nargs=-1, required=True)
@click.option(
    "-o",
    "--output",
    type=click.Path(dir_okay=False, writable=True),
    default=None,
    help="Write the CSS to this file instead of stdout.",
)
@click.option(
    "--indent",
    type=click.IntRange(min=0),
    default=2,
    show_default=True,
    help="Spaces used to indent declarations.",
)
def compile_command(entries: tuple[str, ...], output: str | None, indent: int) -> None:
    """Load ENTRIES and compile every style they register.

    Each entry is a Python file or a dotted module name; it is imported so
    that its treestyle.create() calls run.  The CSS for all registered
    styles is written in registration order.  Nothing is written if any
    entry fails to load or compile.
    """
    options = CompileOptions(indent=" " * indent)
    try:
        load_entries(entries)
        css = compile_registry(options=options)
    except (EntryLoadError, StyleError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    if not output:
        click.echo(css)
        return
    try:
        Path(output).write_text(css + "\n", encoding="utf-8")
    except OSError as exc:
        click.echo(f"Error: cannot write {output}: {exc}", err=True)
        sys.exit(1)
    click.echo(f"Wrote {output}", err=True)
