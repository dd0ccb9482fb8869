"""CLI command: treestyle inspect -- list the registered styles and their classes."""

from __future__ import annotations

import sys
from collections.abc import Mapping

import click

from treestyle.cli.loader import EntryLoadError, load_entries
from treestyle.compiler.names import join_names, resolve_name
from treestyle.errors import StyleError
from treestyle.model.node import iter_children, iter_declarations
from treestyle.model.style_registry import registry


def _describe(node: Mapping, depth: int) -> list[str]:
    count = sum(1 for _ in iter_declarations(node))
    parts = [f"{'  ' * depth}.{resolve_name(node)}", f"declarations={count}"]
    mixins = join_names(node.get("mixins") or ())
    if mixins:
        parts.append(f'mixins="{mixins}"')
    lines = ["  ".join(parts)]
    for _, child in iter_children(node):
        lines.extend(_describe(child, depth + 1))
    return lines


@click.command()
@click.argument("entries", nargs=-1, required=True)
def inspect(entries: tuple[str, ...]) -> None:
    """Load ENTRIES and display the registered styles.

    Shows every top-level style with its nested classes, declaration
    counts and named mixins.
    """
    try:
        load_entries(entries)
        styles = registry.all()
        lines: list[str] = []
        for style in styles.values():
            lines.extend(_describe(style, 0))
    except (EntryLoadError, StyleError) as exc:
        click.echo(f"Error: {exc}", err=True)
        sys.exit(1)

    click.echo(f"Styles: {len(styles)}")
    click.echo()
    for line in lines:
        click.echo(line)
