"""Command line interface for treestyle."""

from treestyle.cli.main import cli

__all__ = ["cli"]
