"""Compiler: class-name resolution and CSS generation."""

from treestyle.compiler.css import compile_css, compile_registry, format_value
from treestyle.compiler.names import classes, join_names, resolve_name

__all__ = [
    "compile_css",
    "compile_registry",
    "format_value",
    "classes",
    "join_names",
    "resolve_name",
]
