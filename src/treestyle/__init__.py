"""treestyle: CSS classes and render-time props from nested style data."""

from treestyle.combine import assign, combine, flatten, merge, mixin
from treestyle.compiler import classes, compile_css, compile_registry, join_names, resolve_name
from treestyle.errors import (
    CyclicStyleTreeError,
    InvalidTargetError,
    MalformedStyleError,
    StyleError,
)
from treestyle.model import CompileOptions, StyleNode, StyleProps, StyleRegistry, is_style, registry
from treestyle.tree import create

__version__ = "0.3.0"

__all__ = [
    "__version__",
    # tree
    "create",
    # compiler
    "compile_css",
    "compile_registry",
    "classes",
    "join_names",
    "resolve_name",
    # combine
    "assign",
    "combine",
    "flatten",
    "merge",
    "mixin",
    # model
    "CompileOptions",
    "StyleNode",
    "StyleProps",
    "StyleRegistry",
    "is_style",
    "registry",
    # errors
    "StyleError",
    "InvalidTargetError",
    "MalformedStyleError",
    "CyclicStyleTreeError",
]
