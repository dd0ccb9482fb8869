"""treestyle model layer -- public type re-exports."""

from treestyle.model.config import DEFAULT_OPTIONS, UNITLESS_PROPERTIES, CompileOptions
from treestyle.model.node import RESERVED, StyleNode, is_style
from treestyle.model.props import StyleProps
from treestyle.model.style_registry import StyleRegistry, registry

__all__ = [
    # node
    "RESERVED",
    "StyleNode",
    "is_style",
    # props
    "StyleProps",
    # registry
    "StyleRegistry",
    "registry",
    # config
    "CompileOptions",
    "DEFAULT_OPTIONS",
    "UNITLESS_PROPERTIES",
]
