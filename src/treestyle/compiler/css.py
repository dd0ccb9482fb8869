"""CSS compiler: turns keyed style trees into CSS class rules.

Example:
    styles = create({"widget": {"top": 5, "opacity": 0.5, ":hover": {"opacity": 1}}})
    compile_css(styles)

Generates:
    .widget {
      top: 5px;
      opacity: 0.5;
    }

    .widget:hover {
      opacity: 1;
    }
"""

from __future__ import annotations

import logging
from collections.abc import Mapping

from treestyle.compiler.names import resolve_name
from treestyle.errors import CyclicStyleTreeError
from treestyle.model.config import DEFAULT_OPTIONS, CompileOptions
from treestyle.model.hyphenate import hyphenate
from treestyle.model.node import CSSValue, iter_children, iter_declarations
from treestyle.model.style_registry import StyleRegistry
from treestyle.model.style_registry import registry as default_registry

__all__ = ["compile_css", "compile_registry", "format_declaration", "format_value"]

logger = logging.getLogger(__name__)


def format_value(name: str, value: CSSValue, options: CompileOptions = DEFAULT_OPTIONS) -> str:
    """Format a CSS value, appending the default unit to lengths."""
    if isinstance(value, str):
        return value
    if isinstance(value, float) and value.is_integer():
        value = int(value)
    if hyphenate(name) in options.unitless:
        return str(value)
    return f"{value}{options.unit}"


def format_declaration(
    name: str, value: CSSValue, options: CompileOptions = DEFAULT_OPTIONS
) -> str:
    return f"{hyphenate(name)}: {format_value(name, value, options)}"


def _rule(selector: str, declarations: list[str], options: CompileOptions) -> str:
    body = "".join(f"{options.indent}{decl};\n" for decl in declarations)
    return f".{selector} {{\n{body}}}"


def _compile(node: Mapping, options: CompileOptions, active: set[int]) -> list[str]:
    if id(node) in active:
        raise CyclicStyleTreeError(
            f"Style {resolve_name(node) or '<anonymous>'!r} contains itself"
        )
    active.add(id(node))
    try:
        declarations = [
            format_declaration(name, value, options)
            for name, value in iter_declarations(node)
        ]
        blocks: list[str] = []
        name = resolve_name(node)
        if name and declarations:
            blocks.append(_rule(name, declarations, options))
        for _, child in iter_children(node):
            blocks.extend(_compile(child, options, active))
        return blocks
    finally:
        active.discard(id(node))


def compile_css(node: Mapping, options: CompileOptions | None = None) -> str:
    """Return the CSS for *node* and all of its nested styles.

    Keyed nodes with at least one declaration produce one rule block;
    nested styles follow in property order, separated by blank lines.
    Keyless nodes (such as the root passed to ``create()``) only
    contribute their children.
    """
    blocks = _compile(node, options or DEFAULT_OPTIONS, set())
    return "\n\n".join(blocks)


def compile_registry(
    registry: StyleRegistry | None = None, options: CompileOptions | None = None
) -> str:
    """Compile every registered style, in registration order."""
    if registry is None:
        registry = default_registry
    styles = registry.all()
    chunks = [compile_css(style, options) for style in styles.values()]
    css = "\n\n".join(chunk for chunk in chunks if chunk)
    logger.debug("Compiled %d registered style(s)", len(styles))
    return css
