"""Style tree node: StyleNode and value classification."""

from __future__ import annotations

from collections.abc import Iterator, Mapping
from typing import Any, Union

from treestyle.errors import MalformedStyleError

# Property names with structural meaning; never CSS declarations.
RESERVED = frozenset({"key", "parent", "mixins"})

CSSValue = Union[int, float, str]


class StyleNode(dict):
    """A node in a style tree.

    Maps property names to CSS values (numbers or strings), nested
    StyleNodes (descendant or pseudo selectors) and the optional reserved
    ``mixins`` list.  ``key`` and ``parent`` are assigned by
    :func:`treestyle.create` and live on the node as attributes, so dict
    equality and iteration only ever see style content.
    """

    __slots__ = ("key", "parent")

    def __init__(self, *args: Any, **kwargs: Any) -> None:
        super().__init__(*args, **kwargs)
        self.key: str | None = None
        self.parent: Mapping | None = None

    @property
    def mixins(self) -> list:
        return list(self.get("mixins") or ())

    def declarations(self) -> Iterator[tuple[str, CSSValue]]:
        """Yield ``(name, value)`` for every CSS declaration, in insertion order."""
        return iter_declarations(self)

    def children(self) -> Iterator[tuple[str, Mapping]]:
        """Yield ``(name, node)`` for every nested style, in insertion order."""
        return iter_children(self)

    def __repr__(self) -> str:
        return f"StyleNode(key={self.key!r}, {dict.__repr__(self)})"


def is_style(obj: Any) -> bool:
    """Return True if *obj* is a named style produced by ``create()``."""
    return isinstance(obj, StyleNode) and obj.key is not None


def is_css_value(value: Any) -> bool:
    """Return True for values that compile to a CSS declaration."""
    if isinstance(value, bool):
        return False
    return isinstance(value, (int, float, str))


def check_value(name: str, value: Any, path: tuple[str, ...] = ()) -> bool:
    """Classify a property value.

    Returns True for a nested style and False for a CSS value.  Anything
    else raises :class:`MalformedStyleError`.
    """
    if isinstance(value, Mapping):
        return True
    if is_css_value(value):
        return False
    raise MalformedStyleError(
        f"Property {name!r} has unsupported value of type {type(value).__name__}",
        path=path + (name,),
    )


def check_mixins(value: Any, path: tuple[str, ...] = ()) -> None:
    """Validate a ``mixins`` entry: a list or tuple of mappings (None allowed)."""
    if value is None:
        return
    if not isinstance(value, (list, tuple)):
        raise MalformedStyleError(
            f"'mixins' must be a list of styles, got {type(value).__name__}",
            path=path + ("mixins",),
        )
    for item in value:
        if item is not None and not isinstance(item, Mapping):
            raise MalformedStyleError(
                f"'mixins' entries must be styles, got {type(item).__name__}",
                path=path + ("mixins",),
            )


def iter_declarations(node: Mapping) -> Iterator[tuple[str, CSSValue]]:
    """Yield the CSS declarations of *node*, skipping reserved and nested entries."""
    for name, value in node.items():
        if name in RESERVED:
            continue
        if not check_value(name, value):
            yield name, value


def iter_children(node: Mapping) -> Iterator[tuple[str, Mapping]]:
    """Yield the nested styles of *node*, skipping reserved entries."""
    for name, value in node.items():
        if name in RESERVED:
            continue
        if check_value(name, value):
            yield name, value
