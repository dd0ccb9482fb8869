"""Class-name resolution for keyed style nodes."""

from __future__ import annotations

from collections.abc import Iterable
from typing import Any

from treestyle.errors import CyclicStyleTreeError

__all__ = ["resolve_name", "join_names", "classes"]


def resolve_name(node: Any) -> str:
    """Return the full CSS class name of *node*, or ``''`` if it has no key.

    The name is the key prefixed by the parent's resolved name.  Keys
    starting with a lowercase letter are joined with ``-``; any other key
    (``:hover``, ``::after``) attaches directly to the parent name.
    """
    parts: list[str] = []
    seen: set[int] = set()
    current = node
    while current is not None:
        if id(current) in seen:
            raise CyclicStyleTreeError(f"Parent chain of style {parts[0]!r} loops")
        seen.add(id(current))
        key = getattr(current, "key", None)
        if not key:
            break
        parts.append(key)
        current = getattr(current, "parent", None)

    name = ""
    for key in reversed(parts):
        if not name:
            name = key
        elif key[0].isalpha() and key[0].islower():
            name = f"{name}-{key}"
        else:
            name = name + key
    return name


def join_names(nodes: Iterable[Any]) -> str:
    """Resolve each node and join the non-empty names with single spaces."""
    names = []
    for node in nodes:
        if node is None or node is False:
            continue
        name = resolve_name(node)
        if name:
            names.append(name)
    return " ".join(names)


def classes(*nodes: Any) -> str:
    """Return the space-separated class names for *nodes*, skipping ``None``.

        classes(theme["button"], active and theme["button"]["pressed"])
    """
    return join_names(nodes)
