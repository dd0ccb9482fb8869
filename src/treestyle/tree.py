"""Style tree construction: assigns keys and parents, registers named styles."""

from __future__ import annotations

import logging
import re
from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from treestyle.errors import CyclicStyleTreeError, InvalidTargetError, MalformedStyleError
from treestyle.model.hyphenate import hyphenate, local_key
from treestyle.model.node import StyleNode, check_mixins, check_value, is_style
from treestyle.model.style_registry import StyleRegistry
from treestyle.model.style_registry import registry as default_registry

__all__ = ["create", "namespace_prefix"]

logger = logging.getLogger(__name__)

T = TypeVar("T", bound=MutableMapping)

_PATH_SEP_RE = re.compile(r"[\\/]")
_SOURCE_SUFFIXES = (".py", ".pyw", ".pyc", ".pyi")


def namespace_prefix(namespace: str | None) -> str:
    """Turn a namespace into the prefix applied to first-level keys.

    File paths (``__file__``) are reduced to their stem and dotted module
    names (``__name__``) to their last component.  The result is
    hyphenated and ends with a single ``-``:

        >>> namespace_prefix("/app/components/ToggleButton.py")
        '-toggle-button-'
        >>> namespace_prefix("app.theme")
        'theme-'
    """
    if not namespace:
        return ""
    base = _PATH_SEP_RE.split(namespace)[-1]
    is_path = base != namespace or namespace.endswith(_SOURCE_SUFFIXES)
    if is_path and "." in base:
        base = base.rsplit(".", 1)[0]
    base = base.rsplit(".", 1)[-1]
    prefix = hyphenate(base)
    if prefix and not prefix.endswith("-"):
        prefix += "-"
    return prefix


class _TreeBuilder:
    """Single-use visitor that keys one tree bottom-up."""

    def __init__(self, prefix: str) -> None:
        self.prefix = prefix
        # id(raw mapping) -> (raw mapping, converted node)
        self._converted: dict[int, tuple[Mapping, StyleNode]] = {}
        self._active: set[int] = set()

    def visit(self, node: MutableMapping, path: tuple[str, ...] = ()) -> None:
        self._active.add(id(node))
        try:
            for name, value in list(node.items()):
                if name in ("key", "parent"):
                    continue
                if name == "mixins":
                    check_mixins(value, path)
                    continue
                if not check_value(name, value, path):
                    continue
                node[name] = self._build_child(node, name, value, path)
        finally:
            self._active.discard(id(node))

    def _build_child(
        self, parent: MutableMapping, name: str, value: Mapping, path: tuple[str, ...]
    ) -> Mapping:
        # Keyed nodes belong to an earlier call (or an earlier branch of this one).
        if is_style(value) or getattr(value, "parent", None) is not None:
            return value
        if id(value) in self._active:
            raise CyclicStyleTreeError(
                f"Style {'.'.join(path + (name,))!r} contains one of its own ancestors"
            )
        seen = self._converted.get(id(value))
        if seen is not None:
            return seen[1]

        child = value if isinstance(value, StyleNode) else StyleNode(value)
        self._converted[id(value)] = (value, child)
        self._active.add(id(value))
        try:
            self.visit(child, path + (name,))
        finally:
            self._active.discard(id(value))

        child.key = (self.prefix if not path else "") + local_key(name)
        child.parent = parent
        return child


def create(
    tree: T, namespace: str | None = None, *, registry: StyleRegistry | None = None
) -> T:
    """Build a style tree from nested mappings and register its named styles.

    Every nested mapping in *tree* is replaced by a :class:`StyleNode`
    carrying a ``key`` derived from its property name and a ``parent``
    reference, then the first-level styles are added to *registry*
    (the process-wide registry by default).  *tree* itself is mutated and
    returned, so the result can be used directly:

        styles = create({
            "button": {
                "backgroundColor": "red",
                "borderRadius": 3,
                ":active": {"backgroundColor": "green"},
            },
        }, __file__)

    Nodes that already have a key are left untouched, so calling
    ``create`` again, or reusing styles from other trees, is safe.
    """
    if tree is None:
        raise InvalidTargetError("create() requires a style tree, got None")
    if not isinstance(tree, MutableMapping):
        raise MalformedStyleError(
            f"create() requires a mutable mapping, got {type(tree).__name__}"
        )
    if registry is None:
        registry = default_registry

    _TreeBuilder(namespace_prefix(namespace)).visit(tree)

    # A keyed root is a subtree of an earlier call; its children are nested
    # styles, not first-level ones.
    if not is_style(tree):
        for name, value in tree.items():
            if name not in ("key", "parent", "mixins") and is_style(value):
                registry.add(value)
    logger.debug("Created style tree with namespace %r", namespace)
    return tree
