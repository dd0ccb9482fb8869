"""Mixin flattening and render-time style combination.

``mixin()`` takes the props for a component and adds the ``className``
and/or ``style`` needed to apply one or more styles:

    mixin([theme["button"], {"width": 120}], {"type": "button"})
    # {"type": "button", "className": "button", "style": {"width": 120}}

Named styles (from ``create()``) contribute class names.  Plain mappings
are applied inline.  When two applied styles set the same property, the
stylesheet alone cannot say which one wins, so every repeat of a property
is written to ``style`` and the last style listed wins.
"""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping, Sequence
from typing import Any

from treestyle.combine.assign import assign
from treestyle.compiler.names import join_names
from treestyle.errors import CyclicStyleTreeError, MalformedStyleError
from treestyle.model.node import check_mixins, is_style, iter_declarations
from treestyle.model.props import StyleProps

__all__ = ["flatten", "combine", "mixin", "merge"]


def _mixins_of(style: Any) -> Sequence:
    if not isinstance(style, Mapping):
        raise MalformedStyleError(
            f"Styles must be mappings, got {type(style).__name__}"
        )
    mixins = style.get("mixins")
    check_mixins(mixins)
    return mixins or ()


def _expand(style: Any, out: list[Mapping], chain: list[int]) -> None:
    if style is None or style is False:
        return
    mixins = _mixins_of(style)
    if mixins:
        if id(style) in chain:
            raise CyclicStyleTreeError("Style lists itself among its own mixins")
        chain.append(id(style))
        try:
            for mixin_style in mixins:
                _expand(mixin_style, out, chain)
        finally:
            chain.pop()
    out.append(style)


def flatten(styles: Any) -> list[Mapping]:
    """Expand *styles* and their ``mixins`` into one ordered list.

    A style's mixins (recursively) come before the style itself.  ``None``
    and ``False`` entries are dropped.
    """
    if styles is None:
        return []
    if not isinstance(styles, (list, tuple)):
        if not _mixins_of(styles):
            return [styles]
        styles = [styles]
    out: list[Mapping] = []
    for style in styles:
        _expand(style, out, [])
    return out


def combine(styles: Sequence[Mapping]) -> StyleProps:
    """Reconcile an already flattened list of styles into render props."""
    used: set[str] = set()
    inline: dict[str, Any] = {}
    for style in styles:
        named = is_style(style)
        for name, value in iter_declarations(style):
            if not named or name in used:
                inline[name] = value
            used.add(name)

    props: StyleProps = {}
    class_name = join_names(styles)
    if class_name:
        props["className"] = class_name
    if inline:
        props["style"] = inline
    return props


def mixin(styles: Any, props: MutableMapping | None = None) -> MutableMapping:
    """Add ``className``/``style`` for *styles* to *props* and return it.

    *styles* may be a single style or a list of styles; *props* defaults
    to a new dict.
    """
    if props is None:
        props = {}
    return assign(props, combine(flatten(styles)))


def merge(*styles: Mapping | None) -> dict[str, Any]:
    """Shallow-merge style fragments into a new plain dict, later ones winning.

    The result carries no key or parent, so it can be reused inline or
    nested under a new name in ``create()``.
    """
    merged = assign({}, *styles)
    merged.pop("key", None)
    merged.pop("parent", None)
    return merged
