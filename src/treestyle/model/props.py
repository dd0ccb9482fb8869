"""Render-time props produced for a styled element."""

from __future__ import annotations

from typing import TypedDict

from treestyle.model.node import CSSValue


class StyleProps(TypedDict, total=False):
    """``className``/``style`` props for a UI component.

    ``className`` is present only when at least one named style applies;
    ``style`` only when some property had to be set inline.
    """

    className: str
    style: dict[str, CSSValue]
