"""Name hyphenation for CSS property names and class-name keys."""

from __future__ import annotations

import re

_UPPERCASE_RE = re.compile(r"([A-Z])")


def hyphenate(name: str) -> str:
    """Convert a camelCase name to its hyphenated CSS form.

    ``backgroundColor`` becomes ``background-color`` and vendor names such
    as ``WebkitTransition`` become ``-webkit-transition``.
    """
    return _UPPERCASE_RE.sub(r"-\1", name).lower()


def local_key(name: str) -> str:
    """Return the class-name key for a property name.

    Names starting with a lowercase letter are camelCase identifiers and
    are hyphenated.  Anything else (``:hover``, ``::after``, `` .child``)
    is an opaque selector suffix and is kept verbatim.
    """
    if name[:1].islower():
        return hyphenate(name)
    return name
