"""Shallow merge of mappings onto a target."""

from __future__ import annotations

from collections.abc import Mapping, MutableMapping
from typing import TypeVar

from treestyle.errors import InvalidTargetError

T = TypeVar("T", bound=MutableMapping)


def assign(target: T, *sources: Mapping | None) -> T:
    """Copy the entries of each source onto *target*, left to right.

    Later sources overwrite earlier ones and ``None`` sources are skipped.
    """
    if target is None:
        raise InvalidTargetError("assign() target cannot be None")
    for source in sources:
        if source is None:
            continue
        target.update(source)
    return target
