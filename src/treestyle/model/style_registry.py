"""Style registry: the named top-level styles defined via ``create()``."""

from __future__ import annotations

import logging
import threading
from collections.abc import Iterator

from treestyle.model.node import StyleNode

logger = logging.getLogger(__name__)


class StyleRegistry:
    """Insertion-ordered mapping from class-name key to top-level style.

    Registries only grow.  Adding a node under a key that already belongs
    to a different node replaces that entry in place (keeping its original
    position) and logs a warning: trees created without a namespace can
    collide.
    """

    def __init__(self) -> None:
        self._styles: dict[str, StyleNode] = {}
        self._lock = threading.Lock()

    def add(self, style: StyleNode) -> None:
        """Register a keyed top-level style."""
        key = getattr(style, "key", None)
        if not key:
            raise ValueError("Only styles with a key can be registered")
        with self._lock:
            existing = self._styles.get(key)
            if existing is not None and existing is not style:
                logger.warning("Style %r redefined; replacing earlier definition", key)
            self._styles[key] = style
        logger.debug("Registered style %r", key)

    def all(self) -> dict[str, StyleNode]:
        """Return a copy of the registered styles in registration order."""
        with self._lock:
            return dict(self._styles)

    def __len__(self) -> int:
        return len(self._styles)

    def __contains__(self, key: object) -> bool:
        return key in self._styles

    def __iter__(self) -> Iterator[str]:
        return iter(self.all())


# Process-wide default used by create() and the CLI.
registry = StyleRegistry()
