"""Style error types."""

from __future__ import annotations


class StyleError(Exception):
    """Base class for all style tree errors."""


class InvalidTargetError(StyleError, TypeError):
    """Raised when an operation is given ``None`` where a mapping is required."""


class MalformedStyleError(StyleError, ValueError):
    """Raised when a style value is neither a CSS primitive nor a nested style."""

    def __init__(self, message: str, path: tuple[str, ...] = ()):
        self.path = path
        if path:
            message = f"{message} (at {'.'.join(path)})"
        super().__init__(message)


class CyclicStyleTreeError(StyleError):
    """Raised when a style tree, parent chain, or mixin chain loops back on itself."""
