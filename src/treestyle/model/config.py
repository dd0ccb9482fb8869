"""Compiler configuration."""

from __future__ import annotations

from dataclasses import dataclass, field, replace

from treestyle.model.hyphenate import hyphenate

# CSS properties whose numeric values carry no unit (hyphenated form).
UNITLESS_PROPERTIES = frozenset(
    {
        "opacity",
        "flex",
        "flex-grow",
        "flex-shrink",
        "flex-positive",
        "flex-negative",
        "font-weight",
        "line-height",
        "z-index",
        "order",
        "zoom",
        "widows",
        "orphans",
        "fill-opacity",
        "column-count",
    }
)


@dataclass(frozen=True)
class CompileOptions:
    """Formatting options for generated CSS."""

    indent: str = "  "
    unit: str = "px"
    unitless: frozenset[str] = field(default=UNITLESS_PROPERTIES)

    def with_unitless(self, *names: str) -> CompileOptions:
        """Return a copy that also treats *names* (CSS property names) as unitless."""
        return replace(self, unitless=self.unitless | {hyphenate(n) for n in names})


DEFAULT_OPTIONS = CompileOptions()
