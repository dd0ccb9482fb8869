"""Style combination: mixins, render-time props, and fragment merging."""

from treestyle.combine.assign import assign
from treestyle.combine.mixin import combine, flatten, merge, mixin

__all__ = ["assign", "combine", "flatten", "merge", "mixin"]
