"""Tree walking: attribute snapshots and depth-bounded traversal."""

from .attributes import enumerate_children, snapshot_element
from .tree_walker import DEFAULT_MAX_DEPTH, AccessibilityTreeWalker, walk

__all__ = [
    "DEFAULT_MAX_DEPTH",
    "AccessibilityTreeWalker",
    "enumerate_children",
    "snapshot_element",
    "walk",
]
