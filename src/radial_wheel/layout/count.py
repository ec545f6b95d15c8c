"""Leaf counting over the category hierarchy."""

from ..data import HierarchyNode, InteriorNode, LeafGroup


def count_leaves(node: HierarchyNode) -> int:
    """Total number of leaf items under ``node``."""
    match node:
        case LeafGroup(items=items):
            return len(items)
        case InteriorNode():
            return sum(count_leaves(child) for _, child in node.items())
    raise TypeError(f"Not a hierarchy node: {node!r}")
