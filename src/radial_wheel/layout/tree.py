"""Sector tree: parent/child relationships between sectors of a laid out wheel."""

import networkx as nx

from .ring import Sector, WheelLayout

# Synthetic root node name
ROOT_NODE = "__root__"


def build_sector_tree(layout: WheelLayout) -> nx.DiGraph:
    """Build a tree of sectors rooted at a synthetic ``__root__`` node.

    Inner ring sectors hang off the root, every other sector hangs off the sector
    one ring further in. Each node carries its Sector as the ``sector`` attribute.

    Args:
        layout: Result of a layout pass.

    Returns:
        NetworkX DiGraph with one node per sector plus the root.
    """
    G = nx.DiGraph()
    G.add_node(ROOT_NODE)
    for sector in layout.sectors:
        G.add_node(sector.id, sector=sector)
        G.add_edge(sector.parent or ROOT_NODE, sector.id)
    return G


def find_sectors(tree: nx.DiGraph, pattern: str) -> list[Sector]:
    """All sectors whose label contains ``pattern`` (case-insensitive), in layout order."""
    needle = pattern.lower()
    return [
        data["sector"]
        for _, data in tree.nodes(data=True)
        if "sector" in data and needle in data["sector"].label.lower()
    ]


def sector_chain(tree: nx.DiGraph, sector_id: str) -> list[Sector]:
    """Sectors from the inner ring out to ``sector_id``.

    Raises:
        KeyError: If no sector has this id.
    """
    if sector_id not in tree:
        raise KeyError(sector_id)
    path = nx.shortest_path(tree, ROOT_NODE, sector_id)
    return [tree.nodes[node]["sector"] for node in path[1:]]


def leaf_descendants(tree: nx.DiGraph, sector_id: str) -> list[Sector]:
    """Outermost sectors under ``sector_id`` (the sector itself if it has no children)."""
    descendants = nx.descendants(tree, sector_id) | {sector_id}
    leaves = [node for node in descendants if tree.out_degree(node) == 0]
    return sorted((tree.nodes[n]["sector"] for n in leaves), key=lambda s: s.start)
