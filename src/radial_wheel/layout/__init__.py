"""Sunburst layout: three concentric rings partitioned by leaf counts.

Sector widths are proportional to the number of leaf items under each node.
"""

from .count import count_leaves
from .geometry import Point, cartesian, sector_arc_path, spoke_path
from .render import render_html
from .ring import ColorArc, Ring, Sector, WheelLayout
from .surface import DrawingSurface, SvgSurface
from .tree import ROOT_NODE, build_sector_tree, find_sectors, leaf_descendants, sector_chain
from .wheel import build_wheel, create_rings

__all__ = [
    "Point",
    "cartesian",
    "sector_arc_path",
    "spoke_path",
    "count_leaves",
    "Ring",
    "Sector",
    "ColorArc",
    "WheelLayout",
    "DrawingSurface",
    "SvgSurface",
    "create_rings",
    "build_wheel",
    "render_html",
    "ROOT_NODE",
    "build_sector_tree",
    "find_sectors",
    "sector_chain",
    "leaf_descendants",
]
