"""Sunburst layout: allocate sectors on three rings and draw them."""

import logging
from typing import Any

from ..config import WheelConfig
from ..data import HierarchyNode, InteriorNode, LeafGroup, WheelData
from .count import count_leaves
from .geometry import sector_arc_path, spoke_path
from .ring import ColorArc, Ring, Sector, WheelLayout
from .surface import DrawingSurface

logger = logging.getLogger(__name__)

COLOR_GROUP_ID = "color"


def create_rings(config: WheelConfig) -> tuple[Ring, Ring, Ring]:
    """Inner, middle and outer rings for ``config``."""
    return (
        Ring("inner", 0, config.inner_radius, config.inner_label_offset),
        Ring("middle", config.inner_radius, config.middle_radius),
        Ring("outer", config.middle_radius, config.outer_radius),
    )


class _WheelBuilder:
    """State of a single layout pass."""

    def __init__(self, surface: DrawingSurface, config: WheelConfig):
        self.surface = surface
        self.config = config
        self.center = config.center
        self.layout = WheelLayout()
        self.ring_nodes: dict[str, Any] = {}
        self._next_id = 1

        # Color key wedges are drawn beneath the rings
        self.color_group = surface.resolve(COLOR_GROUP_ID)
        if self.color_group is None:
            self.color_group = surface.create(surface.root, "g", id=COLOR_GROUP_ID)

    def add_ring(self, ring: Ring) -> None:
        node = self.surface.create(self.surface.root, "g", id=ring.id)
        outline = self.surface.create(node, "circle", ["outline"])
        self.surface.set_attribute(outline, "cx", self.center[0])
        self.surface.set_attribute(outline, "cy", self.center[1])
        self.surface.set_attribute(outline, "r", ring.outer_radius)
        self.ring_nodes[ring.id] = node
        self.layout.rings.append(ring)

    def sector(self, ring: Ring, label: str, parent: str | None) -> Sector:
        """Draw the ring's current sector and record it."""
        start, end = ring.current_sector
        sector_id = f"s{self._next_id}"
        self._next_id += 1

        elem = self.surface.create(self.ring_nodes[ring.id], "g", ["sector"], id=sector_id)

        midline_id = f"{sector_id}-midline"
        midline_path = spoke_path((start + end) / 2, *ring.radii, self.center)
        defs = self.surface.create(elem, "defs")
        midline = self.surface.create(defs, "path", ["midline"], id=midline_id)
        self.surface.set_attribute(midline, "d", midline_path)

        # The label text follows the midline guide path
        text = self.surface.create(elem, "text")
        label_elem = self.surface.create(text, "textPath", ["label"])
        self.surface.set_attribute(label_elem, "href", f"#{midline_id}")
        self.surface.set_attribute(label_elem, "startOffset", f"{50 + ring.label_offset:g}%")
        self.surface.set_text(label_elem, label)

        spoke = spoke_path(start, *ring.radii, self.center)
        spoke_elem = self.surface.create(elem, "path", ["spoke"])
        self.surface.set_attribute(spoke_elem, "d", spoke)

        sector = Sector(
            id=sector_id,
            ring=ring.id,
            label=label,
            start=start,
            end=end,
            spoke=spoke,
            midline=midline_path,
            parent=parent,
        )
        self.layout.sectors.append(sector)
        return sector

    def color_arc(self, category: str, ring: Ring, colors: dict[str, str]) -> ColorArc:
        start, end = ring.current_sector
        fill = colors.get(category, self.config.default_color)
        path = sector_arc_path(start, end, ring.outer_radius, self.center)
        elem = self.surface.create(self.color_group, "path")
        self.surface.set_attribute(elem, "d", path)
        self.surface.set_attribute(elem, "fill", fill)
        arc = ColorArc(category=category, start=start, end=end, fill=fill, path=path)
        self.layout.color_arcs.append(arc)
        return arc


def build_wheel(
    data: WheelData,
    surface: DrawingSurface,
    config: WheelConfig | None = None,
) -> WheelLayout:
    """Lay out the hierarchy as a three-ring sunburst and draw it on ``surface``.

    Every sector's width is ``360 * leaves(node) / leaves(root)`` degrees. Widths are
    accumulated by running sum along each ring, so the last sector of a ring ends at
    360 up to floating point error.

    Args:
        data: Categories -> subcategories -> items, plus category colors.
        surface: Drawing surface to draw into.
        config: Radii, label offset and default color. Defaults to WheelConfig().

    Returns:
        The rings, sectors and color arcs that were drawn.
    """
    config = config or WheelConfig()
    builder = _WheelBuilder(surface, config)
    inner, middle, outer = create_rings(config)
    for ring in (inner, middle, outer):
        builder.add_ring(ring)

    total = count_leaves(data.labels)
    builder.layout.total_leaves = total
    if total == 0:
        logger.warning("Wheel data has no leaf items, nothing to lay out")
        return builder.layout

    def width(node: HierarchyNode) -> float:
        return count_leaves(node) * 360 / total

    for category, subcategories in data.labels.items():
        inner.advance(width(subcategories))
        category_sector = builder.sector(inner, category, None)

        for subcategory, items in _subcategories(subcategories, category):
            middle.advance(width(items))
            sub_sector = builder.sector(middle, subcategory, category_sector.id)

            for item in _leaf_items(items, subcategory):
                outer.advance(360 / total)
                builder.sector(outer, item, sub_sector.id)

        builder.color_arc(category, inner, data.colors)

    logger.debug(
        "Laid out %d sectors for %d leaves (outer ring ends at %.9f)",
        len(builder.layout.sectors),
        total,
        outer.degrees,
    )
    return builder.layout


def _subcategories(node: HierarchyNode, category: str):
    match node:
        case InteriorNode():
            return node.items()
    raise TypeError(f"{category}: expected subcategories, got {type(node).__name__}")


def _leaf_items(node: HierarchyNode, subcategory: str) -> tuple[str, ...]:
    match node:
        case LeafGroup(items=items):
            return items
    raise TypeError(f"{subcategory}: expected leaf items, got {type(node).__name__}")
