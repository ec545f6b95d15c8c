"""Generate wheel outputs."""

import json
import logging
from pathlib import Path

from .config import WheelConfig
from .data import DataProvider, load_data
from .layout import SvgSurface, WheelLayout, build_sector_tree, build_wheel, leaf_descendants, render_html

logger = logging.getLogger(__name__)


def load_and_build(
    provider: DataProvider,
    config: WheelConfig | None = None,
) -> tuple[SvgSurface, WheelLayout]:
    """Load the dataset and lay out the wheel on a fresh SVG surface.

    Nothing is drawn if the dataset cannot be loaded; the failure is logged by
    load_data and an empty layout is returned.

    Args:
        provider: Source of the dataset.
        config: Wheel sizing. Defaults to WheelConfig().

    Returns:
        Tuple of (surface, layout).
    """
    config = config or WheelConfig()
    surface = SvgSurface(config.size)
    data = load_data(provider)
    if data is None:
        return surface, WheelLayout()
    return surface, build_wheel(data, surface, config)


def generate_svg(surface: SvgSurface, output_file: Path) -> None:
    """Write the wheel as a standalone SVG file."""
    with open(output_file, "w", encoding="utf-8") as f:
        f.write('<?xml version="1.0" encoding="UTF-8"?>\n')
        f.write(surface.to_string())
        f.write("\n")


def generate_html(
    surface: SvgSurface,
    output_file: Path,
    config: WheelConfig | None = None,
    title: str = "Wheel",
) -> None:
    """Write the interactive, rotatable HTML page."""
    render_html(surface, output_file, config, title=title)


def generate_json(layout: WheelLayout, output_file: Path) -> None:
    """Write sector geometry as JSON.

    Args:
        layout: Result of a layout pass.
        output_file: Path to write the JSON file.
    """
    data = {
        "total_leaves": layout.total_leaves,
        "rings": [
            {"id": r.id, "inner_radius": r.inner_radius, "outer_radius": r.outer_radius}
            for r in layout.rings
        ],
        "sectors": [
            {
                "id": s.id,
                "ring": s.ring,
                "label": s.label,
                "parent": s.parent,
                "start": s.start,
                "end": s.end,
            }
            for s in layout.sectors
        ],
        "colors": [
            {"category": a.category, "start": a.start, "end": a.end, "fill": a.fill}
            for a in layout.color_arcs
        ],
    }
    with open(output_file, "w", encoding="utf-8") as f:
        json.dump(data, f, indent=2)


def generate_summary(layout: WheelLayout, output_file: Path) -> None:
    """Write a human-readable summary of the category shares.

    Args:
        layout: Result of a layout pass.
        output_file: Path to write the summary to.
    """
    tree = build_sector_tree(layout)
    lines = [
        "=== WHEEL SUMMARY ===",
        "",
        f"Leaf items: {layout.total_leaves}",
    ]
    for ring in layout.rings:
        lines.append(f"{ring.id.capitalize()} ring sectors: {len(layout.sectors_on(ring.id))}")

    categories = layout.sectors_on("inner")
    if categories:
        lines.extend(["", "=== CATEGORIES ==="])
        for sector in sorted(categories, key=lambda s: -s.width):
            leaves = sum(1 for s in leaf_descendants(tree, sector.id) if s.ring == "outer")
            share = sector.width / 360 * 100
            lines.append(
                f"  {share:5.1f}%  {sector.width:7.2f} deg  {leaves:4d} items  {sector.label}"
            )

    with open(output_file, "w", encoding="utf-8") as f:
        f.write("\n".join(lines) + "\n")
