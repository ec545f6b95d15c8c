"""Wheel dataset model and loading.

The dataset is a three-level hierarchy (category -> subcategory -> items) plus a
color for each category, read from a JSON document of the form::

    {
        "colors": {"Joy": "#f7d547", ...},
        "labels": {"Joy": {"Ecstatic": ["Elated", "Euphoric"], ...}, ...}
    }
"""

import json
import logging
from collections.abc import Iterator, Mapping
from dataclasses import dataclass, field
from pathlib import Path
from typing import Protocol

from .errors import DataLoadFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LeafGroup:
    """Ordered leaf item labels. Each item counts as one leaf."""

    items: tuple[str, ...] = ()


@dataclass(frozen=True)
class InteriorNode:
    """Ordered mapping of child label to child node."""

    children: tuple[tuple[str, "HierarchyNode"], ...] = ()

    def items(self) -> Iterator[tuple[str, "HierarchyNode"]]:
        return iter(self.children)

    def __len__(self) -> int:
        return len(self.children)


HierarchyNode = LeafGroup | InteriorNode


@dataclass(frozen=True)
class WheelData:
    """Immutable dataset for one layout pass."""

    labels: InteriorNode
    colors: Mapping[str, str] = field(default_factory=dict)


def parse_hierarchy(value: object, path: str = "labels") -> HierarchyNode:
    """Convert nested JSON mappings/lists into HierarchyNode values.

    Args:
        value: A mapping (interior node) or list (leaf group).
        path: Location of ``value`` in the document, used in error messages.

    Returns:
        The parsed node.

    Raises:
        DataLoadFailure: If a value is neither a mapping nor a list.
    """
    if isinstance(value, Mapping):
        return InteriorNode(
            tuple((str(label), parse_hierarchy(child, f"{path}.{label}")) for label, child in value.items())
        )
    if isinstance(value, (list, tuple)):
        for item in value:
            if isinstance(item, (Mapping, list, tuple)):
                raise DataLoadFailure(f"{path}: leaf items must be labels, got {type(item).__name__}")
        # A missing label renders as an empty one
        return LeafGroup(tuple("" if item is None else str(item) for item in value))
    raise DataLoadFailure(f"{path}: expected a mapping or a list, got {type(value).__name__}")


def parse_data(payload: object) -> WheelData:
    """Build WheelData from a decoded JSON document.

    Raises:
        DataLoadFailure: If the document does not have the expected shape.
    """
    if not isinstance(payload, Mapping):
        raise DataLoadFailure("Dataset must be a JSON object with 'colors' and 'labels'")

    labels = parse_hierarchy(payload.get("labels", {}))
    if not isinstance(labels, InteriorNode):
        raise DataLoadFailure("'labels' must map category names to subcategories")
    for category, subcategories in labels.items():
        if not isinstance(subcategories, InteriorNode):
            raise DataLoadFailure(f"labels.{category}: expected a mapping of subcategories")
        for subcategory, items in subcategories.items():
            if not isinstance(items, LeafGroup):
                raise DataLoadFailure(
                    f"labels.{category}.{subcategory}: expected a list of item labels"
                )

    raw_colors = payload.get("colors", {})
    if not isinstance(raw_colors, Mapping):
        raise DataLoadFailure("'colors' must map category names to colors")
    # dict() keeps the last value for a repeated label
    colors = {str(label): str(color) for label, color in raw_colors.items()}

    return WheelData(labels=labels, colors=colors)


class DataProvider(Protocol):
    """Source of the raw dataset."""

    def fetch(self) -> object:
        """Return the decoded dataset document, or raise DataLoadFailure."""
        ...


class JsonFileProvider:
    """Reads the dataset from a JSON file."""

    def __init__(self, path: Path):
        self.path = Path(path)

    def fetch(self) -> object:
        try:
            with open(self.path, encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError, RecursionError) as err:
            raise DataLoadFailure(f"Error reading JSON file {self.path}: {err}") from err


def load_data(provider: DataProvider) -> WheelData | None:
    """Fetch and parse the dataset, reporting failures instead of raising.

    Args:
        provider: Where to read the dataset from.

    Returns:
        The dataset, or None if it could not be loaded. Loading is not retried.
    """
    try:
        return parse_data(provider.fetch())
    except DataLoadFailure as err:
        logger.error("Could not load wheel data: %s", err)
        return None
