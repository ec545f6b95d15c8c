"""Sunburst wheel rendering with drag-to-rotate interaction."""

from .config import WheelConfig
from .data import InteriorNode, LeafGroup, WheelData
from .errors import ConfigError, DataLoadFailure, RadialWheelError

__all__ = [
    "WheelConfig",
    "WheelData",
    "InteriorNode",
    "LeafGroup",
    "RadialWheelError",
    "DataLoadFailure",
    "ConfigError",
]
