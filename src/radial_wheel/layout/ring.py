"""Concentric rings and the sectors allocated on them."""

from dataclasses import dataclass, field


@dataclass
class Ring:
    """One concentric annulus with a running angular cursor.

    ``degrees`` is the total angle allocated so far and ``prev_degrees`` its value
    before the last allocation, so the sector currently being described is
    ``[prev_degrees, degrees)``.
    """

    id: str
    inner_radius: float
    outer_radius: float
    label_offset: float = 0
    degrees: float = field(default=0.0, init=False)
    prev_degrees: float = field(default=0.0, init=False)

    @property
    def radii(self) -> tuple[float, float]:
        return (self.inner_radius, self.outer_radius)

    @property
    def current_sector(self) -> tuple[float, float]:
        return (self.prev_degrees, self.degrees)

    def advance(self, width: float) -> tuple[float, float]:
        """Allocate the next ``width`` degrees and return the new interval.

        Raises:
            ValueError: If ``width`` is negative.
        """
        if width < 0:
            raise ValueError(f"Sector width must not be negative, got {width}")
        self.prev_degrees, self.degrees = self.degrees, self.degrees + width
        return self.current_sector


@dataclass(frozen=True)
class Sector:
    """Angular slice ``[start, end)`` of one ring for one hierarchy node."""

    id: str
    ring: str
    label: str
    start: float
    end: float
    spoke: str  # Boundary line path at ``start``
    midline: str  # Guide path at the centre angle, used to bend the label
    parent: str | None = None  # Id of the sector one ring further in

    @property
    def width(self) -> float:
        return self.end - self.start

    @property
    def mid_degrees(self) -> float:
        return (self.start + self.end) / 2


@dataclass(frozen=True)
class ColorArc:
    """Color key wedge spanning one category's angular range."""

    category: str
    start: float
    end: float
    fill: str
    path: str


@dataclass
class WheelLayout:
    """Everything produced by one layout pass."""

    rings: list[Ring] = field(default_factory=list)
    sectors: list[Sector] = field(default_factory=list)
    color_arcs: list[ColorArc] = field(default_factory=list)
    total_leaves: int = 0

    def sectors_on(self, ring_id: str) -> list[Sector]:
        """Sectors of one ring, in angular order."""
        return [s for s in self.sectors if s.ring == ring_id]
