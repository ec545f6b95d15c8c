"""Tests for ring.py module."""

import pytest

from radial_wheel.config import WheelConfig
from radial_wheel.layout.ring import Ring, Sector, WheelLayout
from radial_wheel.layout.wheel import create_rings


class TestRing:
    """Tests for the Ring cursor."""

    def test_fresh_ring_starts_at_zero(self):
        ring = Ring("inner", 0, 200)
        assert ring.degrees == 0
        assert ring.prev_degrees == 0
        assert ring.current_sector == (0, 0)

    def test_advance_returns_new_interval(self):
        ring = Ring("outer", 355, 520)
        assert ring.advance(90) == (0, 90)
        assert ring.advance(45) == (90, 135)
        assert ring.current_sector == (90, 135)

    def test_zero_width_advance(self):
        """Zero-width sectors keep the cursor in place."""
        ring = Ring("middle", 200, 355)
        ring.advance(10)
        assert ring.advance(0) == (10, 10)

    def test_negative_width_rejected(self):
        ring = Ring("middle", 200, 355)
        with pytest.raises(ValueError):
            ring.advance(-1)
        assert ring.current_sector == (0, 0)

    def test_prev_never_exceeds_degrees(self):
        ring = Ring("outer", 355, 520)
        for width in (1.5, 0, 30, 0.25):
            ring.advance(width)
            assert ring.prev_degrees <= ring.degrees

    def test_radii(self):
        assert Ring("middle", 200, 355).radii == (200, 355)


class TestCreateRings:
    """Tests for create_rings function."""

    def test_default_bands(self):
        inner, middle, outer = create_rings(WheelConfig())
        assert inner.radii == (0, 200)
        assert middle.radii == (200, 355)
        assert outer.radii == (355, 520)

    def test_only_inner_ring_has_label_offset(self):
        inner, middle, outer = create_rings(WheelConfig())
        assert inner.label_offset == 7
        assert middle.label_offset == 0
        assert outer.label_offset == 0

    def test_custom_bands(self):
        config = WheelConfig(outer_radius=300, middle_radius=200, inner_radius=100)
        inner, middle, outer = create_rings(config)
        assert (inner.outer_radius, middle.outer_radius, outer.outer_radius) == (100, 200, 300)


class TestSector:
    """Tests for Sector helpers."""

    def test_width_and_midpoint(self):
        sector = Sector("s1", "inner", "A", 30, 90, spoke="", midline="")
        assert sector.width == 60
        assert sector.mid_degrees == 60

    def test_sectors_on(self):
        layout = WheelLayout(
            sectors=[
                Sector("s1", "inner", "A", 0, 360, spoke="", midline=""),
                Sector("s2", "middle", "A1", 0, 360, spoke="", midline="", parent="s1"),
            ]
        )
        assert [s.id for s in layout.sectors_on("middle")] == ["s2"]
        assert layout.sectors_on("outer") == []
