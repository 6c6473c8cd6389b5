"""Tests for BoundsBuilder."""

from __future__ import annotations

import math

import pytest

from geotext.codes import Coords
from geotext.coordinates import Box, Position, PositionSeries
from geotext.utils.bounds_builder import BoundsBuilder

pytestmark = pytest.mark.unit


class TestBoundsBuilder:
    def test_empty_has_no_result(self):
        builder = BoundsBuilder(Coords.XY)
        assert builder.box_coords is None
        assert builder.result() is None

    def test_nan_is_ignored(self):
        builder = BoundsBuilder(Coords.XY)
        builder.add_point(1, 2)
        builder.add_point(math.nan, 5)
        builder.add_point(3, math.nan)
        assert builder.box_coords == [1.0, 2.0, 3.0, 5.0]

    def test_only_nan_has_no_result(self):
        builder = BoundsBuilder(Coords.XY)
        builder.add_point(math.nan, math.nan)
        assert builder.result() is None

    def test_missing_z_counts_as_zero(self):
        builder = BoundsBuilder(Coords.XYZ)
        builder.add_position(Position.create(1, 1, z=5))
        builder.add_position(Position.create(2, 2))
        assert builder.result() == Box.create(1, 1, 2, 2, min_z=0, max_z=5)

    def test_z_ignored_for_xy_target(self):
        builder = BoundsBuilder(Coords.XY)
        builder.add_position(Position.create(1, 1, z=5, m=7))
        assert builder.box_coords == [1.0, 1.0, 1.0, 1.0]

    def test_measured_series(self):
        builder = BoundsBuilder(Coords.XYM)
        builder.add_position_series(PositionSeries.view([0, 0, 9, 4, -1, 3], Coords.XYM))
        assert builder.box_coords == [0.0, -1.0, 3.0, 4.0, 0.0, 9.0]
        assert builder.result().type is Coords.XYM

    def test_add_bounds(self, xyz_box):
        builder = BoundsBuilder(Coords.XYZ)
        builder.add_bounds(xyz_box)
        builder.add_point(0, 0, 15)
        assert builder.result() == Box.create(0, 0, 3, 4, min_z=10, max_z=20)


class TestCalculateBounds:
    def test_nothing_given(self):
        assert BoundsBuilder.calculate_bounds(Coords.XY) is None

    def test_combines_sources(self, square_ring):
        box = BoundsBuilder.calculate_bounds(
            Coords.XY,
            positions=[Position.create(-1, 5)],
            series=square_ring,
            series_array=[PositionSeries.view([7, 1], Coords.XY)],
            boxes=[Box.create(0, -3, 1, 1)],
        )
        assert box == Box.create(-1, -3, 7, 5)
