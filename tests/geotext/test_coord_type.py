"""Tests for coordinate type resolution."""

from __future__ import annotations

import pytest

from geotext.codes import Coords
from geotext.coordinates import Position, PositionSeries
from geotext.utils.coord_type import (
    position_array_type,
    resolve_coord_type,
    series_array_array_type,
    series_array_type,
)

pytestmark = pytest.mark.unit


class TestResolveCoordType:
    """3D and measured only when every element is."""

    def test_nothing_is_xy(self):
        assert resolve_coord_type() is Coords.XY
        assert resolve_coord_type(collection=[]) is Coords.XY

    def test_item_only(self):
        assert resolve_coord_type(Coords.XYZM) is Coords.XYZM

    def test_item_with_empty_collection_keeps_item(self):
        assert resolve_coord_type(Coords.XYZ, []) is Coords.XYZ

    def test_narrows_to_common_type(self):
        assert resolve_coord_type(collection=[Coords.XYZM, Coords.XYZ]) is Coords.XYZ
        assert resolve_coord_type(collection=[Coords.XYZ, Coords.XYM]) is Coords.XY
        assert resolve_coord_type(Coords.XYM, [Coords.XYZM]) is Coords.XYM

    def test_short_circuits_at_xy(self):
        def elements():
            yield Coords.XY
            raise AssertionError("collection read past an XY element")

        assert resolve_coord_type(collection=elements()) is Coords.XY

    def test_reads_type_attribute(self):
        positions = [Position.create(1, 2, 3, 4), Position.create(1, 2, m=4)]
        assert position_array_type(positions) is Coords.XYM


class TestSeriesTypes:
    def test_series_array(self):
        rings = [
            PositionSeries.view([0, 0, 1, 1, 1, 1], Coords.XYZ),
            PositionSeries.view([0, 0, 1, 1, 1, 1, 1, 1], Coords.XYZM),
        ]
        assert series_array_type(rings) is Coords.XYZ

    def test_series_array_array(self):
        polygons = [
            [PositionSeries.view([0, 0, 0], Coords.XYM)],
            [PositionSeries.view([0, 0, 0, 0], Coords.XYZM)],
        ]
        assert series_array_array_type(polygons) is Coords.XYM
        assert series_array_array_type([]) is Coords.XY

    def test_polygon_without_rings_adds_no_constraint(self):
        ring = PositionSeries.view([0, 0, 1, 1, 0, 1, 0, 0, 1], Coords.XYZ)
        assert series_array_array_type([[ring], []]) is Coords.XYZ
        assert series_array_array_type([[], []]) is Coords.XY

    def test_mixed_list_examples(self):
        assert resolve_coord_type(collection=[Coords.XY, Coords.XYZ, Coords.XYM]) is Coords.XY
        assert resolve_coord_type(collection=[Coords.XYZ, Coords.XYZ]) is Coords.XYZ
