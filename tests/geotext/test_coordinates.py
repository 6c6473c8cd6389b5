"""Tests for Position, Box and PositionSeries."""

from __future__ import annotations

import numpy as np
import pytest

from geotext.codes import Coords
from geotext.coordinates import Box, Position, PositionSeries, as_position, as_series
from geotext.errors import FormatError

pytestmark = pytest.mark.unit


class TestPosition:
    def test_create_converts_to_float(self):
        pos = Position.create(1, 2, z=3)
        assert pos.values == (1.0, 2.0, 3.0)
        assert pos.type is Coords.XYZ

    def test_missing_z_and_m_read_as_zero(self, xym_position):
        assert xym_position.z == 0.0
        assert xym_position.m == 4.0
        assert not xym_position.is_3d
        assert xym_position.is_measured
        assert xym_position.type is Coords.XYM

    def test_from_coords_three_values_is_xyz(self):
        assert Position.from_coords([1, 2, 3]).opt_z == 3.0

    def test_from_coords_three_values_as_xym(self):
        pos = Position.from_coords([1, 2, 3], Coords.XYM)
        assert pos.opt_z is None
        assert pos.opt_m == 3.0

    def test_from_coords_xyzm(self):
        assert Position.from_coords([1, 2, 3, 4]).values == (1.0, 2.0, 3.0, 4.0)

    def test_from_coords_too_short(self):
        with pytest.raises(FormatError, match="at least 2 values, got 1"):
            Position.from_coords([1])

    def test_from_coords_too_long(self):
        with pytest.raises(FormatError, match="at most 4 values, got 5"):
            Position.from_coords([1, 2, 3, 4, 5])

    def test_from_coords_short_for_type(self):
        with pytest.raises(FormatError, match="XYZM needs 4 values, got 3"):
            Position.from_coords([1, 2, 3], Coords.XYZM)


class TestBox:
    def test_from_coords_xyz(self, xyz_box):
        box = Box.from_coords([1, 2, 10, 3, 4, 20])
        assert box == xyz_box
        assert box.type is Coords.XYZ
        assert box.values == (1.0, 2.0, 10.0, 3.0, 4.0, 20.0)

    def test_from_coords_xym(self):
        box = Box.from_coords([1, 2, 5, 3, 4, 6], Coords.XYM)
        assert box.min_m == 5.0
        assert box.max_m == 6.0
        assert box.min_z is None

    @pytest.mark.parametrize("length", [0, 2, 3, 5, 7, 9])
    def test_from_coords_bad_length(self, length):
        with pytest.raises(FormatError, match=f"4, 6 or 8 values, got {length}"):
            Box.from_coords([0.0] * length)

    def test_from_coords_length_does_not_match_type(self):
        with pytest.raises(FormatError, match="XYZ needs 6 values, got 4"):
            Box.from_coords([0, 0, 1, 1], Coords.XYZ)

    def test_unpaired_z_rejected(self):
        with pytest.raises(FormatError):
            Box(0.0, 0.0, 1.0, 1.0, min_z=1.0)

    def test_corners(self, xyz_box):
        assert xyz_box.min == Position(1.0, 2.0, 10.0)
        assert xyz_box.max == Position(3.0, 4.0, 20.0)


class TestPositionSeries:
    """Flat float64 storage and positional access."""

    def test_view(self):
        series = PositionSeries.view([1, 2, 3, 4, 5, 6], Coords.XYZ)
        assert series.position_count == 2
        assert len(series) == 2
        assert series.values.dtype == np.float64
        assert series[1] == Position(4.0, 5.0, 6.0)

    def test_view_rejects_partial_position(self):
        with pytest.raises(FormatError, match="Expected 3 values per XYM position, got buffer of length 4"):
            PositionSeries.view([1, 2, 3, 4], Coords.XYM)

    def test_constructor_rejects_partial_position(self):
        with pytest.raises(FormatError, match="Expected 2 values per XY position, got buffer of length 3"):
            PositionSeries(np.array([1.0, 2.0, 3.0]), Coords.XY)

    def test_m_accessor_for_xym(self):
        series = PositionSeries.view([1, 2, 7], Coords.XYM)
        assert series.m(0) == 7.0
        assert series.z(0) == 0.0

    def test_from_positions_uses_common_type(self):
        series = PositionSeries.from_positions([[1, 2, 3], [4, 5]])
        assert series.type is Coords.XY
        assert series.values.tolist() == [1.0, 2.0, 4.0, 5.0]

    def test_from_positions_with_type_fills_zeros(self):
        series = PositionSeries.from_positions([Position(1.0, 2.0)], Coords.XYZM)
        assert series.values.tolist() == [1.0, 2.0, 0.0, 0.0]

    def test_index_out_of_range(self):
        series = PositionSeries.view([1, 2], Coords.XY)
        assert series[-1] == Position(1.0, 2.0)
        with pytest.raises(IndexError):
            series[1]

    def test_is_closed(self, square_ring):
        assert square_ring.is_closed
        assert not PositionSeries.view([0, 0, 1, 1], Coords.XY).is_closed
        assert not PositionSeries.view([], Coords.XY).is_closed

    def test_iteration(self, square_ring):
        assert [p.x for p in square_ring] == [0.0, 2.0, 2.0, 0.0, 0.0]
        assert list(square_ring.positions) == list(square_ring)

    def test_as_helpers(self, square_ring):
        assert as_series(square_ring) is square_ring
        assert as_series([[0, 0], [1, 1]]).position_count == 2
        assert as_position([1, 2]) == Position(1.0, 2.0)
