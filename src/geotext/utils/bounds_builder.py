"""BoundsBuilder -- running min/max bounds over positions and boxes.

NaN values are treated as absent: a NaN never replaces a running value
and a real value always replaces a running NaN.
"""

from __future__ import annotations

import math
from typing import Iterable

from geotext.codes import Coords
from geotext.coordinates import Box, Position, PositionSeries


def _min(current: float, value: float) -> float:
    if math.isnan(value):
        return current
    return value if math.isnan(current) else min(current, value)


def _max(current: float, value: float) -> float:
    if math.isnan(value):
        return current
    return value if math.isnan(current) else max(current, value)


class BoundsBuilder:
    """Accumulates bounds for a target coordinate type.

    z is tracked only when `type` is 3D and m only when it is measured;
    a missing z or m counts as 0.0.
    """

    def __init__(self, type: Coords) -> None:
        self.type = type
        self._min_x = math.nan
        self._min_y = math.nan
        self._min_z = math.nan
        self._min_m = math.nan
        self._max_x = math.nan
        self._max_y = math.nan
        self._max_z = math.nan
        self._max_m = math.nan

    @staticmethod
    def calculate_bounds(
        type: Coords,
        positions: Iterable[Position] | None = None,
        series: PositionSeries | None = None,
        series_array: Iterable[PositionSeries] | None = None,
        boxes: Iterable[Box] | None = None,
    ) -> Box | None:
        """Bounds of everything given, or None if nothing was given."""
        builder = BoundsBuilder(type)
        if positions is not None:
            for pos in positions:
                builder.add_position(pos)
        if series is not None:
            builder.add_position_series(series)
        if series_array is not None:
            for s in series_array:
                builder.add_position_series(s)
        if boxes is not None:
            for box in boxes:
                builder.add_bounds(box)
        return builder.result()

    def add_point(
        self, x: float, y: float, z: float | None = None, m: float | None = None,
    ) -> None:
        self._min_x = _min(self._min_x, x)
        self._min_y = _min(self._min_y, y)
        self._max_x = _max(self._max_x, x)
        self._max_y = _max(self._max_y, y)
        if self.type.is_3d:
            zv = 0.0 if z is None else z
            self._min_z = _min(self._min_z, zv)
            self._max_z = _max(self._max_z, zv)
        if self.type.is_measured:
            mv = 0.0 if m is None else m
            self._min_m = _min(self._min_m, mv)
            self._max_m = _max(self._max_m, mv)

    def add_position(self, position: Position) -> None:
        self.add_point(position.x, position.y, position.opt_z, position.opt_m)

    def add_position_series(self, series: PositionSeries) -> None:
        has_z = series.type.is_3d
        has_m = series.type.is_measured
        for i in range(series.position_count):
            self.add_point(
                series.x(i),
                series.y(i),
                series.z(i) if has_z else None,
                series.m(i) if has_m else None,
            )

    def add_bounds(self, bounds: Box) -> None:
        """Add a box as its two corner points."""
        self.add_position(bounds.min)
        self.add_position(bounds.max)

    @property
    def box_coords(self) -> list[float] | None:
        """[minX, minY, (minZ), (minM), maxX, maxY, (maxZ), (maxM)], or None.

        None until at least one finite x and y have been added.
        """
        if any(math.isnan(v) for v in (self._min_x, self._min_y, self._max_x, self._max_y)):
            return None
        lo = [self._min_x, self._min_y]
        hi = [self._max_x, self._max_y]
        if self.type.is_3d:
            lo.append(self._min_z)
            hi.append(self._max_z)
        if self.type.is_measured:
            lo.append(self._min_m)
            hi.append(self._max_m)
        return lo + hi

    def result(self) -> Box | None:
        coords = self.box_coords
        if coords is None:
            return None
        return Box.from_coords(coords, self.type)
