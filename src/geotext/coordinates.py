"""Position, Box and PositionSeries: the coordinate model read by the writers.

Positions and boxes are immutable values.  A PositionSeries stores its
coordinates in one flat float64 array laid out as x, y, [z], [m] per
position, in the order given by its coordinate type.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Iterator, Sequence

import numpy as np

from geotext.codes import Coords
from geotext.errors import FormatError


@dataclass(frozen=True)
class Position:
    """A position with x, y and optional z and m values.

    Attributes:
        x: Easting or longitude.
        y: Northing or latitude.
        opt_z: Elevation or altitude, None when the position is not 3D.
        opt_m: Measure, None when the position is not measured.
    """

    x: float
    y: float
    opt_z: float | None = None
    opt_m: float | None = None

    @classmethod
    def create(
        cls, x: float, y: float, z: float | None = None, m: float | None = None,
    ) -> Position:
        return cls(
            float(x),
            float(y),
            None if z is None else float(z),
            None if m is None else float(m),
        )

    @classmethod
    def from_coords(cls, coords: Sequence[float], type: Coords | None = None) -> Position:
        """Create a position from a flat sequence of 2 to 4 values.

        Three values are read as x, y, z unless `type` is XYM.

        Raises:
            FormatError: If the sequence holds fewer than 2 or more than 4
                values, or fewer values than `type` requires.
        """
        n = len(coords)
        if n < 2:
            raise FormatError(f"Position needs at least 2 values, got {n}")
        if n > 4:
            raise FormatError(f"Position takes at most 4 values, got {n}")
        if type is None:
            type = Coords.from_dimension(n)
        if n < type.coordinate_dimension:
            raise FormatError(
                f"Position of type {type.name} needs {type.coordinate_dimension} "
                f"values, got {n}"
            )
        z = coords[type.index_for_z] if type.is_3d else None
        m = coords[type.index_for_m] if type.is_measured else None
        return cls.create(coords[0], coords[1], z, m)

    @property
    def z(self) -> float:
        return 0.0 if self.opt_z is None else self.opt_z

    @property
    def m(self) -> float:
        return 0.0 if self.opt_m is None else self.opt_m

    @property
    def is_3d(self) -> bool:
        return self.opt_z is not None

    @property
    def is_measured(self) -> bool:
        return self.opt_m is not None

    @property
    def type(self) -> Coords:
        return Coords.select(self.is_3d, self.is_measured)

    @property
    def values(self) -> tuple[float, ...]:
        """Coordinate values in x, y, [z], [m] order."""
        vals = [self.x, self.y]
        if self.opt_z is not None:
            vals.append(self.opt_z)
        if self.opt_m is not None:
            vals.append(self.opt_m)
        return tuple(vals)


@dataclass(frozen=True)
class Box:
    """An axis aligned bounding box.

    Min values are not required to be less than max values (a box may
    cross the antimeridian), but z and m are present on both corners or
    on neither.
    """

    min_x: float
    min_y: float
    max_x: float
    max_y: float
    min_z: float | None = None
    max_z: float | None = None
    min_m: float | None = None
    max_m: float | None = None

    def __post_init__(self) -> None:
        if (self.min_z is None) != (self.max_z is None):
            raise FormatError("Box needs both min_z and max_z, or neither")
        if (self.min_m is None) != (self.max_m is None):
            raise FormatError("Box needs both min_m and max_m, or neither")

    @classmethod
    def create(
        cls,
        min_x: float,
        min_y: float,
        max_x: float,
        max_y: float,
        min_z: float | None = None,
        max_z: float | None = None,
        min_m: float | None = None,
        max_m: float | None = None,
    ) -> Box:
        def _opt(v):
            return None if v is None else float(v)

        return cls(
            float(min_x), float(min_y), float(max_x), float(max_y),
            _opt(min_z), _opt(max_z), _opt(min_m), _opt(max_m),
        )

    @classmethod
    def from_coords(cls, coords: Sequence[float], type: Coords | None = None) -> Box:
        """Create a box from [minX, minY, (minZ), (minM), maxX, maxY, (maxZ), (maxM)].

        Six values are read as XYZ unless `type` is XYM.

        Raises:
            FormatError: If the sequence length is not 4, 6 or 8, or does
                not match `type`.
        """
        n = len(coords)
        if n not in (4, 6, 8):
            raise FormatError(f"Box needs 4, 6 or 8 values, got {n}")
        if type is None:
            type = Coords.from_dimension(n // 2)
        elif type.coordinate_dimension * 2 != n:
            raise FormatError(
                f"Box of type {type.name} needs {type.coordinate_dimension * 2} "
                f"values, got {n}"
            )
        lo = Position.from_coords(coords[: n // 2], type)
        hi = Position.from_coords(coords[n // 2:], type)
        return cls.from_corners(lo, hi)

    @classmethod
    def from_corners(cls, min: Position, max: Position) -> Box:
        return cls.create(
            min.x, min.y, max.x, max.y,
            min_z=min.opt_z if max.opt_z is not None else None,
            max_z=max.opt_z if min.opt_z is not None else None,
            min_m=min.opt_m if max.opt_m is not None else None,
            max_m=max.opt_m if min.opt_m is not None else None,
        )

    @property
    def is_3d(self) -> bool:
        return self.min_z is not None

    @property
    def is_measured(self) -> bool:
        return self.min_m is not None

    @property
    def type(self) -> Coords:
        return Coords.select(self.is_3d, self.is_measured)

    @property
    def min(self) -> Position:
        return Position(self.min_x, self.min_y, self.min_z, self.min_m)

    @property
    def max(self) -> Position:
        return Position(self.max_x, self.max_y, self.max_z, self.max_m)

    @property
    def values(self) -> tuple[float, ...]:
        """Box values in [minX, minY, (minZ), (minM), maxX, maxY, (maxZ), (maxM)] order."""
        return self.min.values + self.max.values


class PositionSeries:
    """An ordered series of positions stored in one flat coordinate array."""

    def __init__(self, values: np.ndarray, type: Coords = Coords.XY) -> None:
        """Wrap a flat float64 buffer laid out per `type`.

        Raises:
            FormatError: If the buffer length is not a multiple of the
                coordinate dimension of `type`.
        """
        dim = type.coordinate_dimension
        if values.size % dim != 0:
            raise FormatError(
                f"Expected {dim} values per {type.name} position, "
                f"got buffer of length {values.size}"
            )
        self._values = values
        self._type = type

    @classmethod
    def view(cls, values: Iterable[float], type: Coords = Coords.XY) -> PositionSeries:
        """Wrap any flat sequence of numbers, copying it to float64 if needed."""
        return cls(np.asarray(values, dtype=np.float64).ravel(), type)

    @classmethod
    def from_positions(
        cls, positions: Iterable[Position | Sequence[float]], type: Coords | None = None,
    ) -> PositionSeries:
        """Pack positions into a flat buffer.

        When `type` is None the common coordinate type of all positions
        is used; values a position lacks are stored as 0.0.
        """
        from geotext.utils.coord_type import position_array_type

        items = [as_position(p) for p in positions]
        if type is None:
            type = position_array_type(items)
        dim = type.coordinate_dimension
        arr = np.zeros(len(items) * dim, dtype=np.float64)
        for i, pos in enumerate(items):
            base = i * dim
            arr[base] = pos.x
            arr[base + 1] = pos.y
            if type.is_3d:
                arr[base + type.index_for_z] = pos.z
            if type.is_measured:
                arr[base + type.index_for_m] = pos.m
        return cls(arr, type)

    @property
    def type(self) -> Coords:
        return self._type

    @property
    def values(self) -> np.ndarray:
        return self._values

    @property
    def position_count(self) -> int:
        return self._values.size // self._type.coordinate_dimension

    def __len__(self) -> int:
        return self.position_count

    def _at(self, index: int, offset: int) -> float:
        return float(self._values[index * self._type.coordinate_dimension + offset])

    def x(self, index: int) -> float:
        return self._at(index, 0)

    def y(self, index: int) -> float:
        return self._at(index, 1)

    def z(self, index: int) -> float:
        """The z value at `index`, 0.0 if the series is not 3D."""
        return self._at(index, 2) if self._type.is_3d else 0.0

    def m(self, index: int) -> float:
        """The m value at `index`, 0.0 if the series is not measured."""
        offset = self._type.index_for_m
        return self._at(index, offset) if offset is not None else 0.0

    def __getitem__(self, index: int) -> Position:
        count = self.position_count
        if index < 0:
            index += count
        if not 0 <= index < count:
            raise IndexError(f"Position index {index} out of range for {count} positions")
        return Position(
            self.x(index),
            self.y(index),
            self.z(index) if self._type.is_3d else None,
            self.m(index) if self._type.is_measured else None,
        )

    def __iter__(self) -> Iterator[Position]:
        for i in range(self.position_count):
            yield self[i]

    @property
    def positions(self) -> Iterator[Position]:
        return iter(self)

    @property
    def is_closed(self) -> bool:
        """True when there are positions and the first equals the last."""
        count = self.position_count
        if count == 0:
            return False
        return self[0] == self[count - 1]

    def __repr__(self) -> str:
        return f"PositionSeries(type={self._type.name}, positions={self.position_count})"


def as_position(value: Position | Sequence[float]) -> Position:
    """Return `value` as a Position, reading plain sequences with Position.from_coords."""
    if isinstance(value, Position):
        return value
    return Position.from_coords(value)


def as_series(value: PositionSeries | Iterable[Position | Sequence[float]]) -> PositionSeries:
    """Return `value` as a PositionSeries, packing plain position sequences."""
    if isinstance(value, PositionSeries):
        return value
    return PositionSeries.from_positions(value)
