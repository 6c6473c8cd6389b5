"""TextWriter -- the state machine shared by every text rendering.

The writer keeps three stacks:

    container kinds   ROOT, then whatever is open (innermost last)
    has-items flags   one per container, drives separator placement
    coordinate types  the type pinned by the nearest enclosing geometry,
                      or None when values decide (z/m present => printed)

Containers and flags are pushed and popped together.  After any top-level
call the writer is back at the single ROOT frame with no pinned types.

Leaf tokens come from a Lexicon: JSON_LEXICON gives the "default"
rendering (`[x,y],[x,y]`), WKT_LEXICON the WKT-like one (`x y,x y`).
GeoJSON and strict WKT subclass TextWriter to add object keys and
geometry keywords.
"""

from __future__ import annotations

import io
from contextlib import AbstractContextManager, contextmanager, nullcontext
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, Iterable, Iterator, Sequence, TextIO

from geotext.codes import Coords, GeoRepresentation, Geom
from geotext.coordinates import Box, Position, PositionSeries, as_position, as_series
from geotext.crs import CoordRefSys
from geotext.errors import WriterStateError
from geotext.utils.coord_type import (
    position_array_type,
    series_array_array_type,
    series_array_type,
)
from geotext.utils.num import format_num

PositionLike = Position | Sequence[float]
SeriesLike = PositionSeries | Iterable[PositionLike]

# Callback receiving the writer, used for geometry collections and features
WriteContent = Callable[["TextWriter"], Any]


def _non_empty(series: Iterable[PositionSeries]) -> list[PositionSeries]:
    """Series holding at least one position; empty rings and parts are skipped."""
    return [s for s in series if s.position_count]


class Container(Enum):
    """Kind of structural context currently open on a writer."""
    ROOT = "root"
    FEATURE_COLLECTION = "feature_collection"
    FEATURE = "feature"
    OBJECT_ARRAY = "object_array"
    GEOMETRY = "geometry"
    COORD_ARRAY = "coord_array"
    PROPERTY_MAP = "property_map"
    PROPERTY_ARRAY = "property_array"


@dataclass(frozen=True)
class Lexicon:
    """Leaf tokens and rules of one text rendering.

    Attributes:
        name: Short name used in log messages.
        array_open: Opens coordinate and object arrays.
        array_close: Closes coordinate and object arrays.
        coord_separator: Separates values within one position.
        item_separator: Separates sibling items.
        swaps_axes: Whether x and y may be swapped for the CRS.
        bare_points_in_arrays: Points directly inside a coordinate array
            are written without their own open/close tokens.
        pad_z_for_pinned_m: With a pinned measured type that is not 3D,
            still write a z slot so m stays the 4th value.
    """

    name: str
    array_open: str
    array_close: str
    coord_separator: str
    item_separator: str = ","
    swaps_axes: bool = False
    bare_points_in_arrays: bool = False
    pad_z_for_pinned_m: bool = True


JSON_LEXICON = Lexicon(
    name="json",
    array_open="[",
    array_close="]",
    coord_separator=",",
    swaps_axes=True,
)

WKT_LEXICON = Lexicon(
    name="wkt",
    array_open="(",
    array_close=")",
    coord_separator=" ",
    bare_points_in_arrays=True,
    pad_z_for_pinned_m=False,
)


class TextWriter:
    """Writes coordinates and geometries as text into a sink.

    Args:
        lexicon: Tokens of the rendering (JSON_LEXICON or WKT_LEXICON).
        sink: Append-only text destination; a new StringIO if None.
        decimals: Fixed fraction digits, or None for the shortest form.
        compact_nums: Write whole numbers without a fractional part.
        crs: Reference system of the data, used to decide axis swap.
        swap_xy: Force (True) or disable (False) axis swap; None lets
            `crs` decide.  Ignored by renderings that never swap.
        crs_logic: How `crs` decides axis swap.
    """

    def __init__(
        self,
        lexicon: Lexicon = JSON_LEXICON,
        sink: TextIO | None = None,
        decimals: int | None = None,
        compact_nums: bool = False,
        crs: CoordRefSys | None = None,
        swap_xy: bool | None = None,
        crs_logic: GeoRepresentation | None = None,
    ) -> None:
        self.lexicon = lexicon
        self.decimals = decimals
        self.compact_nums = compact_nums
        self.crs = crs
        self._sink = sink if sink is not None else io.StringIO()
        self._swap_xy = swap_xy
        self._crs_logic = crs_logic
        self._print_measured = True

        self._containers: list[Container] = [Container.ROOT]
        self._has_items: list[bool] = [False]
        self._coord_types: list[Coords | None] = []

    # ------------------------------------------------------------------
    # State stacks
    # ------------------------------------------------------------------

    @property
    def container_depth(self) -> int:
        """Number of open containers, 1 when only ROOT is open."""
        return len(self._containers)

    @property
    def coord_type_depth(self) -> int:
        return len(self._coord_types)

    def _start_container(self, kind: Container) -> None:
        self._has_items.append(False)
        self._containers.append(kind)

    def _end_container(self) -> None:
        if len(self._containers) <= 1:
            raise WriterStateError("Cannot close the root container")
        self._has_items.pop()
        self._containers.pop()

    @contextmanager
    def _container(self, kind: Container) -> Iterator[None]:
        self._start_container(kind)
        try:
            yield
        finally:
            self._end_container()

    def _start_coord_type(self, coord_type: Coords | None) -> None:
        self._coord_types.append(coord_type)

    def _end_coord_type(self) -> None:
        if not self._coord_types:
            raise WriterStateError("Coordinate type stack is empty")
        self._coord_types.pop()

    @contextmanager
    def _coord_type(self, coord_type: Coords | None) -> Iterator[None]:
        self._start_coord_type(coord_type)
        try:
            yield
        finally:
            self._end_coord_type()

    def _pinned_coord_type(self, coord_type: Coords | None) -> AbstractContextManager[None]:
        """Pin `coord_type` if given, otherwise leave the stack untouched."""
        if coord_type is None:
            return nullcontext()
        return self._coord_type(coord_type)

    @property
    def _active_coord_type(self) -> Coords | None:
        return self._coord_types[-1] if self._coord_types else None

    @property
    def _at_feature(self) -> bool:
        return self._containers[-1] is Container.FEATURE

    @property
    def _at_feature_collection(self) -> bool:
        last = self._containers[-1]
        if last is Container.FEATURE_COLLECTION:
            return True
        return (
            last is Container.OBJECT_ARRAY
            and len(self._containers) >= 2
            and self._containers[-2] is Container.FEATURE_COLLECTION
        )

    @property
    def _not_at_root(self) -> bool:
        return len(self._has_items) > 1

    @property
    def _at_root_or_at_coord_array(self) -> bool:
        return (
            len(self._containers) == 1
            or self._containers[-1] is Container.COORD_ARRAY
        )

    def _mark_item(self) -> bool:
        """Mark an item in the innermost container.

        Returns True if the container already had an item, i.e. a
        separator must be written before this one.
        """
        had_items = self._has_items[-1]
        if not had_items:
            self._has_items[-1] = True
        return had_items

    def _write(self, text: str) -> None:
        self._sink.write(text)

    def _separate(self) -> None:
        if self._mark_item():
            self._write(self.lexicon.item_separator)

    @contextmanager
    def _array(self, kind: Container) -> Iterator[None]:
        self._separate()
        if self._not_at_root:
            self._write(self.lexicon.array_open)
        with self._container(kind):
            yield
        if self._not_at_root:
            self._write(self.lexicon.array_close)

    def _object_array(self) -> AbstractContextManager[None]:
        return self._array(Container.OBJECT_ARRAY)

    def _coord_array(self) -> AbstractContextManager[None]:
        return self._array(Container.COORD_ARRAY)

    # ------------------------------------------------------------------
    # Geometry hooks
    # ------------------------------------------------------------------

    def _geometry_before_coordinates(
        self,
        geom: Geom,
        coord_type: Coords | None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> bool:
        """Open a geometry; returns False to skip writing its coordinates."""
        self._start_coord_type(coord_type)
        return True

    def _geometry_after_coordinates(self) -> None:
        self._end_coord_type()

    @contextmanager
    def _geometry(
        self,
        geom: Geom,
        coord_type: Coords | None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> Iterator[bool]:
        if not self._geometry_before_coordinates(geom, coord_type, name, bounds):
            yield False
            return
        try:
            yield True
        finally:
            self._geometry_after_coordinates()

    # ------------------------------------------------------------------
    # Geometry content
    # ------------------------------------------------------------------

    def point(
        self,
        position: PositionLike,
        name: str | None = None,
        coord_type: Coords | None = None,
    ) -> None:
        pos = as_position(position)
        with self._geometry(Geom.POINT, coord_type or pos.type, name) as proceed:
            if proceed:
                self._coord_position(pos)

    def line_string(
        self,
        chain: SeriesLike,
        name: str | None = None,
        coord_type: Coords | None = None,
        bounds: Box | None = None,
    ) -> None:
        series = as_series(chain)
        if not series.position_count:
            self.empty_geometry(Geom.LINE_STRING, name)
            return
        with self._geometry(
            Geom.LINE_STRING, coord_type or series.type, name, bounds,
        ) as proceed:
            if proceed:
                self._coord_series(series)

    def polygon(
        self,
        rings: Iterable[SeriesLike],
        name: str | None = None,
        coord_type: Coords | None = None,
        bounds: Box | None = None,
    ) -> None:
        ring_list = _non_empty(as_series(r) for r in rings)
        if not ring_list:
            self.empty_geometry(Geom.POLYGON, name)
            return
        with self._geometry(
            Geom.POLYGON, coord_type or series_array_type(ring_list), name, bounds,
        ) as proceed:
            if proceed:
                with self._coord_array():
                    for ring in ring_list:
                        self._coord_series(ring)

    def multi_point(
        self,
        points: Iterable[PositionLike],
        name: str | None = None,
        coord_type: Coords | None = None,
        bounds: Box | None = None,
    ) -> None:
        positions = [as_position(p) for p in points]
        if not positions:
            self.empty_geometry(Geom.MULTI_POINT, name)
            return
        with self._geometry(
            Geom.MULTI_POINT, coord_type or position_array_type(positions), name, bounds,
        ) as proceed:
            if proceed:
                with self._coord_array():
                    for pos in positions:
                        self._coord_position(pos)

    def multi_line_string(
        self,
        line_strings: Iterable[SeriesLike],
        name: str | None = None,
        coord_type: Coords | None = None,
        bounds: Box | None = None,
    ) -> None:
        chains = _non_empty(as_series(c) for c in line_strings)
        if not chains:
            self.empty_geometry(Geom.MULTI_LINE_STRING, name)
            return
        with self._geometry(
            Geom.MULTI_LINE_STRING, coord_type or series_array_type(chains), name, bounds,
        ) as proceed:
            if proceed:
                with self._coord_array():
                    for chain in chains:
                        self._coord_series(chain)

    def multi_polygon(
        self,
        polygons: Iterable[Iterable[SeriesLike]],
        name: str | None = None,
        coord_type: Coords | None = None,
        bounds: Box | None = None,
    ) -> None:
        polys = [
            rings for rings in (_non_empty(as_series(r) for r in p) for p in polygons)
            if rings
        ]
        if not polys:
            self.empty_geometry(Geom.MULTI_POLYGON, name)
            return
        with self._geometry(
            Geom.MULTI_POLYGON, coord_type or series_array_array_type(polys), name, bounds,
        ) as proceed:
            if proceed:
                with self._coord_array():
                    for rings in polys:
                        with self._coord_array():
                            for ring in rings:
                                self._coord_series(ring)

    def geometry_collection(
        self,
        geometries: WriteContent,
        type: Coords | None = None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> None:
        """Write a collection; `geometries` is called with this writer."""
        with self._pinned_coord_type(type):
            with self._object_array():
                geometries(self)

    def empty_geometry(self, geom: Geom, name: str | None = None) -> None:
        """Write a geometry without coordinates (nothing in this rendering)."""

    # ------------------------------------------------------------------
    # Coordinate content
    # ------------------------------------------------------------------

    def position(self, position: PositionLike) -> None:
        pos = as_position(position)
        with self._coord_type(pos.type):
            self._coord_position(pos)

    def positions(self, positions: Iterable[PositionLike]) -> None:
        with self._coord_array():
            for pos in positions:
                self._coord_position(as_position(pos))

    def bounds(self, bounds: Box) -> None:
        """Write a box as its min and max corner positions."""
        with self._coord_type(bounds.type):
            self._separate()
            not_at_root = self._not_at_root
            if not_at_root:
                self._write(self.lexicon.array_open)
            self._print_point(bounds.min_x, bounds.min_y, bounds.min_z, bounds.min_m)
            self._write(self.lexicon.item_separator)
            self._print_point(bounds.max_x, bounds.max_y, bounds.max_z, bounds.max_m)
            if not_at_root:
                self._write(self.lexicon.array_close)

    # ------------------------------------------------------------------
    # Point emitter
    # ------------------------------------------------------------------

    def _coord_series(self, series: PositionSeries) -> None:
        with self._coord_array():
            for pos in series:
                self._coord_position(pos)

    def _coord_position(self, pos: Position) -> None:
        self._coord_point(pos.x, pos.y, pos.opt_z, pos.opt_m)

    def _coord_point(
        self, x: float, y: float, z: float | None = None, m: float | None = None,
    ) -> None:
        self._separate()
        if self.lexicon.bare_points_in_arrays:
            wrap = not self._at_root_or_at_coord_array
        else:
            wrap = self._not_at_root
        if wrap:
            self._write(self.lexicon.array_open)
        self._print_point(x, y, z, m)
        if wrap:
            self._write(self.lexicon.array_close)

    @property
    def _swaps_xy(self) -> bool:
        if not self.lexicon.swaps_axes:
            return False
        if self._swap_xy is not None:
            return self._swap_xy
        return self.crs is not None and self.crs.swap_xy(self._crs_logic)

    def _print_point(
        self, x: float, y: float, z: float | None, m: float | None,
    ) -> None:
        active = self._active_coord_type
        if active is not None and not self.lexicon.pad_z_for_pinned_m:
            # the pinned type alone decides, as with WKT Z/M/ZM specifiers
            print_m = self._print_measured and active.is_measured
            print_z = active.is_3d
        else:
            # m is the 4th value, so printing m needs a z slot too
            print_m = self._print_measured and (
                active.is_measured if active is not None else m is not None
            )
            print_z = print_m or (active.is_3d if active is not None else z is not None)
        if active is None or active.is_3d:
            z_value = 0.0 if z is None else z
        else:
            z_value = 0.0

        if self._swaps_xy:
            x, y = y, x
        values = [x, y]
        if print_z:
            values.append(z_value)
        if print_m:
            values.append(0.0 if m is None else m)
        self._write(self.lexicon.coord_separator.join(
            format_num(v, self.decimals, self.compact_nums) for v in values
        ))

    # ------------------------------------------------------------------
    # Output
    # ------------------------------------------------------------------

    def to_text(self) -> str:
        """The text written so far (the sink must support getvalue())."""
        getvalue = getattr(self._sink, "getvalue", None)
        if getvalue is None:
            raise TypeError(
                f"Sink {type(self._sink).__name__} cannot be read back; "
                "read the text from the sink directly"
            )
        return getvalue()

    def to_bytes(self) -> bytes:
        return self.to_text().encode("utf-8")

    def __str__(self) -> str:
        return self.to_text()
