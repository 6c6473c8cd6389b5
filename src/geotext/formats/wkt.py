"""Well-known text (WKT) writer.

WktTextWriter extends the WKT-like rendering (`x y,x y` inside
parentheses) with geometry keywords, Z/M/ZM dimension specifiers and the
EMPTY keyword:

    POINT (10 20)
    POINT Z (1 2 3)
    POLYGON ((0 0,2 0,2 2,0 2,0 0))
    LINESTRING EMPTY
    GEOMETRYCOLLECTION (POINT (1 2),LINESTRING (1 2,3 4))

WKT has no axis swap, so a CRS given to this writer is ignored.
"""

from __future__ import annotations

import io
import logging
from typing import TextIO

from geotext.codes import Coords, Geom
from geotext.coordinates import Box, Position, PositionSeries
from geotext.formats.base import WKT_LEXICON, Container, TextWriter, WriteContent

logger = logging.getLogger(__name__)


def _mid(lo: float | None, hi: float | None) -> float | None:
    if lo is None or hi is None:
        return None
    return 0.5 * lo + 0.5 * hi


class WktTextWriter(TextWriter):
    """Writes geometries as WKT text.

    Whole numbers are written without a fractional part unless
    `compact_nums` is False.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        decimals: int | None = None,
        compact_nums: bool = True,
    ) -> None:
        super().__init__(
            WKT_LEXICON, sink=sink, decimals=decimals, compact_nums=compact_nums,
        )

    def _write_keyword(self, geom: Geom, coord_type: Coords | None) -> None:
        self._write(geom.wkt_name)
        specifier = coord_type.wkt_specifier if coord_type is not None else None
        if specifier:
            self._write(f" {specifier}")

    def _geometry_before_coordinates(
        self,
        geom: Geom,
        coord_type: Coords | None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> bool:
        self._separate()
        self._write_keyword(geom, coord_type)
        self._write(" ")
        self._start_container(Container.GEOMETRY)
        self._start_coord_type(coord_type)
        return True

    def _geometry_after_coordinates(self) -> None:
        self._end_coord_type()
        self._end_container()

    def geometry_collection(
        self,
        geometries: WriteContent,
        type: Coords | None = None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> None:
        """Write a collection; one without members is written as EMPTY.

        Members go to a scratch buffer until it is known whether there
        are any.
        """
        self._separate()
        self._write_keyword(Geom.GEOMETRY_COLLECTION, type)
        with self._container(Container.GEOMETRY), self._pinned_coord_type(type):
            sink, self._sink = self._sink, io.StringIO()
            try:
                with self._container(Container.OBJECT_ARRAY):
                    geometries(self)
                members = self._sink.getvalue()
            finally:
                self._sink = sink
        self._write(f" ({members})" if members else " EMPTY")

    def empty_geometry(self, geom: Geom, name: str | None = None) -> None:
        self._separate()
        self._write(f"{geom.wkt_name} EMPTY")

    def bounds(self, bounds: Box) -> None:
        """Write a box as a closed POLYGON ring.

        The corners not given by the box take the mid z and m values.
        """
        mid_z = _mid(bounds.min_z, bounds.max_z)
        mid_m = _mid(bounds.min_m, bounds.max_m)
        ring = PositionSeries.from_positions(
            [
                bounds.min,
                Position(bounds.max_x, bounds.min_y, mid_z, mid_m),
                bounds.max,
                Position(bounds.min_x, bounds.max_y, mid_z, mid_m),
                bounds.min,
            ],
            type=bounds.type,
        )
        logger.debug(f"Writing {bounds.type.name} box as a POLYGON")
        self.polygon([ring], coord_type=bounds.type)
