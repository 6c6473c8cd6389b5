"""Coordinate reference system identifiers.

Only a small built-in registry is known: OGC CRS84/CRS84h, EPSG:4326,
EPSG:4258, EPSG:3857 and EPSG:3395.  Unknown identifiers have no axis
order and are never swapped.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from geotext.codes import AxisOrder, GeoRepresentation

_EPSG_PREFIX = "EPSG:"
_OPENGIS_EPSG0_PREFIX = "http://www.opengis.net/def/crs/EPSG/0/"

_CRS84_ID = "http://www.opengis.net/def/crs/OGC/1.3/CRS84"
_CRS84H_ID = "http://www.opengis.net/def/crs/OGC/1.3/CRS84h"

_AXIS_ORDERS: dict[str, AxisOrder] = {
    _CRS84_ID: AxisOrder.XY,
    _CRS84H_ID: AxisOrder.XY,
    f"{_OPENGIS_EPSG0_PREFIX}4326": AxisOrder.YX,
    f"{_OPENGIS_EPSG0_PREFIX}4258": AxisOrder.YX,
    f"{_OPENGIS_EPSG0_PREFIX}3857": AxisOrder.XY,
    f"{_OPENGIS_EPSG0_PREFIX}3395": AxisOrder.XY,
}

# WGS84 based geographic systems; EPSG:4258 (ETRS89) is geographic too
_WGS84_GEOGRAPHIC = {_CRS84_ID, _CRS84H_ID, f"{_OPENGIS_EPSG0_PREFIX}4326"}
_OTHER_GEOGRAPHIC = {f"{_OPENGIS_EPSG0_PREFIX}4258"}


def _epsg_code(id: str, prefix: str) -> int | None:
    if id.startswith(prefix) and len(id) > len(prefix):
        try:
            return int(id[len(prefix):])
        except ValueError:
            return None
    return None


@dataclass(frozen=True)
class CoordRefSys:
    """An immutable coordinate reference system identifier."""

    id: str

    CRS84: ClassVar[CoordRefSys]
    CRS84H: ClassVar[CoordRefSys]
    EPSG_4326: ClassVar[CoordRefSys]
    EPSG_4258: ClassVar[CoordRefSys]
    EPSG_3857: ClassVar[CoordRefSys]
    EPSG_3395: ClassVar[CoordRefSys]

    @classmethod
    def normalized(cls, id: str) -> CoordRefSys:
        """Create from an id, expanding "EPSG:n" to the OGC URI form."""
        code = _epsg_code(id, _EPSG_PREFIX)
        if code is not None:
            return cls(f"{_OPENGIS_EPSG0_PREFIX}{code}")
        return cls(id)

    @property
    def axis_order(self) -> AxisOrder | None:
        return _AXIS_ORDERS.get(self.id)

    @property
    def epsg(self) -> str | None:
        """The short "EPSG:n" form, or None if this is not an EPSG id."""
        if _epsg_code(self.id, _EPSG_PREFIX) is not None:
            return self.id
        code = _epsg_code(self.id, _OPENGIS_EPSG0_PREFIX)
        return f"{_EPSG_PREFIX}{code}" if code is not None else None

    def is_geographic(
        self, wgs84: bool | None = None, order: AxisOrder | None = None,
    ) -> bool:
        """Whether this is a known geographic CRS.

        Args:
            wgs84: When given, also require (True) or reject (False) WGS84.
            order: When given, also require this axis order.
        """
        if self.id in _WGS84_GEOGRAPHIC:
            id_ok = wgs84 is None or wgs84
        elif self.id in _OTHER_GEOGRAPHIC:
            id_ok = wgs84 is None or not wgs84
        else:
            id_ok = False
        if order is not None:
            return id_ok and order is self.axis_order
        return id_ok

    def swap_xy(self, logic: GeoRepresentation | None = None) -> bool:
        """Whether x and y must be swapped when writing text for this CRS.

        Under CRS_AUTHORITY logic (the default) data in lat-lon or
        northing-easting order is swapped.  GEOJSON_STRICT never swaps.
        """
        if (logic or GeoRepresentation.CRS_AUTHORITY) is GeoRepresentation.GEOJSON_STRICT:
            return False
        return self.axis_order is AxisOrder.YX

    def __str__(self) -> str:
        return self.id


CoordRefSys.CRS84 = CoordRefSys(_CRS84_ID)
CoordRefSys.CRS84H = CoordRefSys(_CRS84H_ID)
CoordRefSys.EPSG_4326 = CoordRefSys(f"{_OPENGIS_EPSG0_PREFIX}4326")
CoordRefSys.EPSG_4258 = CoordRefSys(f"{_OPENGIS_EPSG0_PREFIX}4258")
CoordRefSys.EPSG_3857 = CoordRefSys(f"{_OPENGIS_EPSG0_PREFIX}3857")
CoordRefSys.EPSG_3395 = CoordRefSys(f"{_OPENGIS_EPSG0_PREFIX}3395")
