"""Enumerated codes shared by the coordinate model and the text writers.

Coords            -- coordinate type (XY, XYZ, XYM, XYZM)
Geom              -- geometry type with its WKT and GeoJSON names
AxisOrder         -- axis order of a coordinate reference system
GeoRepresentation -- how a CRS axis order maps to external text data
"""

from __future__ import annotations

from enum import Enum

from geotext.errors import FormatError


class Coords(Enum):
    """Coordinate type: which of z and m a position carries."""

    XY = ("xy", False, False)
    XYZ = ("xyz", True, False)
    XYM = ("xym", False, True)
    XYZM = ("xyzm", True, True)

    def __init__(self, code: str, is_3d: bool, is_measured: bool) -> None:
        self.code = code
        self.is_3d = is_3d
        self.is_measured = is_measured

    @property
    def coordinate_dimension(self) -> int:
        """Number of values per position: 2, 3, 3 or 4."""
        return 2 + int(self.is_3d) + int(self.is_measured)

    @property
    def spatial_dimension(self) -> int:
        return 3 if self.is_3d else 2

    @property
    def wkt_specifier(self) -> str | None:
        """WKT dimension specifier ("Z", "M", "ZM"), None for XY."""
        if self.is_3d:
            return "ZM" if self.is_measured else "Z"
        return "M" if self.is_measured else None

    @property
    def index_for_z(self) -> int | None:
        return 2 if self.is_3d else None

    @property
    def index_for_m(self) -> int | None:
        if not self.is_measured:
            return None
        return 3 if self.is_3d else 2

    @staticmethod
    def select(is_3d: bool, is_measured: bool) -> Coords:
        if is_3d:
            return Coords.XYZM if is_measured else Coords.XYZ
        return Coords.XYM if is_measured else Coords.XY

    @staticmethod
    def from_dimension(coordinate_dimension: int, xyz_for_dim3: bool = True) -> Coords:
        """Coordinate type for a number of values per position.

        Three values are read as XYZ unless `xyz_for_dim3` is False.
        """
        if coordinate_dimension == 4:
            return Coords.XYZM
        if coordinate_dimension == 3:
            return Coords.XYZ if xyz_for_dim3 else Coords.XYM
        if coordinate_dimension == 2:
            return Coords.XY
        raise FormatError(f"Invalid coordinate dimension: {coordinate_dimension}")


class Geom(Enum):
    """Geometry type."""

    POINT = ("POINT", "Point")
    LINE_STRING = ("LINESTRING", "LineString")
    POLYGON = ("POLYGON", "Polygon")
    MULTI_POINT = ("MULTIPOINT", "MultiPoint")
    MULTI_LINE_STRING = ("MULTILINESTRING", "MultiLineString")
    MULTI_POLYGON = ("MULTIPOLYGON", "MultiPolygon")
    GEOMETRY_COLLECTION = ("GEOMETRYCOLLECTION", "GeometryCollection")

    def __init__(self, wkt_name: str, geojson_name: str) -> None:
        self.wkt_name = wkt_name
        self.geojson_name = geojson_name

    @property
    def is_collection(self) -> bool:
        return self is Geom.GEOMETRY_COLLECTION

    @property
    def is_multi(self) -> bool:
        return self in (Geom.MULTI_POINT, Geom.MULTI_LINE_STRING, Geom.MULTI_POLYGON)


class AxisOrder(Enum):
    """Order of the first two axes of a coordinate reference system."""
    XY = "xy"  # longitude-latitude, easting-northing
    YX = "yx"  # latitude-longitude, northing-easting


class GeoRepresentation(Enum):
    """Logic used to decide whether x and y are swapped in text output."""
    CRS_AUTHORITY = "crs_authority"
    GEOJSON_STRICT = "geojson_strict"
