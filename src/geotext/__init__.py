"""geotext -- encode positions, geometries and features as GeoJSON and WKT text."""

from geotext.codes import AxisOrder, Coords, GeoRepresentation, Geom
from geotext.coordinates import Box, Position, PositionSeries
from geotext.crs import CoordRefSys
from geotext.errors import FormatError, WriterStateError
from geotext.utils.bounds_builder import BoundsBuilder

__version__ = "0.1.0"

__all__ = [
    "AxisOrder",
    "BoundsBuilder",
    "Box",
    "CoordRefSys",
    "Coords",
    "FormatError",
    "GeoRepresentation",
    "Geom",
    "Position",
    "PositionSeries",
    "WriterStateError",
]
