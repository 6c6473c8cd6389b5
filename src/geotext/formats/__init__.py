"""Text writers for coordinates, geometries and features.

Supports a JSON-array-like "default" rendering, GeoJSON (RFC 7946),
a WKT-like coordinate rendering and WKT.
"""

from geotext.formats.base import JSON_LEXICON, WKT_LEXICON, Container, Lexicon, TextWriter
from geotext.formats.geojson import GeoJsonTextWriter
from geotext.formats.text_format import (
    DefaultFormat,
    GeoJsonFormat,
    TextWriterFormat,
    WktFormat,
    WktLikeFormat,
)
from geotext.formats.wkt import WktTextWriter

DEFAULT = DefaultFormat()
GEOJSON = GeoJsonFormat()
WKT_LIKE = WktLikeFormat()
WKT = WktFormat()

__all__ = [
    "Container",
    "DEFAULT",
    "DefaultFormat",
    "GEOJSON",
    "GeoJsonFormat",
    "GeoJsonTextWriter",
    "JSON_LEXICON",
    "Lexicon",
    "TextWriter",
    "TextWriterFormat",
    "WKT",
    "WKT_LEXICON",
    "WKT_LIKE",
    "WktFormat",
    "WktLikeFormat",
    "WktTextWriter",
]
