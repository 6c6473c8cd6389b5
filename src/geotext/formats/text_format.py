"""Text format objects -- factories of configured writers.

TextWriterFormat -- abstract factory with encoder(sink, decimals, crs)
DefaultFormat    -- JSON-array-like coordinates, no object keys
GeoJsonFormat    -- GeoJSON with a GeoJsonConf
WktLikeFormat    -- WKT coordinate syntax without keywords
WktFormat        -- WKT

Missing encoder arguments fall back to geotext.config.settings, read when
the encoder is created.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import TextIO

from geotext import config
from geotext.config import GeoJsonConf
from geotext.crs import CoordRefSys
from geotext.formats.base import JSON_LEXICON, WKT_LEXICON, TextWriter
from geotext.formats.geojson import GeoJsonTextWriter
from geotext.formats.wkt import WktTextWriter


class TextWriterFormat(ABC):
    """A named text format able to create writers."""

    name: str = ""

    @abstractmethod
    def encoder(
        self,
        sink: TextIO | None = None,
        decimals: int | None = None,
        crs: CoordRefSys | None = None,
    ) -> TextWriter:
        """A fresh writer writing into `sink` (a new StringIO if None)."""

    def _decimals(self, decimals: int | None) -> int | None:
        return decimals if decimals is not None else config.settings.default_decimals

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r})"


class DefaultFormat(TextWriterFormat):
    name = "default"

    def encoder(self, sink=None, decimals=None, crs=None) -> TextWriter:
        return TextWriter(
            JSON_LEXICON,
            sink=sink,
            decimals=self._decimals(decimals),
            compact_nums=config.settings.json_compact_nums,
            crs=crs,
        )


class GeoJsonFormat(TextWriterFormat):
    """GeoJSON; `conf` defaults to GeoJsonConf.from_settings(settings)."""

    name = "geojson"

    def __init__(self, conf: GeoJsonConf | None = None) -> None:
        self.conf = conf

    def encoder(self, sink=None, decimals=None, crs=None) -> GeoJsonTextWriter:
        conf = self.conf or GeoJsonConf.from_settings(config.settings)
        return GeoJsonTextWriter(
            sink=sink, decimals=self._decimals(decimals), crs=crs, conf=conf,
        )


class WktLikeFormat(TextWriterFormat):
    name = "wkt_like"

    def encoder(self, sink=None, decimals=None, crs=None) -> TextWriter:
        # WKT syntax has no axis swap, the CRS is not needed
        return TextWriter(
            WKT_LEXICON,
            sink=sink,
            decimals=self._decimals(decimals),
            compact_nums=config.settings.wkt_compact_nums,
        )


class WktFormat(TextWriterFormat):
    name = "wkt"

    def encoder(self, sink=None, decimals=None, crs=None) -> WktTextWriter:
        return WktTextWriter(
            sink=sink,
            decimals=self._decimals(decimals),
            compact_nums=config.settings.wkt_compact_nums,
        )
