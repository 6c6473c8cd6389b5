"""GeoJSON (RFC 7946) text writer.

Builds on the "default" JSON rendering of TextWriter and adds geometry
objects, features, feature collections, properties and foreign members.
Property names and string values are escaped with stdlib json; numbers
that JSON cannot represent (NaN, infinities) are written as null.

A bounding box is written as a flat "bbox" array by a disposable
sub-writer sharing this writer's sink, so that the parent's container
and coordinate type stacks are never touched.
"""

from __future__ import annotations

import json
import logging
import math
import numbers
from collections.abc import Iterable, Mapping
from typing import Any, TextIO

import numpy as np

from geotext.codes import AxisOrder, Coords, Geom
from geotext.config import GeoJsonConf
from geotext.coordinates import Box
from geotext.crs import CoordRefSys
from geotext.formats.base import JSON_LEXICON, Container, TextWriter, WriteContent

logger = logging.getLogger(__name__)

# Members defined by GeoJSON, never written from custom member maps
_STANDARD_MEMBERS = frozenset(
    {"type", "bbox", "features", "properties", "geometry", "coordinates", "geometries"}
)


class GeoJsonTextWriter(TextWriter):
    """Writes geometries and features as GeoJSON text.

    Args:
        sink: Append-only text destination; a new StringIO if None.
        decimals: Fixed fraction digits, or None for the shortest form.
        crs: Reference system of the data.  Under the default CRS_AUTHORITY
            logic, x and y are swapped for lat-lon systems like EPSG:4326.
        conf: GeoJSON options; GeoJsonConf() if None.
        swap_xy: Force or disable axis swap regardless of `crs`.
    """

    def __init__(
        self,
        sink: TextIO | None = None,
        decimals: int | None = None,
        crs: CoordRefSys | None = None,
        conf: GeoJsonConf | None = None,
        swap_xy: bool | None = None,
    ) -> None:
        self.conf = conf or GeoJsonConf()
        super().__init__(
            JSON_LEXICON,
            sink=sink,
            decimals=decimals,
            compact_nums=self.conf.compact_nums,
            crs=crs,
            swap_xy=swap_xy,
            crs_logic=self.conf.crs_logic,
        )
        self._print_measured = not self.conf.ignore_measured
        self._feature_has_geometry = False

    def _sub_writer(self) -> GeoJsonTextWriter:
        return GeoJsonTextWriter(
            sink=self._sink,
            decimals=self.decimals,
            crs=self.crs,
            conf=self.conf,
            swap_xy=self._swap_xy,
        )

    def _write_bbox(self, bounds: Box | None) -> None:
        if bounds is not None:
            self._write(',"bbox":[')
            self._sub_writer().bounds(bounds)
            self._write("]")

    def _skips_foreign_geometry(self, name: str | None) -> bool:
        if self.conf.ignore_foreign_members and self._at_feature and (name or "geometry") != "geometry":
            logger.debug(f"Dropping foreign geometry member '{name}' of a feature")
            return True
        return False

    def _write_geometry_member_name(self, name: str | None) -> None:
        """Write the member name when a geometry is a member of a feature."""
        if self._at_feature:
            if name is None or name == "geometry":
                self._feature_has_geometry = True
            self._write(f"{json.dumps(name or 'geometry')}:")

    # ------------------------------------------------------------------
    # Geometries
    # ------------------------------------------------------------------

    def _geometry_before_coordinates(
        self,
        geom: Geom,
        coord_type: Coords | None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> bool:
        if self._skips_foreign_geometry(name):
            return False
        self._separate()
        self._write_geometry_member_name(name)
        self._start_container(Container.GEOMETRY)
        self._start_coord_type(coord_type)
        self._write(f'{{"type":"{geom.geojson_name}"')
        self._write_bbox(bounds)
        self._write(',"coordinates":')
        return True

    def _geometry_after_coordinates(self) -> None:
        self._write("}")
        self._end_coord_type()
        self._end_container()

    def geometry_collection(
        self,
        geometries: WriteContent,
        type: Coords | None = None,
        name: str | None = None,
        bounds: Box | None = None,
    ) -> None:
        if self._skips_foreign_geometry(name):
            return
        self._separate()
        self._write_geometry_member_name(name)
        with self._container(Container.GEOMETRY), self._pinned_coord_type(type):
            self._write('{"type":"GeometryCollection"')
            self._write_bbox(bounds)
            self._write(',"geometries":')
            with self._object_array():
                geometries(self)
            self._write("}")

    def empty_geometry(self, geom: Geom, name: str | None = None) -> None:
        """Write an empty geometry.

        As a feature member this is `null`; elsewhere a geometry object
        with empty "coordinates" (or "geometries") is written.
        """
        if self._skips_foreign_geometry(name):
            return
        self._separate()
        if self._at_feature:
            self._write_geometry_member_name(name)
            self._write("null")
        else:
            member = "geometries" if geom.is_collection else "coordinates"
            self._write(f'{{"type":"{geom.geojson_name}","{member}":[]}}')

    # ------------------------------------------------------------------
    # Features
    # ------------------------------------------------------------------

    def feature_collection(
        self,
        features: WriteContent,
        bbox: Box | None = None,
        custom: Mapping[str, Any] | None = None,
    ) -> None:
        """Write a FeatureCollection; `features` is called with this writer.

        A collection started while already inside one writes its features
        straight into the enclosing "features" array.
        """
        if self._at_feature_collection:
            features(self)
            return
        self._separate()
        with self._container(Container.FEATURE_COLLECTION):
            self._write('{"type":"FeatureCollection"')
            if self.crs is not None and self.conf.print_non_default_crs:
                if not self.crs.is_geographic(wgs84=True, order=AxisOrder.XY):
                    self._write(f',"crs":{json.dumps(self.crs.id)}')
            self._write_bbox(bbox)
            self._write(',"features":')
            # the features array is the first member printed via _separate()
            self._mark_item()
            self._write("[")
            with self._container(Container.OBJECT_ARRAY):
                features(self)
            self._write("]")
            if custom is not None:
                self._write_custom(custom)
            self._write("}")

    def feature(
        self,
        id: Any = None,
        geometry: WriteContent | None = None,
        properties: Mapping[str, Any] | None = None,
        bbox: Box | None = None,
        custom: Mapping[str, Any] | None = None,
    ) -> None:
        """Write a Feature.

        Args:
            id: Feature id; ints are written as numbers, anything else as
                a string.
            geometry: Called with this writer to write the geometry (and
                any named foreign geometries).  Without a "geometry"
                member the feature gets `"geometry":null`.
            properties: Written as the "properties" object ({} if None).
            bbox: Written as "bbox".
            custom: Foreign members; GeoJSON member names are skipped.
        """
        self._separate()
        with self._container(Container.FEATURE):
            self._write('{"type":"Feature"')
            if id is not None:
                if isinstance(id, int) and not isinstance(id, bool):
                    self._write(f',"id":{id}')
                else:
                    self._write(f',"id":{json.dumps(str(id))}')
            # "type" has been written, so every member below needs a comma
            self._mark_item()
            self._write_bbox(bbox)
            self._feature_has_geometry = False
            if geometry is not None:
                geometry(self)
            if not self._feature_has_geometry:
                self._write(',"geometry":null')
            self._write_map_entry("properties", properties or {})
            if custom is not None:
                self._write_custom(custom)
            self._write("}")

    def properties(self, name: str, map: Mapping[str, Any]) -> None:
        """Write a named object member (ignored for "properties" of a feature)."""
        if self._at_feature and name == "properties":
            return
        self._write_map_entry(name, map)

    def property(self, name: str, value: Any) -> None:
        """Write a named member (ignored for "properties" of a feature)."""
        if self._at_feature and name == "properties":
            return
        self._write_map_entry(name, value)

    # ------------------------------------------------------------------
    # JSON values
    # ------------------------------------------------------------------

    def _write_custom(self, custom: Mapping[str, Any]) -> None:
        if self.conf.ignore_foreign_members:
            logger.debug(f"Dropping {len(custom)} foreign member(s)")
            return
        for name, value in custom.items():
            if name in _STANDARD_MEMBERS or (self._at_feature and name == "id"):
                logger.debug(f"Skipping custom member '{name}' that GeoJSON defines")
                continue
            self._write_map_entry(name, value)

    def _write_map_entry(self, name: str, value: Any) -> None:
        self._separate()
        self._write(f"{json.dumps(str(name))}:")
        self._write_value(value)

    def _write_array_item(self, value: Any) -> None:
        self._separate()
        self._write_value(value)

    def _write_value(self, value: Any) -> None:
        if isinstance(value, Mapping):
            with self._container(Container.PROPERTY_MAP):
                self._write("{")
                for key, item in value.items():
                    self._write_map_entry(key, item)
                self._write("}")
        elif isinstance(value, Iterable) and not isinstance(value, (str, bytes)):
            with self._container(Container.PROPERTY_ARRAY):
                self._write("[")
                for item in value:
                    self._write_array_item(item)
                self._write("]")
        elif value is None:
            self._write("null")
        elif isinstance(value, (bool, np.bool_)):
            self._write("true" if value else "false")
        elif isinstance(value, numbers.Integral):
            self._write(str(int(value)))
        elif isinstance(value, numbers.Real):
            number = float(value)
            if math.isfinite(number):
                self._write(json.dumps(number))
            else:
                # JSON has no NaN or Infinity
                logger.debug(f"Writing non-finite property value {number} as null")
                self._write("null")
        else:
            self._write(json.dumps(str(value)))
