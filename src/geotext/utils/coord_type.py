"""Resolve the common coordinate type of positions, series and boxes.

A collection is 3D only if every element is 3D, and measured only if
every element is measured.  Mixed input degrades to the lowest common
type; nothing at all resolves to XY.
"""

from __future__ import annotations

from typing import Any, Iterable

from geotext.codes import Coords


def _type_of(element: Any) -> Coords:
    if isinstance(element, Coords):
        return element
    return element.type


def resolve_coord_type(
    item: Any | None = None, collection: Iterable[Any] | None = None,
) -> Coords:
    """Resolve the coordinate type valid for `item` and every `collection` element.

    Elements are Coords values or objects with a `type` attribute
    holding one (positions, boxes, series).
    """
    if item is None and collection is None:
        return Coords.XY

    is_3d = True
    is_measured = True

    if item is not None:
        t = _type_of(item)
        is_3d = t.is_3d
        is_measured = t.is_measured

    if collection is not None:
        seen = False
        if is_3d or is_measured:
            for element in collection:
                seen = True
                t = _type_of(element)
                is_3d = is_3d and t.is_3d
                is_measured = is_measured and t.is_measured
                if not is_3d and not is_measured:
                    break
        if not seen and item is None:
            return Coords.XY

    return Coords.select(is_3d, is_measured)


def position_array_type(positions: Iterable[Any]) -> Coords:
    """Common coordinate type of positions."""
    return resolve_coord_type(collection=positions)


def series_array_type(series: Iterable[Any]) -> Coords:
    """Common coordinate type of position series (rings or line strings)."""
    return resolve_coord_type(collection=series)


def series_array_array_type(polygons: Iterable[Iterable[Any]]) -> Coords:
    """Common coordinate type of a list of polygons, each a list of rings.

    Resolved over all rings, so a polygon without rings adds no constraint.
    """
    return resolve_coord_type(
        collection=(ring for rings in polygons for ring in rings),
    )
