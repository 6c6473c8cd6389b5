"""Helpers for coordinate type resolution, bounds and number formatting."""

from geotext.utils.bounds_builder import BoundsBuilder
from geotext.utils.coord_type import (
    position_array_type,
    resolve_coord_type,
    series_array_array_type,
    series_array_type,
)
from geotext.utils.num import format_num

__all__ = [
    "BoundsBuilder",
    "format_num",
    "position_array_type",
    "resolve_coord_type",
    "series_array_array_type",
    "series_array_type",
]
