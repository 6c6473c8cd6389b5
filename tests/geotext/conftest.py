"""Shared fixtures for geotext tests."""

from __future__ import annotations

import pytest

from geotext.codes import Coords
from geotext.coordinates import Box, Position, PositionSeries
from geotext.formats import GeoJsonTextWriter, TextWriter, WktTextWriter
from geotext.formats.base import WKT_LEXICON


@pytest.fixture
def default_writer():
    return TextWriter()


@pytest.fixture
def wkt_like_writer():
    return TextWriter(WKT_LEXICON, compact_nums=True)


@pytest.fixture
def geojson_writer():
    return GeoJsonTextWriter()


@pytest.fixture
def wkt_writer():
    return WktTextWriter()


@pytest.fixture
def square_ring():
    """Closed 2x2 square starting at the origin."""
    return PositionSeries.view([0, 0, 2, 0, 2, 2, 0, 2, 0, 0], Coords.XY)


@pytest.fixture
def xyz_box():
    return Box.create(1, 2, 3, 4, min_z=10, max_z=20)


@pytest.fixture
def xym_position():
    return Position.create(1.5, 2.5, m=4.0)
