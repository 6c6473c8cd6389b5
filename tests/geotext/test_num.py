"""Tests for coordinate number formatting."""

from __future__ import annotations

import pytest

from geotext.utils.num import format_num

pytestmark = pytest.mark.unit


@pytest.mark.parametrize("value,decimals,compact,expected", [
    (10, None, False, "10.0"),
    (10, None, True, "10"),
    (10.25, None, True, "10.25"),
    (10.125, 2, False, "10.12"),
    (-2.9, 2, True, "-2.90"),
    (0.0, 2, True, "0"),
    (3, 1, False, "3.0"),
    (-0.0, None, True, "0"),
])
def test_format_num(value, decimals, compact, expected):
    assert format_num(value, decimals, compact) == expected
