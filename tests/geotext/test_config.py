"""Tests for settings and GeoJSON options."""

from __future__ import annotations

import pydantic
import pytest

from geotext.codes import GeoRepresentation
from geotext.config import GeoJsonConf, Settings

pytestmark = pytest.mark.unit


class TestSettings:
    def test_defaults(self, monkeypatch):
        monkeypatch.delenv("GEOTEXT_DEFAULT_DECIMALS", raising=False)
        s = Settings(_env_file=None)
        assert s.default_decimals is None
        assert s.json_compact_nums is False
        assert s.wkt_compact_nums is True
        assert s.geojson_ignore_measured is False

    def test_reads_prefixed_env(self, monkeypatch):
        monkeypatch.setenv("GEOTEXT_DEFAULT_DECIMALS", "3")
        monkeypatch.setenv("GEOTEXT_GEOJSON_IGNORE_MEASURED", "true")
        s = Settings(_env_file=None)
        assert s.default_decimals == 3
        assert s.geojson_ignore_measured is True

    def test_negative_decimals_rejected(self):
        with pytest.raises(pydantic.ValidationError):
            Settings(_env_file=None, default_decimals=-1)


class TestGeoJsonConf:
    def test_defaults(self):
        conf = GeoJsonConf()
        assert conf.crs_logic is None
        assert conf.compact_nums is False
        assert conf.ignore_foreign_members is False

    def test_frozen(self):
        conf = GeoJsonConf(crs_logic=GeoRepresentation.GEOJSON_STRICT)
        with pytest.raises(pydantic.ValidationError):
            conf.ignore_measured = True

    def test_from_settings(self):
        s = Settings(
            _env_file=None,
            json_compact_nums=True,
            geojson_ignore_measured=True,
            geojson_print_non_default_crs=True,
        )
        conf = GeoJsonConf.from_settings(s)
        assert conf.compact_nums is True
        assert conf.ignore_measured is True
        assert conf.print_non_default_crs is True
        assert conf.ignore_foreign_members is False
