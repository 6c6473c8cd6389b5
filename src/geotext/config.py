"""Configuration management using Pydantic settings.

Settings are read from GEOTEXT_* environment variables (or a .env file)
and supply the defaults used by the format objects in geotext.formats.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field
from pydantic_settings import BaseSettings, SettingsConfigDict

from geotext.codes import GeoRepresentation


class Settings(BaseSettings):
    """Library defaults loaded from environment variables."""

    model_config = SettingsConfigDict(
        env_prefix="GEOTEXT_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore",
    )

    # Fixed fraction digits for coordinate values (None = shortest form)
    default_decimals: Optional[int] = Field(default=None, ge=0)

    # "15" instead of "15.0" for whole numbers
    json_compact_nums: bool = False
    wkt_compact_nums: bool = True

    # GeoJSON conformance
    geojson_ignore_measured: bool = False
    geojson_ignore_foreign_members: bool = False
    geojson_print_non_default_crs: bool = False


class GeoJsonConf(BaseModel):
    """Options for GeoJSON and GeoJSON-like text output.

    Attributes:
        crs_logic: How the CRS axis order decides x/y swapping
            (None = CRS_AUTHORITY).
        ignore_measured: Drop m values even when positions carry them.
        ignore_foreign_members: Drop geometries and members not defined
            by GeoJSON (e.g. a Feature's non-"geometry" geometries).
        print_non_default_crs: Write a non-standard "crs" member on
            feature collections whose CRS is not lon-lat WGS84.
        compact_nums: Write whole numbers without ".0".
    """

    model_config = ConfigDict(frozen=True)

    crs_logic: Optional[GeoRepresentation] = None
    ignore_measured: bool = False
    ignore_foreign_members: bool = False
    print_non_default_crs: bool = False
    compact_nums: bool = False

    @classmethod
    def from_settings(cls, settings: Settings) -> GeoJsonConf:
        return cls(
            ignore_measured=settings.geojson_ignore_measured,
            ignore_foreign_members=settings.geojson_ignore_foreign_members,
            print_non_default_crs=settings.geojson_print_non_default_crs,
            compact_nums=settings.json_compact_nums,
        )


settings = Settings()
