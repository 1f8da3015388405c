"""I/O sub-package – GeoJSON document loaders."""

from geojson_kit.io.geojson import (
    DefaultGeoJsonLoader,
    GeoJson,
    GeoJsonLoader,
    decode,
    load_geojson,
)

__all__ = [
    "DefaultGeoJsonLoader",
    "GeoJson",
    "GeoJsonLoader",
    "decode",
    "load_geojson",
]
