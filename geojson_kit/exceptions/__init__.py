"""GeoJSON decode exceptions."""

from geojson_kit.exceptions.general import (
    GeoJsonError,
    ShapeMismatch,
    StructuralMismatch,
    UnrecognizedGeometryType,
)

__all__ = [
    "GeoJsonError",
    "ShapeMismatch",
    "StructuralMismatch",
    "UnrecognizedGeometryType",
]
