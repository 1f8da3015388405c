"""geojson-kit – typed decoding of GeoJSON geometries, features and collections."""

from geojson_kit.exceptions import (
    GeoJsonError,
    ShapeMismatch,
    StructuralMismatch,
    UnrecognizedGeometryType,
)
from geojson_kit.feature import (
    Feature,
    FeatureCollection,
    GeoJsonObject,
    Identifier,
    IntId,
    StringId,
    parse_bounding_box,
    parse_identifier,
)
from geojson_kit.geometry import (
    Coordinate,
    Geometry,
    GeometryCollection,
    LineString,
    MultiLineString,
    MultiPoint,
    MultiPolygon,
    Point,
    Polygon,
    parse_coordinates,
    parse_nested_coordinates,
)
from geojson_kit.io import load_geojson

__all__ = [
    "Coordinate",
    "Geometry",
    "Point",
    "MultiPoint",
    "LineString",
    "MultiLineString",
    "Polygon",
    "MultiPolygon",
    "GeometryCollection",
    "parse_coordinates",
    "parse_nested_coordinates",
    "Identifier",
    "IntId",
    "StringId",
    "parse_identifier",
    "parse_bounding_box",
    "GeoJsonObject",
    "Feature",
    "FeatureCollection",
    "load_geojson",
    # decode exceptions
    "GeoJsonError",
    "ShapeMismatch",
    "StructuralMismatch",
    "UnrecognizedGeometryType",
]

__version__ = "0.1.0"
