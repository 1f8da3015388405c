"""Geometry model – coordinates and the seven GeoJSON geometry kinds.

Every geometry is an immutable dataclass.  Decoding goes through
:meth:`Geometry.parse`, which reads the ``type`` member (case-insensitively),
dispatches to the variant that owns that tag and validates the nested
``coordinates`` arrays to the depth the variant requires::

    geometry = Geometry.parse({"type": "Point", "coordinates": [100.0, 0.5]})
    geometry.point  # Coordinate(latitude=0.5, longitude=100.0)

``parse`` returns ``None`` for malformed input; ``from_json`` raises the
matching :class:`~geojson_kit.exceptions.GeoJsonError` instead.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from typing import Any, ClassVar

from geojson_kit.exceptions import (
    GeoJsonError,
    ShapeMismatch,
    StructuralMismatch,
    UnrecognizedGeometryType,
)
from geojson_kit.types import Position, is_array, is_number, is_object

logger = logging.getLogger(__name__)

Line = tuple["Coordinate", ...]
Rings = tuple[Line, ...]


# ---------------------------------------------------------------------------
# Coordinates
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Coordinate:
    """A single geographic position.

    GeoJSON writes positions as ``[longitude, latitude]``; the fields here
    are named so the axis order never has to be remembered.  No range
    checks are applied.
    """

    latitude: float
    longitude: float

    @classmethod
    def parse(cls, value: Any) -> Coordinate | None:
        """Decode a ``[longitude, latitude]`` array, or return ``None``."""
        try:
            return _coordinate(value)
        except GeoJsonError:
            return None

    @classmethod
    def from_lon_lat(cls, longitude: Any, latitude: Any) -> Coordinate:
        """Build a coordinate from two JSON numbers in GeoJSON axis order.

        Raises
        ------
        ShapeMismatch
            If a number does not fit in a float.
        """
        try:
            return cls(latitude=float(latitude), longitude=float(longitude))
        except OverflowError:
            raise ShapeMismatch(
                f"position value out of float range: {longitude!r}, {latitude!r}"
            ) from None

    def to_position(self) -> Position:
        return (self.longitude, self.latitude)


def _coordinate(value: Any) -> Coordinate:
    if not is_array(value):
        raise StructuralMismatch(f"position must be an array, got {type(value).__name__}")
    if len(value) != 2:
        raise ShapeMismatch(f"position must have exactly 2 elements, got {len(value)}")
    longitude, latitude = value
    if not (is_number(longitude) and is_number(latitude)):
        raise ShapeMismatch(f"position elements must be numbers: {value!r}")
    return Coordinate.from_lon_lat(longitude, latitude)


def _coordinates(value: Any) -> Line:
    if not is_array(value):
        raise StructuralMismatch(
            f"expected an array of positions, got {type(value).__name__}"
        )
    return tuple(_coordinate(item) for item in value)


def _nested_coordinates(value: Any) -> Rings:
    if not is_array(value):
        raise StructuralMismatch(
            f"expected an array of position arrays, got {type(value).__name__}"
        )
    return tuple(_coordinates(item) for item in value)


def parse_coordinates(value: Any) -> Line | None:
    """Decode an array of positions.

    Every element must be a well-formed position; one bad element rejects
    the whole sequence.
    """
    try:
        return _coordinates(value)
    except GeoJsonError:
        return None


def parse_nested_coordinates(value: Any) -> Rings | None:
    """Decode an array of position arrays (rings or lines)."""
    try:
        return _nested_coordinates(value)
    except GeoJsonError:
        return None


def _positions(line: Line) -> list[Position]:
    return [c.to_position() for c in line]


# ---------------------------------------------------------------------------
# Geometry base
# ---------------------------------------------------------------------------


class Geometry(ABC):
    """Base class of the seven GeoJSON geometry variants."""

    geom_type: ClassVar[str]

    @classmethod
    def parse(cls, fragment: Any) -> Geometry | None:
        """Decode a geometry object, or return ``None`` if it is malformed.

        Called on a concrete variant (``Polygon.parse``), only fragments
        of that kind are accepted.
        """
        try:
            return cls.from_json(fragment)
        except GeoJsonError as exc:
            logger.debug("rejected %s fragment: %s", cls.__name__, exc)
            return None

    @classmethod
    def from_json(cls, fragment: Any) -> Geometry:
        """Decode a geometry object.

        Raises
        ------
        StructuralMismatch
            If a required member is missing or has the wrong JSON type.
        ShapeMismatch
            If a coordinate array has the wrong arity at some depth.
        UnrecognizedGeometryType
            If ``type`` does not name a geometry kind.
        """
        geometry = _parse_geometry(fragment)
        if not isinstance(geometry, cls):
            raise StructuralMismatch(
                f"expected {cls.__name__}, got {geometry.geom_type}"
            )
        return geometry

    @classmethod
    @abstractmethod
    def _from_coordinates(cls, value: Any) -> Geometry:
        """Build the variant from its ``coordinates`` member."""

    @property
    def point(self) -> Coordinate | None:
        """The coordinate of a Point; ``None`` for every other kind."""
        return None

    @abstractmethod
    def to_dict(self) -> dict[str, Any]:
        """Return the GeoJSON-shaped mapping of this geometry."""

    @property
    def __geo_interface__(self) -> dict[str, Any]:
        return self.to_dict()


# ---------------------------------------------------------------------------
# Variants
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Point(Geometry):
    geom_type: ClassVar[str] = "Point"

    coordinate: Coordinate

    @classmethod
    def _from_coordinates(cls, value: Any) -> Point:
        return cls(_coordinate(value))

    @property
    def point(self) -> Coordinate | None:
        return self.coordinate

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.geom_type, "coordinates": self.coordinate.to_position()}


@dataclass(frozen=True)
class MultiPoint(Geometry):
    geom_type: ClassVar[str] = "MultiPoint"

    coordinates: Line

    @classmethod
    def _from_coordinates(cls, value: Any) -> MultiPoint:
        return cls(_coordinates(value))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.geom_type, "coordinates": _positions(self.coordinates)}


@dataclass(frozen=True)
class LineString(Geometry):
    geom_type: ClassVar[str] = "LineString"

    coordinates: Line

    @classmethod
    def _from_coordinates(cls, value: Any) -> LineString:
        return cls(_coordinates(value))

    def to_dict(self) -> dict[str, Any]:
        return {"type": self.geom_type, "coordinates": _positions(self.coordinates)}


@dataclass(frozen=True)
class MultiLineString(Geometry):
    geom_type: ClassVar[str] = "MultiLineString"

    lines: Rings

    @classmethod
    def _from_coordinates(cls, value: Any) -> MultiLineString:
        return cls(_nested_coordinates(value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": [_positions(line) for line in self.lines],
        }


@dataclass(frozen=True)
class Polygon(Geometry):
    """A polygon; the first ring is the exterior, the rest are holes."""

    geom_type: ClassVar[str] = "Polygon"

    rings: Rings

    @classmethod
    def _from_coordinates(cls, value: Any) -> Polygon:
        return cls(_nested_coordinates(value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": [_positions(ring) for ring in self.rings],
        }


@dataclass(frozen=True)
class MultiPolygon(Geometry):
    geom_type: ClassVar[str] = "MultiPolygon"

    polygons: tuple[Rings, ...]

    @classmethod
    def _from_coordinates(cls, value: Any) -> MultiPolygon:
        if not is_array(value):
            raise StructuralMismatch(
                f"expected an array of polygons, got {type(value).__name__}"
            )
        return cls(tuple(_nested_coordinates(polygon) for polygon in value))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "coordinates": [
                [_positions(ring) for ring in polygon] for polygon in self.polygons
            ],
        }


@dataclass(frozen=True)
class GeometryCollection(Geometry):
    """A heterogeneous collection of geometries.

    Decoding is best-effort: members that fail to decode are dropped and
    the surviving geometries keep their relative order.
    """

    geom_type: ClassVar[str] = "GeometryCollection"

    geometries: tuple[Geometry, ...]

    @classmethod
    def _from_coordinates(cls, value: Any) -> GeometryCollection:
        raise StructuralMismatch("GeometryCollection must use 'geometries', not 'coordinates'")

    @classmethod
    def _from_members(cls, value: Any) -> GeometryCollection:
        if not is_array(value):
            raise StructuralMismatch(
                f"'geometries' must be an array, got {type(value).__name__}"
            )
        geometries: list[Geometry] = []
        for index, item in enumerate(value):
            try:
                geometries.append(_parse_geometry(item))
            except GeoJsonError as exc:
                logger.debug("dropped geometry %d from collection: %s", index, exc)
        return cls(tuple(geometries))

    def to_dict(self) -> dict[str, Any]:
        return {
            "type": self.geom_type,
            "geometries": [g.to_dict() for g in self.geometries],
        }


# ---------------------------------------------------------------------------
# Dispatch – lower-cased GeoJSON tag → variant
# ---------------------------------------------------------------------------

GEOMETRY_TYPES: dict[str, type[Geometry]] = {
    kind.geom_type.lower(): kind
    for kind in (
        Point,
        MultiPoint,
        LineString,
        MultiLineString,
        Polygon,
        MultiPolygon,
        GeometryCollection,
    )
}


def _parse_geometry(fragment: Any) -> Geometry:
    if not is_object(fragment):
        raise StructuralMismatch(
            f"geometry must be a JSON object, got {type(fragment).__name__}"
        )
    tag = fragment.get("type")
    if not isinstance(tag, str):
        raise StructuralMismatch("geometry has no string 'type' member")
    kind = GEOMETRY_TYPES.get(tag.lower())
    if kind is None:
        raise UnrecognizedGeometryType(f"unknown geometry type {tag!r}")

    if "coordinates" in fragment:
        return kind._from_coordinates(fragment["coordinates"])
    if "geometries" in fragment:
        if kind is not GeometryCollection:
            raise StructuralMismatch(f"{kind.geom_type} must use 'coordinates', not 'geometries'")
        return GeometryCollection._from_members(fragment["geometries"])
    raise StructuralMismatch(f"{kind.geom_type} has neither 'coordinates' nor 'geometries'")
