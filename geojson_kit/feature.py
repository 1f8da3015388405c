"""Feature model – identifiers, bounding boxes, features and collections.

Features and feature collections keep the complete object they were decoded
from in :attr:`~GeoJsonObject.members`, so keys that RFC 7946 does not
define ("foreign members") stay reachable by name::

    collection = FeatureCollection.parse(document)
    collection.get("layerName")
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from types import MappingProxyType
from typing import Any, ClassVar, Iterator, Optional, Union

from geojson_kit.exceptions import GeoJsonError, ShapeMismatch, StructuralMismatch
from geojson_kit.geometry import Coordinate, Geometry
from geojson_kit.types import JsonObject, is_array, is_number, is_object

logger = logging.getLogger(__name__)


# ---------------------------------------------------------------------------
# Identifier
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class IntId:
    value: int


@dataclass(frozen=True)
class StringId:
    value: str


Identifier = Union[IntId, StringId]
"""A Feature ``id`` – either a number or a string."""


def parse_identifier(value: Any) -> Identifier | None:
    """Decode a Feature ``id``.

    Integers and integral floats (``7.0``) become :class:`IntId`, strings
    become :class:`StringId`.  Anything else, including non-integral
    numbers, yields ``None``; a bad ``id`` never rejects its feature.
    """
    if isinstance(value, bool):
        return None
    if isinstance(value, int):
        return IntId(value)
    if isinstance(value, float) and value.is_integer():
        return IntId(int(value))
    if isinstance(value, str):
        return StringId(value)
    return None


# ---------------------------------------------------------------------------
# Bounding box
# ---------------------------------------------------------------------------


def _bounding_box(value: Any) -> tuple[Coordinate, ...]:
    if not is_array(value):
        raise StructuralMismatch(f"'bbox' must be an array, got {type(value).__name__}")
    if len(value) % 2:
        raise ShapeMismatch(f"'bbox' must have an even number of values, got {len(value)}")
    if not all(is_number(v) for v in value):
        raise ShapeMismatch(f"'bbox' values must be numbers: {value!r}")
    return tuple(
        Coordinate.from_lon_lat(value[i], value[i + 1])
        for i in range(0, len(value), 2)
    )


def parse_bounding_box(value: Any) -> tuple[Coordinate, ...] | None:
    """Decode a flat ``bbox`` array into corner coordinates.

    Values are read pairwise as ``(longitude, latitude)``, so a 2D box
    ``[west, south, east, north]`` gives the south-west and north-east
    corners.  Any even count is accepted.
    """
    try:
        return _bounding_box(value)
    except GeoJsonError as exc:
        logger.debug("ignored bbox: %s", exc)
        return None


def _optional_bounding_box(fragment: JsonObject) -> tuple[Coordinate, ...] | None:
    if "bbox" not in fragment:
        return None
    return parse_bounding_box(fragment["bbox"])


# ---------------------------------------------------------------------------
# Shared base
# ---------------------------------------------------------------------------


class GeoJsonObject:
    """Keyed access to the members of a decoded Feature or FeatureCollection."""

    defined_members: ClassVar[frozenset[str]] = frozenset({"type", "bbox"})

    members: JsonObject
    bounding_box: Optional[tuple[Coordinate, ...]]

    def get(self, key: str, default: Any = None) -> Any:
        """Return the raw member *key* of the source object, or *default*."""
        return self.members.get(key, default)

    def __getitem__(self, key: str) -> Any:
        return self.members[key]

    def __contains__(self, key: object) -> bool:
        return key in self.members

    @property
    def foreign_members(self) -> dict[str, Any]:
        """Members that RFC 7946 does not define for this object type."""
        return {
            key: value
            for key, value in self.members.items()
            if key not in self.defined_members
        }


def _frozen_members(fragment: JsonObject) -> JsonObject:
    return MappingProxyType(dict(fragment))


# ---------------------------------------------------------------------------
# Feature
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class Feature(GeoJsonObject):
    """A geometry with free-form properties.

    ``properties`` and ``geometry`` are mandatory: if either is missing or
    malformed no Feature is produced.  ``id`` and ``bbox`` are optional
    and never reject the feature.
    """

    defined_members: ClassVar[frozenset[str]] = frozenset(
        {"type", "bbox", "id", "geometry", "properties"}
    )

    properties: JsonObject = field(hash=False)
    geometry: Geometry
    members: JsonObject = field(default_factory=dict, repr=False, hash=False)
    bounding_box: Optional[tuple[Coordinate, ...]] = None
    identifier: Optional[Identifier] = None

    @classmethod
    def parse(cls, fragment: Any) -> Feature | None:
        """Decode a Feature object, or return ``None`` if it is malformed."""
        try:
            return cls.from_json(fragment)
        except GeoJsonError as exc:
            logger.debug("rejected Feature fragment: %s", exc)
            return None

    @classmethod
    def from_json(cls, fragment: Any) -> Feature:
        """Decode a Feature object.

        Raises
        ------
        GeoJsonError
            If ``properties`` is not an object or ``geometry`` does not
            decode.
        """
        if not is_object(fragment):
            raise StructuralMismatch(
                f"Feature must be a JSON object, got {type(fragment).__name__}"
            )
        properties = fragment.get("properties")
        if not is_object(properties):
            raise StructuralMismatch("Feature has no 'properties' object")
        if "geometry" not in fragment:
            raise StructuralMismatch("Feature has no 'geometry' member")
        geometry = Geometry.from_json(fragment["geometry"])

        return cls(
            properties=MappingProxyType(dict(properties)),
            geometry=geometry,
            members=_frozen_members(fragment),
            bounding_box=_optional_bounding_box(fragment),
            identifier=parse_identifier(fragment.get("id")),
        )


# ---------------------------------------------------------------------------
# FeatureCollection
# ---------------------------------------------------------------------------


@dataclass(frozen=True)
class FeatureCollection(GeoJsonObject):
    """An ordered sequence of features.

    Decoding is best-effort: features that fail to decode are dropped, so
    ``features`` may be shorter than the source array.  A missing or
    non-array ``features`` member rejects the whole collection.
    """

    defined_members: ClassVar[frozenset[str]] = frozenset({"type", "bbox", "features"})

    features: tuple[Feature, ...]
    members: JsonObject = field(default_factory=dict, repr=False, hash=False)
    bounding_box: Optional[tuple[Coordinate, ...]] = None

    @classmethod
    def parse(cls, fragment: Any) -> FeatureCollection | None:
        """Decode a FeatureCollection object, or return ``None``."""
        try:
            return cls.from_json(fragment)
        except GeoJsonError as exc:
            logger.debug("rejected FeatureCollection fragment: %s", exc)
            return None

    @classmethod
    def from_json(cls, fragment: Any) -> FeatureCollection:
        """Decode a FeatureCollection object.

        Raises
        ------
        StructuralMismatch
            If the fragment is not an object or ``features`` is not an array.
        """
        if not is_object(fragment):
            raise StructuralMismatch(
                f"FeatureCollection must be a JSON object, got {type(fragment).__name__}"
            )
        values = fragment.get("features")
        if not is_array(values):
            raise StructuralMismatch("FeatureCollection has no 'features' array")

        features: list[Feature] = []
        for index, item in enumerate(values):
            try:
                features.append(Feature.from_json(item))
            except GeoJsonError as exc:
                logger.debug("dropped feature %d from collection: %s", index, exc)

        return cls(
            features=tuple(features),
            members=_frozen_members(fragment),
            bounding_box=_optional_bounding_box(fragment),
        )

    def __iter__(self) -> Iterator[Feature]:
        return iter(self.features)
