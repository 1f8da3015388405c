"""GeoJSON loader – decode a GeoJSON document into typed objects."""

from __future__ import annotations

import json
import logging
import os
from pathlib import Path
from typing import Any, Protocol, Union, runtime_checkable

from geojson_kit.feature import Feature, FeatureCollection
from geojson_kit.geometry import GEOMETRY_TYPES, Geometry
from geojson_kit.types import JsonObject, JsonValue, is_object

logger = logging.getLogger(__name__)

GeoJson = Union[Geometry, Feature, FeatureCollection]
"""Any decoded top-level GeoJSON object."""


@runtime_checkable
class GeoJsonLoader(Protocol):
    """Protocol for GeoJSON loaders."""

    def load_geojson(self, source: str | os.PathLike | JsonObject) -> GeoJson | None:
        ...


class DefaultGeoJsonLoader:
    """Default GeoJSON loader using the standard :mod:`json` decoder."""

    def load_geojson(self, source: str | os.PathLike | JsonObject) -> GeoJson | None:
        """Load GeoJSON from a file path, a JSON string, or an inline mapping.

        Parameters
        ----------
        source : str | os.PathLike | JsonObject
            Path to a GeoJSON file, a GeoJSON text (a string whose first
            non-blank character is ``{``), or an already decoded mapping.

        Returns
        -------
        Geometry | Feature | FeatureCollection | None
            The decoded object chosen by the top-level ``type`` member, or
            ``None`` if the document is not valid GeoJSON.

        Raises
        ------
        json.JSONDecodeError
            If the text is not valid JSON.
        OSError
            If the file cannot be read.
        """
        document = self._read(source)
        return decode(document)

    @staticmethod
    def _read(source: str | os.PathLike | JsonObject) -> JsonValue:
        if is_object(source):
            return source
        if isinstance(source, str) and source.lstrip().startswith("{"):
            return json.loads(source)
        path = Path(source)
        logger.debug("reading GeoJSON from %s", path)
        return json.loads(path.read_text(encoding="utf-8"))


def decode(document: Any) -> GeoJson | None:
    """Decode a parsed JSON tree by its top-level ``type`` member."""
    if not is_object(document):
        return None
    tag = document.get("type")
    if not isinstance(tag, str):
        return None

    kind = tag.lower()
    if kind == "featurecollection":
        collection = FeatureCollection.parse(document)
        if collection is not None:
            _log_dropped(document["features"], collection.features, "features")
        return collection
    if kind == "feature":
        return Feature.parse(document)
    if kind in GEOMETRY_TYPES:
        return Geometry.parse(document)

    logger.debug("unsupported top-level GeoJSON type %r", tag)
    return None


def _log_dropped(source: list, decoded: tuple, what: str) -> None:
    dropped = len(source) - len(decoded)
    if dropped:
        logger.info("dropped %d of %d malformed %s", dropped, len(source), what)


# Module-level convenience function using the default loader.
_default = DefaultGeoJsonLoader()


def load_geojson(source: str | os.PathLike | JsonObject) -> GeoJson | None:
    """Load a GeoJSON document into typed objects.

    Delegates to :class:`DefaultGeoJsonLoader`.
    """
    return _default.load_geojson(source)
