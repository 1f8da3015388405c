"""Core type aliases for the JSON trees consumed by geojson-kit."""

from __future__ import annotations

from typing import Any, Mapping, Union

# ---------------------------------------------------------------------------
# Public type aliases
# ---------------------------------------------------------------------------

JsonValue = Union[None, bool, int, float, str, list[Any], dict[str, Any]]
"""Any value produced by a standard JSON parser."""

JsonObject = Mapping[str, Any]
"""A JSON object – the fragment every ``parse`` entry point consumes."""

Position = tuple[float, float]
"""A GeoJSON position in wire order: ``(longitude, latitude)``."""


def is_number(value: Any) -> bool:
    """Return ``True`` for JSON numbers (``bool`` is not a number here)."""
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def is_array(value: Any) -> bool:
    return isinstance(value, (list, tuple))


def is_object(value: Any) -> bool:
    return isinstance(value, Mapping)
