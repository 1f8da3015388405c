"""GeoJSON decode exceptions."""


class GeoJsonError(Exception):
    """A fragment could not be decoded into a GeoJSON object."""


class StructuralMismatch(GeoJsonError):
    """A required member is missing or holds the wrong JSON type."""


class ShapeMismatch(GeoJsonError):
    """An array has the wrong arity or element type at some nesting depth."""


class UnrecognizedGeometryType(GeoJsonError):
    """The ``type`` member does not name a known geometry kind."""
