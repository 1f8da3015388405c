"""Operations on decoded GeoJSON objects."""

from geojson_kit.ops.convert import to_geodataframe, to_shapely

__all__ = ["to_geodataframe", "to_shapely"]
