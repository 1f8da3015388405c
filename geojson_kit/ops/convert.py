"""Interop – convert decoded GeoJSON into shapely and geopandas objects."""

from __future__ import annotations

import geopandas as gpd
from shapely.geometry import shape
from shapely.geometry.base import BaseGeometry

from geojson_kit.feature import FeatureCollection
from geojson_kit.geometry import Geometry


# ---------------------------------------------------------------------------
# to_shapely
# ---------------------------------------------------------------------------


def to_shapely(geometry: Geometry) -> BaseGeometry:
    """Build the shapely equivalent of a decoded geometry.

    Positions are passed in GeoJSON axis order, so ``x`` is the longitude
    and ``y`` the latitude.
    """
    if not isinstance(geometry, Geometry):
        raise TypeError(f"to_shapely expects a Geometry; got {type(geometry)!r}.")
    return shape(geometry)


# ---------------------------------------------------------------------------
# to_geodataframe
# ---------------------------------------------------------------------------


def to_geodataframe(
    collection: FeatureCollection,
    *,
    crs: str | None = None,
) -> gpd.GeoDataFrame:
    """Convert a feature collection into a :class:`~geopandas.GeoDataFrame`.

    Parameters
    ----------
    collection : FeatureCollection
        Decoded collection.  Each feature becomes one row, its properties
        become columns.
    crs : str | None
        CRS label to assign.  Defaults to ``"EPSG:4326"`` since GeoJSON
        positions are always WGS 84; no reprojection is performed.

    When at least one feature carries an ``id`` the frame is indexed by it
    (features without one get ``None``).
    """
    if not isinstance(collection, FeatureCollection):
        raise TypeError(
            f"to_geodataframe expects a FeatureCollection; got {type(collection)!r}."
        )

    records = [dict(feature.properties) for feature in collection.features]
    geometries = [to_shapely(feature.geometry) for feature in collection.features]
    gdf = gpd.GeoDataFrame(records, geometry=geometries, crs=crs or "EPSG:4326")

    ids = [
        feature.identifier.value if feature.identifier is not None else None
        for feature in collection.features
    ]
    if any(i is not None for i in ids):
        gdf.index = ids
        gdf.index.name = "id"
    return gdf
