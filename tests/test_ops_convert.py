"""Tests for shapely / geopandas interop."""

import geopandas as gpd
import pytest
from shapely.geometry import LineString as ShapelyLineString
from shapely.geometry import Point as ShapelyPoint

from geojson_kit.feature import FeatureCollection
from geojson_kit.geometry import Geometry
from geojson_kit.ops import to_geodataframe, to_shapely


def _make_collection(with_ids: bool = True) -> FeatureCollection:
    features = []
    for i, (lon, lat) in enumerate([(10, 50), (11, 51)]):
        feature = {
            "type": "Feature",
            "geometry": {"type": "Point", "coordinates": [lon, lat]},
            "properties": {"name": f"p{i}", "value": i * 10},
        }
        if with_ids:
            feature["id"] = f"f{i}"
        features.append(feature)
    return FeatureCollection.parse({"type": "FeatureCollection", "features": features})


class TestToShapely:
    def test_point_axis_order(self):
        geom = Geometry.parse({"type": "Point", "coordinates": [10, 50]})
        shp = to_shapely(geom)
        assert isinstance(shp, ShapelyPoint)
        assert (shp.x, shp.y) == (10.0, 50.0)

    def test_line_string(self):
        geom = Geometry.parse({"type": "LineString", "coordinates": [[0, 0], [3, 4]]})
        shp = to_shapely(geom)
        assert isinstance(shp, ShapelyLineString)
        assert shp.length == pytest.approx(5.0)

    def test_every_kind(self, geometry_collection_doc):
        for member in geometry_collection_doc["geometries"]:
            geom = Geometry.parse(member)
            assert to_shapely(geom).geom_type == geom.geom_type

    def test_polygon_with_hole(self, geometry_collection_doc):
        geom = Geometry.parse(geometry_collection_doc["geometries"][4])
        shp = to_shapely(geom)
        assert len(shp.geoms) == 2
        assert len(shp.geoms[1].interiors) == 1

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_shapely({"type": "Point", "coordinates": [0, 0]})


class TestToGeoDataFrame:
    def test_rows_and_columns(self):
        gdf = to_geodataframe(_make_collection())
        assert isinstance(gdf, gpd.GeoDataFrame)
        assert len(gdf) == 2
        assert list(gdf["name"]) == ["p0", "p1"]
        assert gdf.geometry.iloc[1].equals(ShapelyPoint(11, 51))

    def test_default_crs(self):
        gdf = to_geodataframe(_make_collection())
        assert gdf.crs.to_epsg() == 4326

    def test_crs_label(self):
        gdf = to_geodataframe(_make_collection(), crs="EPSG:3857")
        assert gdf.crs.to_epsg() == 3857

    def test_indexed_by_id(self):
        gdf = to_geodataframe(_make_collection())
        assert gdf.index.name == "id"
        assert list(gdf.index) == ["f0", "f1"]

    def test_without_ids(self):
        gdf = to_geodataframe(_make_collection(with_ids=False))
        assert gdf.index.name is None

    def test_rejects_other_types(self):
        with pytest.raises(TypeError):
            to_geodataframe([])
