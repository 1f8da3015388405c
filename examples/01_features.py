from geojson_kit import load_geojson
from geojson_kit.ops import to_geodataframe

# A small collection with one malformed feature (a 3-element position)
document = {
    "type": "FeatureCollection",
    "layerName": "Landmarks",
    "bbox": [-106.5, 35.0, -106.4, 35.1],
    "features": [
        {
            "type": "Feature",
            "id": 1,
            "geometry": {"type": "Point", "coordinates": [-106.45, 35.05]},
            "properties": {"name": "Old Town"},
        },
        {
            "type": "Feature",
            "id": 2,
            "geometry": {"type": "Point", "coordinates": [-106.42, 35.08, 1500]},
            "properties": {"name": "Summit"},
        },
    ],
}

collection = load_geojson(document)
print(f"Loaded {len(collection.features)} of {len(document['features'])} features "
      f"from layer {collection.get('layerName')!r}")

for feature in collection:
    print(feature.identifier, feature.properties["name"], feature.geometry.point)

gdf = to_geodataframe(collection)
print(gdf)
