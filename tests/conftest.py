"""Shared fixtures – GeoJSON documents under ``tests/data``."""

import json
from pathlib import Path

import pytest

DATA_DIR = Path(__file__).parent / "data"


def load_json(name: str) -> dict:
    return json.loads((DATA_DIR / name).read_text(encoding="utf-8"))


@pytest.fixture
def geometry_collection_doc() -> dict:
    return load_json("GeometryCollection.json")


@pytest.fixture
def feature_collection_doc() -> dict:
    return load_json("FeatureCollection.json")


@pytest.fixture
def invalid_features() -> list[dict]:
    return load_json("InvalidFeature.json")["features"]
