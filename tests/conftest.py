"""Shared fixtures for regionmap tests."""

from __future__ import annotations

import json

import pytest
from loguru import logger

from regionmap.catalog import RegionCatalog, StatusClassifier
from regionmap.config import Settings


def square(x0: float, y0: float, size: float) -> list[list[float]]:
    """Closed GeoJSON ring for an axis-aligned square."""
    return [
        [x0, y0],
        [x0 + size, y0],
        [x0 + size, y0 + size],
        [x0, y0 + size],
        [x0, y0],
    ]


def feature(
    hc_key: str | None,
    coordinates: list,
    name: str | None = None,
    postal_code: str | None = None,
    geometry_type: str = "Polygon",
) -> dict:
    properties = {}
    if hc_key is not None:
        properties["hc-key"] = hc_key
    if name is not None:
        properties["name"] = name
    if postal_code is not None:
        properties["postal-code"] = postal_code
    return {
        "type": "Feature",
        "properties": properties,
        "geometry": {"type": geometry_type, "coordinates": coordinates},
    }


def collection(*features: dict) -> bytes:
    return json.dumps({"type": "FeatureCollection", "features": list(features)}).encode("utf-8")


@pytest.fixture
def geo():
    """GeoJSON builders: geo.square(), geo.feature(), geo.collection()."""
    class _Geo:
        pass

    builders = _Geo()
    builders.square = square
    builders.feature = feature
    builders.collection = collection
    return builders


@pytest.fixture
def moscow_geojson() -> bytes:
    """One MultiPolygon region made of two squares at different offsets."""
    return collection(
        feature(
            "11001",
            [[square(0, 0, 10)], [square(20, 20, 10)]],
            name="Moscow",
            postal_code="MOW",
            geometry_type="MultiPolygon",
        )
    )


@pytest.fixture
def settings(tmp_path) -> Settings:
    """Default canvas (1000x700, no padding) with data_dir inside tmp_path."""
    return Settings(_env_file=None, data_dir=tmp_path / "data")


@pytest.fixture
def catalog(settings) -> RegionCatalog:
    return RegionCatalog(settings)


@pytest.fixture
def sample_status_rules() -> dict[str, list[str]]:
    """Status table shipped with the Russian regions sample map."""
    return {
        "warning": ["10312", "10401", "10404", "10201"],
        "danger": ["10202", "10505", "10205", "11103"],
    }


@pytest.fixture
def classifier(sample_status_rules) -> StatusClassifier:
    return StatusClassifier(sample_status_rules)


@pytest.fixture
def events(catalog) -> list[dict]:
    """Every message published on the catalog's bus, in order."""
    received: list[dict] = []
    catalog.bus.subscribe(received.append)
    return received


@pytest.fixture
def log_messages():
    """Capture loguru messages (DEBUG and above) for the duration of a test."""
    messages: list[str] = []
    handler_id = logger.add(lambda m: messages.append(m.record["message"]), level="DEBUG")
    yield messages
    logger.remove(handler_id)
