"""regionmap — GeoJSON region maps projected onto a canvas, with hit-testing.

Loads a FeatureCollection of administrative regions, projects it into
canvas-space path strings and answers "which region is under this point".
Rendering and widget wiring belong to the caller; this package returns
plain data and publishes change notifications on an EventBus.

Usage:

    from regionmap import RegionCatalog

    catalog = RegionCatalog()
    catalog.load_file("rus_simple_highcharts.geo.json")
    catalog.build_geometry()

    hit = catalog.hit_test(420.0, 310.0)
    if hit is not None:
        catalog.set_selected_region(hit.id)
"""

from regionmap.catalog import Region, RegionCatalog, RegionStatus, RegionSummary, StatusClassifier
from regionmap.comms import EventBus, RegionEvent
from regionmap.errors import (
    GeoJSONLoadError,
    GeoJSONParseError,
    GeoJSONReadError,
    MalformedFeatureError,
    RegionMapError,
    RegionNotFoundError,
)
from regionmap.geometry import Bounds, HitTester, Projector

__all__ = [
    "Region",
    "RegionCatalog",
    "RegionStatus",
    "RegionSummary",
    "StatusClassifier",
    "EventBus",
    "RegionEvent",
    "GeoJSONLoadError",
    "GeoJSONParseError",
    "GeoJSONReadError",
    "MalformedFeatureError",
    "RegionMapError",
    "RegionNotFoundError",
    "Bounds",
    "HitTester",
    "Projector",
]

__version__ = "0.1.0"
