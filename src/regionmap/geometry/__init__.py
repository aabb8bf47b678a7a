"""Geometry layer: bounds, projection, path strings and hit-testing.

Pure functions and small stateful helpers; nothing here knows about the
catalog or its notifications.
"""

from regionmap.geometry.bounds import Bounds, scan_bounds, scan_collection
from regionmap.geometry.hittest import HitTester, RegionGeometry, point_in_ring
from regionmap.geometry.path import format_ring, parse_path
from regionmap.geometry.projector import ProjectedRing, Projector

__all__ = [
    "Bounds",
    "scan_bounds",
    "scan_collection",
    "HitTester",
    "RegionGeometry",
    "point_in_ring",
    "format_ring",
    "parse_path",
    "ProjectedRing",
    "Projector",
]
