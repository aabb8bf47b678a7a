"""Bounding boxes over nested GeoJSON coordinate arrays.

Geometry is inspected structurally: an array whose first two entries are
finite numbers is a point, and an array holding at least one point is a
ring. Other arrays are containers and are recursed into. This treats
Polygon and MultiPolygon nestings the same without trusting the geometry
``type`` tag.
"""

from __future__ import annotations

import math
from dataclasses import dataclass


def is_number(value) -> bool:
    """True for finite JSON numbers (bools, NaN and Infinity excluded)."""
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    try:
        return math.isfinite(value)
    except OverflowError:
        return False


def as_point(value) -> tuple[float, float] | None:
    """Return (x, y) if ``value`` is a coordinate array, else None."""
    if isinstance(value, list) and len(value) >= 2 and is_number(value[0]) and is_number(value[1]):
        return (float(value[0]), float(value[1]))
    return None


@dataclass
class Bounds:
    """Axis-aligned bounding box accumulator.

    A fresh Bounds is degenerate (min > max) until the first point is added.
    """

    min_x: float = math.inf
    max_x: float = -math.inf
    min_y: float = math.inf
    max_y: float = -math.inf

    @property
    def range_x(self) -> float:
        return self.max_x - self.min_x

    @property
    def range_y(self) -> float:
        return self.max_y - self.min_y

    @property
    def is_empty(self) -> bool:
        return self.min_x > self.max_x or self.min_y > self.max_y

    @property
    def can_project(self) -> bool:
        """True when the box is non-empty and neither range is zero."""
        if self.is_empty:
            return False
        return self.range_x != 0 and self.range_y != 0

    def add_point(self, x: float, y: float) -> None:
        self.min_x = min(self.min_x, x)
        self.max_x = max(self.max_x, x)
        self.min_y = min(self.min_y, y)
        self.max_y = max(self.max_y, y)

    def contains(self, x: float, y: float) -> bool:
        """Inclusive containment test."""
        return self.min_x <= x <= self.max_x and self.min_y <= y <= self.max_y

    @classmethod
    def from_points(cls, points) -> "Bounds":
        bounds = cls()
        for x, y in points:
            bounds.add_point(x, y)
        return bounds


def iter_rings(coordinates):
    """Yield every ring in a nested coordinate array.

    A ring is an array with at least one point entry, or one with no array
    entries at all. Its other entries are malformed coordinates, left for
    the caller to skip. Any other array is a container (polygon,
    multipolygon) and is descended into.
    """
    if not isinstance(coordinates, list):
        return
    is_ring = any(as_point(item) is not None for item in coordinates) or not any(
        isinstance(item, list) for item in coordinates
    )
    if is_ring:
        yield coordinates
        return
    for item in coordinates:
        if isinstance(item, list):
            yield from iter_rings(item)


def scan_bounds(coordinates, bounds: Bounds | None = None) -> Bounds:
    """Fold every ring point in a nested coordinate array into ``bounds``.

    Args:
        coordinates: ``geometry.coordinates`` of one feature, any depth.
        bounds: Accumulator to extend. A new one is created if omitted.

    Returns:
        The accumulator. Entries that are not points are ignored.
    """
    if bounds is None:
        bounds = Bounds()

    for ring in iter_rings(coordinates):
        for entry in ring:
            point = as_point(entry)
            if point is not None:
                bounds.add_point(*point)
    return bounds


def feature_coordinates(feature) -> list | None:
    """Return ``feature.geometry.coordinates`` or None when it is missing."""
    if not isinstance(feature, dict):
        return None
    geometry = feature.get("geometry")
    if not isinstance(geometry, dict):
        return None
    coordinates = geometry.get("coordinates")
    if not isinstance(coordinates, list):
        return None
    return coordinates


def scan_collection(features: list) -> Bounds:
    """Bounds across every feature of a collection (not per feature)."""
    bounds = Bounds()
    for feature in features:
        coordinates = feature_coordinates(feature)
        if coordinates is not None:
            scan_bounds(coordinates, bounds)
    return bounds
