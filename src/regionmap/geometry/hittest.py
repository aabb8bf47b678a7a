"""Point-in-region queries over projected region geometry.

The geometry cache is derived data: build() must be called after every
catalog reload and before hit_test(), otherwise answers come from whatever
was built last.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Iterable

from loguru import logger

from regionmap.geometry.bounds import Bounds
from regionmap.geometry.path import Point

if TYPE_CHECKING:
    from regionmap.catalog.models import Region, RegionSummary


def point_in_ring(ring: list[Point], x: float, y: float) -> bool:
    """Even-odd ray casting along +X.

    For an axis-aligned ring, a point exactly on the minimum-x or minimum-y
    edge counts as inside; on the maximum-x or maximum-y edge as outside.
    Rings with fewer than 3 points never match.
    """
    n = len(ring)
    if n < 3:
        return False

    inside = False
    j = n - 1

    for i in range(n):
        xi, yi = ring[i]
        xj, yj = ring[j]

        if ((yi > y) != (yj > y)) and (x < (xj - xi) * (y - yi) / (yj - yi) + xi):
            inside = not inside
        j = i

    return inside


@dataclass
class RegionGeometry:
    """Bounding box and point rings for one region."""

    region: Region
    bounds: Bounds
    rings: list[list[Point]] = field(default_factory=list)

    def contains(self, x: float, y: float) -> bool:
        """True if any single ring contains the point; rings are not combined."""
        if not self.bounds.contains(x, y):
            return False
        return any(point_in_ring(ring, x, y) for ring in self.rings)


class HitTester:
    """Finds the topmost region under a canvas point."""

    def __init__(self) -> None:
        self._geometry: list[RegionGeometry] = []

    def __len__(self) -> int:
        return len(self._geometry)

    def build(self, regions: Iterable[Region]) -> None:
        """Rebuild the geometry cache from regions, in draw order."""
        geometry = []
        for region in regions:
            rings = [list(ring) for ring in region.rings]
            bounds = Bounds.from_points(p for ring in rings for p in ring)
            geometry.append(RegionGeometry(region=region, bounds=bounds, rings=rings))
        self._geometry = geometry
        logger.debug(f"Built hit-test geometry for {len(geometry)} regions")

    def clear(self) -> None:
        self._geometry = []

    def geometry_for(self, region_id: str) -> RegionGeometry | None:
        for geom in self._geometry:
            if geom.region.id == region_id:
                return geom
        return None

    def find(self, x: float, y: float, scale: float = 1.0,
             offset_x: float = 0.0, offset_y: float = 0.0) -> Region | None:
        """Return the topmost region containing the point, or None.

        The query point is mapped into path space as
        ``((x - offset_x) / scale, (y - offset_y) / scale)``. Regions are
        tested in reverse draw order so the last-drawn region wins.
        """
        if scale <= 0:
            logger.warning(f"Hit test ignored: non-positive scale {scale}")
            return None

        map_x = (x - offset_x) / scale
        map_y = (y - offset_y) / scale

        for geom in reversed(self._geometry):
            if geom.contains(map_x, map_y):
                return geom.region
        return None

    def hit_test(self, x: float, y: float, scale: float = 1.0,
                 offset_x: float = 0.0, offset_y: float = 0.0) -> RegionSummary | None:
        """Like find(), but returns the region's summary instead."""
        region = self.find(x, y, scale, offset_x, offset_y)
        if region is None:
            return None
        return region.summary()
