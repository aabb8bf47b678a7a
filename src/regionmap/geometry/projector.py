"""Linear projection of geographic coordinates onto a fixed canvas.

One uniform scale factor is fitted to the smaller axis so the aspect ratio
is preserved. Y is flipped: latitude grows northward, canvas Y grows down.
This is a min/max normalization, not a cartographic projection.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from loguru import logger

from regionmap.geometry.bounds import Bounds, as_point, iter_rings
from regionmap.geometry.path import Point, format_ring, round_point


@dataclass
class ProjectedRing:
    """One projected ring: its path string and the points it encodes."""

    path: str
    points: list[Point] = field(default_factory=list)


class Projector:
    """Maps lon/lat into canvas pixels and emits per-ring path strings."""

    def __init__(self, width: float = 1000.0, height: float = 700.0, padding: float = 0.0):
        if width <= 2 * padding or height <= 2 * padding:
            raise ValueError(
                f"Canvas {width}x{height} leaves no room for padding {padding}"
            )
        self.width = width
        self.height = height
        self.padding = padding

    @classmethod
    def from_settings(cls, settings) -> "Projector":
        return cls(
            width=settings.canvas_width,
            height=settings.canvas_height,
            padding=settings.canvas_padding,
        )

    def scale_for(self, bounds: Bounds) -> float:
        """Uniform scale fitting ``bounds`` into the padded canvas.

        Raises:
            ValueError: If the bounds are empty or have a zero range.
        """
        if not bounds.can_project:
            raise ValueError(f"Cannot project degenerate bounds {bounds}")
        scale_x = (self.width - 2 * self.padding) / bounds.range_x
        scale_y = (self.height - 2 * self.padding) / bounds.range_y
        return min(scale_x, scale_y)

    def project_point(self, x: float, y: float, bounds: Bounds, scale: float) -> Point:
        px = (x - bounds.min_x) * scale + self.padding
        py = self.height - ((y - bounds.min_y) * scale + self.padding)
        return (px, py)

    def project(self, coordinates, bounds: Bounds) -> list[ProjectedRing]:
        """Project one feature's coordinates.

        Args:
            coordinates: ``geometry.coordinates`` (Polygon or MultiPolygon).
            bounds: Collection-wide bounds from the first pass.

        Returns:
            One ProjectedRing per ring that had at least one usable point.
            Empty when the bounds cannot be projected. Never raises on
            malformed coordinates; bad entries are skipped.
        """
        if not bounds.can_project:
            logger.warning(
                f"Invalid coordinate range: X[{bounds.min_x}, {bounds.max_x}] "
                f"Y[{bounds.min_y}, {bounds.max_y}]"
            )
            return []

        scale = self.scale_for(bounds)
        rings: list[ProjectedRing] = []

        for ring in iter_rings(coordinates):
            points = []
            for entry in ring:
                point = as_point(entry)
                if point is None:
                    continue
                px, py = self.project_point(point[0], point[1], bounds, scale)
                points.append(round_point(px, py))
            if not points:
                continue
            rings.append(ProjectedRing(path=format_ring(points), points=points))

        return rings
