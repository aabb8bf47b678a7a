"""Exception hierarchy for the region map core.

Whole-document failures (unreadable source, malformed JSON) raise and leave
the current catalog untouched. Per-feature problems use MalformedFeatureError
internally and are logged and skipped by the catalog.
"""

from __future__ import annotations


class RegionMapError(Exception):
    """Base class for all region map errors."""


class GeoJSONLoadError(RegionMapError):
    """A GeoJSON document could not be loaded into the catalog."""


class GeoJSONReadError(GeoJSONLoadError):
    """The source bytes could not be read."""


class GeoJSONParseError(GeoJSONLoadError):
    """The document is not a usable GeoJSON FeatureCollection."""


class MalformedFeatureError(RegionMapError):
    """A single feature is missing its id or geometry."""


class RegionNotFoundError(RegionMapError, KeyError):
    """No region with the requested id exists in the catalog."""

    def __init__(self, region_id: str):
        super().__init__(region_id)
        self.region_id = region_id

    def __str__(self) -> str:
        return f"Region not found: {self.region_id}"
