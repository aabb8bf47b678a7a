"""RegionCatalog — owns the loaded regions, selection and highlight colours.

All mutation happens through load(), set_selected_region(),
clear_selection(), update_region_status() and the highlight methods. Each
publishes its notifications on ``self.bus`` before returning.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from loguru import logger

from regionmap.catalog.classifier import StatusClassifier
from regionmap.catalog.models import Region, RegionSummary, status_value
from regionmap.comms.event_bus import EventBus, RegionEvent
from regionmap.errors import MalformedFeatureError, RegionNotFoundError
from regionmap.geometry.bounds import scan_collection
from regionmap.geometry.hittest import HitTester
from regionmap.geometry.projector import Projector
from regionmap.loader import decode_geojson, parse_feature, read_source


class RegionCatalog:
    """Ordered collection of regions parsed from one GeoJSON map."""

    def __init__(
        self,
        settings=None,
        projector: Optional[Projector] = None,
        classifier: Optional[StatusClassifier] = None,
        bus: Optional[EventBus] = None,
    ):
        """Initialize an empty catalog.

        Args:
            settings: Settings instance; defaults to regionmap.config.settings
            projector: Canvas projector; built from settings if omitted
            classifier: Status table; built from settings if omitted
            bus: Event bus for change notifications; a new one if omitted
        """
        if settings is None:
            from regionmap.config import settings as default_settings
            settings = default_settings
        self.settings = settings
        self.projector = projector or Projector.from_settings(settings)
        self.classifier = classifier or StatusClassifier.from_settings(settings)
        self.bus = bus or EventBus()
        self.hit_tester = HitTester()

        self._regions: list[Region] = []
        self._colors: dict[str, str] = {}
        self._selected_region: str = ""

    def __len__(self) -> int:
        return len(self._regions)

    # ==================
    # Loading
    # ==================

    def load(self, data: bytes | str) -> int:
        """Replace the catalog with the regions of a GeoJSON FeatureCollection.

        Args:
            data: Raw GeoJSON document

        Returns:
            Number of regions loaded

        Raises:
            GeoJSONParseError: The document is unusable; the previous
                catalog is left untouched.
        """
        features = decode_geojson(data)
        logger.info(f"Parsing GeoJSON, {len(features)} features")

        bounds = scan_collection(features)
        logger.debug(
            f"Coordinate bounds: X[{bounds.min_x}, {bounds.max_x}] "
            f"Y[{bounds.min_y}, {bounds.max_y}]"
        )

        regions: list[Region] = []
        seen: set[str] = set()

        for idx, raw in enumerate(features):
            try:
                record = parse_feature(raw, idx)
                if record.region_id in seen:
                    raise MalformedFeatureError(
                        f"Feature #{idx} repeats region id {record.region_id}"
                    )
            except MalformedFeatureError as e:
                logger.warning(f"Skipped feature: {e}")
                continue

            projected = self.projector.project(record.coordinates, bounds)
            if not projected:
                logger.warning(f"Empty path for region: {record.name}")
                continue

            region = Region(
                id=record.region_id,
                name=record.name,
                postal_code=record.postal_code,
                paths=[ring.path for ring in projected],
                rings=[ring.points for ring in projected],
                status=self.classifier.classify(record.region_id),
            )
            regions.append(region)
            seen.add(region.id)
            logger.debug(f"Loaded region {region.name} ({region.id}), {len(region.paths)} paths")

        self._regions = regions
        self._colors = {region.id: self.settings.default_color for region in regions}
        logger.info(f"Loaded {len(regions)} regions")

        self.bus.publish(RegionEvent.REGIONS_CHANGED)
        return len(regions)

    def load_file(self, path: str | Path) -> int:
        """Read a GeoJSON file (falling back to ``settings.data_dir``) and load it.

        Raises:
            GeoJSONReadError: Neither location is readable.
            GeoJSONParseError: The document is unusable.
        """
        data = read_source(path, self.settings.data_dir)
        return self.load(data)

    # ==================
    # Queries
    # ==================

    def regions(self) -> list[Region]:
        """Snapshot of the regions in load (draw) order."""
        return list(self._regions)

    def get_region_by_id(self, region_id: str) -> Optional[Region]:
        for region in self._regions:
            if region.id == region_id:
                return region
        return None

    def _require(self, region_id: str) -> Region:
        region = self.get_region_by_id(region_id)
        if region is None:
            logger.warning(f"Region not found: {region_id}")
            raise RegionNotFoundError(region_id)
        return region

    # ==================
    # Selection
    # ==================

    @property
    def selected_region(self) -> str:
        """Selected region id, or "" when nothing is selected."""
        return self._selected_region

    def set_selected_region(self, region_id: str) -> None:
        if self._selected_region == region_id:
            return
        self._selected_region = region_id
        logger.debug(f"Selected region: {region_id}")
        self.bus.publish(RegionEvent.SELECTED_REGION_CHANGED, {"region_id": region_id})

    def clear_selection(self) -> None:
        if not self._selected_region:
            return
        self.set_selected_region("")

    # ==================
    # Status
    # ==================

    def update_region_status(self, region_id: str, status) -> None:
        """Change a region's status in place.

        Publishes ``region_status_changed`` and then ``regions_changed``
        when the status actually changes; the same status is a no-op.

        Raises:
            RegionNotFoundError: No region has this id.
        """
        region = self._require(region_id)
        status = status_value(status)
        if region.status == status:
            return

        region.status = status
        logger.info(f"Region {region_id} status -> {status}")
        self.bus.publish(
            RegionEvent.REGION_STATUS_CHANGED,
            {"region_id": region_id, "status": status},
        )
        self.bus.publish(RegionEvent.REGIONS_CHANGED)

    # ==================
    # Highlight colours
    # ==================

    def region_colors(self) -> dict[str, str]:
        return dict(self._colors)

    def highlight_region(self, region_id: str, color: str) -> None:
        """Paint one region with ``color``.

        Raises:
            RegionNotFoundError: No region has this id.
        """
        self._require(region_id)
        self._colors[region_id] = color
        logger.debug(f"Highlighted region {region_id} with {color}")
        self.bus.publish(RegionEvent.REGION_COLORS_CHANGED, {"region_id": region_id, "color": color})

    def clear_highlights(self) -> None:
        """Reset every colour to the default and drop the selection."""
        default = self.settings.default_color
        self._colors = {region_id: default for region_id in self._colors}
        self._selected_region = ""
        logger.debug("Cleared all highlights")
        self.bus.publish(RegionEvent.REGION_COLORS_CHANGED)
        self.bus.publish(RegionEvent.SELECTED_REGION_CHANGED, {"region_id": ""})

    # ==================
    # Hit testing
    # ==================

    def build_geometry(self) -> None:
        """Rebuild the hit-test cache. Call after every load."""
        self.hit_tester.build(self._regions)

    def hit_test(
        self,
        x: float,
        y: float,
        scale: float = 1.0,
        offset_x: float = 0.0,
        offset_y: float = 0.0,
    ) -> Optional[RegionSummary]:
        """Topmost region under a view point, using the last built geometry."""
        return self.hit_tester.hit_test(x, y, scale, offset_x, offset_y)

    def notify_region_clicked(self, region_id: str, name: str) -> None:
        """Forward a pointer click from the UI layer to listeners."""
        self.bus.publish(RegionEvent.REGION_CLICKED, {"region_id": region_id, "name": name})
