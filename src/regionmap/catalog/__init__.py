"""Region catalog: loaded regions, selection, status and highlight colours."""

from regionmap.catalog.models import Region, RegionStatus, RegionSummary
from regionmap.catalog.classifier import StatusClassifier
from regionmap.catalog.catalog import RegionCatalog

__all__ = [
    "Region",
    "RegionStatus",
    "RegionSummary",
    "StatusClassifier",
    "RegionCatalog",
]
