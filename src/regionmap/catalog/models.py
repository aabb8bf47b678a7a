"""Region and RegionSummary models for the region catalog."""

from dataclasses import dataclass, field
from enum import Enum


class RegionStatus(str, Enum):
    """Well-known region statuses. Update calls may use other strings."""
    DEFAULT = "default"
    WARNING = "warning"
    DANGER = "danger"


def status_value(status) -> str:
    """Normalize a RegionStatus or string to its plain string value.

    Strings are kept as given; blank ones are rejected.
    """
    if isinstance(status, RegionStatus):
        return status.value
    value = str(status)
    if not value.strip():
        raise ValueError("Region status must be a non-empty string")
    return value


@dataclass
class RegionSummary:
    """What the hit-tester reports about a region."""

    id: str
    name: str
    status: str
    postal_code: str = ""

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "status": self.status,
            "postal-code": self.postal_code,
        }


@dataclass
class Region:
    """An administrative region projected onto the canvas.

    ``paths`` holds one path string per ring; ``rings`` holds the same points
    as numbers, rounded exactly as they were written into ``paths``.
    """

    id: str
    name: str
    paths: list[str]
    rings: list[list[tuple[float, float]]] = field(default_factory=list)
    postal_code: str = ""
    status: str = RegionStatus.DEFAULT.value

    def summary(self) -> RegionSummary:
        return RegionSummary(
            id=self.id,
            name=self.name,
            status=self.status,
            postal_code=self.postal_code,
        )

    def to_dict(self) -> dict:
        return {
            "id": self.id,
            "name": self.name,
            "postal-code": self.postal_code,
            "status": self.status,
            "paths": list(self.paths),
        }
