"""Id-based status classification.

The id lists are deployment policy (one dataset's sample highlights), so
they come from configuration rather than code.
"""

from __future__ import annotations

from regionmap.catalog.models import RegionStatus, status_value


class StatusClassifier:
    """Maps region ids to statuses through an ordered table.

    The first status whose id set contains the region id wins; ids in no
    set get ``default``.
    """

    def __init__(self, rules: dict | None = None, default: str = RegionStatus.DEFAULT.value):
        self.default = status_value(default)
        self._rules: list[tuple[str, frozenset[str]]] = [
            (status_value(status), frozenset(str(i) for i in ids))
            for status, ids in (rules or {}).items()
        ]

    @classmethod
    def from_settings(cls, settings) -> "StatusClassifier":
        return cls(rules=settings.status_rules)

    @property
    def rules(self) -> dict[str, frozenset[str]]:
        return dict(self._rules)

    def classify(self, region_id: str) -> str:
        for status, ids in self._rules:
            if region_id in ids:
                return status
        return self.default
