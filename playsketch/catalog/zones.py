"""Coverage zone rendering hints."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playsketch.catalog.labels import CoverageLabel
from playsketch.core.point import Point


DEEP_COVERAGE_ROLES = (CoverageLabel.DEEP_THIRD, CoverageLabel.DEEP_HALF, CoverageLabel.QUARTER)

DEEP_ZONE_COLOR = "#1E40AF"
SHALLOW_ZONE_COLOR = "#CA8A04"

# Ellipse size when the drop has no extent on an axis
MIN_ZONE_WIDTH = 50.0
MIN_ZONE_HEIGHT = 30.0


@dataclass(frozen=True)
class ZoneShape:
    """Ellipse the diagram draws around a zone defender's landmark."""
    center: Point
    width: float
    height: float
    is_deep: bool
    color: str

    def to_dict(self) -> dict:
        return {
            "center": self.center.to_dict(),
            "width": self.width,
            "height": self.height,
            "is_deep": self.is_deep,
            "color": self.color,
        }


def is_deep_zone(label: str) -> bool:
    return label in DEEP_COVERAGE_ROLES


def zone_shape(start: Point, label: str, endpoint: Point) -> Optional[ZoneShape]:
    """Ellipse for a zone drop, or None for man coverage."""
    if label == CoverageLabel.MAN:
        return None

    deep = is_deep_zone(label)
    return ZoneShape(
        center=endpoint,
        width=abs(endpoint.x - start.x) or MIN_ZONE_WIDTH,
        height=abs(endpoint.y - start.y) or MIN_ZONE_HEIGHT,
        is_deep=deep,
        color=DEEP_ZONE_COLOR if deep else SHALLOW_ZONE_COLOR,
    )
