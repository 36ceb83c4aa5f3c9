"""Classification results.

One frozen record per classifier, tagged by ``kind`` so callers holding a
mixed collection can dispatch on it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import ClassVar

from playsketch.catalog.labels import (
    BlockLabel,
    CoverageLabel,
    GapLabel,
    MotionLabel,
    RouteLabel,
)
from playsketch.classifiers.features import PathCharacteristics
from playsketch.core.enums import Confidence, DrawTool, MotionDirection
from playsketch.core.point import Point


@dataclass(frozen=True)
class ClassificationResult:
    """Suggested label plus how sure the rule table is."""
    kind: ClassVar[DrawTool]

    label: str
    confidence: Confidence

    def to_dict(self) -> dict:
        return {
            "kind": self.kind.value,
            "label": str(getattr(self.label, "value", self.label)),
            "confidence": self.confidence.value,
        }


@dataclass(frozen=True)
class RouteClassification(ClassificationResult):
    kind: ClassVar[DrawTool] = DrawTool.ROUTE

    label: RouteLabel
    characteristics: PathCharacteristics = PathCharacteristics()

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["characteristics"] = self.characteristics.to_dict()
        return data


@dataclass(frozen=True)
class BlockClassification(ClassificationResult):
    kind: ClassVar[DrawTool] = DrawTool.BLOCK

    label: BlockLabel


@dataclass(frozen=True)
class CoverageClassification(ClassificationResult):
    """Zone drop; endpoint is the landmark the renderer draws the zone on."""
    kind: ClassVar[DrawTool] = DrawTool.COVERAGE

    label: CoverageLabel
    endpoint: Point = Point()

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["endpoint"] = self.endpoint.to_dict()
        return data


@dataclass(frozen=True)
class GapClassification(ClassificationResult):
    kind: ClassVar[DrawTool] = DrawTool.BLITZ

    label: GapLabel
    endpoint: Point = Point()

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["endpoint"] = self.endpoint.to_dict()
        return data


@dataclass(frozen=True)
class MotionClassification(ClassificationResult):
    kind: ClassVar[DrawTool] = DrawTool.MOTION

    label: MotionLabel
    endpoint: Point = Point()
    direction: MotionDirection = MotionDirection.AWAY_FROM_CENTER

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["endpoint"] = self.endpoint.to_dict()
        data["direction"] = self.direction.value
        return data
