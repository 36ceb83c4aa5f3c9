"""Pre-snap motion classifier."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playsketch.catalog.labels import MotionLabel
from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.results import MotionClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import Confidence, DrawTool, MotionDirection
from playsketch.core.geometry import endpoint_or, offset_from_center
from playsketch.core.point import Path, Point


@dataclass(frozen=True)
class MotionFeatures:
    horizontal: float       # |end.x - start.x|
    vertical: float         # |end.y - start.y|
    point_count: int
    end_y: float
    direction: MotionDirection

    @property
    def toward_center(self) -> bool:
        return self.direction == MotionDirection.TOWARD_CENTER


MOTION_RULES = RuleTable([
    Rule(
        "fast across behind the line",
        lambda f, c: (f.horizontal > c.jet_min_lateral and f.toward_center
                      and f.end_y > c.line_of_scrimmage + c.jet_behind_line),
        MotionLabel.JET, Confidence.HIGH,
    ),
    Rule(
        "looping arc",
        lambda f, c: (f.point_count > c.orbit_min_points and f.vertical > c.orbit_min_vertical
                      and f.horizontal > c.orbit_min_lateral),
        MotionLabel.ORBIT, Confidence.MEDIUM,
    ),
    Rule(
        "flat lateral",
        lambda f, c: f.horizontal > c.across_min_lateral and f.vertical < c.across_max_vertical,
        MotionLabel.ACROSS, Confidence.HIGH,
    ),
    Rule(
        "short move outside",
        lambda f, c: not f.toward_center and f.horizontal > c.return_min_lateral,
        MotionLabel.RETURN, Confidence.MEDIUM,
    ),
    Rule("realign", always, MotionLabel.SHIFT, Confidence.LOW),
])


def motion_direction(
    end: Point,
    player_start_x: float,
    config: Optional[FieldConfig] = None,
) -> MotionDirection:
    """Toward center when the motion finishes closer to the ball than it began."""
    config = resolve_config(config)
    if offset_from_center(end.x, config) < offset_from_center(player_start_x, config):
        return MotionDirection.TOWARD_CENTER
    return MotionDirection.AWAY_FROM_CENTER


class MotionClassifier(PathClassifier[MotionFeatures, MotionLabel]):
    kind = DrawTool.MOTION
    rules = MOTION_RULES
    degenerate_label = MotionLabel.SHIFT

    def classify(
        self,
        path: Path,
        player_start_x: Optional[float] = None,
        config: Optional[FieldConfig] = None,
    ) -> MotionClassification:
        config = resolve_config(config)
        if player_start_x is None:
            player_start_x = path[0].x if path else config.center_x
        end = endpoint_or(path, Point(player_start_x, config.line_of_scrimmage))
        direction = motion_direction(end, player_start_x, config)

        if self.is_degenerate(path):
            self.log_degenerate(path)
            return MotionClassification(
                label=self.degenerate_label,
                confidence=Confidence.LOW,
                endpoint=end,
                direction=direction,
            )

        start = path[0]
        features = MotionFeatures(
            horizontal=abs(end.x - start.x),
            vertical=abs(end.y - start.y),
            point_count=len(path),
            end_y=end.y,
            direction=direction,
        )
        rule = self.evaluate(features, config)
        return MotionClassification(
            label=rule.label,
            confidence=rule.confidence,
            endpoint=end,
            direction=direction,
        )


motion_classifier = MotionClassifier()


def detect_motion_type(
    path: Path,
    player_start_x: Optional[float] = None,
    config: Optional[FieldConfig] = None,
) -> MotionClassification:
    """Detect a pre-snap motion from a drawn path."""
    return motion_classifier.classify(path, player_start_x, config)
