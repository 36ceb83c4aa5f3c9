"""Coverage zone classifier.

Reads a defender's drawn drop and names the zone he is responsible for. The
deeper the drop, the deeper the zone; shallow drops are a flat zone when
they finish wide, otherwise the defender is treated as playing man.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playsketch.catalog.labels import CoverageLabel
from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.results import CoverageClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import Confidence, DrawTool
from playsketch.core.geometry import endpoint_or, offset_from_center
from playsketch.core.point import Path, Point


@dataclass(frozen=True)
class ZoneFeatures:
    vertical_drop: float    # Alignment y minus endpoint y (positive = deeper)
    center_offset: float    # |endpoint x - center|


COVERAGE_RULES = RuleTable([
    Rule(
        "deep drop in the middle",
        lambda f, c: f.vertical_drop > c.deep_zone_drop and f.center_offset <= c.deep_third_band,
        CoverageLabel.DEEP_THIRD, Confidence.HIGH,
    ),
    Rule(
        "deep drop wide",
        lambda f, c: f.vertical_drop > c.deep_zone_drop,
        CoverageLabel.DEEP_HALF, Confidence.HIGH,
    ),
    Rule(
        "intermediate drop",
        lambda f, c: f.vertical_drop > c.quarter_drop,
        CoverageLabel.QUARTER, Confidence.MEDIUM,
    ),
    Rule(
        "short drop",
        lambda f, c: f.vertical_drop > c.hook_drop,
        CoverageLabel.HOOK_CURL, Confidence.MEDIUM,
    ),
    Rule(
        "shallow and wide",
        lambda f, c: f.center_offset > c.flat_min_offset,
        CoverageLabel.FLAT, Confidence.HIGH,
    ),
    Rule("no drop", always, CoverageLabel.MAN, Confidence.LOW),
])


class CoverageClassifier(PathClassifier[ZoneFeatures, CoverageLabel]):
    kind = DrawTool.COVERAGE
    rules = COVERAGE_RULES
    degenerate_label = CoverageLabel.MAN

    def classify(
        self,
        path: Path,
        player_start_y: float,
        config: Optional[FieldConfig] = None,
    ) -> CoverageClassification:
        config = resolve_config(config)
        end = endpoint_or(path, Point(config.center_x, player_start_y))

        if self.is_degenerate(path):
            self.log_degenerate(path)
            return CoverageClassification(
                label=self.degenerate_label, confidence=Confidence.LOW, endpoint=end,
            )

        features = ZoneFeatures(
            vertical_drop=player_start_y - end.y,
            center_offset=offset_from_center(end.x, config),
        )
        rule = self.evaluate(features, config)
        return CoverageClassification(label=rule.label, confidence=rule.confidence, endpoint=end)


coverage_classifier = CoverageClassifier()


def detect_coverage_zone(
    path: Path,
    player_start_y: float,
    config: Optional[FieldConfig] = None,
) -> CoverageClassification:
    """Detect a zone coverage drop. The endpoint is returned for rendering."""
    return coverage_classifier.classify(path, player_start_y, config)
