"""Blitz gap classifier.

The gap is read purely from where the rush path ends: its side of the ball
picks Strong (diagram left) or Weak, and its distance from the ball picks
the gap letter.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from playsketch.catalog.labels import GapLabel
from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.results import GapClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import Confidence, DrawTool
from playsketch.core.geometry import endpoint_or, offset_from_center
from playsketch.core.point import Path, Point

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GapFeatures:
    center_offset: float
    strong_side: bool


GAP_LETTER_RULES = RuleTable([
    Rule("over the ball", lambda f, c: f.center_offset < c.a_gap_max, "A", Confidence.HIGH),
    Rule("guard-tackle", lambda f, c: f.center_offset < c.b_gap_max, "B", Confidence.HIGH),
    Rule("off tackle", lambda f, c: f.center_offset < c.c_gap_max, "C", Confidence.MEDIUM),
    Rule("edge", always, "D", Confidence.MEDIUM),
])


class BlitzGapClassifier(PathClassifier[GapFeatures, GapLabel]):
    kind = DrawTool.BLITZ
    rules = GAP_LETTER_RULES
    degenerate_label = GapLabel.STRONG_A

    def evaluate(self, features: GapFeatures, config: FieldConfig):
        # Rules pick the letter; the side comes straight from the features
        rule = self.rules.first_match(features, config)
        label = GapLabel.from_parts(features.strong_side, rule.label)
        logger.debug(f"blitz: rule '{rule.name}' -> {label.value} ({rule.confidence.value})")
        return Rule(rule.name, rule.when, label, rule.confidence)

    def classify(self, path: Path, config: Optional[FieldConfig] = None) -> GapClassification:
        config = resolve_config(config)
        end = endpoint_or(path, Point(config.center_x, config.line_of_scrimmage))

        if self.is_degenerate(path):
            self.log_degenerate(path)
            return GapClassification(
                label=self.degenerate_label, confidence=Confidence.LOW, endpoint=end,
            )

        features = GapFeatures(
            center_offset=offset_from_center(end.x, config),
            strong_side=end.x < config.center_x,
        )
        rule = self.evaluate(features, config)
        return GapClassification(label=rule.label, confidence=rule.confidence, endpoint=end)


blitz_classifier = BlitzGapClassifier()


def detect_blitz_gap(path: Path, config: Optional[FieldConfig] = None) -> GapClassification:
    """Detect which gap a drawn blitz attacks."""
    return blitz_classifier.classify(path, config)
