"""Blocking assignment classifier for offensive linemen."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from playsketch.catalog.labels import BlockLabel
from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.results import BlockClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import Confidence, DrawTool
from playsketch.core.geometry import path_distance
from playsketch.core.point import Path


@dataclass(frozen=True)
class BlockFeatures:
    total_distance: float
    lateral: float      # Unsigned net horizontal movement


BLOCK_RULES = RuleTable([
    Rule(
        "long lateral trip",
        lambda f, c: f.lateral > c.pull_min_lateral and f.total_distance > c.pull_min_distance,
        BlockLabel.PULL, Confidence.HIGH,
    ),
    Rule(
        "short fire-out",
        lambda f, c: f.total_distance < c.run_block_max_distance,
        BlockLabel.RUN_BLOCK, Confidence.MEDIUM,
    ),
    Rule("set and hold", always, BlockLabel.PASS_BLOCK, Confidence.MEDIUM),
])


class BlockingClassifier(PathClassifier[BlockFeatures, BlockLabel]):
    kind = DrawTool.BLOCK
    rules = BLOCK_RULES
    degenerate_label = BlockLabel.PASS_BLOCK

    def classify(self, path: Path, config: Optional[FieldConfig] = None) -> BlockClassification:
        config = resolve_config(config)
        if self.is_degenerate(path):
            self.log_degenerate(path)
            return BlockClassification(label=self.degenerate_label, confidence=Confidence.LOW)

        features = BlockFeatures(
            total_distance=path_distance(path),
            lateral=abs(path[-1].x - path[0].x),
        )
        rule = self.evaluate(features, config)
        return BlockClassification(label=rule.label, confidence=rule.confidence)


blocking_classifier = BlockingClassifier()


def detect_blocking_type(path: Path, config: Optional[FieldConfig] = None) -> BlockClassification:
    """Detect blocking assignment from a drawn path."""
    return blocking_classifier.classify(path, config)
