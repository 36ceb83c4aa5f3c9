"""Shared machinery for the path classifiers.

Every classifier is an ordered rule table evaluated first-match-wins. A rule
is a (predicate, label, confidence) triple; the table's order is its
priority, so reordering rules changes what the coach sees.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum
from typing import Any, Callable, ClassVar, Generic, Iterator, List, Sequence, TypeVar

from playsketch.config import FieldConfig
from playsketch.core.enums import Confidence, DrawTool
from playsketch.core.point import Path

logger = logging.getLogger(__name__)

TFeatures = TypeVar("TFeatures")
TLabel = TypeVar("TLabel", bound=Enum)

Predicate = Callable[[Any, FieldConfig], bool]


def always(features: Any, config: FieldConfig) -> bool:
    """Catch-all predicate that closes every rule table."""
    return True


@dataclass(frozen=True)
class Rule(Generic[TLabel]):
    """One row of a rule table.

    Attributes:
        name: Short description shown in debug logs
        when: Predicate over (features, config)
        label: Label produced when the predicate holds
        confidence: Fixed confidence for this rule
    """
    name: str
    when: Predicate
    label: TLabel
    confidence: Confidence

    def matches(self, features: Any, config: FieldConfig) -> bool:
        return bool(self.when(features, config))


class RuleTable(Generic[TLabel]):
    """Ordered rules, first match wins. Must end with a catch-all."""

    def __init__(self, rules: Sequence[Rule[TLabel]]):
        if not rules:
            raise ValueError("Rule table needs at least one rule")
        if rules[-1].when is not always:
            raise ValueError(f"Last rule '{rules[-1].name}' must be a catch-all")
        self._rules = tuple(rules)

    def first_match(self, features: Any, config: FieldConfig) -> Rule[TLabel]:
        for rule in self._rules:
            if rule.matches(features, config):
                return rule
        # Unreachable: the final rule always matches
        return self._rules[-1]

    @property
    def fallback(self) -> Rule[TLabel]:
        return self._rules[-1]

    @property
    def labels(self) -> List[TLabel]:
        """Distinct labels in priority order."""
        seen: List[TLabel] = []
        for rule in self._rules:
            if rule.label not in seen:
                seen.append(rule.label)
        return seen

    def __iter__(self) -> Iterator[Rule[TLabel]]:
        return iter(self._rules)

    def __len__(self) -> int:
        return len(self._rules)


class PathClassifier(ABC, Generic[TFeatures, TLabel]):
    """Base for the five drawn-path classifiers.

    Subclasses supply a rule table, the label used for degenerate paths, and
    a classify() that extracts features and builds the tagged result.
    """

    kind: ClassVar[DrawTool]
    rules: ClassVar[RuleTable]
    degenerate_label: ClassVar[Enum]

    @staticmethod
    def is_degenerate(path: Path) -> bool:
        """Fewer than two points can't describe any movement."""
        return len(path) < 2

    def evaluate(self, features: TFeatures, config: FieldConfig) -> Rule[TLabel]:
        rule = self.rules.first_match(features, config)
        logger.debug(
            f"{self.kind.value}: rule '{rule.name}' -> "
            f"{rule.label.value} ({rule.confidence.value})"
        )
        return rule

    def log_degenerate(self, path: Path) -> None:
        logger.debug(
            f"{self.kind.value}: degenerate path ({len(path)} points), "
            f"defaulting to {self.degenerate_label.value}"
        )

    @abstractmethod
    def classify(self, path: Path, **kwargs):
        """Classify a drawn path. Never raises for any path length."""
