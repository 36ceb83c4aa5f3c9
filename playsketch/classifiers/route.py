"""Route classifier.

Detects the pass route a coach drew for a receiver. Rules are ordered from
most to least specific and the first match wins; this order is a product
decision and must not be shuffled.
"""

from __future__ import annotations

from typing import Optional

from playsketch.catalog.labels import RouteLabel
from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.features import (
    PathCharacteristics,
    RouteFeatures,
    extract_route_features,
)
from playsketch.classifiers.results import RouteClassification
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import (
    Confidence,
    Curvature,
    Direction,
    DrawTool,
    EndDirection,
    PlayerSide,
)
from playsketch.core.point import Path


def _returns_to_line(f: RouteFeatures, c: FieldConfig) -> bool:
    """Works back toward the line, or cuts and finishes flat."""
    return f.end_direction == EndDirection.BACK or (
        f.has_major_break and -c.curl_flat_band < f.net_vertical < c.curl_flat_band
    )


ROUTE_RULES = RuleTable([
    Rule(
        "deep straight vertical",
        lambda f, c: (f.is_deep and f.direction == Direction.UPFIELD and not f.has_major_break
                      and abs(f.net_horizontal) < c.go_max_drift),
        RouteLabel.GO, Confidence.HIGH,
    ),
    Rule(
        "deep break inside",
        lambda f, c: f.is_deep and f.has_major_break and f.end_direction == EndDirection.INSIDE,
        RouteLabel.POST, Confidence.HIGH,
    ),
    Rule(
        "deep break outside",
        lambda f, c: f.is_deep and f.has_major_break and f.end_direction == EndDirection.OUTSIDE,
        RouteLabel.CORNER, Confidence.HIGH,
    ),
    Rule(
        "medium-deep straight upfield",
        lambda f, c: ((f.is_medium or f.is_deep) and f.direction == Direction.UPFIELD
                      and not f.has_major_break),
        RouteLabel.SEAM, Confidence.MEDIUM,
    ),
    Rule(
        "medium break outside",
        lambda f, c: (f.is_medium and f.has_major_break and f.end_direction == EndDirection.OUTSIDE
                      and f.direction != Direction.DOWNFIELD),
        RouteLabel.OUT, Confidence.HIGH,
    ),
    Rule(
        "medium break inside",
        lambda f, c: f.is_medium and f.has_major_break and f.end_direction == EndDirection.INSIDE,
        RouteLabel.IN_DIG, Confidence.HIGH,
    ),
    # Same predicate split on depth: medium comes back as a Comeback, else a Curl
    Rule(
        "medium comes back",
        lambda f, c: _returns_to_line(f, c) and f.is_medium,
        RouteLabel.COMEBACK, Confidence.MEDIUM,
    ),
    Rule(
        "comes back",
        _returns_to_line,
        RouteLabel.CURL, Confidence.MEDIUM,
    ),
    Rule(
        "short-medium diagonal inside",
        lambda f, c: ((f.is_short or f.is_medium) and f.is_moving_inside and not f.has_major_break
                      and f.net_vertical > c.slant_min_rise),
        RouteLabel.SLANT, Confidence.HIGH,
    ),
    Rule(
        "short straight upfield",
        lambda f, c: f.is_short and f.direction == Direction.UPFIELD and not f.has_major_break,
        RouteLabel.HITCH, Confidence.MEDIUM,
    ),
    Rule(
        "short lateral",
        lambda f, c: f.is_short and f.direction == Direction.LATERAL,
        RouteLabel.FLAT, Confidence.HIGH,
    ),
    Rule(
        "short curved",
        lambda f, c: f.is_short and f.curvature == Curvature.CURVED,
        RouteLabel.SWING, Confidence.MEDIUM,
    ),
    Rule(
        "medium break turning vertical",
        lambda f, c: f.is_medium and f.has_major_break and f.end_direction == EndDirection.VERTICAL,
        RouteLabel.WHEEL, Confidence.MEDIUM,
    ),
    Rule(
        "medium lateral inside",
        lambda f, c: f.is_medium and f.direction == Direction.LATERAL and f.is_moving_inside,
        RouteLabel.SHALLOW_CROSS, Confidence.MEDIUM,
    ),
    Rule(
        "deep lateral",
        lambda f, c: f.is_deep and f.direction == Direction.LATERAL,
        RouteLabel.DEEP_CROSS, Confidence.LOW,
    ),
    Rule("no match", always, RouteLabel.CUSTOM, Confidence.LOW),
])


class RouteClassifier(PathClassifier[RouteFeatures, RouteLabel]):
    """Pass route detection for receivers, backs and tight ends."""

    kind = DrawTool.ROUTE
    rules = ROUTE_RULES
    degenerate_label = RouteLabel.CUSTOM

    def classify(
        self,
        path: Path,
        player_side: PlayerSide = PlayerSide.OFFENSE,
        player_start_x: Optional[float] = None,
        config: Optional[FieldConfig] = None,
    ) -> RouteClassification:
        config = resolve_config(config)
        if self.is_degenerate(path):
            self.log_degenerate(path)
            return RouteClassification(
                label=self.degenerate_label,
                confidence=Confidence.LOW,
                characteristics=PathCharacteristics(),
            )

        features = extract_route_features(path, player_side, player_start_x, config)
        rule = self.evaluate(features, config)
        return RouteClassification(
            label=rule.label,
            confidence=rule.confidence,
            characteristics=features.characteristics,
        )


route_classifier = RouteClassifier()


def detect_route_type(
    path: Path,
    player_side: PlayerSide = PlayerSide.OFFENSE,
    player_start_x: Optional[float] = None,
    config: Optional[FieldConfig] = None,
) -> RouteClassification:
    """Detect route type from a drawn path.

    Args:
        path: Drawn points in diagram space
        player_side: Offense or defense (does not alter the geometry)
        player_start_x: Receiver's pre-snap x, used to judge inside vs outside.
            Defaults to the first point of the path.
        config: Field layout and thresholds (process default if omitted)

    Returns:
        RouteClassification with the suggested route, confidence and the
        computed characteristics.
    """
    return route_classifier.classify(path, player_side, player_start_x, config)
