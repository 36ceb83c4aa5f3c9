"""
Drawn-path classifiers.

Five rule-table classifiers share one shape: extract features from the path,
walk an ordered rule table, return a tagged result. Degenerate paths (fewer
than two points) never raise; they get the classifier's default label at low
confidence.

Example usage:
    from playsketch.classifiers import classify_path, detect_route_type
    from playsketch.core import DrawTool, Point

    result = detect_route_type([Point(100, 200), Point(100, 0)], player_start_x=100)
    result.label        # RouteLabel.GO ("Go/Streak/9")
    result.confidence   # Confidence.HIGH

    classify_path(DrawTool.BLITZ, [Point(350, 150), Point(340, 205)])
"""

from playsketch.classifiers.base import PathClassifier, Rule, RuleTable, always
from playsketch.classifiers.blitz import (
    GAP_LETTER_RULES,
    BlitzGapClassifier,
    detect_blitz_gap,
)
from playsketch.classifiers.blocking import (
    BLOCK_RULES,
    BlockingClassifier,
    detect_blocking_type,
)
from playsketch.classifiers.coverage import (
    COVERAGE_RULES,
    CoverageClassifier,
    detect_coverage_zone,
)
from playsketch.classifiers.dispatch import classify_path
from playsketch.classifiers.features import (
    DistanceBand,
    PathCharacteristics,
    RouteFeatures,
    detect_break,
    distance_band,
    extract_characteristics,
    extract_route_features,
)
from playsketch.classifiers.motion import (
    MOTION_RULES,
    MotionClassifier,
    detect_motion_type,
    motion_direction,
)
from playsketch.classifiers.results import (
    BlockClassification,
    ClassificationResult,
    CoverageClassification,
    GapClassification,
    MotionClassification,
    RouteClassification,
)
from playsketch.classifiers.route import ROUTE_RULES, RouteClassifier, detect_route_type

__all__ = [
    # Machinery
    "PathClassifier",
    "Rule",
    "RuleTable",
    "always",
    # Features
    "DistanceBand",
    "PathCharacteristics",
    "RouteFeatures",
    "detect_break",
    "distance_band",
    "extract_characteristics",
    "extract_route_features",
    # Results
    "ClassificationResult",
    "RouteClassification",
    "BlockClassification",
    "CoverageClassification",
    "GapClassification",
    "MotionClassification",
    # Classifiers
    "RouteClassifier",
    "BlockingClassifier",
    "CoverageClassifier",
    "BlitzGapClassifier",
    "MotionClassifier",
    "ROUTE_RULES",
    "BLOCK_RULES",
    "COVERAGE_RULES",
    "GAP_LETTER_RULES",
    "MOTION_RULES",
    # Functions
    "classify_path",
    "detect_route_type",
    "detect_blocking_type",
    "detect_coverage_zone",
    "detect_blitz_gap",
    "detect_motion_type",
    "motion_direction",
]
