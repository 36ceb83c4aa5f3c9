"""
playsketch - turn hand-drawn play diagram paths into football concepts.

A coach drags a path for one player; the classifiers name it (Post, Pull,
Deep Third, Strong A-gap, Jet, ...) with a confidence level, and the
suggestion ranker builds the alternatives for the confirmation dialog.

Quick Start:
    from playsketch import classify_path, get_assignment_options, DrawTool, Point

    result = classify_path(
        DrawTool.ROUTE,
        [Point(100, 200), Point(100, 120), Point(140, 120)],
        player_start_x=100,
    )
    options = get_assignment_options(result)
"""

from playsketch.classifiers import (
    ClassificationResult,
    PathCharacteristics,
    classify_path,
    detect_blitz_gap,
    detect_blocking_type,
    detect_coverage_zone,
    detect_motion_type,
    detect_route_type,
)
from playsketch.config import FieldConfig, get_config, set_config
from playsketch.core import Confidence, DrawTool, PlayerSide, Point, as_path
from playsketch.suggestions import get_assignment_options, get_route_options, get_tool_options

__all__ = [
    # Config
    "FieldConfig",
    "get_config",
    "set_config",
    # Types
    "Point",
    "as_path",
    "Confidence",
    "DrawTool",
    "PlayerSide",
    "ClassificationResult",
    "PathCharacteristics",
    # Classification
    "classify_path",
    "detect_route_type",
    "detect_blocking_type",
    "detect_coverage_zone",
    "detect_blitz_gap",
    "detect_motion_type",
    # Suggestions
    "get_route_options",
    "get_assignment_options",
    "get_tool_options",
]

__version__ = "0.1.0"
