"""Single entry point the editor calls on pointer events."""

from __future__ import annotations

from typing import Optional

from playsketch.classifiers.blitz import detect_blitz_gap
from playsketch.classifiers.blocking import detect_blocking_type
from playsketch.classifiers.coverage import detect_coverage_zone
from playsketch.classifiers.motion import detect_motion_type
from playsketch.classifiers.results import ClassificationResult
from playsketch.classifiers.route import detect_route_type
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import DrawTool, PlayerSide
from playsketch.core.point import Path


def classify_path(
    tool: DrawTool,
    path: Path,
    *,
    player_side: PlayerSide = PlayerSide.OFFENSE,
    player_start_x: Optional[float] = None,
    player_start_y: Optional[float] = None,
    config: Optional[FieldConfig] = None,
) -> ClassificationResult:
    """Classify a drawn path with the classifier for the active draw tool.

    Alignment defaults to the first point of the path; for an empty path the
    coverage classifier falls back to the line of scrimmage.
    """
    config = resolve_config(config)
    tool = DrawTool(tool)

    if player_start_x is None and path:
        player_start_x = path[0].x
    if player_start_y is None:
        player_start_y = path[0].y if path else config.line_of_scrimmage

    if tool == DrawTool.ROUTE:
        return detect_route_type(path, player_side, player_start_x, config)
    if tool == DrawTool.BLOCK:
        return detect_blocking_type(path, config)
    if tool == DrawTool.COVERAGE:
        return detect_coverage_zone(path, player_start_y, config)
    if tool == DrawTool.BLITZ:
        return detect_blitz_gap(path, config)
    return detect_motion_type(path, player_start_x, config)
