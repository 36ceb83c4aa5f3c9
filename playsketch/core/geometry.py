"""Path geometry helpers shared by every classifier."""

from __future__ import annotations

import math
from typing import Optional

from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import FieldSide
from playsketch.core.point import Path, Point


def path_distance(path: Path) -> float:
    """Total length of the drawn path (0 for fewer than 2 points)."""
    if len(path) < 2:
        return 0.0
    return sum(path[i - 1].distance_to(path[i]) for i in range(1, len(path)))


def angle_of_segment(start: Point, end: Point) -> float:
    """Angle of a segment in degrees (0 = right, 90 = up, -90 = down).

    Screen y grows downward, so dy is negated.
    """
    dx = end.x - start.x
    dy = end.y - start.y
    return math.atan2(-dy, dx) * (180 / math.pi)


def field_side(x: float, config: Optional[FieldConfig] = None) -> FieldSide:
    """Which side of the field an x coordinate sits on."""
    config = resolve_config(config)
    if x < config.center_x - config.center_band:
        return FieldSide.LEFT
    if x > config.center_x + config.center_band:
        return FieldSide.RIGHT
    return FieldSide.CENTER


def offset_from_center(x: float, config: Optional[FieldConfig] = None) -> float:
    """Unsigned lateral distance from the field center."""
    return abs(x - resolve_config(config).center_x)


def endpoint_or(path: Path, fallback: Point) -> Point:
    """Last point of the path, or the fallback for an empty path."""
    return path[-1] if path else fallback
