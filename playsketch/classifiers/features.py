"""Route feature extraction.

Turns a raw drawn path plus the receiver's alignment into the handful of
shape features the route rules are written against:

- Net vertical movement (upfield vs back toward the line)
- Net horizontal movement, judged inside/outside from the alignment
- Shape (straight, one sharp cut, or a many-point curve)
- Direction of the finish
"""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Optional

from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import (
    Curvature,
    Direction,
    EndDirection,
    FieldSide,
    PlayerSide,
)
from playsketch.core.geometry import angle_of_segment, field_side, path_distance
from playsketch.core.point import Path

logger = logging.getLogger(__name__)

NO_BREAK = -1


class DistanceBand(str, Enum):
    SHORT = "short"
    MEDIUM = "medium"
    DEEP = "deep"


@dataclass(frozen=True)
class PathCharacteristics:
    """Shape summary returned with every route classification.

    Attributes:
        total_distance: Length of the drawn path
        net_vertical: Start y minus end y (positive = upfield)
        net_horizontal: End x minus start x (positive = right)
        direction: Overall movement
        curvature: Straight, one sharp cut, or curved
        end_direction: Where the route is heading at the finish
    """
    total_distance: float = 0.0
    net_vertical: float = 0.0
    net_horizontal: float = 0.0
    direction: Direction = Direction.UPFIELD
    curvature: Curvature = Curvature.STRAIGHT
    end_direction: EndDirection = EndDirection.VERTICAL

    def to_dict(self) -> dict:
        return {
            "total_distance": self.total_distance,
            "net_vertical": self.net_vertical,
            "net_horizontal": self.net_horizontal,
            "direction": self.direction.value,
            "curvature": self.curvature.value,
            "end_direction": self.end_direction.value,
        }


@dataclass(frozen=True)
class RouteFeatures:
    """Everything the route rule table looks at."""
    characteristics: PathCharacteristics
    band: DistanceBand
    is_moving_inside: bool
    break_index: int = NO_BREAK
    player_side: PlayerSide = PlayerSide.OFFENSE
    start_side: FieldSide = field(default=FieldSide.CENTER)

    @property
    def has_major_break(self) -> bool:
        return self.break_index != NO_BREAK

    @property
    def is_short(self) -> bool:
        return self.band == DistanceBand.SHORT

    @property
    def is_medium(self) -> bool:
        return self.band == DistanceBand.MEDIUM

    @property
    def is_deep(self) -> bool:
        return self.band == DistanceBand.DEEP

    @property
    def direction(self) -> Direction:
        return self.characteristics.direction

    @property
    def end_direction(self) -> EndDirection:
        return self.characteristics.end_direction

    @property
    def curvature(self) -> Curvature:
        return self.characteristics.curvature

    @property
    def net_vertical(self) -> float:
        return self.characteristics.net_vertical

    @property
    def net_horizontal(self) -> float:
        return self.characteristics.net_horizontal


def distance_band(distance: float, config: Optional[FieldConfig] = None) -> DistanceBand:
    config = resolve_config(config)
    if distance < config.short_distance:
        return DistanceBand.SHORT
    if distance < config.deep_distance:
        return DistanceBand.MEDIUM
    return DistanceBand.DEEP


def detect_break(path: Path, config: Optional[FieldConfig] = None) -> int:
    """Index of the first sharp cut in the path, or NO_BREAK.

    A turn counts when the raw difference of consecutive segment angles lies
    strictly between break_angle and 360 - break_angle. Near-parallel
    continuation and near-complete reversals across the +-180 seam don't count.
    """
    config = resolve_config(config)
    upper = 360.0 - config.break_angle

    for i in range(1, len(path) - 1):
        before = angle_of_segment(path[i - 1], path[i])
        after = angle_of_segment(path[i], path[i + 1])
        diff = abs(before - after)
        if config.break_angle < diff < upper:
            return i
    return NO_BREAK


def is_moving_inside(
    net_horizontal: float,
    start_side: FieldSide,
    config: Optional[FieldConfig] = None,
) -> bool:
    """Is the route drifting toward the middle of the field?"""
    config = resolve_config(config)
    if start_side == FieldSide.LEFT:
        return net_horizontal > 0
    if start_side == FieldSide.RIGHT:
        return net_horizontal < 0
    return abs(net_horizontal) < config.inside_tolerance


def extract_route_features(
    path: Path,
    player_side: PlayerSide = PlayerSide.OFFENSE,
    player_start_x: Optional[float] = None,
    config: Optional[FieldConfig] = None,
) -> RouteFeatures:
    """Compute route features for a path of at least 2 points.

    player_side is recorded but does not change the geometry; diagrams are
    always drawn with the offense attacking toward smaller y.
    """
    config = resolve_config(config)
    start = path[0]
    end = path[-1]
    if player_start_x is None:
        player_start_x = start.x

    total_distance = path_distance(path)
    net_vertical = start.y - end.y
    net_horizontal = end.x - start.x

    start_side = field_side(player_start_x, config)
    inside = is_moving_inside(net_horizontal, start_side, config)
    break_index = detect_break(path, config)

    final_angle = abs(angle_of_segment(path[-2], end))
    if net_vertical < 0:
        end_direction = EndDirection.BACK
    elif config.vertical_angle_min < final_angle < config.vertical_angle_max:
        end_direction = EndDirection.VERTICAL
    elif inside:
        end_direction = EndDirection.INSIDE
    else:
        end_direction = EndDirection.OUTSIDE

    if abs(net_vertical) > abs(net_horizontal) * config.lateral_ratio:
        direction = Direction.UPFIELD if net_vertical > 0 else Direction.DOWNFIELD
    else:
        direction = Direction.LATERAL

    if break_index != NO_BREAK:
        curvature = Curvature.BREAKING
    elif len(path) >= config.curved_min_points:
        curvature = Curvature.CURVED
    else:
        curvature = Curvature.STRAIGHT

    characteristics = PathCharacteristics(
        total_distance=total_distance,
        net_vertical=net_vertical,
        net_horizontal=net_horizontal,
        direction=direction,
        curvature=curvature,
        end_direction=end_direction,
    )
    logger.debug(
        f"Route features: {total_distance:.1f} units, {direction.value}, "
        f"{curvature.value}, ends {end_direction.value} (break at {break_index})"
    )
    return RouteFeatures(
        characteristics=characteristics,
        band=distance_band(total_distance, config),
        is_moving_inside=inside,
        break_index=break_index,
        player_side=PlayerSide(player_side),
        start_side=start_side,
    )


def extract_characteristics(
    path: Path,
    player_side: PlayerSide = PlayerSide.OFFENSE,
    player_start_x: Optional[float] = None,
    config: Optional[FieldConfig] = None,
) -> PathCharacteristics:
    """Public shape summary; zeroed for paths under 2 points."""
    if len(path) < 2:
        return PathCharacteristics()
    return extract_route_features(path, player_side, player_start_x, config).characteristics
