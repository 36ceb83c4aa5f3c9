"""Core geometry and shared types."""

from playsketch.core.enums import (
    Confidence,
    Curvature,
    Direction,
    DrawTool,
    EndDirection,
    FieldSide,
    MotionDirection,
    PlayerSide,
)
from playsketch.core.geometry import (
    angle_of_segment,
    endpoint_or,
    field_side,
    offset_from_center,
    path_distance,
)
from playsketch.core.point import Path, Point, as_path, as_point

__all__ = [
    # Types
    "Point",
    "Path",
    "as_point",
    "as_path",
    # Enums
    "Confidence",
    "Curvature",
    "Direction",
    "DrawTool",
    "EndDirection",
    "FieldSide",
    "MotionDirection",
    "PlayerSide",
    # Geometry
    "angle_of_segment",
    "endpoint_or",
    "field_side",
    "offset_from_center",
    "path_distance",
]
