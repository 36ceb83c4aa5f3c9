"""Shared enumerations for path classification."""

from enum import Enum


class Confidence(str, Enum):
    """Qualitative certainty of a heuristic match (not a probability)."""
    HIGH = "high"
    MEDIUM = "medium"
    LOW = "low"


class PlayerSide(str, Enum):
    OFFENSE = "offense"
    DEFENSE = "defense"


class FieldSide(str, Enum):
    """Lateral third of the field a player is aligned in."""
    LEFT = "left"
    CENTER = "center"
    RIGHT = "right"


class Direction(str, Enum):
    """Overall movement of a route."""
    UPFIELD = "upfield"
    DOWNFIELD = "downfield"
    LATERAL = "lateral"


class Curvature(str, Enum):
    STRAIGHT = "straight"
    BREAKING = "breaking"   # One sharp cut
    CURVED = "curved"       # Many points, no sharp cut


class EndDirection(str, Enum):
    """Where the route is heading when it finishes."""
    INSIDE = "inside"
    OUTSIDE = "outside"
    VERTICAL = "vertical"
    BACK = "back"           # Working back toward the line of scrimmage


class MotionDirection(str, Enum):
    TOWARD_CENTER = "toward-center"
    AWAY_FROM_CENTER = "away-from-center"


class DrawTool(str, Enum):
    """Quick-draw tool the coach used, one per classifier."""
    ROUTE = "route"
    BLOCK = "block"
    COVERAGE = "coverage"
    BLITZ = "blitz"
    MOTION = "motion"
