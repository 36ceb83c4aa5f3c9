"""Pre-snap motion catalogue.

Describes each motion the diagram supports, whether it is legal while moving
at the snap, and where the editor should place a default endpoint when the
coach picks a motion from the menu instead of drawing it.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Optional

from playsketch.config import FieldConfig, resolve_config
from playsketch.core.enums import MotionDirection
from playsketch.core.point import Point


NO_MOTION = "None"

# Players on the line arc back this far before moving laterally (1 yard)
LINE_ARC_BACK = 10.0

OFFENSIVE_LINEMEN = ("LT", "LG", "C", "RG", "RT")


@dataclass(frozen=True)
class EndpointOffset:
    """Default endpoint relative to the player's alignment.

    Attributes:
        lateral: Movement toward the field center (negative = away from it)
        depth: Movement toward the offense's own end zone (+y)
        from_center: Measure lateral from the field center instead of the player
    """
    lateral: float = 0.0
    depth: float = 0.0
    from_center: bool = False


@dataclass(frozen=True)
class MotionDefinition:
    """A motion the coach can assign."""
    name: str
    description: str
    is_legal_at_snap: bool
    requires_set: bool
    toward_center: EndpointOffset = EndpointOffset()
    away_from_center: EndpointOffset = EndpointOffset()

    def offset_for(self, direction: MotionDirection) -> EndpointOffset:
        if direction == MotionDirection.TOWARD_CENTER:
            return self.toward_center
        return self.away_from_center


# =============================================================================
# Motion Library
# =============================================================================

MOTION_CATALOG: Dict[str, MotionDefinition] = {
    NO_MOTION: MotionDefinition(
        name=NO_MOTION,
        description="No motion. Player stays in original alignment.",
        is_legal_at_snap=True,
        requires_set=False,
    ),
    "Jet": MotionDefinition(
        name="Jet",
        description="Fast lateral motion toward center, timed to arrive at snap. "
                    "Threatens sweep or creates bunch.",
        is_legal_at_snap=True,
        requires_set=True,
        toward_center=EndpointOffset(lateral=120),
        away_from_center=EndpointOffset(lateral=-80),
    ),
    "Orbit": MotionDefinition(
        name="Orbit",
        description="Arcing loop behind QB, exiting to opposite side. "
                    "Sets up swing/wheel or backfield misdirection.",
        is_legal_at_snap=True,
        requires_set=True,
        toward_center=EndpointOffset(lateral=80, depth=30, from_center=True),
        away_from_center=EndpointOffset(lateral=-60, depth=40),
    ),
    "Across": MotionDefinition(
        name="Across",
        description="Short lateral move across formation (in front of QB) "
                    "to re-stack or flip strength.",
        is_legal_at_snap=True,
        requires_set=True,
        toward_center=EndpointOffset(lateral=0, from_center=True),
        away_from_center=EndpointOffset(lateral=-80),
    ),
    "Return": MotionDefinition(
        name="Return",
        description="Fake motion that starts then returns to final spot before snap. "
                    "Misleads defense rotations.",
        is_legal_at_snap=False,
        requires_set=True,
        toward_center=EndpointOffset(lateral=30),
        away_from_center=EndpointOffset(lateral=-20),
    ),
    "Shift": MotionDefinition(
        name="Shift",
        description="Static realignment. Player moves to new position, "
                    "then comes fully set (1 sec) before snap.",
        is_legal_at_snap=False,
        requires_set=True,
        toward_center=EndpointOffset(lateral=80),
        away_from_center=EndpointOffset(lateral=-80),
    ),
}


def get_motion(name: str) -> Optional[MotionDefinition]:
    """Look up a motion by name, case-insensitively."""
    for motion in MOTION_CATALOG.values():
        if motion.name.lower() == str(name).lower():
            return motion
    return None


def calculate_motion_endpoint(
    start: Point,
    motion: str,
    direction: MotionDirection,
    config: Optional[FieldConfig] = None,
    on_line: bool = False,
) -> Point:
    """Default endpoint for a motion picked from the menu.

    Args:
        start: Player's pre-snap alignment
        motion: Motion name (Jet, Orbit, ...)
        direction: Toward or away from the field center
        config: Field layout (center_x)
        on_line: Player is on the line of scrimmage and must arc back first

    Returns:
        Endpoint in diagram space. Unknown motions and None return start.
    """
    config = resolve_config(config)
    definition = get_motion(motion)
    if definition is None or definition.name == NO_MOTION:
        return start

    offset = definition.offset_for(MotionDirection(direction))
    inward = 1.0 if start.x < config.center_x else -1.0
    anchor = config.center_x if offset.from_center else start.x
    arc_back = LINE_ARC_BACK if on_line else 0.0

    return Point(anchor + inward * offset.lateral, start.y + offset.depth + arc_back)


def legal_motion_types(position: str) -> List[str]:
    """Motions a player at this position may be given. Linemen can't motion."""
    if position.upper() in OFFENSIVE_LINEMEN:
        return [NO_MOTION]
    return list(MOTION_CATALOG)


def is_motion_legal_at_snap(motion: str) -> bool:
    """Whether the player may still be moving when the ball is snapped."""
    definition = get_motion(motion)
    return definition.is_legal_at_snap if definition else True
