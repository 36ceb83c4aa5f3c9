"""Gap geometry.

Maps a blitz gap label back to the diagram point the blitz arrow is drawn
to. Strong side is the diagram's left (tight end side assumed left).
"""

from __future__ import annotations

from typing import Dict, Optional

from playsketch.catalog.labels import GapLabel
from playsketch.config import FieldConfig, resolve_config
from playsketch.core.point import Point


# Penetration past the line of scrimmage (half a yard)
THROUGH_LINE_DEPTH = 5.0

# Lateral offset from center per gap (1 yard ~ 10 units)
GAP_OFFSETS: Dict[GapLabel, float] = {
    GapLabel.STRONG_A: -10.0,   # Between C and strong guard
    GapLabel.WEAK_A: 10.0,      # Between C and weak guard
    GapLabel.STRONG_B: -25.0,   # Between guard and tackle
    GapLabel.WEAK_B: 25.0,
    GapLabel.STRONG_C: -40.0,   # Outside tackle
    GapLabel.WEAK_C: 40.0,
    GapLabel.STRONG_D: -55.0,   # Outside TE/wing
    GapLabel.WEAK_D: 55.0,
}


def gap_position(gap: str, config: Optional[FieldConfig] = None) -> Point:
    """Where a blitz through this gap should be drawn to.

    Unknown gap names fall back to the ball.
    """
    config = resolve_config(config)
    through_line = config.line_of_scrimmage + THROUGH_LINE_DEPTH
    try:
        offset = GAP_OFFSETS[GapLabel(gap)]
    except ValueError:
        offset = 0.0
    return Point(config.center_x + offset, through_line)
