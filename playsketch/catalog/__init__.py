"""
Football vocabulary and diagram catalogue.

Label vocabularies for each classifier plus the lookup tables the editor uses
around them: motion definitions and default endpoints, gap positions, and
coverage zone rendering hints.
"""

from playsketch.catalog.gaps import GAP_OFFSETS, gap_position
from playsketch.catalog.labels import (
    PASSING_ROUTE_MENU,
    VOCABULARIES,
    BlockLabel,
    CoverageLabel,
    GapLabel,
    MotionLabel,
    RouteLabel,
    vocabulary_for,
)
from playsketch.catalog.motion import (
    MOTION_CATALOG,
    NO_MOTION,
    MotionDefinition,
    calculate_motion_endpoint,
    get_motion,
    is_motion_legal_at_snap,
    legal_motion_types,
)
from playsketch.catalog.zones import (
    DEEP_COVERAGE_ROLES,
    ZoneShape,
    is_deep_zone,
    zone_shape,
)

__all__ = [
    # Labels
    "RouteLabel",
    "BlockLabel",
    "CoverageLabel",
    "GapLabel",
    "MotionLabel",
    "PASSING_ROUTE_MENU",
    "VOCABULARIES",
    "vocabulary_for",
    # Motion
    "MOTION_CATALOG",
    "NO_MOTION",
    "MotionDefinition",
    "calculate_motion_endpoint",
    "get_motion",
    "is_motion_legal_at_snap",
    "legal_motion_types",
    # Gaps
    "GAP_OFFSETS",
    "gap_position",
    # Zones
    "DEEP_COVERAGE_ROLES",
    "ZoneShape",
    "is_deep_zone",
    "zone_shape",
]
