"""
Label vocabularies.

Each classifier returns exactly one member of its closed vocabulary. Enum
values are the display labels the confirmation dialog shows, so members
compare equal to those strings.
"""

from enum import Enum
from typing import List, Type

from playsketch.core.enums import DrawTool


class RouteLabel(str, Enum):
    """Pass routes the route classifier can detect."""
    # Deep
    GO = "Go/Streak/9"
    POST = "Post"
    CORNER = "Corner"
    SEAM = "Seam"

    # Intermediate breaking
    OUT = "Out"
    IN_DIG = "In/Dig"
    CURL = "Curl"
    COMEBACK = "Comeback"

    # Quick
    SLANT = "Slant"
    HITCH = "Hitch"
    FLAT = "Flat"
    SWING = "Swing"

    # Special
    WHEEL = "Wheel"
    SHALLOW_CROSS = "Shallow Cross"
    DEEP_CROSS = "Deep Cross"
    CUSTOM = "Draw Route (Custom)"


class BlockLabel(str, Enum):
    RUN_BLOCK = "Run Block"
    PASS_BLOCK = "Pass Block"
    PULL = "Pull"


class CoverageLabel(str, Enum):
    DEEP_THIRD = "Deep Third"
    DEEP_HALF = "Deep Half"
    QUARTER = "Quarter"
    HOOK_CURL = "Hook/Curl"
    FLAT = "Flat"
    MAN = "Man"


class GapLabel(str, Enum):
    """Blitz gaps. Strong side is the diagram's left."""
    STRONG_A = "Strong A-gap"
    WEAK_A = "Weak A-gap"
    STRONG_B = "Strong B-gap"
    WEAK_B = "Weak B-gap"
    STRONG_C = "Strong C-gap"
    WEAK_C = "Weak C-gap"
    STRONG_D = "Strong D-gap"
    WEAK_D = "Weak D-gap"

    @classmethod
    def from_parts(cls, strong: bool, letter: str) -> "GapLabel":
        side = "Strong" if strong else "Weak"
        return cls(f"{side} {letter}-gap")


class MotionLabel(str, Enum):
    JET = "Jet"
    ORBIT = "Orbit"
    ACROSS = "Across"
    RETURN = "Return"
    SHIFT = "Shift"


# Full passing-route menu shown when the coach expands the dialog. Includes
# entries the classifier never suggests (Stick, Fade, Bubble Screen, Block).
PASSING_ROUTE_MENU: List[str] = [
    "Go/Streak/9",
    "Post",
    "Corner",
    "Comeback",
    "Curl",
    "Out",
    "In/Dig",
    "Slant",
    "Hitch",
    "Stick",
    "Flat",
    "Wheel",
    "Swing",
    "Bubble Screen",
    "Shallow Cross",
    "Deep Cross",
    "Seam",
    "Fade",
    "Block",
    "Draw Route (Custom)",
]


VOCABULARIES: dict[DrawTool, Type[Enum]] = {
    DrawTool.ROUTE: RouteLabel,
    DrawTool.BLOCK: BlockLabel,
    DrawTool.COVERAGE: CoverageLabel,
    DrawTool.BLITZ: GapLabel,
    DrawTool.MOTION: MotionLabel,
}


def vocabulary_for(tool: DrawTool) -> List[str]:
    """Display labels a tool's classifier may return, in catalogue order."""
    return [label.value for label in VOCABULARIES[DrawTool(tool)]]
