"""2D point for drawn paths.

Coordinates are diagram pixel space:
    +X = Right
    +Y = Down the screen (toward the offense's own end zone)

So a receiver running upfield produces decreasing y values.
"""

from __future__ import annotations

import math
from collections.abc import Mapping
from dataclasses import dataclass
from typing import Iterable, List, Sequence


@dataclass(frozen=True, slots=True)
class Point:
    """Immutable point on the diagram."""
    x: float = 0.0
    y: float = 0.0

    def __add__(self, other: Point) -> Point:
        return Point(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Point) -> Point:
        return Point(self.x - other.x, self.y - other.y)

    def length(self) -> float:
        """Magnitude when treated as a vector."""
        return math.sqrt(self.x * self.x + self.y * self.y)

    def distance_to(self, other: Point) -> float:
        """Euclidean distance to another point."""
        return (other - self).length()

    def with_x(self, x: float) -> Point:
        """Return new point with different x."""
        return Point(x, self.y)

    def with_y(self, y: float) -> Point:
        """Return new point with different y."""
        return Point(self.x, y)

    def to_dict(self) -> dict:
        return {"x": self.x, "y": self.y}

    def __repr__(self) -> str:
        return f"Point({self.x:.1f}, {self.y:.1f})"


Path = Sequence[Point]


def as_point(value) -> Point:
    """Coerce a Point, an (x, y) pair, or an {"x", "y"} mapping."""
    if isinstance(value, Point):
        return value
    if isinstance(value, Mapping):
        if "x" not in value or "y" not in value:
            raise TypeError(f"Point mapping needs 'x' and 'y' keys: {value!r}")
        return Point(float(value["x"]), float(value["y"]))
    if isinstance(value, (list, tuple)) and len(value) == 2:
        return Point(float(value[0]), float(value[1]))
    raise TypeError(f"Cannot interpret {value!r} as a point")


def as_path(points: Iterable) -> List[Point]:
    """Coerce a drawn gesture into a list of Points."""
    return [as_point(p) for p in points]
