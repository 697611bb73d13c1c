"""Shared type definitions for the chamber geometry kernel."""
from typing import NamedTuple, Sequence

WallId = int
ChamberId = int


class Point(NamedTuple):
    """Floating-point position used by queries and results."""
    x: float; y: float

    def to_coord(self) -> "Coord":
        """Truncate toward zero onto the integer grid."""
        return Coord(int(self.x), int(self.y))


class Coord(NamedTuple):
    """Integer grid position, the persisted vertex type."""
    x: int; y: int

    def to_point(self) -> Point:
        return Point(float(self.x), float(self.y))


class BBox(NamedTuple):
    """Axis-aligned bounding box."""
    min: Point; max: Point


class Rgb(NamedTuple):
    r: float; g: float; b: float


# Anything indexable as (x, y): Coord, Point or a plain tuple.
Vec = Sequence[float]
