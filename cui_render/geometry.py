"""
Geometry
=========
Integer pairs and rectangles shared by the canvas, world and UI layers.
"""

from dataclasses import dataclass


class CastError(ValueError):
    """Raised when a pair does not fit in the requested lattice."""


@dataclass(frozen=True)
class Lattice:
    """Closed integer range that coordinates of one domain must lie in."""
    name: str
    minimum: int
    maximum: int

    def contains(self, value: int) -> bool:
        return self.minimum <= value <= self.maximum


# Canvas coordinates are unsigned, world coordinates signed (64-bit ranges)
CANVAS_LATTICE = Lattice('canvas', 0, 2 ** 64 - 1)
WORLD_LATTICE = Lattice('world', -(2 ** 63), 2 ** 63 - 1)


@dataclass(frozen=True, order=True)
class Pair:
    """2-D integer point or vector."""
    x: int = 0
    y: int = 0

    def __add__(self, other: 'Pair') -> 'Pair':
        return Pair(self.x + other.x, self.y + other.y)

    def __sub__(self, other: 'Pair') -> 'Pair':
        return Pair(self.x - other.x, self.y - other.y)

    def try_cast(self, lattice: Lattice) -> 'Pair':
        """
        Return this pair checked against another coordinate domain.

        Raises CastError instead of wrapping when either component
        is out of range.
        """
        if not (lattice.contains(self.x) and lattice.contains(self.y)):
            raise CastError(f"{self} does not fit in the {lattice.name} lattice")
        return self


@dataclass(frozen=True)
class Rectangle:
    """Axis-aligned rectangle with inclusive edges."""
    left: int
    top: int
    right: int
    bottom: int

    @classmethod
    def from_corners(cls, top_left: Pair, bottom_right: Pair) -> 'Rectangle':
        return cls(top_left.x, top_left.y, bottom_right.x, bottom_right.y)

    @property
    def width(self) -> int:
        return max(0, self.right - self.left + 1)

    @property
    def height(self) -> int:
        return max(0, self.bottom - self.top + 1)

    @property
    def top_left(self) -> Pair:
        return Pair(self.left, self.top)

    @property
    def bottom_right(self) -> Pair:
        return Pair(self.right, self.bottom)

    def contains(self, point: Pair) -> bool:
        return self.left <= point.x <= self.right and self.top <= point.y <= self.bottom
