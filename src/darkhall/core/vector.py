"""Vector2 -- the grid coordinate / direction value used everywhere.

Coordinate convention:
    +X = right (column), +Y = down (row), matching the maze grid where
    ``grid[y][x]`` addresses a cell.  "Up" is therefore (0, -1).

Vector2 is a frozen dataclass: every operation returns a new value, so a
position stored in a footprint or a path can never be changed through an
alias.  Equality is exact and component-wise (no epsilon) because grid
addresses are compared with ``==``; Vector2(1, 2) == Vector2(1.0, 2.0)
and both hash the same, so integer and float forms share dict keys.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Iterator


@dataclass(frozen=True)
class Vector2:
    """Immutable 2D vector."""

    x: float = 0
    y: float = 0

    @classmethod
    def of(cls, value: Vector2 | tuple[float, float]) -> Vector2:
        """Coerce a tuple (or another Vector2) into a Vector2."""
        if isinstance(value, Vector2):
            return value
        x, y = value
        return cls(x, y)

    def __iter__(self) -> Iterator[float]:
        yield self.x
        yield self.y

    def __add__(self, other: Vector2) -> Vector2:
        return Vector2(self.x + other.x, self.y + other.y)

    def __sub__(self, other: Vector2) -> Vector2:
        return Vector2(self.x - other.x, self.y - other.y)

    def __mul__(self, scalar: float) -> Vector2:
        return Vector2(self.x * scalar, self.y * scalar)

    __rmul__ = __mul__

    def __neg__(self) -> Vector2:
        return Vector2(-self.x, -self.y)

    def add(self, other: Vector2) -> Vector2:
        return self + other

    def subtract(self, other: Vector2) -> Vector2:
        return self - other

    def scale(self, scalar: float) -> Vector2:
        return self * scalar

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalize(self) -> Vector2:
        """Unit-length copy; the zero vector normalizes to itself."""
        mag = self.magnitude()
        if mag == 0:
            return Vector2(0.0, 0.0)
        return Vector2(self.x / mag, self.y / mag)

    def dot(self, other: Vector2) -> float:
        return self.x * other.x + self.y * other.y

    def distance_to(self, other: Vector2) -> float:
        return math.hypot(self.x - other.x, self.y - other.y)

    def rotate(self, angle: float) -> Vector2:
        """Rotate by *angle* radians (positive turns +X toward +Y)."""
        cos = math.cos(angle)
        sin = math.sin(angle)
        return Vector2(self.x * cos - self.y * sin, self.x * sin + self.y * cos)

    def angle_to(self, other: Vector2) -> float:
        """Unsigned angle in radians between two direction vectors."""
        a = self.normalize()
        b = other.normalize()
        return math.acos(max(-1.0, min(1.0, a.dot(b))))

    def floor(self) -> Vector2:
        """Integer cell containing this point."""
        return Vector2(math.floor(self.x), math.floor(self.y))

    def is_integral(self) -> bool:
        return float(self.x).is_integer() and float(self.y).is_integer()

    def as_tuple(self) -> tuple[float, float]:
        return (self.x, self.y)


ZERO = Vector2(0, 0)
UP = Vector2(0, -1)
RIGHT = Vector2(1, 0)
DOWN = Vector2(0, 1)
LEFT = Vector2(-1, 0)

# Neighbour scan order: up, right, down, left
CARDINALS: tuple[Vector2, ...] = (UP, RIGHT, DOWN, LEFT)
