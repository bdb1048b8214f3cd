"""Integer grid coordinates and displacements.

``x`` is the row index and ``y`` the column index, matching how the tile grid
is addressed (``grid[row][col]``). The generator only needs ``plus``,
``minus``, ``scaled_by`` and equality; the float helpers (``normalized``,
``rotated``, ``projected_onto``) exist for movement/camera code consuming the
generated map.
"""

from __future__ import annotations

import math
from dataclasses import dataclass
from typing import Callable, Tuple

from .errors import DegenerateVector


@dataclass(frozen=True)
class Vector:
    x: float
    y: float

    def __str__(self) -> str:
        return f"[{self.x}, {self.y}]"

    def __iter__(self):
        yield self.x
        yield self.y

    def __add__(self, other: "Vector") -> "Vector":
        return self.plus(other)

    def __sub__(self, other: "Vector") -> "Vector":
        return self.minus(other)

    def __mul__(self, n: float) -> "Vector":
        return self.scaled_by(n)

    __rmul__ = __mul__

    def as_tuple(self) -> Tuple[float, float]:
        return (self.x, self.y)

    def eq(self, other: "Vector") -> bool:
        return self.x == other.x and self.y == other.y

    def plus(self, other: "Vector") -> "Vector":
        return Vector(self.x + other.x, self.y + other.y)

    def minus(self, other: "Vector") -> "Vector":
        return Vector(self.x - other.x, self.y - other.y)

    def scaled_by(self, n: float) -> "Vector":
        return Vector(self.x * n, self.y * n)

    def map(self, fn: Callable[[float], float]) -> "Vector":
        return Vector(fn(self.x), fn(self.y))

    def floored(self) -> "Vector":
        """Grid cell containing this (possibly fractional) position."""
        return Vector(math.floor(self.x), math.floor(self.y))

    def magnitude(self) -> float:
        return math.hypot(self.x, self.y)

    def normalized(self) -> "Vector":
        m = self.magnitude()
        if m == 0:
            raise DegenerateVector("Can't normalize the zero vector")
        return Vector(self.x / m, self.y / m)

    def rotated(self, theta: float) -> "Vector":
        cos_t = math.cos(theta)
        sin_t = math.sin(theta)
        return Vector(self.x * cos_t - self.y * sin_t, self.x * sin_t + self.y * cos_t)

    def dot(self, other: "Vector") -> float:
        return self.x * other.x + self.y * other.y

    def distance_from(self, other: "Vector") -> float:
        return self.minus(other).magnitude()

    def projected_onto(self, other: "Vector") -> "Vector":
        unit = other.normalized()
        return unit.scaled_by(self.dot(unit))


# Cardinal steps in the order the generator tries them.
NORTH = Vector(1, 0)
SOUTH = Vector(-1, 0)
WEST = Vector(0, -1)
EAST = Vector(0, 1)
DIRECTIONS: Tuple[Vector, ...] = (NORTH, SOUTH, WEST, EAST)

ORIGIN = Vector(0, 0)


__all__ = ["Vector", "DIRECTIONS", "NORTH", "SOUTH", "WEST", "EAST", "ORIGIN"]
