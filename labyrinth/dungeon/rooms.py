from __future__ import annotations

from dataclasses import dataclass
from typing import Iterator, List, Tuple

from .config import DungeonConfig
from .errors import InvalidRoom
from .grid import TileGrid
from .vector import Vector


@dataclass(frozen=True)
class Room:
    """Axis-aligned rectangle of floor, corners inclusive.

    ``top_left.x`` / ``bottom_right.x`` are rows, ``.y`` are columns.
    """

    top_left: Vector
    bottom_right: Vector

    def __post_init__(self):
        if self.top_left.x >= self.bottom_right.x or self.top_left.y >= self.bottom_right.y:
            raise InvalidRoom(
                f"Top left corner {self.top_left} must be above and to the left of "
                f"bottom right corner {self.bottom_right}"
            )

    @property
    def height(self) -> int:
        return int(self.bottom_right.x - self.top_left.x) + 1

    @property
    def width(self) -> int:
        return int(self.bottom_right.y - self.top_left.y) + 1

    @property
    def area(self) -> int:
        return self.height * self.width

    @property
    def center(self) -> Vector:
        offset = self.bottom_right.minus(self.top_left)
        return Vector(self.top_left.x + offset.x // 2, self.top_left.y + offset.y // 2)

    def cells(self) -> Iterator[Vector]:
        for r in range(int(self.top_left.x), int(self.bottom_right.x) + 1):
            for c in range(int(self.top_left.y), int(self.bottom_right.y) + 1):
                yield Vector(r, c)

    def contains(self, v: Vector) -> bool:
        return (
            self.top_left.x <= v.x <= self.bottom_right.x
            and self.top_left.y <= v.y <= self.bottom_right.y
        )

    def intersects(self, other: "Room") -> bool:
        # Closed intervals: sharing an edge or a corner counts as intersecting.
        return not (
            self.bottom_right.x < other.top_left.x
            or other.bottom_right.x < self.top_left.x
            or self.bottom_right.y < other.top_left.y
            or other.bottom_right.y < self.top_left.y
        )


def rand_odd(rng, a: int, b: int) -> int:
    """Random odd integer in [a, b] for odd ``a`` (``b`` may be even)."""
    return a + 2 * rng.randint(0, (b - a) // 2)


def place_rooms(grid: TileGrid, config: DungeonConfig, rng, next_region) -> Tuple[List[Room], int]:
    """Scatter non-overlapping rooms on the odd lattice.

    Each attempt is independent: a candidate that overlaps an accepted room or
    spills past the grid is discarded. ``next_region`` allocates a fresh
    region id per accepted room. Returns (rooms, failed_attempts).
    """
    rooms: List[Room] = []
    if config.rows < 3 or config.cols < 3:
        # no interior lattice cell to anchor a room on
        return rooms, config.room_placement_attempts
    failed = 0
    for _ in range(config.room_placement_attempts):
        top_left = Vector(rand_odd(rng, 1, config.rows - 2), rand_odd(rng, 1, config.cols - 2))
        w = rand_odd(rng, config.min_room_size, config.max_room_size)
        h = rand_odd(rng, config.min_room_size, config.max_room_size)
        bottom_right = Vector(top_left.x + h - 1, top_left.y + w - 1)
        candidate = Room(top_left, bottom_right)
        if any(r.intersects(candidate) for r in rooms) or not grid.in_bounds(bottom_right):
            failed += 1
            continue
        region = next_region()
        rooms.append(candidate)
        for cell in candidate.cells():
            grid.carve(cell, config.floor_tile, region)
    return rooms, failed


__all__ = ["Room", "rand_odd", "place_rooms"]
