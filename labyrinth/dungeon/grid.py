"""Flat tile and region buffers.

Both buffers are single lists indexed by ``row * cols + col``. A cell that
belongs to no region holds ``UNASSIGNED`` in the region buffer; region ids
themselves are always >= 0.
"""

from __future__ import annotations

from typing import Iterator, List, Tuple

from .errors import OutOfBounds
from .vector import DIRECTIONS, Vector

UNASSIGNED = -1


class TileGrid:
    __slots__ = ("rows", "cols", "wall", "tiles", "regions")

    def __init__(self, rows: int, cols: int, wall: int):
        self.rows = rows
        self.cols = cols
        self.wall = wall
        self.tiles: List[int] = [wall] * (rows * cols)
        self.regions: List[int] = [UNASSIGNED] * (rows * cols)

    # ---- bounds --------------------------------------------------------
    def in_bounds(self, v: Vector) -> bool:
        return 0 <= v.x < self.rows and 0 <= v.y < self.cols

    def index(self, v: Vector) -> int:
        if not self.in_bounds(v):
            raise OutOfBounds(f"This dungeon doesn't have a cell at ({v.x}, {v.y})")
        return int(v.x) * self.cols + int(v.y)

    # ---- tiles ---------------------------------------------------------
    def get(self, v: Vector) -> int:
        return self.tiles[self.index(v)]

    def is_wall(self, v: Vector) -> bool:
        return self.tiles[self.index(v)] == self.wall

    def carve(self, v: Vector, tile: int, region: int) -> None:
        i = self.index(v)
        self.tiles[i] = tile
        self.regions[i] = region

    def open(self, v: Vector, tile: int) -> None:
        """Set a tile without tagging a region (connectors)."""
        self.tiles[self.index(v)] = tile

    def region(self, v: Vector) -> int:
        return self.regions[self.index(v)]

    # ---- geometry ------------------------------------------------------
    def valid_directions_from(self, v: Vector, steps: int = 1) -> List[Vector]:
        return [d for d in DIRECTIONS if self.in_bounds(v.plus(d.scaled_by(steps)))]

    def neighbours(self, v: Vector) -> List[Vector]:
        return [v.plus(d) for d in self.valid_directions_from(v)]

    def open_neighbour_count(self, v: Vector) -> int:
        return sum(1 for n in self.neighbours(v) if not self.is_wall(n))

    def is_isolated(self, v: Vector) -> bool:
        """True when ``v`` and all of its in-bounds cardinal neighbours are wall."""
        return self.is_wall(v) and all(self.is_wall(n) for n in self.neighbours(v))

    def coords(self) -> Iterator[Vector]:
        for r in range(self.rows):
            for c in range(self.cols):
                yield Vector(r, c)

    def to_rows(self) -> List[List[int]]:
        cols = self.cols
        return [self.tiles[r * cols:(r + 1) * cols] for r in range(self.rows)]

    def snapshot(self) -> Tuple[int, ...]:
        return tuple(self.tiles)


__all__ = ["TileGrid", "UNASSIGNED"]
