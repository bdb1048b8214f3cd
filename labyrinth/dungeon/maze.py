"""Growing-tree maze carving between the placed rooms.

Every odd-row/odd-column lattice cell that is still wall seeds a new region and
a randomized depth-first walk. A step two cells away is only taken when the
target and all of its neighbours are still wall, so a maze never touches a
room or another maze and each region is a tree.
"""

from __future__ import annotations

from typing import Callable, List, Optional

from .config import DungeonConfig
from .grid import TileGrid
from .vector import Vector


def open_directions(grid: TileGrid, cell: Vector) -> List[Vector]:
    return [d for d in grid.valid_directions_from(cell, 2) if grid.is_isolated(cell.plus(d.scaled_by(2)))]


def grow_maze(grid: TileGrid, start: Vector, region: int, config: DungeonConfig, rng) -> int:
    """Carve one maze tree from ``start``; returns the number of cells carved."""
    floor = config.floor_tile
    grid.carve(start, floor, region)
    carved = 1
    live: List[Vector] = [start]
    last_dir: Optional[Vector] = None

    while live:
        cell = live[-1]
        candidates = open_directions(grid, cell)
        if not candidates:
            live.pop()
            last_dir = None
            continue

        # The rng is consulted for the straight/turn decision only when going
        # straight is possible at all.
        if last_dir is not None and last_dir in candidates and rng.random() > config.curliness:
            direction = last_dir
        else:
            direction = rng.choice(candidates)

        grid.carve(cell.plus(direction), floor, region)
        two_away = cell.plus(direction.scaled_by(2))
        grid.carve(two_away, floor, region)
        live.append(two_away)
        carved += 2
        last_dir = direction
    return carved


def fill_mazes(grid: TileGrid, config: DungeonConfig, rng, next_region: Callable[[], int]) -> int:
    """Grow a maze from every free lattice cell; returns the number of mazes grown."""
    mazes = 0
    for r in range(1, grid.rows, 2):
        for c in range(1, grid.cols, 2):
            start = Vector(r, c)
            if grid.is_wall(start):
                grow_maze(grid, start, next_region(), config, rng)
                mazes += 1
    return mazes


__all__ = ["open_directions", "grow_maze", "fill_mazes"]
