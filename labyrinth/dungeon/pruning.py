"""Dead-end elimination.

Runs full-grid sweeps until one makes no change. Cells are erased in place
during a sweep, so a dead end exposed by an earlier erasure in the same sweep
may be removed before the sweep ends.
"""
from __future__ import annotations

from typing import List, NamedTuple

from .grid import UNASSIGNED, TileGrid
from .vector import Vector


class PruneStats(NamedTuple):
    removed: int
    passes: int


def prune_pass(grid: TileGrid) -> int:
    """One row-major sweep; returns the number of cells erased."""
    tiles, regions, wall = grid.tiles, grid.regions, grid.wall
    rows, cols = grid.rows, grid.cols
    erased = 0
    for r in range(rows):
        base = r * cols
        for c in range(cols):
            i = base + c
            if tiles[i] == wall:
                continue
            exits = 0
            if r + 1 < rows and tiles[i + cols] != wall:
                exits += 1
            if r > 0 and tiles[i - cols] != wall:
                exits += 1
            if c > 0 and tiles[i - 1] != wall:
                exits += 1
            if c + 1 < cols and tiles[i + 1] != wall:
                exits += 1
            if exits == 1:
                tiles[i] = wall
                regions[i] = UNASSIGNED
                erased += 1
    return erased


def eliminate_dead_ends(grid: TileGrid) -> PruneStats:
    removed = 0
    passes = 0
    while True:
        passes += 1
        erased = prune_pass(grid)
        removed += erased
        if not erased:
            return PruneStats(removed, passes)


def dead_ends(grid: TileGrid) -> List[Vector]:
    return [v for v in grid.coords() if not grid.is_wall(v) and grid.open_neighbour_count(v) == 1]


__all__ = ["PruneStats", "prune_pass", "eliminate_dead_ends", "dead_ends"]
