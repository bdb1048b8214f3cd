"""Structural audit of a generated dungeon.

Used by ``scripts/diagnose_seeds.py`` and ``run.py check`` to flag seeds that
break connectivity, leave dead ends or place overlapping rooms.
"""
from __future__ import annotations

from typing import Any, Dict

from .connectivity import count_components
from .pruning import dead_ends


def analyze(dungeon) -> Dict[str, Any]:
    grid = dungeon.grid
    rooms = dungeon.rooms
    overlaps = [
        (i, j)
        for i in range(len(rooms))
        for j in range(i + 1, len(rooms))
        if rooms[i].intersects(rooms[j])
    ]
    out_of_bounds = [
        i
        for i, r in enumerate(rooms)
        if not (grid.in_bounds(r.top_left) and grid.in_bounds(r.bottom_right))
    ]
    ends = [(int(v.x), int(v.y)) for v in dead_ends(grid)]
    components = count_components(grid)
    floor = sum(1 for t in grid.tiles if t != grid.wall)
    return {
        "seed": dungeon.seed,
        "floor_cells": floor,
        "components": components,
        "dead_ends": ends,
        "room_overlaps": overlaps,
        "rooms_out_of_bounds": out_of_bounds,
        "ok": components <= 1 and not ends and not overlaps and not out_of_bounds,
    }
