"""Region merging and reachability helpers.

``connect_regions`` opens wall cells ("connectors") that touch two or more
regions until every room and maze belongs to a single merged region. The
connector list is walked in fixed scan order; only the decision to open an
already-redundant connector consults the rng.
"""

from __future__ import annotations

from collections import deque
from typing import Dict, Iterable, List, NamedTuple, Set, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig
from .grid import UNASSIGNED, TileGrid
from .vector import Vector

log = get_logger("labyrinth.connectivity")


class DisjointSet:
    """Union-find over region ids with path halving."""

    def __init__(self, ids: Iterable[int] = ()):
        self.parent: Dict[int, int] = {}
        for i in ids:
            self.add(i)

    def add(self, i: int) -> None:
        self.parent.setdefault(i, i)

    def find(self, a: int) -> int:
        parent = self.parent
        while parent[a] != a:
            parent[a] = parent[parent[a]]
            a = parent[a]
        return a

    def union(self, dest: int, source: int) -> bool:
        """Attach ``source``'s representative under ``dest``'s. False if already joined."""
        rd, rs = self.find(dest), self.find(source)
        if rd == rs:
            return False
        self.parent[rs] = rd
        return True

    def representatives(self, ids: Iterable[int]) -> List[int]:
        """Distinct representatives of ``ids`` in first-seen order."""
        seen: List[int] = []
        for i in ids:
            r = self.find(i)
            if r not in seen:
                seen.append(r)
        return seen


class Connector(NamedTuple):
    pos: Vector
    regions: Tuple[int, ...]


class MergeStats(NamedTuple):
    candidates: int
    opened: int
    extra_opened: int
    unmerged: int


def touched_regions(grid: TileGrid, pos: Vector) -> Tuple[int, ...]:
    regions: List[int] = []
    for n in grid.neighbours(pos):
        rid = grid.region(n)
        if rid != UNASSIGNED and rid not in regions:
            regions.append(rid)
    return tuple(regions)


def find_connectors(grid: TileGrid) -> List[Connector]:
    """Interior wall cells bordering two or more regions, row-major."""
    found: List[Connector] = []
    for r in range(1, grid.rows - 1):
        for c in range(1, grid.cols - 1):
            pos = Vector(r, c)
            if not grid.is_wall(pos):
                continue
            regions = touched_regions(grid, pos)
            if len(regions) >= 2:
                found.append(Connector(pos, regions))
    return found


def connect_regions(grid: TileGrid, region_count: int, config: DungeonConfig, rng) -> MergeStats:
    connectors = find_connectors(grid)
    candidates = len(connectors)
    merged = DisjointSet(range(region_count))
    independent: Set[int] = set(range(region_count))
    opened = 0
    extra = 0

    while len(independent) > 1:
        if not connectors:
            log.warn(event="regions_unmerged", remaining=len(independent), rows=grid.rows, cols=grid.cols)
            break
        first = connectors[0]
        grid.open(first.pos, config.connector_tile)
        opened += 1

        reps = merged.representatives(first.regions)
        dest, sources = reps[0], reps[1:]
        for source in sources:
            merged.union(dest, source)
            independent.discard(source)

        remaining: List[Connector] = []
        for conn in connectors:
            if len(merged.representatives(conn.regions)) > 1:
                remaining.append(conn)
                continue
            if rng.random() < config.extra_connector_chance:
                grid.open(conn.pos, config.connector_tile)
                # the connector just used is dropped here too; it is already open
                if conn is not first:
                    extra += 1
        connectors = remaining

    return MergeStats(candidates, opened, extra, len(independent) - 1 if len(independent) > 1 else 0)


def flood_fill(grid: TileGrid, start: Vector) -> Set[Vector]:
    """Non-wall cells reachable from ``start`` by 4-directional moves."""
    if grid.is_wall(start):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        cur = q.popleft()
        for n in grid.neighbours(cur):
            if n not in seen and not grid.is_wall(n):
                seen.add(n)
                q.append(n)
    return seen


def count_components(grid: TileGrid) -> int:
    seen: Set[Vector] = set()
    components = 0
    for v in grid.coords():
        if v in seen or grid.is_wall(v):
            continue
        components += 1
        seen |= flood_fill(grid, v)
    return components


__all__ = [
    "DisjointSet",
    "Connector",
    "MergeStats",
    "touched_regions",
    "find_connectors",
    "connect_regions",
    "flood_fill",
    "count_components",
]
