"""Rooms-and-mazes dungeon generator.

Generation phases, run once and in order by ``Dungeon.generate``:
    * Scatter non-overlapping odd-aligned rooms (each room is one region).
    * Fill every remaining odd lattice cell with growing-tree mazes (one region per maze).
    * Open connectors in scan order until all regions are merged, occasionally
      opening a redundant one to add loops.
    * Erase dead ends until a sweep changes nothing.

Invariants after generation:
    * No two rooms intersect and every room lies inside the grid.
    * All non-wall cells form one 4-connected component.
    * No non-wall cell has exactly one non-wall neighbour.

Public contract consumed by renderers:
    Dungeon(config=None, *, rng=None, enable_metrics=None, **overrides)
    generate(), tile_at(v), is_wall(v), in_bounds(v), rand_pos(), rooms,
    to_rows(), pretty_print()
    Coordinates are ``Vector(row, col)``.
"""

from __future__ import annotations

import os
import random
import time
from typing import Any, Callable, Dict, Iterator, List, Optional, Tuple

from ..logging_utils import get_logger
from .config import DungeonConfig
from .connectivity import connect_regions
from .errors import AlreadyGenerated, NoRooms, NotGenerated
from .grid import TileGrid
from .maze import fill_mazes
from .metrics import init_metrics
from .pruning import eliminate_dead_ends
from .rooms import Room, place_rooms
from .tiles import CONNECTOR_GLYPH, FLOOR_GLYPH, WALL_GLYPH
from .vector import ORIGIN, Vector

log = get_logger("labyrinth.dungeon")


class Dungeon:
    def __init__(
        self,
        config: DungeonConfig | None = None,
        *,
        rng: random.Random | None = None,
        enable_metrics: bool | None = None,
        **overrides: Any,
    ):
        # Accept either a config object or keyword overrides of the defaults
        if config is None:
            config = DungeonConfig(**overrides)
        else:
            # private copy; the drawn seed is recorded on it below
            config = config.replace(**overrides)
        self.config = config.validate()
        if rng is None:
            if self.config.seed is None:
                self.config.seed = random.randint(0, 2**31 - 1)
            rng = random.Random(self.config.seed)
        self._rng = rng
        if enable_metrics is None:
            enable_metrics = os.environ.get("DUNGEON_ENABLE_GENERATION_METRICS", "1").lower() not in {
                "0",
                "false",
                "no",
                "",
            }
        self.enable_metrics = enable_metrics
        self.metrics: Dict[str, Any] = init_metrics() if enable_metrics else {}

        self.grid = TileGrid(self.config.rows, self.config.cols, self.config.wall_tile)
        self._rooms: List[Room] = []
        self.current_region = -1
        self._generated = False

    # ------------------------------------------------------------------
    # Generation
    # ------------------------------------------------------------------
    @property
    def generated(self) -> bool:
        return self._generated

    @property
    def seed(self) -> Optional[int]:
        return self.config.seed

    @property
    def rows(self) -> int:
        return self.config.rows

    @property
    def cols(self) -> int:
        return self.config.cols

    @property
    def rooms(self) -> Tuple[Room, ...]:
        return tuple(self._rooms)

    @property
    def region_count(self) -> int:
        return self.current_region + 1

    def _next_region(self) -> int:
        self.current_region += 1
        return self.current_region

    def generate(self) -> "Dungeon":
        if self._generated:
            raise AlreadyGenerated("This dungeon has already been generated")

        start = time.perf_counter()
        phase_times: Dict[str, int] = {}

        def _phase(label: str, fn: Callable, *a, **k):
            ps = time.perf_counter()
            r = fn(*a, **k)
            elapsed = int((time.perf_counter() - ps) * 1000)
            phase_times[label] = elapsed
            log.debug(event="phase", phase=label, ms=elapsed)
            return r

        cfg, grid, rng = self.config, self.grid, self._rng
        rooms, failed = _phase("place_rooms", place_rooms, grid, cfg, rng, self._next_region)
        self._rooms.extend(rooms)
        mazes = _phase("fill_mazes", fill_mazes, grid, cfg, rng, self._next_region)
        merge = _phase("connect_regions", connect_regions, grid, self.region_count, cfg, rng)
        pruned = _phase("eliminate_dead_ends", eliminate_dead_ends, grid)

        self._generated = True

        if self.enable_metrics:
            self.metrics.update(
                rooms_placed=len(rooms),
                room_attempts_failed=failed,
                mazes_grown=mazes,
                regions=self.region_count,
                connector_candidates=merge.candidates,
                connectors_opened=merge.opened,
                extra_connectors_opened=merge.extra_opened,
                unmerged_regions=merge.unmerged,
                dead_ends_removed=pruned.removed,
                dead_end_passes=pruned.passes,
                runtime_ms=int((time.perf_counter() - start) * 1000),
                phase_ms=phase_times,
            )
        log.info(
            event="dungeon_generated",
            seed=self.seed,
            rows=cfg.rows,
            cols=cfg.cols,
            rooms=len(rooms),
            regions=self.region_count,
            connectors=merge.opened + merge.extra_opened,
        )
        return self

    def _check_generated(self) -> None:
        if not self._generated:
            raise NotGenerated("Forgot to call Dungeon.generate()")

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def in_bounds(self, v: Vector) -> bool:
        return self.grid.in_bounds(v)

    def check_bounds(self, v: Vector) -> None:
        self.grid.index(v)

    def tile_at(self, v: Vector) -> int:
        self._check_generated()
        return self.grid.get(v)

    def is_wall(self, v: Vector) -> bool:
        return self.tile_at(v) == self.config.wall_tile

    def region_at(self, v: Vector) -> int:
        self._check_generated()
        return self.grid.region(v)

    def neighbours(self, v: Vector) -> List[Vector]:
        return self.grid.neighbours(v)

    def valid_directions_from(self, v: Vector, steps: int = 1) -> List[Vector]:
        return self.grid.valid_directions_from(v, steps)

    def rand_pos(self) -> Vector:
        """Centre of the first room placed.

        Rooms are already placed at random, so this is a deterministic pick
        rather than a fresh draw.
        """
        self._check_generated()
        if not self._rooms:
            raise NoRooms("No room was placed; there is no spawn position")
        return self._rooms[0].center

    def traverse(
        self,
        visitor: Callable[[Vector], Any],
        top_left: Vector | None = None,
        bottom_right: Vector | None = None,
    ) -> None:
        """Call ``visitor`` on every cell of the inclusive rectangle, row-major.

        With no corners the whole grid is visited.
        """
        if (top_left is None) != (bottom_right is None):
            raise TypeError("traverse takes either both corners or neither")
        if top_left is None:
            top_left = ORIGIN
            bottom_right = Vector(self.rows - 1, self.cols - 1)
        else:
            self.check_bounds(top_left)
            self.check_bounds(bottom_right)
        for r in range(int(top_left.x), int(bottom_right.x) + 1):
            for c in range(int(top_left.y), int(bottom_right.y) + 1):
                visitor(Vector(r, c))

    def floor_cells(self) -> Iterator[Vector]:
        self._check_generated()
        return (v for v in self.grid.coords() if not self.grid.is_wall(v))

    def to_rows(self) -> List[List[int]]:
        self._check_generated()
        return self.grid.to_rows()

    def snapshot(self) -> Tuple[int, ...]:
        self._check_generated()
        return self.grid.snapshot()

    def pretty_print(self) -> str:
        cfg = self.config
        glyphs = {cfg.wall_tile: WALL_GLYPH, cfg.floor_tile: FLOOR_GLYPH, cfg.connector_tile: CONNECTOR_GLYPH}
        return "".join("".join(glyphs[t] for t in row) + "\n" for row in self.grid.to_rows())


def generate_dungeon(config: DungeonConfig | None = None, **kwargs: Any) -> Dungeon:
    return Dungeon(config, **kwargs).generate()


__all__ = ["Dungeon", "generate_dungeon"]
