from __future__ import annotations

import os
from dataclasses import dataclass, fields, replace as _dc_replace
from typing import Any, Mapping, Optional

from .errors import InvalidConfig
from .tiles import CONNECTOR, FLOOR, WALL


@dataclass
class DungeonConfig:
    rows: int = 101
    cols: int = 101
    # Probability that a maze turns instead of continuing straight.
    curliness: float = 0.2
    # Probability that a redundant connector is opened anyway.
    extra_connector_chance: float = 0.02
    # Reserved: accepted and validated but not consulted; every dead end is removed.
    dead_endiness: float = 0.0
    min_room_size: int = 5
    max_room_size: int = 9
    room_placement_attempts: int = 10
    wall_tile: int = WALL
    floor_tile: int = FLOOR
    connector_tile: int = CONNECTOR
    seed: Optional[int] = None

    def validate(self) -> "DungeonConfig":
        if self.rows < 1 or self.cols < 1:
            raise InvalidConfig(f"grid must be at least 1x1, got {self.rows}x{self.cols}")
        for name in ("curliness", "extra_connector_chance", "dead_endiness"):
            value = getattr(self, name)
            if not 0.0 <= value <= 1.0:
                raise InvalidConfig(f"{name} must be within [0, 1], got {value}")
        for name in ("min_room_size", "max_room_size"):
            value = getattr(self, name)
            if value < 3 or value % 2 == 0:
                raise InvalidConfig(f"{name} must be an odd integer >= 3, got {value}")
        if self.min_room_size > self.max_room_size:
            raise InvalidConfig(
                f"min_room_size ({self.min_room_size}) exceeds max_room_size ({self.max_room_size})"
            )
        if self.room_placement_attempts < 0:
            raise InvalidConfig("room_placement_attempts must not be negative")
        codes = {self.wall_tile, self.floor_tile, self.connector_tile}
        if len(codes) != 3:
            raise InvalidConfig("wall_tile, floor_tile and connector_tile must be pairwise distinct")
        return self

    def replace(self, **changes: Any) -> "DungeonConfig":
        return _dc_replace(self, **changes)

    @classmethod
    def from_env(cls, environ: Optional[Mapping[str, str]] = None, **overrides: Any) -> "DungeonConfig":
        """Build a config from ``DUNGEON_*`` environment variables.

        Keyword overrides take precedence over the environment; anything left
        unset keeps the dataclass default.
        """
        env = os.environ if environ is None else environ
        kwargs = {}
        for env_key, attr in ENV_MAP.items():
            raw = env.get(env_key)
            if raw is None or raw == "":
                continue
            kwargs[attr] = _cast(attr, raw, env_key)
        kwargs.update(overrides)
        return cls(**kwargs)


ENV_MAP = {
    "DUNGEON_ROWS": "rows",
    "DUNGEON_COLS": "cols",
    "DUNGEON_CURLINESS": "curliness",
    "DUNGEON_EXTRA_CONNECTOR_CHANCE": "extra_connector_chance",
    "DUNGEON_DEAD_ENDINESS": "dead_endiness",
    "DUNGEON_MIN_ROOM_SIZE": "min_room_size",
    "DUNGEON_MAX_ROOM_SIZE": "max_room_size",
    "DUNGEON_ROOM_ATTEMPTS": "room_placement_attempts",
    "DUNGEON_SEED": "seed",
}

_FLOAT_FIELDS = {f.name for f in fields(DungeonConfig) if f.type in ("float", float)}


def _cast(attr: str, raw: str, env_key: str):
    try:
        if attr in _FLOAT_FIELDS:
            return float(raw)
        return int(raw)
    except ValueError:
        raise InvalidConfig(f"{env_key}={raw!r} is not a valid {attr}") from None


__all__ = ["DungeonConfig", "ENV_MAP"]
