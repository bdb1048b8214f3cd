"""Public dungeon package interface."""

from .config import DungeonConfig
from .dungeon import Dungeon, generate_dungeon
from .errors import (
    AlreadyGenerated,
    DegenerateVector,
    DungeonError,
    ErrorKind,
    InvalidConfig,
    InvalidRoom,
    NoRooms,
    NotGenerated,
    OutOfBounds,
)
from .grid import UNASSIGNED, TileGrid
from .rooms import Room
from .tiles import CONNECTOR, FLOOR, WALL
from .vector import DIRECTIONS, Vector

__all__ = [
    "Dungeon",
    "DungeonConfig",
    "generate_dungeon",
    "Room",
    "Vector",
    "DIRECTIONS",
    "TileGrid",
    "UNASSIGNED",
    "WALL",
    "FLOOR",
    "CONNECTOR",
    "ErrorKind",
    "DungeonError",
    "OutOfBounds",
    "InvalidRoom",
    "AlreadyGenerated",
    "NotGenerated",
    "DegenerateVector",
    "InvalidConfig",
    "NoRooms",
]
