"""Error kinds raised by the dungeon package.

Every failure is a programming or configuration mistake, so none of these are
retried or recovered internally. Each exception also derives from the closest
builtin so callers that only know about ``IndexError``/``ValueError`` still
catch them.
"""

from __future__ import annotations

from enum import Enum


class ErrorKind(Enum):
    OUT_OF_BOUNDS = "out_of_bounds"
    INVALID_ROOM = "invalid_room"
    ALREADY_GENERATED = "already_generated"
    NOT_GENERATED = "not_generated"
    DEGENERATE_VECTOR = "degenerate_vector"
    INVALID_CONFIG = "invalid_config"
    NO_ROOMS = "no_rooms"


class DungeonError(Exception):
    kind: ErrorKind


class OutOfBounds(DungeonError, IndexError):
    kind = ErrorKind.OUT_OF_BOUNDS


class InvalidRoom(DungeonError, ValueError):
    kind = ErrorKind.INVALID_ROOM


class AlreadyGenerated(DungeonError, RuntimeError):
    kind = ErrorKind.ALREADY_GENERATED


class NotGenerated(DungeonError, RuntimeError):
    kind = ErrorKind.NOT_GENERATED


class DegenerateVector(DungeonError, ValueError):
    kind = ErrorKind.DEGENERATE_VECTOR


class InvalidConfig(DungeonError, ValueError):
    kind = ErrorKind.INVALID_CONFIG


class NoRooms(DungeonError, LookupError):
    kind = ErrorKind.NO_ROOMS


__all__ = [
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
