"""Rooms-and-mazes dungeon generation."""

__version__ = "0.1.0"
