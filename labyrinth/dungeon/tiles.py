# Default tile codes; DungeonConfig may override them per instance.
WALL = 0
FLOOR = 1
CONNECTOR = 2

# Debug rendering glyphs keyed by tile kind.
WALL_GLYPH = " "
FLOOR_GLYPH = "*"
CONNECTOR_GLYPH = "#"

__all__ = ["WALL", "FLOOR", "CONNECTOR", "WALL_GLYPH", "FLOOR_GLYPH", "CONNECTOR_GLYPH"]
