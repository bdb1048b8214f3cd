from labyrinth.dungeon import DungeonConfig, TileGrid, Vector
from labyrinth.dungeon.pruning import dead_ends, eliminate_dead_ends, prune_pass


def _grid(rows, cols, cells):
    cfg = DungeonConfig(rows=rows, cols=cols)
    grid = TileGrid(rows, cols, cfg.wall_tile)
    for r, c in cells:
        grid.carve(Vector(r, c), cfg.floor_tile, 0)
    return grid


def test_corridor_collapses_to_single_cell():
    grid = _grid(3, 7, [(1, c) for c in range(1, 6)])
    stats = eliminate_dead_ends(grid)
    assert stats.removed == 4
    remaining = [v for v in grid.coords() if not grid.is_wall(v)]
    assert len(remaining) == 1
    assert dead_ends(grid) == []


def test_loop_survives_and_spur_is_removed():
    ring = [(1, 1), (1, 2), (1, 3), (2, 1), (2, 3), (3, 1), (3, 2), (3, 3)]
    spur = [(3, 4), (3, 5)]
    grid = _grid(5, 7, ring + spur)
    stats = eliminate_dead_ends(grid)
    assert stats.removed == 2
    assert {(int(v.x), int(v.y)) for v in grid.coords() if not grid.is_wall(v)} == set(ring)


def test_erased_cells_lose_their_region():
    grid = _grid(3, 5, [(1, 1), (1, 2), (1, 3)])
    eliminate_dead_ends(grid)
    for v in grid.coords():
        if grid.is_wall(v):
            assert grid.region(v) == -1


def test_fixed_point_is_idempotent():
    grid = _grid(7, 7, [(1, c) for c in range(1, 6)] + [(r, 5) for r in range(2, 6)] + [(5, 1), (5, 2)])
    first = eliminate_dead_ends(grid)
    snapshot = grid.snapshot()
    assert first.passes >= 2
    assert prune_pass(grid) == 0
    second = eliminate_dead_ends(grid)
    assert second.removed == 0 and second.passes == 1
    assert grid.snapshot() == snapshot


def test_connectors_count_as_open():
    grid = _grid(3, 5, [(1, 1), (1, 3)])
    grid.open(Vector(1, 2), 2)
    grid.open(Vector(1, 0), 2)
    grid.open(Vector(1, 4), 2)
    eliminate_dead_ends(grid)
    assert sum(1 for t in grid.tiles if t != grid.wall) == 1
