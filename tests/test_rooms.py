import random

import pytest

from labyrinth.dungeon import DungeonConfig, InvalidRoom, Room, TileGrid, UNASSIGNED, Vector
from labyrinth.dungeon.rooms import place_rooms, rand_odd


def room(a, b, c, d):
    return Room(Vector(a, b), Vector(c, d))


def test_disjoint_rooms_do_not_intersect():
    assert not room(1, 1, 3, 3).intersects(room(5, 5, 7, 7))
    assert not room(5, 5, 7, 7).intersects(room(1, 1, 3, 3))


def test_corner_touching_rooms_intersect():
    assert room(1, 1, 3, 3).intersects(room(3, 3, 5, 5))


def test_edge_touching_and_nested_rooms_intersect():
    assert room(1, 1, 3, 3).intersects(room(3, 1, 5, 3))
    assert room(1, 1, 9, 9).intersects(room(3, 3, 5, 5))


def test_separated_on_one_axis_only():
    # rows overlap, columns disjoint
    assert not room(1, 1, 5, 3).intersects(room(1, 5, 5, 7))


@pytest.mark.parametrize("corners", [(3, 3, 1, 1), (1, 1, 1, 5), (1, 1, 5, 1), (4, 1, 2, 3)])
def test_degenerate_or_inverted_room_rejected(corners):
    with pytest.raises(InvalidRoom):
        room(*corners)


def test_room_geometry():
    r = room(1, 3, 5, 9)
    assert (r.height, r.width, r.area) == (5, 7, 35)
    assert r.center == Vector(3, 6)
    cells = list(r.cells())
    assert len(cells) == 35
    assert cells[0] == Vector(1, 3) and cells[-1] == Vector(5, 9)
    assert r.contains(Vector(5, 9)) and not r.contains(Vector(6, 9))


def test_rand_odd_stays_odd_and_in_range():
    rng = random.Random(3)
    values = {rand_odd(rng, 5, 9) for _ in range(200)}
    assert values == {5, 7, 9}
    assert all(rand_odd(rng, 1, 10) in (1, 3, 5, 7, 9) for _ in range(100))


def _counter():
    state = {"n": -1}

    def next_region():
        state["n"] += 1
        return state["n"]

    return next_region


@pytest.mark.parametrize("seed", [1, 2, 3, 4])
def test_place_rooms_non_overlapping_and_in_bounds(seed):
    cfg = DungeonConfig(rows=41, cols=41, room_placement_attempts=60)
    grid = TileGrid(cfg.rows, cfg.cols, cfg.wall_tile)
    rooms, failed = place_rooms(grid, cfg, random.Random(seed), _counter())
    assert len(rooms) + failed == 60
    assert rooms
    for i, a in enumerate(rooms):
        assert grid.in_bounds(a.top_left) and grid.in_bounds(a.bottom_right)
        assert a.top_left.x % 2 == 1 and a.top_left.y % 2 == 1
        assert a.height % 2 == 1 and a.width % 2 == 1
        for b in rooms[i + 1:]:
            assert not a.intersects(b)
        for cell in a.cells():
            assert grid.get(cell) == cfg.floor_tile
            assert grid.region(cell) == i


def test_place_rooms_on_tiny_grid_places_nothing():
    cfg = DungeonConfig(rows=2, cols=2, room_placement_attempts=5)
    grid = TileGrid(2, 2, cfg.wall_tile)
    rooms, failed = place_rooms(grid, cfg, random.Random(0), _counter())
    assert rooms == [] and failed == 5
    assert all(r == UNASSIGNED for r in grid.regions)
