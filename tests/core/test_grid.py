import pytest

from tile_astar.core.grid import Grid, GridError, OutOfBoundsError
from tile_astar.core.tile import Tile


def _positions(tiles):
    return [t.position for t in tiles]


def test_grid_builds_every_tile():
    grid = Grid(4, 3)
    assert len(grid) == 12
    assert len(list(grid)) == 12
    assert {t.position for t in grid} == {(x, y) for x in range(4) for y in range(3)}
    assert grid.tile(3, 2).position == (3, 2)


@pytest.mark.parametrize("size", [(0, 3), (3, 0), (-1, 2)])
def test_grid_rejects_non_positive_size(size):
    with pytest.raises(ValueError):
        Grid(*size)


def test_passability_from_sequence_is_row_major():
    rows = [
        [True, False, True],
        [True, True, True],
    ]
    grid = Grid(3, 2, rows)
    assert grid.tile(1, 0).blocked
    assert not grid.tile(0, 1).blocked


def test_passability_from_callable():
    grid = Grid(3, 3, lambda x, y: (x, y) != (1, 1))
    assert [t.position for t in grid if t.blocked] == [(1, 1)]


def test_passability_shape_mismatch():
    with pytest.raises(ValueError):
        Grid(3, 2, [[True, True, True]])


def test_weights_must_be_positive():
    with pytest.raises(ValueError):
        Grid(2, 1, weights=[[1, 0]])


def test_from_strings():
    grid = Grid.from_strings([
        ".#3",
        "...",
    ])
    assert (grid.width, grid.height) == (3, 2)
    assert grid.tile(1, 0).blocked
    assert grid.tile(2, 0).weight == 3
    assert grid.tile(0, 1).weight == 1


def test_from_strings_rejects_unknown_glyph():
    with pytest.raises(ValueError):
        Grid.from_strings(["..x"])


def test_tile_out_of_bounds():
    grid = Grid(2, 2)
    for x, y in [(-1, 0), (0, -1), (2, 0), (0, 2)]:
        with pytest.raises(OutOfBoundsError):
            grid.tile(x, y)
    assert issubclass(OutOfBoundsError, GridError)
    assert issubclass(OutOfBoundsError, IndexError)


def test_contains_checks_identity():
    grid = Grid(2, 2)
    assert grid.tile(1, 1) in grid
    assert Tile(1, 1) not in grid
    assert Tile(5, 5) not in grid
    assert Grid(2, 2).tile(0, 0) not in grid


def test_neighbors_order_west_east_south_north():
    grid = Grid(3, 3)
    assert _positions(grid.neighbors(1, 1)) == [(0, 1), (2, 1), (1, 0), (1, 2)]


def test_neighbors_corner_and_edge():
    grid = Grid(4, 4)
    assert _positions(grid.neighbors(0, 0)) == [(1, 0), (0, 1)]
    assert _positions(grid.neighbors(3, 3)) == [(2, 3), (3, 2)]
    assert len(grid.neighbors(1, 0)) == 3


def test_neighbors_skip_blocked():
    grid = Grid.from_strings([
        ".#.",
        "#..",
        "...",
    ])
    assert grid.neighbors(0, 0) == []
    assert _positions(grid.neighbors(1, 1)) == [(2, 1), (1, 2)]


def test_neighbors_single_tile_grid():
    assert Grid(1, 1).neighbors(0, 0) == []


def test_neighbors_out_of_bounds():
    with pytest.raises(OutOfBoundsError):
        Grid(2, 2).neighbors(2, 0)


def test_reset_clears_every_tile():
    grid = Grid(2, 2)
    for t in grid:
        t.visited = t.closed = True
        t.g_cost = 7
        t.parent = (0, 0)
    grid.reset()
    assert all(not t.visited and not t.closed and t.g_cost == 0 and t.parent is None for t in grid)
