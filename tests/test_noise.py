from tile_astar.core.grid import Grid
from tile_astar.utils import noise


def test_white_noise_dimensions() -> None:
    data = noise.white_noise(4, 3, seed=123)
    assert len(data) == 3
    assert all(len(row) == 4 for row in data)
    data2 = noise.white_noise(4, 3, seed=123)
    assert data == data2


def test_threshold_mask() -> None:
    values = [[0.1, 0.9], [0.5, 0.95]]
    mask = noise.threshold_mask(values, 0.8)
    assert mask == [[False, True], [False, True]]


def test_random_passability_is_seeded() -> None:
    a = noise.random_passability(6, 5, 0.4, seed=9)
    b = noise.random_passability(6, 5, 0.4, seed=9)
    assert a == b
    assert len(a) == 5 and all(len(row) == 6 for row in a)
    Grid(6, 5, a)


def test_random_passability_extremes_and_keep_open() -> None:
    assert all(all(row) for row in noise.random_passability(3, 3, 0.0, seed=1))
    walls = noise.random_passability(3, 3, 1.0, seed=1, keep_open=[(0, 0), (2, 1), (9, 9)])
    assert walls[0][0] and walls[1][2]
    assert sum(cell for row in walls for cell in row) == 2
