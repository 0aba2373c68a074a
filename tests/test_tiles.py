import pytest

from werlost.grid import Grid, is_wall
from werlost.tiles import ROAD, WALL, is_open
from werlost.mapgen.generator import generate_map

def test_cell_states():
    assert is_open(ROAD)
    assert not is_open(WALL)

def test_boundary_is_closed():
    g = generate_map("abc", 10)
    for i in range(-2, 13):
        for j in (-1, 10, 11):
            assert is_wall(g, i, j)
            assert is_wall(g, j, i)

def test_is_wall_without_board():
    assert is_wall(None, 0, 0)
    assert is_wall(Grid.filled(0), 0, 0)

def test_from_rows_round_trip_and_square_check():
    rows = [[ROAD, WALL], [WALL, ROAD]]
    g = Grid.from_rows(rows)
    assert g.size == 2
    assert g.as_matrix() == rows
    assert g.road_cells() == [(0, 0), (1, 1)]
    assert g.wall_count() == 2
    with pytest.raises(ValueError):
        Grid.from_rows([[ROAD, ROAD], [ROAD]])

def test_grid_is_immutable():
    g = Grid.filled(3)
    with pytest.raises(AttributeError):
        g.size = 4
    m = g.as_matrix()
    m[0][0] = WALL
    assert g.get(0, 0) == ROAD
