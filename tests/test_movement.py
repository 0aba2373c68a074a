import pytest

from werlost.engine.movement import (
    Direction, edge_cells, field_of_view, look, opposite, resolve_cell,
    step, try_move, turn, view_offsets,
)
from werlost.grid import Grid
from werlost.labels import cell_label
from werlost.mapgen.generator import generate_map, open_map
from werlost.tiles import OUT_OF_BOUNDS_LABEL, ROAD, WALL, WALL_LABEL

N, E, S, W = Direction.NORTH, Direction.EAST, Direction.SOUTH, Direction.WEST

def board(size, walls):
    rows = [[ROAD] * size for _ in range(size)]
    for x, y in walls:
        rows[y][x] = WALL
    return Grid.from_rows(rows)

def test_turn_wraps_both_ways():
    assert turn(N, -1) == W
    assert turn(W, 1) == N
    assert turn(E, 1) == S
    assert turn(S, -1) == E
    assert opposite(N) == S and opposite(E) == W

def test_step_per_direction():
    assert step(3, 3, N) == (3, 2)
    assert step(3, 3, E) == (4, 3)
    assert step(3, 3, S) == (3, 4)
    assert step(3, 3, W) == (2, 3)

def test_field_of_view_tables():
    assert field_of_view(3, 3, N).cells() == ((2, 2), (3, 2), (2, 1), (3, 1))
    assert field_of_view(3, 3, E).cells() == ((3, 2), (3, 3), (4, 2), (4, 3))
    assert field_of_view(3, 3, S).cells() == ((3, 3), (2, 3), (3, 4), (2, 4))
    assert field_of_view(3, 3, W).cells() == ((2, 3), (2, 2), (1, 3), (1, 2))

def _rotate_cw(offset):
    # Rotate a cell about the origin intersection by its centre.
    cx, cy = offset[0] + 0.5, offset[1] + 0.5
    rx, ry = -cy, cx
    return int(rx - 0.5), int(ry - 0.5)

def test_fov_is_a_rotation_of_the_previous_facing():
    for d in Direction:
        nxt = turn(d, 1)
        assert tuple(_rotate_cw(o) for o in view_offsets(d)) == view_offsets(nxt), d

def test_edge_cells_are_the_near_row():
    for d in Direction:
        fov = field_of_view(5, 5, d)
        assert edge_cells(5, 5, d) == (fov.left_near, fov.right_near)

def test_moves_stay_inside_intersection_range():
    g = open_map(3)
    assert try_move(g, 3, 0, 0, N) is None
    assert try_move(g, 3, 0, 0, W) is None
    assert try_move(g, 3, 3, 3, S) is None
    assert try_move(g, 3, 3, 3, E) is None
    assert try_move(g, 3, 0, 0, E) == (1, 0)
    assert try_move(g, 3, 0, 0, S) == (0, 1)
    assert try_move(g, 3, -4, 7, N) is None

def test_can_walk_along_the_border():
    g = open_map(4)
    # Outside cells are walls, so these edges are single-sided.
    assert try_move(g, 4, 0, 2, N) == (0, 1)
    assert try_move(g, 4, 4, 2, N) == (4, 1)
    assert try_move(g, 4, 2, 4, E) == (3, 4)
    assert try_move(g, 4, 2, 0, W) == (1, 0)

def test_blocked_only_when_both_sides_are_walls():
    g = board(4, [(0, 1), (1, 1)])
    assert try_move(g, 4, 1, 2, N) is None          # (0,1) and (1,1) both walls
    assert try_move(g, 4, 2, 2, N) == (2, 1)        # (1,1) wall, (2,1) open
    assert try_move(g, 4, 1, 1, N) == (1, 0)        # row above is open
    assert try_move(g, 4, 1, 1, S) is None          # same edge from the other side
    assert try_move(g, 4, 0, 1, E) == (1, 1)        # (0,0) open, (0,1) wall

def test_wall_against_border_blocks():
    g = board(3, [(0, 0)])
    # Moving south along x=0 crosses between (-1,0) outside and the wall (0,0).
    assert try_move(g, 3, 0, 0, S) is None
    assert try_move(g, 3, 1, 0, S) == (1, 1)

def test_moves_are_reversible():
    for seed, size in [("abc", 10), ("rev", 25)]:
        g = generate_map(seed, size)
        for ix in range(size + 1):
            for iy in range(size + 1):
                for d in Direction:
                    res = try_move(g, size, ix, iy, d)
                    if res is None:
                        continue
                    assert try_move(g, size, res[0], res[1], opposite(d)) == (ix, iy), (seed, ix, iy, d)

def test_resolve_cell_and_look():
    g = board(4, [(1, 1)])
    assert resolve_cell("abc", g, -1, 0) == OUT_OF_BOUNDS_LABEL
    assert resolve_cell("abc", g, 4, 0) == OUT_OF_BOUNDS_LABEL
    assert resolve_cell("abc", g, 1, 1) == WALL_LABEL
    assert resolve_cell("abc", g, 2, 2) == cell_label("abc", 2, 2)

    v = look("abc", g, 2, 2, N)
    assert v.left_near == WALL_LABEL
    assert v.right_near == cell_label("abc", 2, 1)
    assert v.left_far == cell_label("abc", 1, 0)
    assert v.right_far == cell_label("abc", 2, 0)

    v = look("abc", g, 0, 0, N)
    assert {v.left_near, v.right_near, v.left_far, v.right_far} == {OUT_OF_BOUNDS_LABEL}

@pytest.mark.parametrize("raw", [0, 1, 2, 3])
def test_int_directions_accepted(raw):
    assert try_move(open_map(5), 5, 2, 2, raw) == step(2, 2, raw)
