# src/werlost/engine/movement.py
# Intersection movement + 2×2 forward view. Player, spectator and tool surfaces
# all go through these functions; none of them re-derive the offsets.
#
# Intersections live on cell corners: (ix, iy) is the north-west corner of cell
# (ix, iy), range 0..N on each axis. Walls sit on cells, so a forward move
# crosses the edge between the two cells in front and is blocked only when
# both of them are walls (out-of-range cells count as walls).

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional, Tuple

from ..grid import Grid
from ..labels import cell_label
from ..tiles import OUT_OF_BOUNDS_LABEL, WALL_LABEL

XY = Tuple[int, int]


class Direction(IntEnum):
    NORTH = 0
    EAST = 1
    SOUTH = 2
    WEST = 3


DEFAULT_FACING = Direction.NORTH

_STEPS = {
    Direction.NORTH: (0, -1),
    Direction.EAST: (1, 0),
    Direction.SOUTH: (0, 1),
    Direction.WEST: (-1, 0),
}

# Facing north from (ix, iy): cell offsets for left-near, right-near,
# left-far, right-far. Other facings are rotations of this block.
_NORTH_VIEW: Tuple[XY, XY, XY, XY] = ((-1, -1), (0, -1), (-1, -2), (0, -2))


def turn(direction: int, delta: int) -> Direction:
    return Direction((int(direction) + delta + 4) % 4)


def opposite(direction: int) -> Direction:
    return turn(direction, 2)


def step(ix: int, iy: int, direction: int) -> XY:
    dx, dy = _STEPS[Direction(direction)]
    return ix + dx, iy + dy


def _rotate_cell(offset: XY, quarter_turns: int) -> XY:
    # Rotate the cell's centre about the intersection, clockwise on screen
    # (y grows south). Doubled coordinates keep it in integers.
    cx, cy = 2 * offset[0] + 1, 2 * offset[1] + 1
    for _ in range(quarter_turns % 4):
        cx, cy = -cy, cx
    return (cx - 1) // 2, (cy - 1) // 2


@dataclass(frozen=True)
class FieldOfView:
    left_near: XY
    right_near: XY
    left_far: XY
    right_far: XY

    def cells(self) -> Tuple[XY, XY, XY, XY]:
        return (self.left_near, self.right_near, self.left_far, self.right_far)


def view_offsets(direction: int) -> Tuple[XY, XY, XY, XY]:
    turns = int(Direction(direction))
    return tuple(_rotate_cell(o, turns) for o in _NORTH_VIEW)


def field_of_view(ix: int, iy: int, direction: int) -> FieldOfView:
    ln, rn, lf, rf = ((ix + dx, iy + dy) for dx, dy in view_offsets(direction))
    return FieldOfView(left_near=ln, right_near=rn, left_far=lf, right_far=rf)


def edge_cells(ix: int, iy: int, direction: int) -> Tuple[XY, XY]:
    """The two cells either side of the edge a forward move crosses."""
    fov = field_of_view(ix, iy, direction)
    return fov.left_near, fov.right_near


def intersection_in_range(size: int, ix: int, iy: int) -> bool:
    return 0 <= ix <= size and 0 <= iy <= size


def try_move(grid: Grid, size: int, ix: int, iy: int, direction: int) -> Optional[XY]:
    nx, ny = step(ix, iy, direction)
    if not intersection_in_range(size, nx, ny):
        return None
    (ax, ay), (bx, by) = edge_cells(ix, iy, direction)
    # Cells outside [0, size) are walls whatever board was passed in.
    a_wall = not (0 <= ax < size and 0 <= ay < size) or grid.is_wall(ax, ay)
    b_wall = not (0 <= bx < size and 0 <= by < size) or grid.is_wall(bx, by)
    if a_wall and b_wall:
        return None
    return nx, ny


def resolve_cell(seed: str, grid: Grid, x: int, y: int) -> str:
    if not grid.in_bounds(x, y):
        return OUT_OF_BOUNDS_LABEL
    if grid.is_wall(x, y):
        return WALL_LABEL
    return cell_label(seed, x, y)


@dataclass(frozen=True)
class ResolvedView:
    left_near: str
    right_near: str
    left_far: str
    right_far: str


def look(seed: str, grid: Grid, ix: int, iy: int, direction: int) -> ResolvedView:
    fov = field_of_view(ix, iy, direction)
    return ResolvedView(*(resolve_cell(seed, grid, x, y) for x, y in fov.cells()))
