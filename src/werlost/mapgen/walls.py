# src/werlost/mapgen/walls.py
# Straight wall segments painted onto an all-road board. Draw order per segment
# is fixed (orientation, length, start x, start y) so every client reproduces
# the same wall set from the same stream.

from typing import List, Tuple

from ..config import DEFAULT_CONFIG, WorldConfig
from ..rng import LCGRandom
from ..tiles import WALL

XY = Tuple[int, int]


def segment_count(size: int, config: WorldConfig = DEFAULT_CONFIG) -> int:
    ratio = config.density_for(size)
    return max(1, int(size * size * ratio / config.mean_segment_length))


def draw_segment(rng: LCGRandom, size: int, config: WorldConfig = DEFAULT_CONFIG) -> List[XY]:
    """Consume one segment's draws and return its cells (may run off the board)."""
    horizontal = rng.chance(0.5)
    length = config.segment_min_length + rng.below(config.segment_length_choices)
    sx = rng.below(size)
    sy = rng.below(size)
    if horizontal:
        return [(sx + k, sy) for k in range(length)]
    return [(sx, sy + k) for k in range(length)]


def paint_walls(cells: List[List[str]], rng: LCGRandom, config: WorldConfig = DEFAULT_CONFIG) -> int:
    """Paint wall segments into ``cells`` ([row][col]) in place.
    Returns the number of cells that ended up inside the board."""
    size = len(cells)
    painted = 0
    for _ in range(segment_count(size, config)):
        for x, y in draw_segment(rng, size, config):
            if x < 0 or x >= size or y < 0 or y >= size:
                continue  # clipped
            cells[y][x] = WALL
            painted += 1
    return painted
