# src/werlost/mapgen/generator.py
# Canonical board generator: (seed, size) -> Grid, nothing else consulted.

import logging

from ..config import DEFAULT_CONFIG, WorldConfig
from ..grid import Grid
from ..rng import LCGRandom
from ..tiles import ROAD
from .walls import paint_walls

logger = logging.getLogger(__name__)


def _check_size(size: int) -> None:
    if size <= 0:
        raise ValueError(f"board size must be positive, got {size}")


def generate_map(seed: str, size: int, config: WorldConfig = DEFAULT_CONFIG) -> Grid:
    _check_size(size)
    cells = [[ROAD for _ in range(size)] for _ in range(size)]
    rng = LCGRandom.from_key(seed + ":wall")
    painted = paint_walls(cells, rng, config)
    grid = Grid.from_rows(cells)
    logger.debug("generated %dx%d board for seed %r: %d wall cells (%d painted)",
                 size, size, seed, grid.wall_count(), painted)
    return grid


def open_map(size: int) -> Grid:
    """All-road board used by fallback sessions."""
    _check_size(size)
    return Grid.filled(size, ROAD)
