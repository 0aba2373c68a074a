# src/werlost/engine/observer.py
# Read-only queries for the spectator surface. Works on the same board and
# labels the players see.

from __future__ import annotations

from typing import List, Tuple

from ..grid import Grid
from ..labels import cell_label
from .connectivity import manhattan

XY = Tuple[int, int]

NEARBY_RADIUS = 2
WINDOW_RADIUS = 4  # 9×9


def nearby_labels(seed: str, grid: Grid, x: int, y: int, radius: int = NEARBY_RADIUS) -> List[Tuple[int, XY, str]]:
    """Labelled road cells within Manhattan ``radius`` of (x, y), closest first."""
    out = []
    for cy in range(y - radius, y + radius + 1):
        for cx in range(x - radius, x + radius + 1):
            d = manhattan((x, y), (cx, cy))
            if d > radius or grid.is_wall(cx, cy):
                continue
            out.append((d, (cx, cy), cell_label(seed, cx, cy)))
    out.sort(key=lambda item: (item[0], item[1][1], item[1][0]))
    return out


def window(cx: int, cy: int, radius: int = WINDOW_RADIUS) -> List[List[XY]]:
    """Cell coordinates of a (2r+1)² window centred on (cx, cy), north row first."""
    return [[(cx + dx, cy + dy) for dx in range(-radius, radius + 1)]
            for dy in range(-radius, radius + 1)]


def distance_between(a: XY, b: XY) -> int:
    return manhattan(a, b)
