# src/werlost/render/palette.py
from typing import Tuple

from ..tiles import ROAD, WALL

RGBA = Tuple[int, int, int, int]

BACKGROUND: RGBA = (0, 0, 0, 255)
GRID_LINE: RGBA = (221, 221, 221, 255)

_CELL_COLORS = {
    ROAD: (236, 236, 228, 255),
    WALL: (80, 80, 80, 255),
}
_FALLBACK_CELL: RGBA = (255, 0, 255, 255)  # unknown state, should never show

PLAYER_COLORS = {
    "A": (220, 40, 40, 255),   # red
    "B": (40, 80, 220, 255),   # blue
}
FOV_TINT: RGBA = (255, 220, 0, 255)


def cell_color(cell: str) -> RGBA:
    return _CELL_COLORS.get(cell, _FALLBACK_CELL)


def player_color(role: str) -> RGBA:
    return PLAYER_COLORS.get(role, _FALLBACK_CELL)
