# src/werlost/render/board.py
# Spectator board on a pygame Surface: cells, grid lines, players drawn on
# their intersections, optional outline of each player's view cells.
from __future__ import annotations

from typing import Iterable, Optional

import pygame

from ..grid import Grid
from ..engine.player import PlayerState
from .palette import BACKGROUND, FOV_TINT, GRID_LINE, cell_color, player_color


def board_size_px(grid: Grid, tile: int, margin: int) -> tuple[int, int]:
    side = grid.size * tile + 2 * margin
    return side, side


def draw_board(
    surface: pygame.Surface,
    grid: Grid,
    tile: int,
    players: Iterable[PlayerState] = (),
    *,
    margin: int = 0,
    show_fov: bool = False,
    marker: Optional[int] = None,
) -> None:
    """
    Draw the whole board. Intersections sit on grid-line crossings, so a
    player at (ix, iy) is centred on pixel (margin + ix*tile, margin + iy*tile).
    """
    surface.fill(BACKGROUND)
    for y in range(grid.size):
        for x in range(grid.size):
            r = pygame.Rect(margin + x * tile, margin + y * tile, tile, tile)
            pygame.draw.rect(surface, cell_color(grid.get(x, y)), r)

    side = grid.size * tile
    for i in range(grid.size + 1):
        p = margin + i * tile
        pygame.draw.line(surface, GRID_LINE, (p, margin), (p, margin + side))
        pygame.draw.line(surface, GRID_LINE, (margin, p), (margin + side, p))

    radius = marker if marker is not None else max(2, tile // 4)
    for pl in players:
        if show_fov:
            for cx, cy in pl.field_of_view().cells():
                if grid.in_bounds(cx, cy):
                    r = pygame.Rect(margin + cx * tile, margin + cy * tile, tile, tile)
                    pygame.draw.rect(surface, FOV_TINT, r, width=max(1, tile // 8))
        centre = (margin + pl.ix * tile, margin + pl.iy * tile)
        pygame.draw.circle(surface, player_color(pl.role), centre, radius)
