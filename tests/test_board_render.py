import os

import pytest

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")
pygame = pytest.importorskip("pygame")

from werlost.engine.movement import Direction
from werlost.engine.player import PlayerState
from werlost.mapgen.generator import generate_map
from werlost.render.board import board_size_px, draw_board
from werlost.render.palette import cell_color, player_color

def test_board_cells_and_player_marker():
    g = generate_map("abc", 10)
    tile, margin = 16, 8
    w, h = board_size_px(g, tile, margin)
    assert (w, h) == (176, 176)
    surf = pygame.Surface((w, h), 0, 32)
    pl = PlayerState("A", 3, 4, Direction.NORTH)
    draw_board(surf, g, tile, [pl], margin=margin, show_fov=True)

    for y in range(10):
        for x in range(10):
            px = margin + x * tile + tile // 2
            py = margin + y * tile + tile // 2
            assert tuple(surf.get_at((px, py))) == cell_color(g.get(x, y)), (x, y)

    # marker sits on the intersection, i.e. a grid-line crossing
    assert tuple(surf.get_at((margin + 3 * tile + 1, margin + 4 * tile + 1))) == player_color("A")
