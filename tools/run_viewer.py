#!/usr/bin/env python3
# Hot-seat viewer for a werlost session (no store, no network).
# - Player A: W forward, A/D turn
# - Player B: Up forward, Left/Right turn
# - F: toggle view-cell outlines
# - N: new session (fresh seed)
# - 60 Hz fixed loop

import argparse, logging
import pygame

from werlost.engine.connectivity import build_session
from werlost.engine.observer import distance_between
from werlost.engine.session import initial_players, session_grid
from werlost.render.board import board_size_px, draw_board
from werlost.ui.hud import player_line, view_lines

log = logging.getLogger("run_viewer")

PANEL_W = 360

KEYS = {
    pygame.K_w: ("A", "forward"),
    pygame.K_a: ("A", -1),
    pygame.K_d: ("A", 1),
    pygame.K_UP: ("B", "forward"),
    pygame.K_LEFT: ("B", -1),
    pygame.K_RIGHT: ("B", 1),
}

def new_game(seed, size):
    plan = build_session(seed, size)
    if plan is None:
        raise SystemExit(f"could not build a session for size {size}; choose a different seed or size")
    grid = session_grid(plan)
    a, b = initial_players(plan)
    return plan, grid, {"A": a, "B": b}

def draw_panel(screen, font, x0, plan, grid, players):
    y = 8
    def line(text, color=(220, 220, 220)):
        nonlocal y
        img = font.render(text, True, color)
        screen.blit(img, (x0 + 8, y))
        y += img.get_height() + 4
    line(f"seed {plan.seed}" + ("  [open board]" if plan.fallback else ""))
    for role in ("A", "B"):
        pl = players[role]
        y += 6
        line(player_line(pl), (255, 200, 200) if role == "A" else (200, 200, 255))
        for text in view_lines(pl.look(plan.seed, grid)):
            line(text)
    y += 6
    line(f"A-B distance {distance_between(players['A'].pos, players['B'].pos)}")

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=None, help="Seed hint (random when omitted)")
    ap.add_argument("--size", type=int, default=10, help="Board size N")
    ap.add_argument("--tile", type=int, default=32, help="Tile size in pixels")
    ap.add_argument("--font", type=str, default=None, help="Font file with CJK glyphs for labels")
    ap.add_argument("-v", "--verbose", action="store_true")
    args = ap.parse_args()
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.INFO, format="[%(name)s] %(message)s")

    plan, grid, players = new_game(args.seed, args.size)

    pygame.init()
    clock = pygame.time.Clock()
    margin = args.tile // 2
    bw, bh = board_size_px(grid, args.tile, margin)
    screen = pygame.display.set_mode((bw + PANEL_W, max(bh, 320)))
    font = pygame.font.Font(args.font, 18) if args.font else pygame.font.SysFont(None, 20)
    board = pygame.Surface((bw, bh))
    show_fov = True

    running = True
    while running:
        for ev in pygame.event.get():
            if ev.type == pygame.QUIT:
                running = False
            elif ev.type == pygame.KEYDOWN:
                if ev.key == pygame.K_ESCAPE:
                    running = False
                elif ev.key == pygame.K_f:
                    show_fov = not show_fov
                elif ev.key == pygame.K_n:
                    plan, grid, players = new_game(None, args.size)
                elif ev.key in KEYS:
                    role, action = KEYS[ev.key]
                    pl = players[role]
                    if action == "forward":
                        if not pl.move_forward(grid):
                            log.info("%s blocked at %s facing %s", role, pl.pos, pl.facing.name)
                    else:
                        pl.turn(action)

        draw_board(board, grid, args.tile, players.values(), margin=margin, show_fov=show_fov)
        screen.fill((24, 24, 24))
        screen.blit(board, (0, 0))
        draw_panel(screen, font, bw, plan, grid, players)

        pygame.display.set_caption(f"werlost viewer — {plan.size}x{plan.size}  seed {plan.seed}")
        pygame.display.flip()
        clock.tick(60)

    pygame.quit()

if __name__ == "__main__":
    main()
