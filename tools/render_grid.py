#!/usr/bin/env python3
# Render a board (plus optional players and their view cells) to PNG using Pillow.

import argparse, os
from PIL import Image, ImageDraw

from werlost.engine.connectivity import build_session
from werlost.engine.session import initial_players, session_grid
from werlost.mapgen.generator import generate_map
from werlost.render.palette import BACKGROUND, FOV_TINT, GRID_LINE, cell_color, player_color

def render_grid(grid, out_png, tile_size=16, margin=0, players=(), show_fov=False):
    side = grid.size * tile_size + 2 * margin
    canvas = Image.new("RGBA", (side, side), BACKGROUND)
    draw = ImageDraw.Draw(canvas)
    for y in range(grid.size):
        for x in range(grid.size):
            x0 = margin + x * tile_size
            y0 = margin + y * tile_size
            draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), fill=cell_color(grid.get(x, y)))
    for i in range(grid.size + 1):
        p = margin + i * tile_size
        draw.line((p, margin, p, margin + grid.size * tile_size), fill=GRID_LINE)
        draw.line((margin, p, margin + grid.size * tile_size, p), fill=GRID_LINE)
    r = max(2, tile_size // 4)
    for pl in players:
        if show_fov:
            for cx, cy in pl.field_of_view().cells():
                if grid.in_bounds(cx, cy):
                    x0 = margin + cx * tile_size
                    y0 = margin + cy * tile_size
                    draw.rectangle((x0, y0, x0 + tile_size - 1, y0 + tile_size - 1), outline=FOV_TINT)
        cx = margin + pl.ix * tile_size
        cy = margin + pl.iy * tile_size
        draw.ellipse((cx - r, cy - r, cx + r, cy + r), fill=player_color(pl.role))
    parent = os.path.dirname(out_png)
    if parent:
        os.makedirs(parent, exist_ok=True)
    canvas.save(out_png)
    return canvas.size

def main(argv=None):
    ap = argparse.ArgumentParser()
    ap.add_argument("--seed", type=str, default=None, help="Board seed (random session when omitted)")
    ap.add_argument("--size", type=int, default=10, help="Board size N")
    ap.add_argument("--out", type=str, default="out/board.png", help="PNG path")
    ap.add_argument("--tile", type=int, default=20, help="Tile size in pixels")
    ap.add_argument("--session", action="store_true", help="Build a session and draw both starts")
    ap.add_argument("--fov", action="store_true", help="Outline each player's view cells")
    args = ap.parse_args(argv)

    if args.session or args.seed is None:
        plan = build_session(args.seed, args.size)
        if plan is None:
            raise SystemExit(f"could not build a session for size {args.size}")
        grid = session_grid(plan)
        players = initial_players(plan)
        label = f"seed {plan.seed}" + (" (fallback)" if plan.fallback else "")
    else:
        grid = generate_map(args.seed, args.size)
        players = ()
        label = f"seed {args.seed}"
    render_grid(grid, args.out, tile_size=args.tile, margin=args.tile // 2, players=players, show_fov=args.fov)
    print(f"Wrote {args.out} ({label})")

if __name__ == "__main__":
    main()
