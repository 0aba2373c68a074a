#!/usr/bin/env python3
import argparse, csv, json, logging, sys
from werlost.engine.connectivity import build_session
from werlost.engine.movement import Direction
from werlost.engine.player import PlayerState
from werlost.engine.session import session_grid
from werlost.labels import cell_label
from werlost.mapgen.generator import generate_map
from werlost.ui.hud import player_line, view_lines

DIRECTION_NAMES = {d.name[0]: d for d in Direction}

def write_tsv(mat, out, include_header=False):
    w = csv.writer(out, delimiter='\t', lineterminator='\n')
    if include_header:
        w.writerow(list(range(len(mat[0]))))
    for r in mat:
        w.writerow(['#' if c == 'wall' else '.' for c in r])

def parse_direction(text):
    key = text.strip().upper()[:1]
    if key not in DIRECTION_NAMES:
        raise SystemExit(f"unknown direction {text!r}; use N, E, S or W")
    return DIRECTION_NAMES[key]

def cmd_emit(args):
    grid = generate_map(args.seed, args.size)
    if args.out == '-':
        write_tsv(grid.as_matrix(), sys.stdout, include_header=args.header)
        return
    with open(args.out, 'w', newline='', encoding='utf-8') as f:
        write_tsv(grid.as_matrix(), f, include_header=args.header)
    print(f"Wrote {args.out}")

def cmd_session(args):
    plan = build_session(args.seed, args.size)
    if plan is None:
        raise SystemExit(f"could not build a session for size {args.size}; choose a different seed or size")
    print(json.dumps(plan.as_record(), ensure_ascii=False))

def cmd_label(args):
    print(cell_label(args.seed, args.x, args.y))

def _player(args):
    return PlayerState(args.role, args.ix, args.iy, parse_direction(args.dir))

def cmd_look(args):
    grid = generate_map(args.seed, args.size)
    pl = _player(args)
    print(player_line(pl))
    for line in view_lines(pl.look(args.seed, grid)):
        print(line)

def cmd_walk(args):
    grid = generate_map(args.seed, args.size)
    pl = _player(args)
    for ch in args.moves.upper():
        if ch == 'L':
            pl.turn(-1)
        elif ch == 'R':
            pl.turn(1)
        elif ch == 'F':
            if not pl.move_forward(grid):
                logging.getLogger('wltool').info("blocked at %s facing %s", pl.pos, pl.facing.name)
        else:
            raise SystemExit(f"unknown move {ch!r}; use L, R or F")
    print(json.dumps(pl.to_record()))

def cmd_plan_grid(args):
    plan = build_session(args.seed, args.size)
    if plan is None:
        raise SystemExit(f"could not build a session for size {args.size}")
    write_tsv(session_grid(plan).as_matrix(), sys.stdout)

def _add_position(p):
    p.add_argument('--role', choices=['A', 'B'], default='A')
    p.add_argument('--ix', type=int, required=True)
    p.add_argument('--iy', type=int, required=True)
    p.add_argument('--dir', type=str, default='N')

def build_parser():
    p = argparse.ArgumentParser(prog='wltool')
    p.add_argument('-v', '--verbose', action='store_true')
    sub = p.add_subparsers(dest='cmd', required=True)
    p1 = sub.add_parser('emit', help='write a board as TSV (# wall, . road)')
    p1.add_argument('--seed', type=str, required=True)
    p1.add_argument('--size', type=int, required=True)
    p1.add_argument('--out', type=str, default='-')
    p1.add_argument('--header', action='store_true')
    p1.set_defaults(func=cmd_emit)
    p2 = sub.add_parser('session', help='pick seed + start positions for a new game')
    p2.add_argument('--seed', type=str, default=None)
    p2.add_argument('--size', type=int, required=True)
    p2.set_defaults(func=cmd_session)
    p3 = sub.add_parser('label')
    p3.add_argument('--seed', type=str, required=True)
    p3.add_argument('x', type=int)
    p3.add_argument('y', type=int)
    p3.set_defaults(func=cmd_label)
    p4 = sub.add_parser('look', help='print the four cells in view')
    p4.add_argument('--seed', type=str, required=True)
    p4.add_argument('--size', type=int, required=True)
    _add_position(p4)
    p4.set_defaults(func=cmd_look)
    p5 = sub.add_parser('walk', help='apply L/R/F moves and print the player record')
    p5.add_argument('--seed', type=str, required=True)
    p5.add_argument('--size', type=int, required=True)
    _add_position(p5)
    p5.add_argument('moves', type=str)
    p5.set_defaults(func=cmd_walk)
    p6 = sub.add_parser('plan-grid', help='build a session and print the board it plays on')
    p6.add_argument('--seed', type=str, default=None)
    p6.add_argument('--size', type=int, required=True)
    p6.set_defaults(func=cmd_plan_grid)
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING,
                        format='[%(name)s] %(message)s')
    args.func(args)
    return 0

if __name__ == '__main__':
    sys.exit(main())
