# src/werlost/engine/connectivity.py
# Picks (seed, start A, start B) for a new game. Retries over seed variants and
# start pairs live here and nowhere else; when they run out the session falls
# back to an open board so a game can still start.

from __future__ import annotations

import logging
import random
import string
from collections import deque
from typing import List, Optional, Set, Tuple

from ..config import DEFAULT_CONFIG, WorldConfig
from ..grid import Grid
from ..mapgen.generator import generate_map
from ..rng import LCGRandom
from .session import SessionPlan

logger = logging.getLogger(__name__)

XY = Tuple[int, int]

_HINT_ALPHABET = string.digits + string.ascii_lowercase
_NEIGHBOURS = ((1, 0), (-1, 0), (0, 1), (0, -1))


def manhattan(a: XY, b: XY) -> int:
    return abs(a[0] - b[0]) + abs(a[1] - b[1])


def reachable_cells(grid: Grid, start: XY) -> Set[XY]:
    """Road cells 4-connected to ``start`` (empty if start itself is a wall)."""
    if grid.is_wall(*start):
        return set()
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in _NEIGHBOURS:
            nxt = (x + dx, y + dy)
            if nxt in seen or grid.is_wall(*nxt):
                continue
            seen.add(nxt)
            q.append(nxt)
    return seen


def reachable(grid: Grid, start: XY, goal: XY) -> bool:
    if grid.is_wall(*start) or grid.is_wall(*goal):
        return False
    if start == goal:
        return True
    seen = {start}
    q = deque([start])
    while q:
        x, y = q.popleft()
        for dx, dy in _NEIGHBOURS:
            nxt = (x + dx, y + dy)
            if nxt in seen or grid.is_wall(*nxt):
                continue
            if nxt == goal:
                return True
            seen.add(nxt)
            q.append(nxt)
    return False


def random_seed_hint(rng: Optional[random.Random] = None) -> str:
    rng = rng or random.SystemRandom()
    return "seed-" + "".join(rng.choice(_HINT_ALPHABET) for _ in range(8))


def candidate_seed(hint: str, attempt: int) -> str:
    return hint if attempt == 0 else f"{hint}_{attempt}"


def _pick_pair(rng: LCGRandom, cells: List[XY], min_dist: int) -> Optional[Tuple[XY, XY]]:
    a = rng.choice(cells)
    b = rng.choice(cells)
    if a == b or manhattan(a, b) < min_dist:
        return None
    return a, b


def find_start_pair(grid: Grid, seed: str, config: WorldConfig = DEFAULT_CONFIG) -> Optional[Tuple[XY, XY]]:
    """Two far-enough road cells of ``grid`` joined by a road path, or None."""
    roads = grid.road_cells()
    if len(roads) < 2:
        logger.debug("seed %r: only %d road cells, skipping", seed, len(roads))
        return None
    min_dist = config.min_distance(grid.size)
    rng = LCGRandom.from_key(seed + ":start")
    for _ in range(config.pair_attempts):
        pair = _pick_pair(rng, roads, min_dist)
        if pair is None:
            continue
        if reachable(grid, *pair):
            return pair
    logger.debug("seed %r: no connected pair in %d tries", seed, config.pair_attempts)
    return None


def fallback_pair(size: int, seed: str, config: WorldConfig = DEFAULT_CONFIG) -> Optional[Tuple[XY, XY]]:
    """Two interior cells of an open board, far enough apart; None if the
    board has no room for them."""
    lo = config.fallback_margin
    hi = size - 1 - config.fallback_margin
    if hi < lo:
        return None
    interior = [(x, y) for y in range(lo, hi + 1) for x in range(lo, hi + 1)]
    min_dist = config.min_distance(size)
    rng = LCGRandom.from_key(seed + ":fallback")
    for _ in range(config.pair_attempts):
        pair = _pick_pair(rng, interior, min_dist)
        if pair is not None:
            return pair
    # Opposite interior corners are as far apart as the interior allows.
    a, b = (lo, lo), (hi, hi)
    if a != b and manhattan(a, b) >= min_dist:
        return a, b
    return None


def build_session(
    seed_hint: Optional[str],
    size: int,
    config: WorldConfig = DEFAULT_CONFIG,
    rng: Optional[random.Random] = None,
) -> Optional[SessionPlan]:
    hint = random_seed_hint(rng) if seed_hint is None else seed_hint
    for attempt in range(config.seed_attempts):
        seed = candidate_seed(hint, attempt)
        grid = generate_map(seed, size, config)
        pair = find_start_pair(grid, seed, config)
        if pair is not None:
            logger.debug("session seed %r accepted on attempt %d: %s -> %s", seed, attempt, *pair)
            return SessionPlan(seed=seed, size=size, start_a=pair[0], start_b=pair[1])

    logger.warning("no connected start pair for hint %r after %d seeds; using open board",
                   hint, config.seed_attempts)
    pair = fallback_pair(size, hint, config)
    if pair is None:
        logger.warning("board size %d too small for a session", size)
        return None
    return SessionPlan(seed=hint, size=size, start_a=pair[0], start_b=pair[1], fallback=True)
