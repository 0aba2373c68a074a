# src/werlost/engine/session.py
# What a new game persists (seed, size, two starts, fallback flag) and how every
# participant turns that back into a board and two players.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Tuple

from ..config import DEFAULT_CONFIG, WorldConfig
from ..grid import Grid
from ..mapgen.generator import generate_map, open_map
from .movement import Direction
from .player import PlayerState

XY = Tuple[int, int]

START_FACING = {"A": Direction.NORTH, "B": Direction.SOUTH}


@dataclass(frozen=True)
class SessionPlan:
    seed: str
    size: int
    start_a: XY
    start_b: XY
    fallback: bool = False

    def as_record(self) -> Dict[str, Any]:
        return {
            "seed": self.seed,
            "size": self.size,
            "fallback": self.fallback,
            "start_a": list(self.start_a),
            "start_b": list(self.start_b),
        }


def session_grid(plan: SessionPlan, config: WorldConfig = DEFAULT_CONFIG) -> Grid:
    # Fallback sessions play on an open board; walls are never consulted.
    if plan.fallback:
        return open_map(plan.size)
    return generate_map(plan.seed, plan.size, config)


def initial_players(plan: SessionPlan) -> Tuple[PlayerState, PlayerState]:
    # A start cell's north-west corner is the start intersection.
    a = PlayerState("A", plan.start_a[0], plan.start_a[1], START_FACING["A"])
    b = PlayerState("B", plan.start_b[0], plan.start_b[1], START_FACING["B"])
    return a, b
