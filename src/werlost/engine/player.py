# src/werlost/engine/player.py
# Per-player state: an intersection plus a facing. Idle until it has a facing;
# every transition goes through movement.turn / movement.try_move.

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Mapping, Optional, Tuple

from ..grid import Grid
from .movement import (
    DEFAULT_FACING,
    Direction,
    FieldOfView,
    ResolvedView,
    field_of_view,
    look,
    try_move,
    turn,
)

XY = Tuple[int, int]

ROLES = ("A", "B")


def _as_int(value: Any, name: str) -> int:
    if isinstance(value, bool) or value is None:
        raise ValueError(f"player record field {name!r} must be an integer, got {value!r}")
    try:
        return int(value)
    except (TypeError, ValueError):
        raise ValueError(f"player record field {name!r} must be an integer, got {value!r}") from None


@dataclass
class PlayerState:
    role: str
    ix: int
    iy: int
    direction: Optional[Direction] = None  # None = idle, no facing yet

    def __post_init__(self) -> None:
        if self.role not in ROLES:
            raise ValueError(f"role must be one of {ROLES}, got {self.role!r}")
        if self.direction is not None:
            self.direction = Direction(self.direction)

    # ------------- state -------------
    @property
    def pos(self) -> XY:
        return (self.ix, self.iy)

    @property
    def idle(self) -> bool:
        return self.direction is None

    @property
    def facing(self) -> Direction:
        return DEFAULT_FACING if self.direction is None else self.direction

    def activate(self, direction: Optional[int] = None) -> None:
        self.direction = Direction(DEFAULT_FACING if direction is None else direction)

    # ------------- transitions -------------
    def turn(self, delta: int) -> Direction:
        self.direction = turn(self.facing, delta)
        return self.direction

    def move_forward(self, grid: Grid) -> bool:
        """Step one intersection ahead. Position is untouched when blocked."""
        facing = self.facing
        res = try_move(grid, grid.size, self.ix, self.iy, facing)
        if res is None:
            return False
        self.direction = facing
        self.ix, self.iy = res
        return True

    # ------------- queries -------------
    def field_of_view(self) -> FieldOfView:
        return field_of_view(self.ix, self.iy, self.facing)

    def look(self, seed: str, grid: Grid) -> ResolvedView:
        return look(seed, grid, self.ix, self.iy, self.facing)

    # ------------- store boundary -------------
    @classmethod
    def from_record(cls, record: Mapping[str, Any]) -> "PlayerState":
        """Build from a stored player row. Rows written by older clients only
        carry cell-style ``x``/``y``; those are read as the intersection."""
        role = record.get("role")
        ix = record.get("ix")
        iy = record.get("iy")
        if ix is None or iy is None:
            ix, iy = record.get("x"), record.get("y")
        raw_dir = record.get("direction")
        direction = None if raw_dir is None else Direction(_as_int(raw_dir, "direction") % 4)
        return cls(role=role, ix=_as_int(ix, "ix"), iy=_as_int(iy, "iy"), direction=direction)

    def to_record(self) -> Dict[str, Any]:
        return {
            "role": self.role,
            "ix": self.ix,
            "iy": self.iy,
            "direction": None if self.direction is None else int(self.direction),
        }
