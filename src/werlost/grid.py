from dataclasses import dataclass
from typing import Iterable, List, Optional, Tuple

from .tiles import ROAD, WALL

XY = Tuple[int, int]


@dataclass(frozen=True)
class Grid:
    """N×N board of cell states, row-major. Immutable once built."""
    buf: Tuple[str, ...]
    size: int

    @classmethod
    def filled(cls, size: int, cell: str = ROAD) -> "Grid":
        return cls(buf=(cell,) * (size * size), size=size)

    @classmethod
    def from_rows(cls, rows: Iterable[Iterable[str]]) -> "Grid":
        rows = [tuple(r) for r in rows]
        size = len(rows)
        if any(len(r) != size for r in rows):
            raise ValueError("grid rows must form a square")
        return cls(buf=tuple(c for r in rows for c in r), size=size)

    def idx(self, x: int, y: int) -> int:
        return y * self.size + x

    def in_bounds(self, x: int, y: int) -> bool:
        return 0 <= x < self.size and 0 <= y < self.size

    def get(self, x: int, y: int) -> str:
        if not self.in_bounds(x, y):
            return WALL
        return self.buf[self.idx(x, y)]

    def is_wall(self, x: int, y: int) -> bool:
        return self.get(x, y) == WALL

    def road_cells(self) -> List[XY]:
        return [(x, y) for y in range(self.size) for x in range(self.size)
                if self.buf[self.idx(x, y)] == ROAD]

    def wall_count(self) -> int:
        return sum(1 for c in self.buf if c == WALL)

    def as_matrix(self) -> List[List[str]]:
        out = []
        for y in range(self.size):
            row = [self.buf[self.idx(x, y)] for x in range(self.size)]
            out.append(row)
        return out


def is_wall(grid: Optional[Grid], x: int, y: int) -> bool:
    # No board at all counts as solid, same as anything outside it.
    if grid is None or grid.size == 0:
        return True
    return grid.is_wall(x, y)
