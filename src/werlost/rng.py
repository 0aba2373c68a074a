# src/werlost/rng.py
# String hash + 32-bit LCG shared by every client (browser players, spectators,
# this engine). Both must stay bit-compatible with the JS clients.

from dataclasses import dataclass
from typing import Callable, Iterator, Sequence, TypeVar

T = TypeVar("T")

HASH_MULT = 31
LCG_A = 1664525
LCG_C = 1013904223
MASK32 = 0xFFFFFFFF
SCALE = 4294967296.0  # 2^32


def _code_units(text: str) -> Iterator[int]:
    # UTF-16 code units, i.e. what String.charCodeAt walks over.
    data = text.encode("utf-16-le", "surrogatepass")
    for i in range(0, len(data), 2):
        yield data[i] | (data[i + 1] << 8)


def hash_to_int(text: str) -> int:
    h = 0
    for unit in _code_units(text):
        h = (h * HASH_MULT + unit) & MASK32
    return h


@dataclass
class LCGRandom:
    state: int

    @classmethod
    def from_key(cls, key: str) -> "LCGRandom":
        state = hash_to_int(key)
        if state == 0:
            state = 1  # zero state would repeat C forever
        return cls(state)

    def next32(self) -> int:
        self.state = (self.state * LCG_A + LCG_C) & MASK32
        return self.state

    def random(self) -> float:
        return self.next32() / SCALE

    def below(self, n: int) -> int:
        assert n > 0
        return int(self.random() * n)

    def chance(self, p: float) -> bool:
        return self.random() < p

    def choice(self, seq: Sequence[T]) -> T:
        return seq[self.below(len(seq))]


def stream(seed: str) -> Callable[[], float]:
    """Return a fresh ``() -> float in [0, 1)`` stream keyed by ``seed``."""
    return LCGRandom.from_key(seed).random
