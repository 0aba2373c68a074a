from dataclasses import dataclass
from typing import Tuple


@dataclass(frozen=True)
class WorldConfig:
    # (max board size, wall ratio); first tier that fits wins.
    density_tiers: Tuple[Tuple[int, float], ...] = ((10, 0.035), (25, 0.06))
    default_density: float = 0.08

    # Wall segments are 2..4 cells, so 3 on average.
    mean_segment_length: int = 3
    segment_min_length: int = 2
    segment_length_choices: int = 3

    # Label clustering
    cluster_block: int = 5
    dominant_percent: int = 70

    # Session search bounds
    seed_attempts: int = 10
    pair_attempts: int = 80
    min_distance_divisor: int = 3
    fallback_margin: int = 1

    def __post_init__(self) -> None:
        sizes = [s for s, _ in self.density_tiers]
        if sizes != sorted(sizes):
            raise ValueError("density_tiers must be sorted by board size")
        for _, ratio in self.density_tiers:
            if not 0.0 <= ratio <= 1.0:
                raise ValueError("density ratios must be within 0..1")
        if not 0.0 <= self.default_density <= 1.0:
            raise ValueError("default_density must be within 0..1")
        if self.mean_segment_length < 1 or self.segment_min_length < 1:
            raise ValueError("segment lengths must be >= 1")
        if self.segment_length_choices < 1:
            raise ValueError("segment_length_choices must be >= 1")
        if self.cluster_block < 1:
            raise ValueError("cluster_block must be >= 1")
        if not 0 <= self.dominant_percent <= 100:
            raise ValueError("dominant_percent must be within 0..100")
        if self.seed_attempts < 1 or self.pair_attempts < 1:
            raise ValueError("attempt counts must be >= 1")
        if self.min_distance_divisor < 1:
            raise ValueError("min_distance_divisor must be >= 1")
        if self.fallback_margin < 0:
            raise ValueError("fallback_margin must be >= 0")

    def density_for(self, size: int) -> float:
        for max_size, ratio in self.density_tiers:
            if size <= max_size:
                return ratio
        return self.default_density

    def min_distance(self, size: int) -> int:
        return max(1, size // self.min_distance_divisor)


DEFAULT_CONFIG = WorldConfig()
