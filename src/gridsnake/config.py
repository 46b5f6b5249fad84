from dataclasses import dataclass
from typing import Optional, Tuple

# ----- Colors -----
BG    = (20, 20, 24)
GRIDLINE = (32, 32, 38)
GREEN = (80, 200, 80)
RED   = (200, 70, 70)
TEXT  = (220, 220, 230)

# ----- Layout -----
STATUS_BAR_H = 32

# ----- Tunables -----
@dataclass(frozen=True)
class Config:
    grid_size: int = 35
    start: Tuple[int, int] = (17, 17)
    initial_food: Tuple[int, int] = (9, 9)
    # tick interval per difficulty level (ms), level 1 is the slowest
    levels: Tuple[int, ...] = (1000, 500, 100, 50, 10)
    default_difficulty: int = 3
    cell_size: int = 16
    seed: Optional[int] = None
    max_food_attempts: int = 10_000

    def __post_init__(self):
        if self.grid_size < 2:
            raise ValueError(f"grid_size must be at least 2, got {self.grid_size}")
        if not self.levels:
            raise ValueError("levels must not be empty")
        if any(ms <= 0 for ms in self.levels):
            raise ValueError(f"tick intervals must be positive, got {self.levels}")
        if not self.valid_difficulty(self.default_difficulty):
            raise ValueError(
                f"default_difficulty must be in [1, {len(self.levels)}], "
                f"got {self.default_difficulty}"
            )
        for name in ("start", "initial_food"):
            x, y = getattr(self, name)
            if not (0 <= x < self.grid_size and 0 <= y < self.grid_size):
                raise ValueError(f"{name} {(x, y)} is outside a {self.grid_size}x{self.grid_size} grid")
        if tuple(self.start) == tuple(self.initial_food):
            raise ValueError("start and initial_food must differ")

    def valid_difficulty(self, level: int) -> bool:
        return 1 <= level <= len(self.levels)

    def interval_ms(self, level: int) -> int:
        """Tick interval for a difficulty level (1-based)."""
        return self.levels[level - 1]

CFG = Config()
