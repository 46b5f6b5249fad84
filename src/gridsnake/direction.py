# direction.py
from __future__ import annotations

from enum import Enum
from typing import Tuple

from .status import Status


class Direction(Enum):
    UP = "up"
    RIGHT = "right"
    LEFT = "left"
    DOWN = "down"

    @property
    def delta(self) -> Tuple[int, int]:
        """Unit step (dx, dy); y grows downwards."""
        return _DELTAS[self]

    @property
    def opposite(self) -> "Direction":
        return _OPPOSITES[self]


_DELTAS = {
    Direction.UP: (0, -1),
    Direction.RIGHT: (1, 0),
    Direction.LEFT: (-1, 0),
    Direction.DOWN: (0, 1),
}

_OPPOSITES = {
    Direction.UP: Direction.DOWN,
    Direction.RIGHT: Direction.LEFT,
    Direction.LEFT: Direction.RIGHT,
    Direction.DOWN: Direction.UP,
}


def request_direction_change(current: Direction, requested: Direction, status: Status) -> Direction:
    """
    Direction to use from the next tick on.
    Turns are only taken while playing, and never a 180° reversal.
    """
    if status is not Status.PLAYING:
        return current
    if requested is current.opposite:
        return current
    return requested
