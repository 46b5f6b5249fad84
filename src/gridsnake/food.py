# food.py
from __future__ import annotations

import logging
import random
from typing import Iterable, Optional

from .grid import Coordinate

logger = logging.getLogger(__name__)


def place_food(
    grid_size: int,
    body: Iterable[Coordinate],
    rng: Optional[random.Random] = None,
    max_attempts: int = 10_000,
) -> Optional[Coordinate]:
    """
    Pick a uniformly random cell that is not on `body`.

    Rejection sampling is tried `max_attempts` times; after that the free
    cells are enumerated and one is chosen directly, so a crowded board
    still terminates. Returns None when the body covers the whole board.
    The grid is not touched, the caller labels the returned cell.
    """
    rng = rng or random
    occupied = set(body)

    for _ in range(max_attempts):
        fx = rng.randrange(grid_size)
        fy = rng.randrange(grid_size)
        if (fx, fy) not in occupied:
            return (fx, fy)

    free = [
        (x, y)
        for y in range(grid_size)
        for x in range(grid_size)
        if (x, y) not in occupied
    ]
    if not free:
        logger.info("Board is full (%d cells), no food placed", grid_size * grid_size)
        return None
    logger.debug("Rejection sampling gave up after %d tries, %d free cells left", max_attempts, len(free))
    return rng.choice(free)
