import os
import random

import pytest

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

from gridsnake.config import Config
from gridsnake.grid import Cell, Grid


@pytest.fixture
def rng():
    return random.Random(1234)


@pytest.fixture
def cfg():
    return Config()


@pytest.fixture
def make_grid():
    """Grid whose SNAKE cells are exactly `body`, plus an optional food cell."""
    def _make(size, body, food=None):
        grid = Grid.create(size, body[0])
        for seg in body[1:]:
            grid.set(seg, Cell.SNAKE)
        if food is not None:
            grid.set(food, Cell.FOOD)
        return grid
    return _make
