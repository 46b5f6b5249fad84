# movement.py
from __future__ import annotations

import random
from enum import Enum
from typing import NamedTuple, Optional, Tuple, Union

from .direction import Direction
from .food import place_food
from .grid import Cell, Coordinate, Grid

Body = Tuple[Coordinate, ...]


class Collision(Enum):
    WALL = "wall"
    SELF = "self"


class Moved(NamedTuple):
    grid: Grid
    body: Body
    ate: bool


def next_head(body: Body, direction: Direction) -> Coordinate:
    hx, hy = body[0]
    dx, dy = direction.delta
    return (hx + dx, hy + dy)


def advance(
    grid: Grid,
    body: Body,
    direction: Direction,
    rng: Optional[random.Random] = None,
    max_food_attempts: int = 10_000,
) -> Union[Moved, Collision]:
    """
    Move the snake one cell in `direction`.

    Returns a Collision when the head would leave the board or land on
    the body, otherwise a new grid and body. The inputs are never
    mutated: the grid is copied before any write.
    """
    new_head = next_head(body, direction)

    # Wall first, an off-board head must never index the grid
    if not grid.in_bounds(new_head):
        return Collision.WALL

    # Every body segment is labelled SNAKE, tail included
    prior = grid.get(new_head)
    if prior is Cell.SNAKE:
        return Collision.SELF

    grid = grid.copy()
    ate = prior is Cell.FOOD

    if ate:
        # Tail stays; the new food must avoid the body we are about to have
        grown = (new_head,) + body
        food = place_food(grid.size, grown, rng, max_food_attempts)
        if food is not None:
            grid.set(food, Cell.FOOD)
        new_body = grown
    else:
        tail = body[-1]
        grid.set(tail, Cell.EMPTY)
        new_body = (new_head,) + body[:-1]

    grid.set(new_head, Cell.SNAKE)
    return Moved(grid=grid, body=new_body, ate=ate)
