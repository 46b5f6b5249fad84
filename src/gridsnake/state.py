# state.py
"""
Game state as one immutable record plus pure transitions.

Every function here takes a GameState and returns a GameState; none of
them touch the scheduler or mutate their input. GameMachine in
machine.py commits the results and drives the timer.
"""
from __future__ import annotations

import random
from dataclasses import dataclass, field, replace
from typing import Dict, Optional

from .config import CFG, Config
from .direction import Direction, request_direction_change
from .grid import Cell, Grid
from .movement import Body, Collision, advance
from .status import Status

__all__ = [
    "GameState", "Status",
    "new_game", "start", "stop", "resume", "restart",
    "change_direction", "set_difficulty", "tick",
]


@dataclass(frozen=True)
class GameState:
    status: Status
    direction: Direction
    body: Body                      # head at index 0
    grid: Grid = field(hash=False)  # numpy-backed, compared but not hashed
    difficulty: int
    ticks: int = 0
    collision: Optional[Collision] = None

    @property
    def length(self) -> int:
        return len(self.body)

    @property
    def head(self):
        return self.body[0]

    def to_dict(self) -> Dict:
        return {
            "status": self.status.value,
            "direction": self.direction.value,
            "body": [list(c) for c in self.body],
            "grid": self.grid.to_dict(),
            "difficulty": self.difficulty,
            "ticks": self.ticks,
            "collision": self.collision.value if self.collision else None,
        }


def new_game(cfg: Config = CFG, difficulty: Optional[int] = None) -> GameState:
    """Fresh INIT state: one-cell snake at cfg.start, food at cfg.initial_food."""
    grid = Grid.create(cfg.grid_size, cfg.start)
    grid.set(cfg.initial_food, Cell.FOOD)
    return GameState(
        status=Status.INIT,
        direction=Direction.UP,
        body=(tuple(cfg.start),),
        grid=grid,
        difficulty=cfg.default_difficulty if difficulty is None else difficulty,
    )


def start(state: GameState) -> GameState:
    if state.status is not Status.INIT:
        return state
    return replace(state, status=Status.PLAYING)


def stop(state: GameState) -> GameState:
    if state.status is not Status.PLAYING:
        return state
    return replace(state, status=Status.SUSPENDED)


def resume(state: GameState) -> GameState:
    if state.status is not Status.SUSPENDED:
        return state
    return replace(state, status=Status.PLAYING)


def restart(state: GameState, cfg: Config = CFG) -> GameState:
    """Back to INIT with a new board, keeping the selected difficulty."""
    return new_game(cfg, difficulty=state.difficulty)


def change_direction(state: GameState, requested: Direction) -> GameState:
    direction = request_direction_change(state.direction, requested, state.status)
    if direction is state.direction:
        return state
    return replace(state, direction=direction)


def set_difficulty(state: GameState, level: int, cfg: Config = CFG) -> GameState:
    if state.status is not Status.INIT or not cfg.valid_difficulty(level):
        return state
    return replace(state, difficulty=level)


def tick(state: GameState, rng: Optional[random.Random] = None, cfg: Config = CFG) -> GameState:
    """
    One timer tick. The counter always advances; the snake only moves
    while PLAYING, so ticks in any other status leave body and grid as is.
    """
    state = replace(state, ticks=state.ticks + 1)
    if state.status is not Status.PLAYING:
        return state

    result = advance(state.grid, state.body, state.direction, rng, cfg.max_food_attempts)
    if isinstance(result, Collision):
        return replace(state, status=Status.GAMEOVER, collision=result)
    return replace(state, grid=result.grid, body=result.body)
