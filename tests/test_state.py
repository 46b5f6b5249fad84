import json
from dataclasses import FrozenInstanceError, replace

import pytest

from gridsnake import state as st
from gridsnake.config import Config
from gridsnake.direction import Direction
from gridsnake.grid import Cell
from gridsnake.movement import Collision
from gridsnake.state import Status


def test_new_game_layout(cfg):
    s = st.new_game(cfg)
    assert s.status is Status.INIT
    assert s.direction is Direction.UP
    assert s.body == ((17, 17),)
    assert s.grid.get((9, 9)) is Cell.FOOD
    assert s.grid.cells_with(Cell.SNAKE) == [(17, 17)]
    assert s.difficulty == 3
    assert s.ticks == 0


def test_lifecycle_transitions(cfg):
    s = st.new_game(cfg)
    assert st.stop(s) is s
    assert st.resume(s) is s
    s = st.start(s)
    assert s.status is Status.PLAYING
    assert st.start(s) is s
    s = st.stop(s)
    assert s.status is Status.SUSPENDED
    s = st.resume(s)
    assert s.status is Status.PLAYING


def test_tick_moves_only_while_playing(cfg, rng):
    s = st.new_game(cfg)
    for status in (Status.INIT, Status.SUSPENDED, Status.GAMEOVER):
        idle = replace(s, status=status)
        after = st.tick(idle, rng, cfg)
        assert after.ticks == idle.ticks + 1
        assert after.body == idle.body
        assert after.grid == idle.grid

    playing = st.tick(st.start(s), rng, cfg)
    assert playing.body == ((17, 16),)
    assert playing.grid.get((17, 17)) is Cell.EMPTY


def test_collision_ends_the_game(rng):
    cfg = Config(grid_size=5, start=(2, 0), initial_food=(4, 4))
    s = st.start(st.new_game(cfg))
    s = st.tick(s, rng, cfg)
    assert s.status is Status.GAMEOVER
    assert s.collision is Collision.WALL
    assert s.body == ((2, 0),)
    # nothing moves after game over
    assert st.tick(s, rng, cfg).body == s.body
    assert st.start(s) is s


def test_direction_change_applies_on_next_tick(cfg, rng):
    s = st.start(st.new_game(cfg))
    s = st.change_direction(s, Direction.LEFT)
    assert s.body == ((17, 17),)
    s = st.tick(s, rng, cfg)
    assert s.body == ((16, 17),)


def test_reversal_and_idle_turns_are_noops(cfg):
    s = st.new_game(cfg)
    assert st.change_direction(s, Direction.LEFT) is s
    s = st.start(s)
    assert st.change_direction(s, Direction.DOWN) is s


def test_difficulty_only_in_init(cfg):
    s = st.new_game(cfg)
    assert st.set_difficulty(s, 5, cfg).difficulty == 5
    assert st.set_difficulty(s, 0, cfg) is s
    assert st.set_difficulty(s, 6, cfg) is s
    assert st.set_difficulty(st.start(s), 1, cfg).difficulty == 3


def test_restart_keeps_difficulty_and_resets_board(cfg, rng):
    s = st.set_difficulty(st.new_game(cfg), 4, cfg)
    s = st.change_direction(st.start(s), Direction.LEFT)
    for _ in range(3):
        s = st.tick(s, rng, cfg)
    s = st.restart(s, cfg)
    assert s == st.new_game(cfg, difficulty=4)
    assert s.direction is Direction.UP
    assert s.grid.get((9, 9)) is Cell.FOOD


def test_eating_scenario(rng):
    cfg = Config(grid_size=10, start=(5, 5), initial_food=(5, 4))
    s = st.tick(st.start(st.new_game(cfg)), rng, cfg)
    assert s.body == ((5, 4), (5, 5))
    foods = s.grid.cells_with(Cell.FOOD)
    assert len(foods) == 1 and foods[0] not in s.body


def test_state_serializes_to_json(cfg):
    s = st.new_game(cfg)
    data = json.loads(json.dumps(s.to_dict()))
    assert data["status"] == "init"
    assert data["direction"] == "up"
    assert data["body"] == [[17, 17]]
    assert data["grid"]["cells"][9][9] == "food"
    assert data["collision"] is None


def test_state_is_frozen(cfg):
    s = st.new_game(cfg)
    with pytest.raises(FrozenInstanceError):
        s.status = Status.PLAYING


def test_state_is_hashable(cfg):
    a = st.new_game(cfg)
    b = st.new_game(cfg)
    assert a == b
    assert hash(a) == hash(b)
    assert len({a, b, st.start(a)}) == 2
