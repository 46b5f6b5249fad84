# game.py
from typing import Dict, Optional, Tuple

import pygame  # type: ignore

from .config import BG, GRIDLINE, GREEN, RED, TEXT, STATUS_BAR_H
from .direction import Direction
from .grid import Cell
from .machine import GameMachine
from .state import GameState, Status

# ---------- Input mapping ----------
KEY_DIRECTIONS: Dict[int, Direction] = {
    pygame.K_UP: Direction.UP,
    pygame.K_DOWN: Direction.DOWN,
    pygame.K_LEFT: Direction.LEFT,
    pygame.K_RIGHT: Direction.RIGHT,
    pygame.K_w: Direction.UP,
    pygame.K_s: Direction.DOWN,
    pygame.K_a: Direction.LEFT,
    pygame.K_d: Direction.RIGHT,
}

DIFFICULTY_KEYS: Dict[int, int] = {
    pygame.K_1: 1,
    pygame.K_2: 2,
    pygame.K_3: 3,
    pygame.K_4: 4,
    pygame.K_5: 5,
}

def direction_for_key(key: int) -> Optional[Direction]:
    """Resolve a pygame key to a direction; None for keys that do not steer."""
    return KEY_DIRECTIONS.get(key)

def handle_key(machine: GameMachine, key: int) -> None:
    direction = direction_for_key(key)
    if direction is not None:
        machine.change_direction(direction)
    elif key == pygame.K_SPACE:
        machine.toggle()
    elif key == pygame.K_r:
        machine.restart()
    elif key in DIFFICULTY_KEYS:
        machine.set_difficulty(DIFFICULTY_KEYS[key])

def handle_input(machine: GameMachine) -> bool:
    """Process pending events. Return False to quit."""
    for event in pygame.event.get():
        if event.type == pygame.QUIT:
            return False
        if event.type == pygame.KEYDOWN:
            if event.key == pygame.K_ESCAPE:
                return False
            handle_key(machine, event.key)
    return True

# ---------- Draw ----------
def window_size(grid_size: int, cell_size: int) -> Tuple[int, int]:
    side = grid_size * cell_size
    return side, side + STATUS_BAR_H

def draw_cell(screen: pygame.Surface, gx: int, gy: int, cell_size: int, color: Tuple[int, int, int]) -> None:
    rect = pygame.Rect(gx * cell_size, STATUS_BAR_H + gy * cell_size, cell_size, cell_size)
    pygame.draw.rect(screen, color, rect)

def status_line(state: GameState) -> str:
    return f"Length: {state.length}   Difficulty: {state.difficulty}   {state.status.value.upper()}"

def draw_game(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int) -> None:
    screen.fill(BG)
    size = state.grid.size
    for i in range(size + 1):
        p = i * cell_size
        pygame.draw.line(screen, GRIDLINE, (p, STATUS_BAR_H), (p, STATUS_BAR_H + size * cell_size))
        pygame.draw.line(screen, GRIDLINE, (0, STATUS_BAR_H + p), (size * cell_size, STATUS_BAR_H + p))

    for x, y in state.grid.cells_with(Cell.FOOD):
        draw_cell(screen, x, y, cell_size, RED)
    for x, y in state.grid.cells_with(Cell.SNAKE):
        draw_cell(screen, x, y, cell_size, GREEN)

    txt = font.render(status_line(state), True, TEXT)
    screen.blit(txt, (8, 8))

def draw_overlay(screen: pygame.Surface, font: pygame.font.Font, title: str, hint: str) -> None:
    width, height = screen.get_size()
    overlay = pygame.Surface((width, height), pygame.SRCALPHA)
    overlay.fill((0, 0, 0, 140))  # RGBA
    screen.blit(overlay, (0, 0))

    t = font.render(title, True, (240, 240, 250))
    h = font.render(hint, True, TEXT)
    screen.blit(t, t.get_rect(center=(width // 2, height // 2 - 12)))
    screen.blit(h, h.get_rect(center=(width // 2, height // 2 + 16)))

def draw_state(screen: pygame.Surface, font: pygame.font.Font, state: GameState, cell_size: int) -> None:
    draw_game(screen, font, state, cell_size)
    if state.status is Status.INIT:
        draw_overlay(screen, font, "SNAKE", "SPACE to start, 1-5 difficulty")
    elif state.status is Status.SUSPENDED:
        draw_overlay(screen, font, "PAUSED", "SPACE to resume, R to restart")
    elif state.status is Status.GAMEOVER:
        draw_overlay(screen, font, "GAME OVER", f"Length {state.length}. SPACE or R to restart")
