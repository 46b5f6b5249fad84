# main.py
import argparse
import logging
import random

import pygame  # type: ignore

from .config import Config
from .game import handle_input, draw_state, window_size
from .machine import GameMachine
from .scheduler import PygameScheduler

logger = logging.getLogger(__name__)

def parse_args(argv=None) -> argparse.Namespace:
    defaults = Config()
    parser = argparse.ArgumentParser(prog="gridsnake", description="Snake on a square grid.")
    parser.add_argument(
        "--difficulty",
        type=int,
        default=defaults.default_difficulty,
        choices=range(1, len(defaults.levels) + 1),
        help="1 (slowest) .. 5 (fastest)",
    )
    parser.add_argument("--seed", type=int, default=None, help="seed for food placement")
    parser.add_argument(
        "--log-level",
        type=str,
        default="WARNING",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
    )
    return parser.parse_args(argv)

def main(argv=None):
    args = parse_args(argv)
    logging.basicConfig(
        level=getattr(logging, args.log_level),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    cfg = Config(default_difficulty=args.difficulty, seed=args.seed)

    pygame.init()
    font = pygame.font.SysFont(None, 24)
    screen = pygame.display.set_mode(window_size(cfg.grid_size, cfg.cell_size))
    pygame.display.set_caption("Snake")
    clock = pygame.time.Clock()

    scheduler = PygameScheduler()
    machine = GameMachine(scheduler, cfg, rng=random.Random(cfg.seed))
    logger.info("grid %dx%d, difficulty %d", cfg.grid_size, cfg.grid_size, machine.difficulty)

    running = True
    while running:
        # 1) input
        running = handle_input(machine)
        if not running:
            break

        # 2) update: ticks fire from the scheduler
        scheduler.poll()

        # 3) render
        draw_state(screen, font, machine.state, cfg.cell_size)
        pygame.display.flip()
        clock.tick(120)  # high FPS; fastest level ticks every 10 ms

    machine.close()
    pygame.quit()

if __name__ == "__main__":
    main()
