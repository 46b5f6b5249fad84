# machine.py
from __future__ import annotations

import logging
import random
from typing import Callable, List, Optional

from . import state as st
from .config import CFG, Config
from .direction import Direction
from .scheduler import Scheduler
from .state import GameState, Status

logger = logging.getLogger(__name__)

Listener = Callable[[GameState], None]


class GameMachine:
    """
    Owns the current GameState and the single live tick timer.

    Commands (start/stop/restart/...) and timer ticks both go through
    pure transitions in state.py; this class only commits the result,
    keeps the timer in step with the difficulty and notifies listeners.
    """

    def __init__(
        self,
        scheduler: Scheduler,
        cfg: Config = CFG,
        rng: Optional[random.Random] = None,
    ):
        self.cfg = cfg
        self.scheduler = scheduler
        self.rng = rng or random.Random(cfg.seed)
        self.listeners: List[Listener] = []
        self.state: GameState = st.new_game(cfg)
        self._timer: Optional[int] = None
        self._install_timer()

    # ---------- Read-only view for the UI ----------
    @property
    def status(self) -> Status:
        return self.state.status

    @property
    def difficulty(self) -> int:
        return self.state.difficulty

    @property
    def length(self) -> int:
        return self.state.length

    @property
    def interval_ms(self) -> int:
        return self.cfg.interval_ms(self.state.difficulty)

    # ---------- Commands ----------
    def start(self) -> None:
        self._apply(st.start(self.state), "start")

    def stop(self) -> None:
        self._apply(st.stop(self.state), "stop")

    def resume(self) -> None:
        self._apply(st.resume(self.state), "resume")

    def toggle(self) -> None:
        """One-button control: start, stop, resume or restart depending on status."""
        if self.status is Status.INIT:
            self.start()
        elif self.status is Status.PLAYING:
            self.stop()
        elif self.status is Status.SUSPENDED:
            self.resume()
        else:
            self.restart()

    def restart(self) -> None:
        self._commit(st.restart(self.state, self.cfg))
        self._install_timer()
        logger.info("restart: difficulty %d, tick every %d ms", self.difficulty, self.interval_ms)

    def set_difficulty(self, level: int) -> None:
        new = st.set_difficulty(self.state, level, self.cfg)
        if new is self.state:
            logger.debug("difficulty %r ignored in status %s", level, self.status.value)
            return
        self._commit(new)
        self._install_timer()
        logger.info("difficulty set to %d (%d ms)", self.difficulty, self.interval_ms)

    def change_direction(self, direction: Direction) -> None:
        new = st.change_direction(self.state, direction)
        if new is self.state:
            logger.debug("turn %s ignored (heading %s, %s)",
                         direction.value, self.state.direction.value, self.status.value)
            return
        self._commit(new)

    def on_tick(self) -> None:
        before = self.state
        self._commit(st.tick(before, self.rng, self.cfg))
        if self.status is Status.GAMEOVER and before.status is Status.PLAYING:
            logger.info(
                "game over: %s collision at tick %d, length %d",
                self.state.collision.value, self.state.ticks, self.length,
            )

    def close(self) -> None:
        self.scheduler.cancel(self._timer)
        self._timer = None

    # ---------- Internals ----------
    def _install_timer(self) -> None:
        # cancel first so two tick sources never overlap
        self.scheduler.cancel(self._timer)
        self._timer = self.scheduler.schedule(self.interval_ms, self.on_tick)

    def _apply(self, new: GameState, command: str) -> None:
        if new is self.state:
            logger.debug("%s ignored in status %s", command, self.status.value)
            return
        self._commit(new)
        logger.info("%s -> %s", command, self.status.value)

    def _commit(self, new: GameState) -> None:
        self.state = new
        for listener in self.listeners:
            listener(new)
