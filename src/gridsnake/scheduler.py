# scheduler.py
from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Callable, Dict, Optional

import pygame  # type: ignore

logger = logging.getLogger(__name__)

Callback = Callable[[], None]


@dataclass
class _Timer:
    interval_ms: int
    due_ms: int
    callback: Callback


class Scheduler:
    """
    Periodic tick source: schedule(interval_ms, callback) -> handle, cancel(handle).
    Subclasses decide where "now" comes from.
    """

    def __init__(self):
        self._timers: Dict[int, _Timer] = {}
        self._ids = itertools.count(1)

    def now(self) -> int:
        raise NotImplementedError

    def schedule(self, interval_ms: int, callback: Callback) -> int:
        if interval_ms <= 0:
            raise ValueError(f"interval_ms must be positive, got {interval_ms}")
        handle = next(self._ids)
        self._timers[handle] = _Timer(interval_ms, self.now() + interval_ms, callback)
        logger.debug("timer %d scheduled every %d ms", handle, interval_ms)
        return handle

    def cancel(self, handle: Optional[int]) -> None:
        if handle is not None and self._timers.pop(handle, None) is not None:
            logger.debug("timer %d cancelled", handle)

    @property
    def active(self) -> int:
        return len(self._timers)


class ManualScheduler(Scheduler):
    """Deterministic clock for tests: time only moves through advance()."""

    def __init__(self, start_ms: int = 0):
        self._now = start_ms
        super().__init__()

    def now(self) -> int:
        return self._now

    def advance(self, ms: int) -> int:
        """
        Move the clock forward by `ms` and fire every interval that falls
        due on the way, in time order. Returns the number of callbacks run.
        """
        target = self._now + ms
        fired = 0
        while True:
            due = [(t.due_ms, h) for h, t in self._timers.items() if t.due_ms <= target]
            if not due:
                break
            due_ms, handle = min(due)
            timer = self._timers[handle]
            self._now = due_ms
            timer.due_ms += timer.interval_ms
            timer.callback()
            fired += 1
        self._now = target
        return fired


class PygameScheduler(Scheduler):
    """
    Polled from the pygame main loop. A due timer fires at most once per
    poll; intervals missed while the loop was busy are dropped.
    """

    def now(self) -> int:
        return pygame.time.get_ticks()

    def poll(self, now_ms: Optional[int] = None) -> int:
        now = self.now() if now_ms is None else now_ms
        fired = 0
        for handle in list(self._timers):
            timer = self._timers.get(handle)
            if timer is None or now < timer.due_ms:
                continue
            # stay on the original phase; skip whole intervals missed while busy
            timer.due_ms += timer.interval_ms
            if timer.due_ms <= now:
                timer.due_ms += ((now - timer.due_ms) // timer.interval_ms + 1) * timer.interval_ms
            timer.callback()
            fired += 1
        return fired
