# src/dino/timers.py
"""
Fixed-period tick sources for the jump.

Both run on the main thread:
  - IntervalTimer accumulates elapsed time handed to it and fires once per full
    period (headless env, tests, or any loop that measures its own dt).
  - EventTimer lets pygame post a user event every period; the event loop
    forwards that event to `fire()`.
"""
from __future__ import annotations
from typing import Callable, Optional
import pygame

from .config import JUMP_TICK_MS

JUMP_TICK_EVENT = pygame.USEREVENT + 1


class IntervalTimer:
    def __init__(self, period_ms: float = JUMP_TICK_MS, callback: Optional[Callable[[], None]] = None):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be > 0, got {period_ms}")
        self.period_ms = float(period_ms)
        self.callback = callback
        self.active = False
        self._acc_ms = 0.0

    def start(self):
        self.active = True
        self._acc_ms = 0.0

    def cancel(self):
        self.active = False
        self._acc_ms = 0.0

    def advance(self, elapsed_ms: float) -> int:
        """Feed elapsed time; returns how many ticks fired."""
        if not self.active:
            return 0
        self._acc_ms += elapsed_ms
        fired = 0
        # the callback may cancel us mid-way (landing)
        while self.active and self._acc_ms >= self.period_ms:
            self._acc_ms -= self.period_ms
            fired += 1
            if self.callback is not None:
                self.callback()
        return fired


class EventTimer:
    def __init__(self, period_ms: int = JUMP_TICK_MS,
                 callback: Optional[Callable[[], None]] = None,
                 event_type: int = JUMP_TICK_EVENT):
        if period_ms <= 0:
            raise ValueError(f"period_ms must be > 0, got {period_ms}")
        self.period_ms = int(period_ms)
        self.callback = callback
        self.event_type = event_type
        self.active = False

    def start(self):
        self.active = True
        pygame.time.set_timer(self.event_type, self.period_ms)

    def cancel(self):
        self.active = False
        pygame.time.set_timer(self.event_type, 0)

    def handles(self, event: pygame.event.Event) -> bool:
        return event.type == self.event_type

    def fire(self):
        # stale events can still sit in the queue after cancel()
        if self.active and self.callback is not None:
            self.callback()

    def advance(self, elapsed_ms: float) -> int:
        """pygame drives this timer; elapsed time is ignored."""
        return 0
