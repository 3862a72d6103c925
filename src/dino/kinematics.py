# src/dino/kinematics.py
from __future__ import annotations
import logging

from .config import DINO_GROUND_Y, JUMP_HEIGHT, JUMP_SPEED, GRAVITY, JUMP_TICK_MS
from .state import SimState
from .timers import IntervalTimer

logger = logging.getLogger(__name__)


class JumpKinematics:
    """
    Two-phase linear jump driven by a fixed-period timer:
    - ascent: y -= JUMP_SPEED per tick until the apex (ground - JUMP_HEIGHT)
    - descent: y += GRAVITY per tick until back on the ground, then the timer is released
    """

    def __init__(self, state: SimState, timer=None):
        self.state = state
        self.timer = timer if timer is not None else IntervalTimer(JUMP_TICK_MS)
        self.timer.callback = self.tick
        self.ascending = True
        self._y: float = float(DINO_GROUND_Y)

    @property
    def apex_y(self) -> int:
        return DINO_GROUND_Y - JUMP_HEIGHT

    def start_jump(self) -> bool:
        """Begin a jump. Returns False (and does nothing) if one is already in progress."""
        if self.state.jumping:
            return False
        self.state.jumping = True
        self.ascending = True
        self._y = float(self.state.dino_y)
        self.timer.start()
        logger.debug("jump started at y=%.0f", self._y)
        return True

    def tick(self):
        if not self.state.jumping:
            return
        if self.ascending:
            self._y -= JUMP_SPEED
            if self._y <= self.apex_y:
                self.ascending = False
        else:
            self._y += GRAVITY
            if self._y >= DINO_GROUND_Y:
                self._land()
        self.state.dino_y = self._y

    def cancel(self):
        """Abort any jump in flight (teardown); the dino goes back to the ground."""
        self.timer.cancel()
        if self.state.jumping:
            logger.debug("jump cancelled at y=%.0f", self._y)
        self._land()
        self.state.dino_y = self._y

    def _land(self):
        self._y = float(DINO_GROUND_Y)
        self.timer.cancel()
        self.ascending = True
        self.state.jumping = False
