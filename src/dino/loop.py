# src/dino/loop.py
from __future__ import annotations
import logging
from enum import Enum
from typing import Callable, Optional

from .config import REFERENCE_FPS
from .collision import detect_collision
from .kinematics import JumpKinematics
from .obstacles import ObstacleManager
from .state import SimState, Phase

logger = logging.getLogger(__name__)


class Command(Enum):
    START = "start"
    JUMP = "jump"


class GameLoop:
    """
    Game loop controller.

    Idle --START--> Running --collision--> Stopped --START--> Running ...

    Each scheduled frame runs, strictly in this order:
      1. renderer.draw(state)      (skipped when headless)
      2. obstacles.advance(...)    (move, prune, maybe spawn)
      3. detect_collision(...)     (stops the game on a hit)
    and the next frame is scheduled only while still running.

    The jump timer is any tick source with start(), cancel(), `active`, `callback`
    and advance(elapsed_ms) -> ticks fired. IntervalTimer counts elapsed time;
    EventTimer is driven by pygame events, so its advance() fires nothing.
    """

    def __init__(self,
                 state: Optional[SimState] = None,
                 renderer=None,
                 obstacles: Optional[ObstacleManager] = None,
                 jump: Optional[JumpKinematics] = None,
                 normalize_speed: bool = False,
                 on_stop: Optional[Callable[["GameLoop"], None]] = None):
        self.state = state if state is not None else SimState()
        self.renderer = renderer
        self.obstacles = obstacles if obstacles is not None else ObstacleManager(self.state.obstacles)
        # the manager and the state must share the very same list
        self.state.obstacles = self.obstacles.obstacles
        self.jump_model = jump if jump is not None else JumpKinematics(self.state)
        self.normalize_speed = normalize_speed
        self.on_stop = on_stop

        self.frame_scheduled = False
        self.frames = 0
        self._frame_acc = 0.0

    # -------------------- Input --------------------

    @property
    def phase(self) -> Phase:
        return self.state.phase

    @property
    def running(self) -> bool:
        return self.state.running

    def handle(self, command: Command) -> bool:
        if command is Command.START:
            return self.start()
        if command is Command.JUMP:
            return self.jump()
        raise ValueError(f"Unknown command {command!r}")

    def start(self) -> bool:
        """Begin a run. Ignored while already running."""
        if self.state.running:
            return False
        self.obstacles.reset()
        self.state.running = True
        self.state.phase = Phase.RUNNING
        self.frames = 0
        self._frame_acc = 0.0
        self.frame_scheduled = True
        logger.info("game started")
        return True

    def jump(self) -> bool:
        if not self.state.running:
            return False
        return self.jump_model.start_jump()

    # -------------------- Scheduling --------------------

    def advance_timers(self, elapsed_ms: float) -> int:
        """Feed elapsed time to the jump tick source; returns ticks fired."""
        return self.jump_model.timer.advance(elapsed_ms)

    def frame(self, elapsed_ms: Optional[float] = None) -> bool:
        """Run one scheduled frame. Returns True if another frame is scheduled."""
        if not self.frame_scheduled:
            return False
        if not self.state.running:
            self.frame_scheduled = False
            return False

        if self.renderer is not None:
            self.renderer.draw(self.state)

        self.obstacles.advance(self._frames_for(elapsed_ms))

        hit = detect_collision(self.state.dino_y, self.state.obstacles)
        if hit is not None:
            self._stop(hit)

        self.frames += 1
        self.frame_scheduled = self.state.running
        return self.frame_scheduled

    def teardown(self):
        """Stop everything: no more frames, no jump tick after this returns."""
        self.frame_scheduled = False
        self.state.running = False
        self.jump_model.cancel()
        logger.debug("game torn down after %d frames", self.frames)

    # -------------------- Helpers --------------------

    def _frames_for(self, elapsed_ms: Optional[float]) -> int:
        if not self.normalize_speed or elapsed_ms is None:
            return 1
        # carry the fractional part so the average speed stays exact
        self._frame_acc += elapsed_ms * REFERENCE_FPS / 1000.0
        whole = int(self._frame_acc)
        self._frame_acc -= whole
        return whole

    def _stop(self, hit):
        self.state.running = False
        self.state.phase = Phase.STOPPED
        logger.info("collision with obstacle at x=%d after %d frames", hit.x, self.frames + 1)
        if self.on_stop is not None:
            self.on_stop(self)
