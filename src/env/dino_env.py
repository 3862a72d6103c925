# src/env/dino_env.py
from __future__ import annotations
import logging
from typing import Optional, Dict, Any
import numpy as np
import gymnasium as gym
import pygame

from src.dino.config import WIDTH, HEIGHT, JUMP_TICK_MS
from src.dino.kinematics import JumpKinematics
from src.dino.loop import GameLoop
from src.dino.obstacles import ObstacleManager
from src.dino.render import Renderer
from src.dino.sprite import SpriteHandle
from src.dino.state import SimState
from src.dino.timers import IntervalTimer
from src.env.observations import build_observation, OBS_SIZE

logger = logging.getLogger(__name__)


class DinoEnv(gym.Env):
    """
    Dino Runner Gymnasium environment (vector observations).
    - Simulation at 60 Hz (internal); the jump ticks every 20 ms of sim time.
    - Agent acts every `frame_skip` frames (default 4) -> 15 decisions/sec.
    - Observation: shape (6,), float32, see build_observation.
    """
    metadata = {"render_modes": ["human", "rgb_array"], "render_fps": 60}

    def __init__(self,
                 render_mode: Optional[str] = None,
                 frame_skip: int = 4,
                 time_limit_seconds: Optional[float] = 30.0):
        super().__init__()
        assert frame_skip >= 1, "frame_skip must be >= 1"
        assert render_mode is None or render_mode in self.metadata["render_modes"], \
            f"Invalid render_mode {render_mode}"
        self.render_mode = render_mode
        self.frame_skip = int(frame_skip)

        self.sim_fps = 60
        self.dt_ms = 1000.0 / self.sim_fps

        self.time_limit_decisions = None
        if time_limit_seconds is not None:
            self.time_limit_decisions = int(self.sim_fps * time_limit_seconds / self.frame_skip)

        # Actions: 0 = NOOP, 1 = JUMP
        self.action_space = gym.spaces.Discrete(2)
        self.observation_space = gym.spaces.Box(
            low=np.zeros(OBS_SIZE, dtype=np.float32),
            high=np.ones(OBS_SIZE, dtype=np.float32),
            dtype=np.float32,
        )

        # --- Runtime state ---
        self.state: Optional[SimState] = None
        self.obstacles: Optional[ObstacleManager] = None
        self.jump: Optional[JumpKinematics] = None
        self.game: Optional[GameLoop] = None
        self.timestep: int = 0

        # Rendering
        self.screen = None
        self.clock = None
        self._renderer: Optional[Renderer] = None

    # -------------------- Core API --------------------

    def reset(self, *, seed: Optional[int] = None, options: Optional[Dict[str, Any]] = None):
        super().reset(seed=seed)

        if self.game is not None:
            self.game.teardown()

        # Fresh world; the game itself has no randomness
        self.state = SimState()
        self.obstacles = ObstacleManager(self.state.obstacles)
        self.jump = JumpKinematics(self.state, IntervalTimer(JUMP_TICK_MS))
        self.game = GameLoop(state=self.state, obstacles=self.obstacles, jump=self.jump)
        self.game.start()

        self.timestep = 0
        return self._get_obs(), self._info()

    def step(self, action: int):
        assert self.action_space.contains(action), f"Invalid action {action}"
        assert self.game is not None, "Call reset() before step()"

        if action == 1:
            self.game.jump()

        # Simulate frame_skip sub-steps (early exit on collision)
        for _ in range(self.frame_skip):
            self.game.advance_timers(self.dt_ms)
            if not self.game.frame():
                break

        alive = self.state.running
        reward = 1.0 if alive else -1.0

        self.timestep += 1
        terminated = not alive
        if terminated:
            logger.debug("episode terminated at step %d (frame %d)", self.timestep, self.game.frames)
        truncated = False
        if (self.time_limit_decisions is not None) and (self.timestep >= self.time_limit_decisions):
            truncated = True

        if self.render_mode == "human":
            self.render()

        return self._get_obs(), reward, terminated, truncated, self._info()

    # -------------------- Helpers --------------------

    def _get_obs(self) -> np.ndarray:
        return build_observation(self.state, self.obstacles, self.jump)

    def _info(self) -> Dict[str, Any]:
        return {
            "frames": self.game.frames,
            "timestep": self.timestep,
            "obstacles_cleared": self.obstacles.pruned,
            "jumping": self.state.jumping,
            "phase": self.state.phase.value,
        }

    # -------------------- Rendering --------------------

    def render(self):
        if self.render_mode is None:
            return

        if self._renderer is None:
            if self.render_mode == "human":
                pygame.init()
                self.screen = pygame.display.set_mode((WIDTH, HEIGHT))
                pygame.display.set_caption("Dino Runner — Gym Env")
                self.clock = pygame.time.Clock()
            else:
                self.screen = pygame.Surface((WIDTH, HEIGHT))
            sprite = SpriteHandle()
            sprite.load()
            self._renderer = Renderer(self.screen, sprite)

        if self.render_mode == "human":
            # Pump the event queue so the OS doesn't think we're hung
            pygame.event.pump()

        if self.state is not None:
            self._renderer.draw(self.state)

        if self.render_mode == "human":
            pygame.display.flip()
            if self.clock is not None:
                self.clock.tick(self.metadata.get("render_fps", 60))
            return None

        # (H, W, 3) uint8
        arr = pygame.surfarray.array3d(self.screen)  # (W, H, 3)
        return np.transpose(arr, (1, 0, 2))

    def close(self):
        if self.game is not None:
            self.game.teardown()
        if self.screen is not None:
            if self.render_mode == "human":
                pygame.display.quit()
                pygame.quit()
            self.screen = None
            self.clock = None
            self._renderer = None
