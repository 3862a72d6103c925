# src/env/observations.py
from __future__ import annotations
import numpy as np

from ..dino.config import WIDTH, DINO_X, DINO_W, DINO_GROUND_Y, JUMP_HEIGHT
from ..dino.kinematics import JumpKinematics
from ..dino.obstacles import ObstacleManager
from ..dino.state import SimState

OBS_SIZE = 6


def build_observation(state: SimState, obstacles: ObstacleManager, jump: JumpKinematics) -> np.ndarray:
    """
    Returns float32 array of shape (6,), every entry in [0, 1]:
      [height_norm, jumping, ascending, next_dx_norm, next_visible, spawn_progress]
    - height_norm: 0 on the ground, 1 at the apex
    - next_dx_norm: gap between the dino's right edge and the next obstacle still ahead
      (1.0 when there is none); 0 once it overlaps the dino horizontally
    - spawn_progress: fraction of the spawn interval elapsed
    """
    height = (DINO_GROUND_Y - state.dino_y) / float(JUMP_HEIGHT)
    height_norm = max(0.0, min(1.0, height))

    jumping = 1.0 if state.jumping else 0.0
    ascending = 1.0 if (state.jumping and jump.ascending) else 0.0

    nxt = obstacles.next_obstacle(min_right=DINO_X)
    if nxt is None:
        next_dx, visible = 1.0, 0.0
    else:
        gap = nxt.x - (DINO_X + DINO_W)
        next_dx = max(0.0, min(1.0, gap / float(WIDTH)))
        visible = 1.0

    spawn_progress = max(0.0, min(1.0, obstacles.spawn_timer / float(obstacles.spawn_interval)))

    return np.array([height_norm, jumping, ascending, next_dx, visible, spawn_progress],
                    dtype=np.float32)
