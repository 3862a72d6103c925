# src/dino/obstacles.py
from __future__ import annotations
from dataclasses import dataclass
from typing import List
import pygame

from .config import (
    WIDTH, OBSTACLE_SPEED, OBSTACLE_W, OBSTACLE_H, OBSTACLE_SCALE, OBSTACLE_Y,
    SPAWN_INTERVAL_FRAMES
)


@dataclass
class Obstacle:
    x: int
    y: int
    width: int = OBSTACLE_W     # base size; drawn and collided at OBSTACLE_SCALE
    height: int = OBSTACLE_H

    @property
    def rendered_w(self) -> int:
        return self.width * OBSTACLE_SCALE

    @property
    def rendered_h(self) -> int:
        return self.height * OBSTACLE_SCALE

    @property
    def right(self) -> int:
        return self.x + self.rendered_w

    @property
    def rect(self) -> pygame.Rect:
        return pygame.Rect(self.x, self.y, self.rendered_w, self.rendered_h)


class ObstacleManager:
    """
    Fixed-cadence obstacle ribbon scrolling left.
    No randomness: one obstacle every SPAWN_INTERVAL_FRAMES frames.
    """
    def __init__(self, obstacles: List[Obstacle] | None = None,
                 speed: int = OBSTACLE_SPEED,
                 spawn_interval: int = SPAWN_INTERVAL_FRAMES,
                 spawn_x: int = WIDTH):
        # shared with SimState, so mutate in place, never rebind
        self.obstacles: List[Obstacle] = obstacles if obstacles is not None else []
        self.speed = speed
        self.spawn_interval = spawn_interval
        self.spawn_x = spawn_x
        self.spawn_timer = 0
        self.spawned = 0
        self.pruned = 0

    def reset(self):
        self.obstacles.clear()
        self.spawn_timer = 0
        self.spawned = 0
        self.pruned = 0

    def advance(self, delta_frames: int = 1):
        """Move, prune and maybe spawn, once per frame in `delta_frames`."""
        if delta_frames < 0:
            raise ValueError(f"delta_frames must be >= 0, got {delta_frames}")
        for _ in range(delta_frames):
            self._step()

    def _step(self):
        # Scroll left
        for obs in self.obstacles:
            obs.x -= self.speed

        # Drop obstacles fully past the left edge
        before = len(self.obstacles)
        self.obstacles[:] = [o for o in self.obstacles if o.right > 0]
        self.pruned += before - len(self.obstacles)

        self.spawn_timer += 1
        if self.spawn_timer >= self.spawn_interval:
            self.obstacles.append(Obstacle(x=self.spawn_x, y=OBSTACLE_Y))
            self.spawned += 1
            self.spawn_timer = 0

    def next_obstacle(self, min_right: int) -> Obstacle | None:
        """First obstacle whose right edge is still past `min_right` (insertion order)."""
        for obs in self.obstacles:
            if obs.right > min_right:
                return obs
        return None
