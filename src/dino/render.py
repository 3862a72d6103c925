# src/dino/render.py
from __future__ import annotations
import pygame

from .config import (
    GROUND_Y, GROUND_H, DINO_X, COLOR_BG, COLOR_GROUND, COLOR_OBSTACLE
)
from .sprite import SpriteHandle
from .state import SimState


class Renderer:
    """Draws one frame: background, ground, dino, obstacles. Never touches the state."""

    def __init__(self, surface: pygame.Surface, sprite: SpriteHandle):
        self.surface = surface
        self.sprite = sprite
        self.sprite_ready = False
        self._waiting = False
        self._state: SimState | None = None

    def draw(self, state: SimState):
        self._state = state
        self.surface.fill(COLOR_BG)
        self.draw_ground()
        self.draw_dino(state)
        self.draw_obstacles(state)

    def draw_ground(self):
        width = self.surface.get_width()
        pygame.draw.rect(self.surface, COLOR_GROUND, pygame.Rect(0, GROUND_Y, width, GROUND_H))

    def draw_dino(self, state: SimState):
        if self.sprite_ready:
            self._blit_dino(state.dino_y)
        elif not self._waiting:
            # deferred: draw as soon as the image arrives
            self._waiting = True
            self.sprite.when_loaded(self._on_sprite_loaded)

    def draw_obstacles(self, state: SimState):
        for obs in state.obstacles:
            pygame.draw.rect(self.surface, COLOR_OBSTACLE, obs.rect)

    def _on_sprite_loaded(self, _sprite: SpriteHandle):
        self.sprite_ready = True
        self._waiting = False
        if self._state is not None:
            self._blit_dino(self._state.dino_y)

    def _blit_dino(self, y: float):
        self.surface.blit(self.sprite.image, (DINO_X, int(y)))
