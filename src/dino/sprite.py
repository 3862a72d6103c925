# src/dino/sprite.py
from __future__ import annotations
import logging
from pathlib import Path
from typing import Callable, List, Optional
import pygame

from .config import DINO_W, DINO_H, COLOR_DINO, COLOR_BG

logger = logging.getLogger(__name__)


class SpriteHandle:
    """
    Loaded-image handle for the dino sprite.
    `loaded` flips once, and callbacks registered with `when_loaded` run exactly once.
    """

    def __init__(self, path: Optional[str | Path] = None, size=(DINO_W, DINO_H)):
        self.path = Path(path) if path is not None else None
        self.size = size
        self.image: Optional[pygame.Surface] = None
        self._callbacks: List[Callable[["SpriteHandle"], None]] = []

    @property
    def loaded(self) -> bool:
        return self.image is not None

    def when_loaded(self, cb: Callable[["SpriteHandle"], None]):
        """Run `cb` now if already loaded, otherwise once loading completes."""
        if self.loaded:
            cb(self)
        else:
            self._callbacks.append(cb)

    def load(self) -> pygame.Surface:
        """Load from `path` (or build the placeholder). Raises FileNotFoundError / pygame.error."""
        if self.loaded:
            return self.image
        if self.path is None:
            surf = make_placeholder(self.size)
        else:
            if not self.path.is_file():
                raise FileNotFoundError(f"sprite not found: {self.path}")
            surf = pygame.image.load(str(self.path))
            surf = pygame.transform.scale(surf, self.size)
            logger.info("loaded sprite %s", self.path)
        self._set_image(surf)
        return surf

    def use_placeholder(self):
        self.path = None
        self.load()

    def _set_image(self, surf: pygame.Surface):
        self.image = surf
        pending, self._callbacks = self._callbacks, []
        for cb in pending:
            cb(self)


def make_placeholder(size=(DINO_W, DINO_H)) -> pygame.Surface:
    """Blocky dino silhouette so the game runs without an asset."""
    w, h = size
    surf = pygame.Surface((w, h))
    surf.fill(COLOR_BG)
    body = pygame.Rect(w // 8, h // 3, w * 5 // 8, h // 2)
    head = pygame.Rect(w // 2, 0, w // 2, h * 3 // 8)
    pygame.draw.rect(surf, COLOR_DINO, body)
    pygame.draw.rect(surf, COLOR_DINO, head)
    pygame.draw.rect(surf, COLOR_DINO, (w // 4, h * 5 // 6, w // 8, h // 6))      # legs
    pygame.draw.rect(surf, COLOR_DINO, (w // 2, h * 5 // 6, w // 8, h // 6))
    pygame.draw.rect(surf, COLOR_BG, (w * 3 // 4, h // 10, w // 12, h // 12))     # eye
    return surf
