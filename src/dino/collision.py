# src/dino/collision.py
from __future__ import annotations
from typing import Iterable, Optional
import pygame

from .config import DINO_X, DINO_W, DINO_H
from .obstacles import Obstacle


def dino_rect(y: float) -> pygame.Rect:
    return pygame.Rect(DINO_X, int(y), DINO_W, DINO_H)


def boxes_overlap(a: pygame.Rect, b: pygame.Rect) -> bool:
    """Strict AABB overlap: boxes that only share an edge do not collide."""
    return (a.left < b.right and a.right > b.left and
            a.top < b.bottom and a.bottom > b.top)


def detect_collision(dino_y: float, obstacles: Iterable[Obstacle]) -> Optional[Obstacle]:
    """Return the first obstacle hitting the dino, or None. Pure: nothing is mutated."""
    me = dino_rect(dino_y)
    for obs in obstacles:
        if boxes_overlap(me, obs.rect):
            return obs
    return None
