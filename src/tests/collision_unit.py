# src/tests/collision_unit.py
import copy
import pygame

from src.dino.collision import boxes_overlap, detect_collision, dino_rect
from src.dino.obstacles import Obstacle


def test_overlap_vs_touching():
    me = pygame.Rect(100, 360, 80, 80)
    assert boxes_overlap(me, pygame.Rect(100, 360, 50, 80)), "Overlapping boxes must collide"
    assert not boxes_overlap(me, pygame.Rect(180, 360, 50, 80)), "Touching edges are not a hit"
    assert not boxes_overlap(me, pygame.Rect(50, 360, 50, 80)), "Touching left edge is not a hit"
    assert boxes_overlap(me, pygame.Rect(179, 360, 50, 80))
    print("✓ AABB ok")


def test_detect_uses_rendered_size():
    assert detect_collision(360, [Obstacle(x=100, y=360)]) is not None
    assert detect_collision(360, [Obstacle(x=180, y=360)]) is None
    # 2x width reaches back to the dino even though the base width would not
    assert detect_collision(360, [Obstacle(x=60, y=360)]) is not None


def test_jumping_dino_clears_obstacle():
    obs = [Obstacle(x=120, y=360)]
    assert detect_collision(210, obs) is None, "Apex is above the obstacle"
    assert detect_collision(280, obs) is None, "Bottom edge touching the top is not a hit"
    assert detect_collision(281, obs) is not None


def test_first_hit_and_purity():
    a, b = Obstacle(x=110, y=360), Obstacle(x=130, y=360)
    obstacles = [a, b]
    before = copy.deepcopy(obstacles)
    assert detect_collision(360, obstacles) is a, "First colliding obstacle in list order"
    assert obstacles == before, "Detection must not mutate obstacles"
    assert dino_rect(300.7) == pygame.Rect(100, 300, 80, 80)


if __name__ == "__main__":
    test_overlap_vs_touching()
    test_detect_uses_rendered_size()
    test_jumping_dino_clears_obstacle()
    test_first_hit_and_purity()
    print("🎉 collision tests passed")
