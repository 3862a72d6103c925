# src/tests/loop_tests.py
"""
Game loop controller tests: state machine, frame ordering, end-to-end runs.

Usage (from repo root):
  python -m src.tests.loop_tests
"""
from __future__ import annotations
from typing import List

from src.dino.config import DINO_GROUND_Y, JUMP_TICK_MS
from src.dino.kinematics import JumpKinematics
from src.dino.loop import GameLoop, Command
from src.dino.obstacles import Obstacle, ObstacleManager
from src.dino.state import SimState, Phase
from src.dino.timers import IntervalTimer

FRAME_MS = 1000.0 / 60


class RecordingRenderer:
    def __init__(self, calls: List[str]):
        self.calls = calls

    def draw(self, state: SimState):
        self.calls.append("draw")


class RecordingManager(ObstacleManager):
    def __init__(self, calls: List[str], *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.calls = calls

    def advance(self, delta_frames: int = 1):
        self.calls.append("advance")
        super().advance(delta_frames)


def make_game(normalize_speed: bool = False):
    calls: List[str] = []
    state = SimState()
    manager = RecordingManager(calls, state.obstacles)
    timer = IntervalTimer(JUMP_TICK_MS)
    game = GameLoop(
        state=state,
        renderer=RecordingRenderer(calls),
        obstacles=manager,
        jump=JumpKinematics(state, timer),
        normalize_speed=normalize_speed,
    )
    return game, calls


def test_start_resets_and_runs():
    game, _ = make_game()
    assert game.phase is Phase.IDLE and not game.running
    assert not game.frame(), "No frame is scheduled before start"

    game.state.obstacles.append(Obstacle(x=800, y=360))
    assert game.handle(Command.START)
    assert game.running and game.phase is Phase.RUNNING
    assert game.state.obstacles == [], "Start clears obstacles"
    assert game.state.obstacles is game.obstacles.obstacles, "State and manager share one list"

    game.state.obstacles.append(Obstacle(x=800, y=360))
    assert not game.start(), "Start is ignored while running"
    assert len(game.state.obstacles) == 1
    print("✓ Start ok")


def test_jump_only_while_running():
    game, _ = make_game()
    assert not game.handle(Command.JUMP), "Idle dino does not jump"
    assert not game.state.jumping
    game.start()
    assert game.handle(Command.JUMP)
    assert game.state.jumping
    assert not game.jump(), "Overlapping jump is ignored"
    print("✓ Jump gating ok")


def test_frame_order():
    game, calls = make_game()
    game.start()
    for _ in range(3):
        assert game.frame()
    assert calls == ["draw", "advance"] * 3
    print("✓ Frame order ok")


def test_collision_halts_schedule():
    game, calls = make_game()
    game.start()
    game.state.obstacles.append(Obstacle(x=110, y=360))
    assert not game.frame(), "Collision must not schedule another frame"
    assert not game.running and game.phase is Phase.STOPPED
    assert calls == ["draw", "advance"]
    for _ in range(10):
        assert not game.frame()
    assert calls == ["draw", "advance"], "No draw/advance after the game stopped"
    print("✓ Collision halts loop")


def test_restart_after_collision():
    game, _ = make_game()
    stops: List[int] = []
    game.on_stop = lambda g: stops.append(g.frames)
    game.start()
    game.state.obstacles.append(Obstacle(x=110, y=360))
    game.frame()
    assert stops == [0]
    assert game.start(), "Stopped game can restart"
    assert game.phase is Phase.RUNNING and game.state.obstacles == []
    assert game.frame()


def test_end_to_end_collision_without_jump():
    game, _ = make_game()
    game.start()
    while game.frame():
        assert game.frames < 1000, "Game never ended"
    # spawn on frame 150 at x=1200, then 146 frames at 7 px until x < 180
    assert game.frames == 296, f"Unexpected collision frame {game.frames}"
    assert not game.running and game.phase is Phase.STOPPED
    print("✓ End-to-end collision ok")


def test_timed_jump_clears_obstacle():
    game, _ = make_game()
    game.start()
    jumped = False
    for _ in range(400):
        obstacles = game.state.obstacles
        if obstacles and not jumped and obstacles[0].x <= 245:
            assert game.jump()
            jumped = True
        game.advance_timers(FRAME_MS)
        if not game.frame():
            break
    assert jumped
    assert game.running, f"Dino should have cleared the first obstacle (stopped at {game.frames})"
    assert game.frames == 400
    print("✓ Jump clears obstacle")


def test_teardown_cancels_jump():
    game, calls = make_game()
    game.start()
    game.jump()
    game.advance_timers(JUMP_TICK_MS * 3)
    assert game.state.dino_y < DINO_GROUND_Y
    game.teardown()
    assert not game.state.jumping and not game.jump_model.timer.active
    assert game.advance_timers(JUMP_TICK_MS * 10) == 0, "No jump tick after teardown"
    assert game.state.dino_y == DINO_GROUND_Y
    calls.clear()
    assert not game.frame()
    assert calls == [], "No frame after teardown"
    print("✓ Teardown ok")


def test_normalized_speed_uses_elapsed_time():
    game, _ = make_game(normalize_speed=True)
    game.start()
    game.frame(elapsed_ms=50)       # 3 reference frames
    assert game.obstacles.spawn_timer == 3
    game.frame(elapsed_ms=8)        # 0.48
    game.frame(elapsed_ms=8)        # 0.96
    assert game.obstacles.spawn_timer == 3
    game.frame(elapsed_ms=8)        # 1.44
    assert game.obstacles.spawn_timer == 4

    coupled, _ = make_game()
    coupled.start()
    coupled.frame(elapsed_ms=50)
    assert coupled.obstacles.spawn_timer == 1, "Default speed is per rendered frame"
    print("✓ Speed normalization ok")


def main():
    test_start_resets_and_runs()
    test_jump_only_while_running()
    test_frame_order()
    test_collision_halts_schedule()
    test_restart_after_collision()
    test_end_to_end_collision_without_jump()
    test_timed_jump_clears_obstacle()
    test_teardown_cancels_jump()
    test_normalized_speed_uses_elapsed_time()
    print("🎉 loop tests passed")


if __name__ == "__main__":
    main()
