# src/dino/game.py
import sys, argparse, logging
import pygame
from pygame import K_SPACE, K_RETURN, K_KP_ENTER, K_ESCAPE

from .config import WIDTH, HEIGHT, FPS, COLOR_FG, COLOR_BG, LOG_FORMAT
from .kinematics import JumpKinematics
from .loop import GameLoop, Command
from .render import Renderer
from .sprite import SpriteHandle
from .state import SimState, Phase
from .timers import EventTimer

logger = logging.getLogger(__name__)

KEY_COMMANDS = {
    K_SPACE: Command.JUMP,
    K_RETURN: Command.START,
    K_KP_ENTER: Command.START,
}

HINTS = {
    Phase.IDLE: "Press Enter to start, Space to jump",
    Phase.STOPPED: "Crashed! Enter to restart | ESC quit",
}


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="Dino Runner")
    p.add_argument("--sprite", type=str, default=None,
                   help="Dino image file. Omit for the built-in placeholder.")
    p.add_argument("--fps", type=int, default=FPS,
                   help="Frame cap for the display loop.")
    p.add_argument("--normalize-speed", action="store_true",
                   help="Scale obstacle speed by elapsed time instead of per rendered frame.")
    p.add_argument("--log-level", type=str, default="INFO",
                   choices=["DEBUG", "INFO", "WARNING", "ERROR"])
    return p.parse_args(argv)


def setup_logging(level: str):
    logging.basicConfig(
        level=getattr(logging, level),
        format=LOG_FORMAT,
        datefmt="%H:%M:%S"
    )


def load_sprite(sprite: SpriteHandle):
    try:
        sprite.load()
    except (FileNotFoundError, pygame.error) as e:
        logger.warning("could not load sprite (%s), using placeholder", e)
        sprite.use_placeholder()


def run(argv=None):
    args = parse_args(argv)
    setup_logging(args.log_level)

    pygame.init()
    pygame.display.set_caption("Dino Runner")
    screen = pygame.display.set_mode((WIDTH, HEIGHT))
    clock = pygame.time.Clock()
    font = pygame.font.SysFont("jetbrainsmono", 18)

    state = SimState()
    sprite = SpriteHandle(args.sprite)
    timer = EventTimer()
    renderer = Renderer(screen, sprite)
    game = GameLoop(
        state=state,
        renderer=renderer,
        jump=JumpKinematics(state, timer),
        normalize_speed=args.normalize_speed,
    )

    # Idle frame first; the dino shows up once the sprite signals it is loaded
    renderer.draw(state)
    load_sprite(sprite)

    try:
        while True:
            elapsed_ms = clock.tick(args.fps)

            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return
                if timer.handles(event):
                    timer.fire()
                elif event.type == pygame.KEYDOWN:
                    if event.key == K_ESCAPE:
                        return
                    command = KEY_COMMANDS.get(event.key)
                    if command is not None:
                        game.handle(command)

            if game.frame_scheduled:
                game.frame(elapsed_ms)

            hint = HINTS.get(game.phase)
            if hint:
                screen.blit(font.render(hint, True, COLOR_FG, COLOR_BG), (12, 10))

            pygame.display.flip()
    finally:
        game.teardown()
        pygame.quit()


def main():
    run()
    sys.exit(0)


if __name__ == "__main__":
    main()
