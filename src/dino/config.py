# --- Display ---
WIDTH = 1200
HEIGHT = 500
FPS = 60
REFERENCE_FPS = 60          # frame rate obstacle speeds are expressed against

# --- Ground ---
GROUND_Y = 420
GROUND_H = 5

# --- Dino ---
DINO_X = 100                # dino's fixed x (world scrolls left)
DINO_W = 80
DINO_H = 80
DINO_GROUND_Y = 360         # top of the dino when standing

# --- Jump ---
JUMP_HEIGHT = 150           # apex = DINO_GROUND_Y - JUMP_HEIGHT
JUMP_SPEED = 15             # px per tick going up
GRAVITY = 4                 # px per tick coming down
JUMP_TICK_MS = 20           # jump tick period, independent of the frame rate

# --- Obstacles ---
OBSTACLE_SPEED = 7          # px per frame
OBSTACLE_W = 25
OBSTACLE_H = 40
OBSTACLE_SCALE = 2          # obstacles are drawn and collided at 2x
OBSTACLE_Y = 360
SPAWN_INTERVAL_FRAMES = 150

# --- Colors (RGB) ---
COLOR_BG = (243, 244, 246)
COLOR_GROUND = (51, 51, 51)
COLOR_OBSTACLE = (255, 0, 0)
COLOR_DINO = (72, 120, 72)
COLOR_FG = (30, 30, 30)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
