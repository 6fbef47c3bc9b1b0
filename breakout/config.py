import math
import os

# Headless unless the host picked a video driver; the play script undoes this
DEFAULT_HEADLESS = "SDL_VIDEODRIVER" not in os.environ
os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

# --- Playfield ---
SCREEN_WIDTH, SCREEN_HEIGHT = 480, 320
FPS = 60

# --- Ball ---
BALL_RADIUS = 10
BALL_SPEED = 2
MAX_BOUNCE_ANGLE = math.pi / 3  # 60 degrees either side of vertical

# --- Paddle ---
PADDLE_WIDTH = 75
PADDLE_HEIGHT = 10
PADDLE_STEP = 7

# --- Bricks ---
BRICK_COLUMNS, BRICK_ROWS = 5, 3
BRICK_WIDTH = 75
BRICK_HEIGHT = 20
BRICK_PADDING = 10
BRICK_OFFSET_TOP = 30
BRICK_OFFSET_LEFT = 30

# Colors
COLOR_BG = (255, 255, 255)
COLOR_PADDLE = (0, 149, 221)  # #0095DD
COLOR_BRICK = (0, 149, 221)
COLOR_BALL = (255, 195, 0)  # #FFC300
COLOR_OVERLAY = (0, 0, 0, 140)

# End of round messages
MSG_LOST = "Game over!"
MSG_WON = "You Win!"
