"""
Game state for Breakout: the ball, the paddle, the brick grid and the session
that owns them.

All entities are created once when a session starts. The ball and paddle are
mutated every frame by :mod:`breakout.physics`; a brick only ever goes from
visible to broken until the next :meth:`GameSession.reset`.
"""
from collections import namedtuple

from breakout import config
from breakout.controls import InputLatch

# Brick states
BRICK_BROKEN = 0
BRICK_VISIBLE = 1

# Read-only view handed to renderers once per frame.
Snapshot = namedtuple("Snapshot", ["ball_pos", "ball_radius", "paddle_rect", "bricks", "bricks_left"])


class Ball:
    def __init__(self, x, y, dx, dy, radius=config.BALL_RADIUS):
        assert radius > 0
        self.x = x
        self.y = y
        self.dx = dx
        self.dy = dy
        self.radius = radius

    @property
    def pos(self):
        return (self.x, self.y)

    @property
    def vel(self):
        return (self.dx, self.dy)

    def place(self, x, y, dx, dy):
        self.x, self.y = x, y
        self.dx, self.dy = dx, dy

    def __repr__(self):
        return f"Ball(x={self.x!r}, y={self.y!r}, dx={self.dx!r}, dy={self.dy!r})"


class Paddle:
    def __init__(self, x, width=config.PADDLE_WIDTH, height=config.PADDLE_HEIGHT):
        self.x = x
        self.width = width
        self.height = height
        # The paddle sits on the bottom edge of the playfield
        self.y = config.SCREEN_HEIGHT - height

    @property
    def center_x(self):
        return self.x + self.width / 2

    @property
    def right(self):
        return self.x + self.width

    @property
    def rect(self):
        return (self.x, self.y, self.width, self.height)

    def __repr__(self):
        return f"Paddle(x={self.x!r})"


class Brick:
    def __init__(self, column, row):
        self.column = column
        self.row = row
        self.x = column * (config.BRICK_WIDTH + config.BRICK_PADDING) + config.BRICK_OFFSET_LEFT
        self.y = row * (config.BRICK_HEIGHT + config.BRICK_PADDING) + config.BRICK_OFFSET_TOP
        self.width = config.BRICK_WIDTH
        self.height = config.BRICK_HEIGHT
        self.status = BRICK_VISIBLE

    @property
    def visible(self):
        return self.status == BRICK_VISIBLE

    @property
    def rect(self):
        return (self.x, self.y, self.width, self.height)

    def contains(self, x, y):
        """Strict point-in-rectangle test; a ball centre on the border is not a hit."""
        return self.x < x < self.x + self.width and self.y < y < self.y + self.height

    def __repr__(self):
        state = "visible" if self.visible else "broken"
        return f"Brick(column={self.column}, row={self.row}, {state})"


def make_bricks(columns=config.BRICK_COLUMNS, rows=config.BRICK_ROWS):
    """Return the brick grid as a flat list in column-major order (index ``c * rows + r``)."""
    bricks = []
    for c in range(columns):
        for r in range(rows):
            bricks.append(Brick(c, r))
    return bricks


class GameSession:
    """
    Everything one game of Breakout needs between frames.

    A fresh session serves the ball from the middle of the playfield; every
    later round (after a win or a loss) serves it from just above the paddle,
    see :meth:`reset`.
    """

    COLUMNS = config.BRICK_COLUMNS
    ROWS = config.BRICK_ROWS
    TOTAL_BRICKS = config.BRICK_COLUMNS * config.BRICK_ROWS

    def __init__(self):
        self.ball = Ball(
            config.SCREEN_WIDTH / 2,
            config.SCREEN_HEIGHT / 2,
            config.BALL_SPEED,
            config.BALL_SPEED,
        )
        self.paddle = Paddle((config.SCREEN_WIDTH - config.PADDLE_WIDTH) / 2)
        self.bricks = make_bricks(self.COLUMNS, self.ROWS)
        self.bricks_left = len(self.bricks)
        self.latch = InputLatch()
        self.frames = 0
        self.rounds = 0

    def reset(self):
        self.ball.place(
            config.SCREEN_WIDTH / 2,
            config.SCREEN_HEIGHT - 30,
            config.BALL_SPEED,
            config.BALL_SPEED,
        )
        self.paddle.x = (config.SCREEN_WIDTH - config.PADDLE_WIDTH) / 2
        for brick in self.bricks:
            brick.status = BRICK_VISIBLE
        self.bricks_left = self.TOTAL_BRICKS
        self.frames = 0
        self.rounds += 1

    def brick_at(self, column, row):
        if not (0 <= column < self.COLUMNS and 0 <= row < self.ROWS):
            raise IndexError(f"no brick at column {column}, row {row}")
        return self.bricks[column * self.ROWS + row]

    def visible_bricks(self):
        return [b for b in self.bricks if b.visible]

    def snapshot(self):
        return Snapshot(
            ball_pos=self.ball.pos,
            ball_radius=self.ball.radius,
            paddle_rect=self.paddle.rect,
            bricks=tuple(b.rect for b in self.bricks if b.visible),
            bricks_left=self.bricks_left,
        )
