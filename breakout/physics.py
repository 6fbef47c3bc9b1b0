"""
Frame update and collision resolution.

Every function here works on a :class:`~breakout.state.GameSession` passed in
by the caller; nothing is kept at module scope.

Bounce decisions look at the ball's *next* position (``x + dx``, ``y + dy``)
after the ball has already been moved, and a bounce only flips the velocity.
The ball is never pushed back inside the walls, so it may overlap an edge by
a pixel or two for a frame.
"""
import math

import numpy as np

from breakout import config
from breakout.state import BRICK_BROKEN


class Outcome:
    NONE = "none"
    LOST = "lost"
    WON = "won"


def move_paddle(session, left_held, right_held):
    paddle = session.paddle
    # Right wins when both keys are held
    if right_held and paddle.x < config.SCREEN_WIDTH - paddle.width:
        paddle.x += config.PADDLE_STEP
    elif left_held and paddle.x > 0:
        paddle.x -= config.PADDLE_STEP
    paddle.x = float(np.clip(paddle.x, 0, config.SCREEN_WIDTH - paddle.width))


def advance_ball(session):
    ball = session.ball
    ball.x += ball.dx
    ball.y += ball.dy


def bounce_angle(ball, paddle):
    """Angle from vertical for a ball leaving the paddle, up to MAX_BOUNCE_ANGLE at the edges."""
    distance_from_center = ball.x - paddle.center_x
    return (distance_from_center / (paddle.width / 2)) * config.MAX_BOUNCE_ANGLE


def paddle_bounce(ball, paddle):
    # Velocity is reassigned rather than reflected so the speed stays at BALL_SPEED
    angle = bounce_angle(ball, paddle)
    ball.dx = math.sin(angle) * config.BALL_SPEED
    ball.dy = -math.cos(angle) * config.BALL_SPEED


def resolve_walls(session):
    """Bounce off the side walls, the ceiling and the paddle; report a miss as LOST."""
    ball, paddle = session.ball, session.paddle
    r = ball.radius

    if ball.x + ball.dx > config.SCREEN_WIDTH - r or ball.x + ball.dx < r:
        ball.dx = -ball.dx

    if ball.y + ball.dy < r:
        ball.dy = -ball.dy
    elif ball.y + ball.dy > config.SCREEN_HEIGHT - r:
        if paddle.x <= ball.x <= paddle.right:
            paddle_bounce(ball, paddle)
        else:
            return Outcome.LOST
    return Outcome.NONE


def check_brick_collisions(session):
    """
    Break every visible brick that contains the ball centre.

    Bricks are visited in column-major order, which decides the credit if the
    ball ever sat inside two at once. The scan does not stop at the first hit.

    Returns:
        tuple: (outcome, list of bricks broken by this call)
    """
    ball = session.ball
    broken = []
    outcome = Outcome.NONE
    for brick in session.bricks:
        if not brick.visible:
            continue
        if brick.contains(ball.x, ball.y):
            ball.dy = -ball.dy
            brick.status = BRICK_BROKEN
            session.bricks_left -= 1
            broken.append(brick)
            if session.bricks_left == 0:
                outcome = Outcome.WON
    return outcome, broken


def step(session, left_held=False, right_held=False):
    """
    Run one frame of game physics.

    Order matters: paddle, ball, walls and paddle bounce, then bricks. A miss
    ends the frame before the brick scan.

    Returns:
        tuple: (outcome, list of bricks broken this frame)
    """
    move_paddle(session, left_held, right_held)
    advance_ball(session)
    session.frames += 1

    outcome = resolve_walls(session)
    if outcome == Outcome.LOST:
        return outcome, []

    return check_brick_collisions(session)
