from breakout import config


def policy(env):
    # Strategy: keep the paddle centre under the ball's x. Inside a dead zone of
    # one paddle step the paddle holds still so it does not jitter around the ball.
    ball_x, _ = env.ball_pos
    offset = ball_x - env.paddle.center_x

    if offset > config.PADDLE_STEP:
        return [env.MOVE_RIGHT, 0, 0]  # Move right
    elif offset < -config.PADDLE_STEP:
        return [env.MOVE_LEFT, 0, 0]  # Move left
    else:
        return [0, 0, 0]  # Hold
