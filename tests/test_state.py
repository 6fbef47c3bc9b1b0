import pytest

from breakout.state import BRICK_BROKEN, BRICK_VISIBLE, Ball, GameSession, make_bricks


def test_new_session_serves_from_center(session):
    assert session.ball.pos == (240, 160)
    assert session.ball.vel == (2, 2)
    assert session.paddle.x == 202.5
    assert session.paddle.y == 310
    assert session.bricks_left == 15
    assert all(b.status == BRICK_VISIBLE for b in session.bricks)


def test_reset_restores_round_start(session):
    session.ball.place(13, 77, -1.5, -0.4)
    session.paddle.x = 0
    for brick in session.bricks[:7]:
        brick.status = BRICK_BROKEN
    session.bricks_left = 8

    session.reset()

    assert session.ball.pos == (240, 290)
    assert session.ball.vel == (2, 2)
    assert session.paddle.x == 202.5
    assert session.bricks_left == 15
    assert len(session.visible_bricks()) == 15
    assert session.rounds == 1


def test_bricks_are_column_major():
    bricks = make_bricks()
    assert len(bricks) == 15
    assert [(b.column, b.row) for b in bricks[:4]] == [(0, 0), (0, 1), (0, 2), (1, 0)]


def test_brick_positions(session):
    assert session.brick_at(0, 0).rect == (30, 30, 75, 20)
    assert session.brick_at(1, 0).rect == (115, 30, 75, 20)
    assert session.brick_at(4, 2).rect == (370, 90, 75, 20)
    assert session.brick_at(1, 0) is session.bricks[3]


def test_brick_at_out_of_range(session):
    with pytest.raises(IndexError):
        session.brick_at(5, 0)
    with pytest.raises(IndexError):
        session.brick_at(0, -1)


def test_bricks_do_not_overlap(session):
    for a in session.bricks:
        for b in session.bricks:
            if a is b:
                continue
            apart_x = a.x + a.width <= b.x or b.x + b.width <= a.x
            apart_y = a.y + a.height <= b.y or b.y + b.height <= a.y
            assert apart_x or apart_y


def test_brick_contains_is_strict(session):
    brick = session.brick_at(0, 0)
    assert brick.contains(67.5, 40)
    assert not brick.contains(30, 40)
    assert not brick.contains(105, 40)
    assert not brick.contains(67.5, 50)


def test_snapshot_lists_only_visible_bricks(session):
    session.brick_at(2, 1).status = BRICK_BROKEN
    session.bricks_left -= 1

    snap = session.snapshot()

    assert len(snap.bricks) == 14
    assert session.brick_at(2, 1).rect not in snap.bricks
    assert snap.ball_pos == (240, 160)
    assert snap.ball_radius == 10
    assert snap.paddle_rect == (202.5, 310, 75, 10)
    assert snap.bricks_left == 14


def test_ball_radius_must_be_positive():
    with pytest.raises(AssertionError):
        Ball(0, 0, 1, 1, radius=0)


def test_sessions_are_independent():
    a, b = GameSession(), GameSession()
    a.ball.x = 5
    a.bricks[0].status = BRICK_BROKEN
    assert b.ball.x == 240
    assert b.bricks[0].visible
