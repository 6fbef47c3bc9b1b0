import os

os.environ.setdefault("SDL_VIDEODRIVER", "dummy")

import pytest

from breakout.driver import FrameDriver, FrameScheduler
from breakout.state import BRICK_BROKEN, GameSession


@pytest.fixture
def session():
    return GameSession()


@pytest.fixture
def messages():
    return []


@pytest.fixture
def scheduler():
    return FrameScheduler()


@pytest.fixture
def driver(session, scheduler, messages):
    return FrameDriver(session, scheduler=scheduler, notify=messages.append)


@pytest.fixture
def break_all_but():
    def _break(session, keep):
        # Every brick but ``keep`` broken, counter to match
        for brick in session.bricks:
            if brick is not keep:
                brick.status = BRICK_BROKEN
        session.bricks_left = 1
    return _break
