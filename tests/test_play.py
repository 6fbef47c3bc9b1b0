import pygame
import pytest

from breakout.driver import Phase
from breakout.play import HumanPlayableGame, QuitGame


@pytest.fixture
def game():
    game = HumanPlayableGame()
    yield game
    pygame.quit()


def test_arrow_keys_reach_the_latch(game):
    game.driver.start()
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_LEFT))
    game.handle_events()
    game.scheduler.run_pending()
    assert game.session.paddle.x == 195.5

    pygame.event.post(pygame.event.Event(pygame.KEYUP, key=pygame.K_LEFT))
    game.handle_events()
    game.scheduler.run_pending()
    assert game.session.paddle.x == 195.5


def test_escape_quits(game):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_ESCAPE))
    with pytest.raises(QuitGame):
        game.handle_events()


def test_notify_waits_for_a_key(game):
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.KEYDOWN, key=pygame.K_SPACE))
    game.notify("Game over!")
    assert pygame.event.peek(pygame.KEYDOWN) is False


def test_lost_round_blocks_until_acknowledged(game):
    game.driver.start()
    game.session.ball.place(100, 308, 0, 2)
    pygame.event.clear()
    pygame.event.post(pygame.event.Event(pygame.MOUSEBUTTONDOWN, button=1, pos=(10, 10)))
    game.scheduler.run_pending()
    assert game.session.rounds == 1
    assert game.driver.phase == Phase.RUNNING
