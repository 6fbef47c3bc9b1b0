"""
Play Breakout in a window.

    python -m breakout.play

Arrow keys move the paddle, ESC quits. The end-of-round message blocks the
game until a key is pressed or the window is clicked.
"""
import os
import sys

import pygame

from breakout import config
from breakout.driver import FrameDriver, FrameScheduler
from breakout.env import GameEnv
from breakout.render import Renderer
from breakout.state import GameSession

KEY_NAMES = {
    pygame.K_LEFT: "ArrowLeft",
    pygame.K_RIGHT: "ArrowRight",
}


class QuitGame(Exception):
    pass


class HumanPlayableGame:
    def __init__(self):
        if config.DEFAULT_HEADLESS:
            os.environ.pop("SDL_VIDEODRIVER", None)
        pygame.init()
        self.screen = pygame.display.set_mode((config.SCREEN_WIDTH, config.SCREEN_HEIGHT))
        pygame.display.set_caption("Breakout")
        self.clock = pygame.time.Clock()
        self.renderer = Renderer(self.screen)
        self.scheduler = FrameScheduler()
        self.session = GameSession()
        self.driver = FrameDriver(
            self.session,
            scheduler=self.scheduler,
            notify=self.notify,
            render=self.draw,
        )

    def draw(self, snapshot):
        self.renderer.draw(snapshot)
        pygame.display.flip()

    def notify(self, message):
        print(message)
        self.renderer.draw_message(message)
        pygame.display.flip()
        # Block everything, input included, until the player acknowledges
        while True:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                raise QuitGame()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    raise QuitGame()
                return
            if event.type == pygame.MOUSEBUTTONDOWN:
                return

    def handle_events(self):
        for event in pygame.event.get():
            if event.type == pygame.QUIT:
                raise QuitGame()
            if event.type == pygame.KEYDOWN:
                if event.key == pygame.K_ESCAPE:
                    raise QuitGame()
                if event.key in KEY_NAMES:
                    self.driver.key_down(KEY_NAMES[event.key])
            elif event.type == pygame.KEYUP and event.key in KEY_NAMES:
                self.driver.key_up(KEY_NAMES[event.key])

    def run(self):
        print(GameEnv.game_description)
        print(GameEnv.user_guide)

        try:
            self.driver.start()
            while self.driver.running:
                self.handle_events()
                self.scheduler.run_pending()
                self.clock.tick(config.FPS)
        except QuitGame:
            self.driver.stop()
        finally:
            pygame.quit()


def main():
    HumanPlayableGame().run()
    return 0


if __name__ == '__main__':
    sys.exit(main())
