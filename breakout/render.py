import pygame
import pygame.gfxdraw

from breakout import config


class Renderer:
    """Draws a :class:`~breakout.state.Snapshot` onto a pygame surface."""

    def __init__(self, surface):
        pygame.font.init()
        self.surface = surface
        self.font = pygame.font.Font(None, 48)
        self.font_small = pygame.font.Font(None, 24)

    def clear(self):
        self.surface.fill(config.COLOR_BG)

    def draw_bricks(self, snapshot):
        for rect in snapshot.bricks:
            pygame.draw.rect(self.surface, config.COLOR_BRICK, pygame.Rect(rect))

    def draw_ball(self, snapshot):
        x, y = int(snapshot.ball_pos[0]), int(snapshot.ball_pos[1])
        r = int(snapshot.ball_radius)
        pygame.gfxdraw.aacircle(self.surface, x, y, r, config.COLOR_BALL)
        pygame.gfxdraw.filled_circle(self.surface, x, y, r, config.COLOR_BALL)

    def draw_paddle(self, snapshot):
        pygame.draw.rect(self.surface, config.COLOR_PADDLE, pygame.Rect(snapshot.paddle_rect))

    def draw(self, snapshot):
        self.clear()
        self.draw_bricks(snapshot)
        self.draw_ball(snapshot)
        self.draw_paddle(snapshot)

    def draw_message(self, text, hint="Press any key"):
        # Dim whatever is on screen and put the message in the middle
        w, h = self.surface.get_size()
        overlay = pygame.Surface((w, h), pygame.SRCALPHA)
        overlay.fill(config.COLOR_OVERLAY)
        self.surface.blit(overlay, (0, 0))

        text_surf = self.font.render(text, True, config.COLOR_BG)
        self.surface.blit(text_surf, text_surf.get_rect(center=(w / 2, h / 2 - 12)))
        if hint:
            hint_surf = self.font_small.render(hint, True, config.COLOR_BG)
            self.surface.blit(hint_surf, hint_surf.get_rect(center=(w / 2, h / 2 + 24)))
