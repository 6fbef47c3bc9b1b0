import gymnasium as gym
from gymnasium.spaces import MultiDiscrete
import numpy as np
import pygame

from breakout import config
from breakout import physics
from breakout.physics import Outcome
from breakout.render import Renderer
from breakout.state import GameSession


class GameEnv(gym.Env):
    """
    Breakout as a Gymnasium environment.

    The player moves a paddle along the bottom of a 480x320 field to keep a
    ball in play. Hitting a brick breaks it; clearing all fifteen wins the
    round and letting the ball past the paddle loses it. Either outcome ends
    the episode. Each ``step`` is exactly one frame of the game.
    """
    metadata = {"render_modes": ["rgb_array"], "render_fps": config.FPS}

    # Must be a short, user-facing control string:
    user_guide = (
        "Controls: ← to move the paddle left, → to move right. Break all 15 bricks without missing the ball."
    )

    # Must be a short, user-facing description of the game:
    game_description = (
        "Bounce the ball off your paddle to clear a wall of bricks. Where the ball lands on the paddle sets its angle."
    )

    # Should frames auto-advance or wait for user input?
    auto_advance = True

    # --- Constants ---
    SCREEN_WIDTH, SCREEN_HEIGHT = config.SCREEN_WIDTH, config.SCREEN_HEIGHT
    MAX_STEPS = 10000
    FPS = config.FPS

    # Rewards
    REWARD_BRICK = 1.0
    REWARD_WIN = 100.0
    REWARD_LOSS = -100.0

    # Movement actions (action[0]); the rest are no-ops here
    MOVE_LEFT = 3
    MOVE_RIGHT = 4

    def __init__(self, render_mode="rgb_array"):
        super().__init__()
        self.render_mode = render_mode

        self.observation_space = gym.spaces.Box(
            low=0, high=255, shape=(self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3), dtype=np.uint8
        )
        self.action_space = MultiDiscrete([5, 2, 2])

        # Pygame setup for headless rendering
        pygame.init()
        pygame.font.init()
        self.screen = pygame.Surface((self.SCREEN_WIDTH, self.SCREEN_HEIGHT))
        self.renderer = Renderer(self.screen)

        # Initialize state variables
        self.session = GameSession()
        self.steps = 0
        self.game_over = False
        self.outcome = Outcome.NONE

        self.reset()

        # Self-validation
        self.validate_implementation()

    def reset(self, seed=None, options=None):
        super().reset(seed=seed)

        self.session.reset()
        self.session.latch.clear()
        self.steps = 0
        self.game_over = False
        self.outcome = Outcome.NONE

        return self._get_observation(), self._get_info()

    def step(self, action):
        if self.game_over:
            return self._get_observation(), 0, True, False, self._get_info()

        reward = 0.0
        terminated = False

        # Unpack action
        movement = int(action[0])
        left_held = movement == self.MOVE_LEFT
        right_held = movement == self.MOVE_RIGHT

        outcome, broken = physics.step(self.session, left_held, right_held)
        self.steps += 1
        self.outcome = outcome

        reward += self.REWARD_BRICK * len(broken)

        if outcome == Outcome.WON:
            reward += self.REWARD_WIN
            terminated = True
        elif outcome == Outcome.LOST:
            reward = self.REWARD_LOSS
            terminated = True

        if self.steps >= self.MAX_STEPS:
            terminated = True

        self.game_over = terminated

        return (
            self._get_observation(),
            reward,
            terminated,
            False,  # truncated is always False
            self._get_info()
        )

    def render(self):
        return self._get_observation()

    def _get_observation(self):
        self.renderer.draw(self.session.snapshot())

        # Convert to numpy array
        arr = pygame.surfarray.array3d(self.screen)
        return np.transpose(arr, (1, 0, 2)).astype(np.uint8)

    def _get_info(self):
        return {
            "steps": self.steps,
            "bricks_left": self.session.bricks_left,
            "outcome": self.outcome,
        }

    # Convenience views used by scripted policies
    @property
    def ball_pos(self):
        return self.session.ball.pos

    @property
    def paddle(self):
        return self.session.paddle

    def close(self):
        pygame.quit()

    def validate_implementation(self):
        '''
        Call this at the end of __init__ to verify implementation:
        '''
        # Test action space
        assert self.action_space.shape == (3,)
        assert self.action_space.nvec.tolist() == [5, 2, 2]

        # Test observation space
        test_obs = self._get_observation()
        assert test_obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert test_obs.dtype == np.uint8

        # Test reset
        obs, info = self.reset()
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(info, dict)

        # Test step
        test_action = self.action_space.sample()
        obs, reward, term, trunc, info = self.step(test_action)
        assert obs.shape == (self.SCREEN_HEIGHT, self.SCREEN_WIDTH, 3)
        assert isinstance(reward, (int, float))
        assert isinstance(term, bool)
        assert trunc == False
        assert isinstance(info, dict)

        # Leave a fresh round behind
        self.reset()

        print("✓ Implementation validated successfully")


# Example of how to run the environment
if __name__ == '__main__':
    from breakout.policy import policy

    env = GameEnv(render_mode="rgb_array")
    obs, info = env.reset()
    total_reward = 0

    for _ in range(5000):
        action = policy(env)
        obs, reward, terminated, truncated, info = env.step(action)
        total_reward += reward
        if terminated or truncated:
            print(f"Episode finished. Outcome: {info['outcome']}, Bricks left: {info['bricks_left']}, "
                  f"Total Reward: {total_reward:.2f}, Steps: {info['steps']}")
            obs, info = env.reset()
            total_reward = 0

    env.close()
