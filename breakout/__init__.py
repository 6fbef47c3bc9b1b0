from breakout.state import Ball, Brick, GameSession, Paddle, Snapshot
from breakout.controls import InputLatch
from breakout.physics import Outcome
from breakout.driver import FrameDriver, FrameScheduler, Phase
from breakout.env import GameEnv

__all__ = [
    "Ball",
    "Brick",
    "FrameDriver",
    "FrameScheduler",
    "GameEnv",
    "GameSession",
    "InputLatch",
    "Outcome",
    "Paddle",
    "Phase",
    "Snapshot",
]
