"""Game state record and status enum.

GameState holds everything one game owns: entities, block grid and
progression counters. The simulation step takes a GameState and returns
the next one; nothing is kept in module globals.
"""

import copy
from dataclasses import dataclass
from enum import Enum

from ..config import BLOCK_INITIAL_ROWS
from .entities import Ball, BlockGrid, Paddle


class GameStatus(Enum):
    """Externally visible game status.

    States:
        PLAYING: Simulation advancing every frame
        GAME_OVER: Ball escaped past the paddle; waiting for a restart
    """
    PLAYING = "playing"
    GAME_OVER = "game_over"


@dataclass
class GameState:
    """State of a single game.

    Attributes:
        paddle: Player paddle
        ball: The ball
        grid: Blocks of the current wave
        score: Points scored so far (never negative)
        rows: Row count of the current wave
        speed_multiplier: Ball speed scale, grows 10% per cleared wave
        game_over: Set once the ball reaches the bottom edge
        level: Number of the current wave, starting at 1
    """

    paddle: Paddle
    ball: Ball
    grid: BlockGrid
    score: int = 0
    rows: int = BLOCK_INITIAL_ROWS
    speed_multiplier: float = 1.0
    game_over: bool = False
    level: int = 1

    @property
    def status(self) -> GameStatus:
        """Map the game-over flag to a GameStatus."""
        return GameStatus.GAME_OVER if self.game_over else GameStatus.PLAYING

    def copy(self) -> 'GameState':
        """Deep copy, so the copy can be stepped without touching self."""
        return copy.deepcopy(self)
