"""Base class for Breakout skins.

Skins handle ALL rendering - the game only manages state.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING

import pygame

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.block import Block


class BreakoutSkin(ABC):
    """Base class for game skins.

    A skin reads entity state and draws it. It never mutates the game.
    """

    NAME: str = "base"
    DESCRIPTION: str = "Base skin"

    @abstractmethod
    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        """Render the paddle.

        Args:
            paddle: Paddle to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        """Render the ball.

        Args:
            ball: Ball to render
            screen: Pygame surface to draw on
        """
        pass

    @abstractmethod
    def render_block(self, block: 'Block', screen: pygame.Surface) -> None:
        """Render a block. Destroyed blocks should draw nothing.

        Args:
            block: Block to render
            screen: Pygame surface to draw on
        """
        pass

    def render_background(self, screen: pygame.Surface) -> None:
        """Clear the frame."""
        screen.fill((0, 0, 0))

    def render_hud(self, screen: pygame.Surface, score: int) -> None:
        """Render the heads-up display.

        Args:
            screen: Pygame surface to draw on
            score: Current score
        """
        pass

    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        """Render the game-over overlay.

        Args:
            screen: Pygame surface to draw on
            score: Final score
        """
        pass
