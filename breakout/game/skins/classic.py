"""Classic skin - flat filled rectangles and a small sans-serif HUD."""

from typing import TYPE_CHECKING, Optional

import pygame

from .base import BreakoutSkin
from ...config import (
    BACKGROUND_COLOR, PADDLE_COLOR, BALL_COLOR, BLOCK_COLOR,
    TEXT_COLOR, GAME_OVER_COLOR,
    FONT_SIZE, SCORE_POSITION, GAME_OVER_POSITION, GAME_OVER_TEXT,
)

if TYPE_CHECKING:
    from ..entities.paddle import Paddle
    from ..entities.ball import Ball
    from ..entities.block import Block


class ClassicSkin(BreakoutSkin):
    """Renders the game as plain colored rectangles.

    - Paddle: light green rectangle
    - Ball: yellow square
    - Blocks: sky blue rectangles
    - Score: sky blue, top left; yellow game-over prompt near the bottom
    """

    NAME = "classic"
    DESCRIPTION = "Flat colored rectangles"

    def __init__(self):
        """Initialize classic skin."""
        self._font: Optional[pygame.font.Font] = None

    def _ensure_font(self) -> pygame.font.Font:
        """Create the HUD font on first use."""
        if self._font is None:
            pygame.font.init()
            self._font = pygame.font.SysFont("sans-serif", FONT_SIZE)
        return self._font

    def _draw_text(self, screen: pygame.Surface, text: str, baseline_pos, color) -> None:
        """Draw text with its baseline at the given position."""
        font = self._ensure_font()
        surface = font.render(text, True, color)
        x, y = baseline_pos
        screen.blit(surface, (x, y - font.get_ascent()))

    def render_background(self, screen: pygame.Surface) -> None:
        screen.fill(BACKGROUND_COLOR)

    def render_paddle(self, paddle: 'Paddle', screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, PADDLE_COLOR, pygame.Rect(paddle.rect))

    def render_ball(self, ball: 'Ball', screen: pygame.Surface) -> None:
        pygame.draw.rect(screen, BALL_COLOR, pygame.Rect(ball.rect))

    def render_block(self, block: 'Block', screen: pygame.Surface) -> None:
        if not block.is_active:
            return
        pygame.draw.rect(screen, BLOCK_COLOR, pygame.Rect(block.rect))

    def render_hud(self, screen: pygame.Surface, score: int) -> None:
        self._draw_text(screen, str(score), SCORE_POSITION, TEXT_COLOR)

    def render_game_over(self, screen: pygame.Surface, score: int) -> None:
        self._draw_text(screen, GAME_OVER_TEXT, GAME_OVER_POSITION, GAME_OVER_COLOR)
