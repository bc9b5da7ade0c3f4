"""Breakout - paddle-and-ball brick breaking.

BreakoutMode ties the pieces together: it folds input events into the
InputState, advances the GameState with the simulation step, and hands
the result to a skin for drawing.
"""

from typing import List

import pygame

from .config import DEFAULT_CONFIG, GameConfig
from .game.progression import reset_game
from .game.simulation import step
from .game.skins import SKINS, BreakoutSkin, ClassicSkin
from .game.state import GameState, GameStatus
from .input.input_event import InputEvent, KeyEvent, LogicalKey, PointerEvent
from .input.input_state import InputState
from .logging import get_logger
from .models import ORIGIN, Point2D

log = get_logger('game_mode')


class BreakoutMode:
    """Breakout game mode.

    Features:
    - Keyboard steering with acceleration and friction
    - Direct pointer placement of the paddle
    - Endless waves with growing rows and ball speed
    """

    # Game metadata
    NAME = "Breakout"
    DESCRIPTION = "Deflect the ball, clear the blocks, don't let it escape."
    VERSION = "1.0.0"

    def __init__(
        self,
        skin: str = 'classic',
        config: GameConfig = DEFAULT_CONFIG,
        surface_origin: Point2D = ORIGIN,
    ):
        """Initialize Breakout game.

        Args:
            skin: Name of the visual skin to use
            config: Game configuration
            surface_origin: Window position of the play surface's top-left,
                used to make pointer positions surface-relative
        """
        self._config = config
        self._surface_origin = surface_origin
        self._inputs = InputState()
        self._game: GameState = reset_game(config)

        skin_class = SKINS.get(skin, ClassicSkin)
        self._skin: BreakoutSkin = skin_class()

        log.info("New game: %d rows x %d columns", self._game.rows, self._config.block_columns)

    @property
    def state(self) -> GameStatus:
        """Get current game status."""
        return self._game.status

    @property
    def game(self) -> GameState:
        """Get the current game state."""
        return self._game

    @property
    def inputs(self) -> InputState:
        """Get the current input state."""
        return self._inputs

    @property
    def config(self) -> GameConfig:
        return self._config

    def get_score(self) -> int:
        """Get current score."""
        return self._game.score

    def handle_input(self, events: List[InputEvent]) -> None:
        """Fold input events into the input state.

        Pointer moves place the paddle immediately. RESTART only acts
        after a game over.

        Args:
            events: Key and pointer events since the last frame
        """
        for event in events:
            if isinstance(event, KeyEvent):
                self._handle_key(event)
            elif isinstance(event, PointerEvent):
                self._handle_pointer(event)

    def _handle_key(self, event: KeyEvent) -> None:
        if event.key == LogicalKey.RESTART:
            if event.pressed and self._game.game_over:
                self.reset()
            return
        self._inputs.handle_key(event)

    def _handle_pointer(self, event: PointerEvent) -> None:
        self._inputs.handle_pointer(event, self._surface_origin)
        self._game.paddle.place_at(self._inputs.pointer_x, self._config.field_width)

    def update(self, dt: float) -> None:
        """Advance the game by one frame.

        Args:
            dt: Delta time in seconds
        """
        self._game = step(self._game, self._inputs, dt, self._config)

    def render(self, screen: pygame.Surface) -> None:
        """Render the game.

        Args:
            screen: Pygame surface to draw on
        """
        self._skin.render_background(screen)

        for block in self._game.grid:
            self._skin.render_block(block, screen)

        self._skin.render_paddle(self._game.paddle, screen)
        self._skin.render_ball(self._game.ball, screen)
        self._skin.render_hud(screen, self._game.score)

        if self._game.game_over:
            self._skin.render_game_over(screen, self._game.score)

    def reset(self) -> None:
        """Start a new game."""
        self._game = reset_game(self._config)
        log.info("Game restarted")
