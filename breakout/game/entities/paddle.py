"""Paddle entity with acceleration/friction movement.

Keyboard movement goes through a per-frame velocity model; pointer
movement places the paddle directly.
"""

from dataclasses import dataclass

from ...config import GameConfig
from .box import Box


@dataclass
class Paddle(Box):
    """Player paddle restricted to a fixed row at the bottom of the field.

    Attributes:
        velocity: Signed horizontal speed in pixels per frame
    """

    velocity: float = 0.0

    @classmethod
    def create(cls, config: GameConfig) -> 'Paddle':
        """Create a centered paddle with the initial velocity."""
        return cls(
            x=config.paddle_start_x,
            y=config.paddle_y,
            width=config.paddle_width,
            height=config.paddle_height,
            velocity=config.paddle_initial_velocity,
        )

    def out_of_bounds(self, x: float, field_width: float) -> bool:
        """Check if the paddle would leave the field with its left edge at x."""
        return x < 0 or x + self.width > field_width

    def place_at(self, center_x: float, field_width: float) -> None:
        """Center the paddle on center_x, clamped to the field.

        Args:
            center_x: Desired paddle center X
            field_width: Field width in pixels
        """
        self.x = max(0.0, min(center_x - self.width / 2, field_width - self.width))
