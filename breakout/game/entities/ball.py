"""Ball entity with velocity-based movement.

Velocities are expressed in pixels per reference 60Hz frame and scaled
by elapsed time when integrated, so movement is frame-rate independent.
"""

from dataclasses import dataclass

from ...config import GameConfig
from .box import Box


@dataclass
class Ball(Box):
    """Free-moving ball that bounces off paddle, walls and blocks."""

    vx: float = 0.0
    vy: float = 0.0

    @classmethod
    def create(cls, config: GameConfig) -> 'Ball':
        """Create a ball centered in the field with the initial velocity."""
        x, y = config.ball_start
        return cls(
            x=x,
            y=y,
            width=config.ball_width,
            height=config.ball_height,
            vx=config.ball_initial_vx,
            vy=config.ball_initial_vy,
        )

    def move(self, elapsed_seconds: float, reference_fps: float, speed_multiplier: float) -> None:
        """Advance position by velocity over the elapsed time.

        Args:
            elapsed_seconds: Wall-clock time since the previous frame
            reference_fps: Frame rate the velocity units are defined at
            speed_multiplier: Difficulty scale applied to velocity
        """
        scale = elapsed_seconds * reference_fps * speed_multiplier
        self.x += self.vx * scale
        self.y += self.vy * scale

    def bounce_horizontal(self) -> None:
        """Bounce off a vertical surface (reverse X velocity)."""
        self.vx = -self.vx

    def bounce_vertical(self) -> None:
        """Bounce off a horizontal surface (reverse Y velocity)."""
        self.vy = -self.vy
