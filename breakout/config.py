"""Configuration for Breakout.

Contains field dimensions, entity sizes, physics constants, scoring and
color definitions. The module-level constants are the canonical values;
GameConfig bundles them into a validated, immutable model that the
simulation receives explicitly.
"""

from typing import Tuple

from pydantic import BaseModel, ConfigDict, Field, model_validator

# Field dimensions
FIELD_WIDTH: int = 500
FIELD_HEIGHT: int = 500

# Paddle
PADDLE_WIDTH: float = 80.0
PADDLE_HEIGHT: float = 10.0
PADDLE_BOTTOM_MARGIN: float = 5.0
PADDLE_INITIAL_VELOCITY: float = 10.0
PADDLE_ACCELERATION: float = 0.5   # per frame
PADDLE_MAX_SPEED: float = 20.0
PADDLE_FRICTION: float = 0.9       # velocity multiplier per idle frame

# Ball (velocities are pixels per reference 60Hz frame)
BALL_WIDTH: float = 10.0
BALL_HEIGHT: float = 10.0
BALL_INITIAL_VX: float = 3.0
BALL_INITIAL_VY: float = 2.0
REFERENCE_FPS: float = 60.0

# Block grid
BLOCK_WIDTH: float = 50.0
BLOCK_HEIGHT: float = 10.0
BLOCK_GAP: float = 10.0
BLOCK_COLUMNS: int = 8
BLOCK_INITIAL_ROWS: int = 3
BLOCK_MAX_ROWS: int = 10
GRID_OFFSET_X: float = 15.0
GRID_OFFSET_Y: float = 45.0

# Scoring and difficulty
POINTS_PER_BLOCK: int = 100
SPEED_INCREASE: float = 0.1        # multiplier growth per cleared level

# Frame driver
DEFAULT_FPS: int = 60

# Visual
BACKGROUND_COLOR: Tuple[int, int, int] = (0, 0, 0)
PADDLE_COLOR: Tuple[int, int, int] = (144, 238, 144)   # lightgreen
BALL_COLOR: Tuple[int, int, int] = (255, 255, 0)       # yellow
BLOCK_COLOR: Tuple[int, int, int] = (135, 206, 235)    # skyblue
TEXT_COLOR: Tuple[int, int, int] = (135, 206, 235)
GAME_OVER_COLOR: Tuple[int, int, int] = (255, 255, 0)  # yellow
FONT_SIZE: int = 20
SCORE_POSITION: Tuple[int, int] = (10, 25)
GAME_OVER_POSITION: Tuple[int, int] = (80, 400)
GAME_OVER_TEXT: str = "Game Over: Press 'Space' to Restart"


class GameConfig(BaseModel):
    """Immutable, validated bundle of the game constants.

    Defaults mirror the module-level constants. Custom configs are mostly
    useful in tests (e.g. a narrow field or a single-block grid).

    Examples:
        >>> config = GameConfig()
        >>> config.paddle_y
        485.0
        >>> GameConfig(block_initial_rows=1, block_columns=1).block_columns
        1
    """

    field_width: int = Field(FIELD_WIDTH, gt=0)
    field_height: int = Field(FIELD_HEIGHT, gt=0)

    paddle_width: float = Field(PADDLE_WIDTH, gt=0)
    paddle_height: float = Field(PADDLE_HEIGHT, gt=0)
    paddle_bottom_margin: float = Field(PADDLE_BOTTOM_MARGIN, ge=0)
    paddle_initial_velocity: float = PADDLE_INITIAL_VELOCITY
    paddle_acceleration: float = Field(PADDLE_ACCELERATION, gt=0)
    paddle_max_speed: float = Field(PADDLE_MAX_SPEED, gt=0)
    paddle_friction: float = Field(PADDLE_FRICTION, gt=0, lt=1)

    ball_width: float = Field(BALL_WIDTH, gt=0)
    ball_height: float = Field(BALL_HEIGHT, gt=0)
    ball_initial_vx: float = BALL_INITIAL_VX
    ball_initial_vy: float = BALL_INITIAL_VY
    reference_fps: float = Field(REFERENCE_FPS, gt=0)

    block_width: float = Field(BLOCK_WIDTH, gt=0)
    block_height: float = Field(BLOCK_HEIGHT, gt=0)
    block_gap: float = Field(BLOCK_GAP, ge=0)
    block_columns: int = Field(BLOCK_COLUMNS, gt=0)
    block_initial_rows: int = Field(BLOCK_INITIAL_ROWS, gt=0)
    block_max_rows: int = Field(BLOCK_MAX_ROWS, gt=0)
    grid_offset_x: float = Field(GRID_OFFSET_X, ge=0)
    grid_offset_y: float = Field(GRID_OFFSET_Y, ge=0)

    points_per_block: int = Field(POINTS_PER_BLOCK, ge=0)
    speed_increase: float = Field(SPEED_INCREASE, ge=0)

    model_config = ConfigDict(frozen=True)

    @model_validator(mode='after')
    def validate_layout(self) -> 'GameConfig':
        """Check that the entities fit inside the field."""
        if self.paddle_width > self.field_width:
            raise ValueError(
                f'Paddle width {self.paddle_width} exceeds field width {self.field_width}'
            )
        if self.block_max_rows < self.block_initial_rows:
            raise ValueError(
                f'block_max_rows ({self.block_max_rows}) must be >= '
                f'block_initial_rows ({self.block_initial_rows})'
            )
        grid_right = (
            self.grid_offset_x
            + self.block_columns * self.block_width
            + (self.block_columns - 1) * self.block_gap
        )
        if grid_right > self.field_width:
            raise ValueError(
                f'Block grid ({grid_right:.0f}px) does not fit field width {self.field_width}'
            )
        return self

    @property
    def paddle_y(self) -> float:
        """Fixed Y of the paddle's top edge."""
        return self.field_height - self.paddle_height - self.paddle_bottom_margin

    @property
    def paddle_start_x(self) -> float:
        """X of a centered paddle."""
        return self.field_width / 2 - self.paddle_width / 2

    @property
    def ball_start(self) -> Tuple[float, float]:
        """Top-left of a ball centered in the field."""
        return (
            self.field_width / 2 - self.ball_width / 2,
            self.field_height / 2 - self.ball_height / 2,
        )


DEFAULT_CONFIG = GameConfig()
