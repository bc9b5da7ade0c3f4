"""Per-frame simulation step.

step() advances a GameState by the elapsed wall-clock time and returns
the next state. Order within a frame:

1. paddle movement from held keys (acceleration/friction, per frame)
2. ball integration (scaled by elapsed time and speed multiplier)
3. ball vs paddle
4. ball vs walls
5. loss check (bottom edge), which ends the frame
6. ball vs blocks
7. level completion

The wall bounce runs before the loss check, so the frame that ends the
game has already reversed the ball's vertical velocity.
"""

from ..config import DEFAULT_CONFIG, GameConfig
from ..input.input_state import InputState
from ..logging import get_logger
from .entities import Ball, BlockGrid, Paddle
from .physics.collision import (
    check_wall_collision,
    get_collision_direction,
    overlaps,
    resolve_collision,
)
from .progression import level_up
from .state import GameState

log = get_logger('simulation')


def update_paddle(paddle: Paddle, inputs: InputState, config: GameConfig) -> None:
    """Apply held movement keys to the paddle.

    A held direction accelerates the paddle only if the resulting
    position stays inside the field; otherwise, or with no key held,
    friction decays the velocity and the paddle stays put. Left is
    checked before right.
    """
    if inputs.moving_left:
        velocity = max(paddle.velocity - config.paddle_acceleration, -config.paddle_max_speed)
        if not paddle.out_of_bounds(paddle.x + velocity, config.field_width):
            paddle.velocity = velocity
            paddle.x += velocity
            return

    if inputs.moving_right:
        velocity = min(paddle.velocity + config.paddle_acceleration, config.paddle_max_speed)
        if not paddle.out_of_bounds(paddle.x + velocity, config.field_width):
            paddle.velocity = velocity
            paddle.x += velocity
            return

    paddle.velocity *= config.paddle_friction


def handle_block_collisions(state: GameState, config: GameConfig) -> int:
    """Destroy every live block the ball overlaps.

    Each block is tested against the same ball rectangle, so two blocks
    can fall in one frame; each one reverses the vertical velocity.

    Returns:
        Number of blocks destroyed this frame
    """
    ball: Ball = state.ball
    grid: BlockGrid = state.grid
    destroyed = 0

    for block in grid:
        if not block.is_active or not overlaps(ball, block):
            continue

        grid.destroy(block)
        ball.bounce_vertical()
        state.score += config.points_per_block
        destroyed += 1
        log.debug("Block at (%.0f, %.0f) destroyed, score %d", block.x, block.y, state.score)

    return destroyed


def step(
    state: GameState,
    inputs: InputState,
    elapsed_seconds: float,
    config: GameConfig = DEFAULT_CONFIG,
) -> GameState:
    """Advance the game by one frame.

    Args:
        state: Current state (not modified)
        inputs: Current input state
        elapsed_seconds: Wall-clock time since the previous frame
        config: Game configuration

    Returns:
        The next state; the same object if the game is already over

    Raises:
        ValueError: If elapsed_seconds is negative
    """
    if elapsed_seconds < 0:
        raise ValueError(f'elapsed_seconds must be non-negative, got {elapsed_seconds}')

    if state.game_over:
        return state

    new_state = state.copy()
    paddle = new_state.paddle
    ball = new_state.ball

    update_paddle(paddle, inputs, config)

    ball.move(elapsed_seconds, config.reference_fps, new_state.speed_multiplier)

    direction = get_collision_direction(ball, paddle)
    if direction is not None:
        resolve_collision(ball, direction)
        log.trace("Paddle hit from %s", direction)

    if check_wall_collision(ball, config.field_width, config.field_height):
        new_state.game_over = True
        log.info("Game over: final score %d (level %d)", new_state.score, new_state.level)
        return new_state

    handle_block_collisions(new_state, config)

    if new_state.grid.is_cleared:
        level_up(new_state, config)

    return new_state
