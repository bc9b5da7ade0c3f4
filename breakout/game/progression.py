"""Level and progression control.

Builds block grids, advances to the next wave when a grid is cleared,
and produces fresh game states. Layout is a pure function of the row and
column counts and the config; nothing here is random.
"""

from ..config import GameConfig
from ..logging import get_logger
from .entities import Ball, Block, BlockGrid, Paddle
from .state import GameState

log = get_logger('progression')


def create_blocks(rows: int, columns: int, config: GameConfig) -> BlockGrid:
    """Lay out a fresh grid of rows x columns blocks.

    Blocks are ordered column by column (every row of column 0 first).
    Pitch is block size plus the configured gap, starting at the grid
    offset.

    Args:
        rows: Number of block rows
        columns: Number of block columns
        config: Game configuration

    Returns:
        BlockGrid with every block active and live_count == rows * columns
    """
    blocks = []
    for col in range(columns):
        for row in range(rows):
            blocks.append(Block(
                x=config.grid_offset_x + col * (config.block_width + config.block_gap),
                y=config.grid_offset_y + row * (config.block_height + config.block_gap),
                width=config.block_width,
                height=config.block_height,
            ))

    return BlockGrid(blocks=blocks, rows=rows, columns=columns, live_count=len(blocks))


def level_up(state: GameState, config: GameConfig) -> None:
    """Award the clear bonus and start the next wave.

    The bonus uses the row count of the wave just cleared. Rows grow by
    one up to the configured maximum, and the speed multiplier grows by
    the configured fraction.

    Args:
        state: State whose grid was just cleared (modified in place)
        config: Game configuration
    """
    bonus = config.points_per_block * state.rows * config.block_columns
    state.score += bonus
    state.rows = min(state.rows + 1, config.block_max_rows)
    state.speed_multiplier += state.speed_multiplier * config.speed_increase
    state.level += 1
    state.grid = create_blocks(state.rows, config.block_columns, config)

    log.info(
        "Level %d: bonus %d, %d rows, speed x%.2f",
        state.level, bonus, state.rows, state.speed_multiplier,
    )


def reset_game(config: GameConfig) -> GameState:
    """Create the state of a brand-new game.

    Args:
        config: Game configuration

    Returns:
        GameState with centered paddle and ball, initial rows, zero score
        and a speed multiplier of 1
    """
    rows = config.block_initial_rows
    return GameState(
        paddle=Paddle.create(config),
        ball=Ball.create(config),
        grid=create_blocks(rows, config.block_columns, config),
        score=0,
        rows=rows,
        speed_multiplier=1.0,
        game_over=False,
    )
