"""
Tests for the per-frame simulation step.

Tests cover:
- Game-over short circuit and purity of the step
- Paddle acceleration, friction and bounds
- Ball integration and frame-rate independence
- Paddle, wall and block collisions
- Loss detection ordering
- Level completion
"""

import pytest

from breakout.config import GameConfig
from breakout.game.entities import Ball
from breakout.game.progression import create_blocks, reset_game
from breakout.game.simulation import handle_block_collisions, step, update_paddle
from breakout.input.input_state import InputState

FRAME = 1 / 60


class TestStepBasics:
    """Test step preconditions and purity."""

    def test_game_over_returns_same_state(self, game_state, inputs):
        game_state.game_over = True
        result = step(game_state, InputState(moving_right=True), FRAME)
        assert result is game_state
        assert (result.ball.x, result.ball.y) == (245, 245)
        assert result.paddle.x == 210

    def test_negative_elapsed_rejected(self, game_state, inputs):
        with pytest.raises(ValueError):
            step(game_state, inputs, -0.01)

    def test_does_not_modify_input_state(self, game_state, inputs):
        """Test that step returns a new state and leaves the old one alone."""
        result = step(game_state, inputs, FRAME)
        assert result is not game_state
        assert (game_state.ball.x, game_state.ball.y) == (245, 245)
        assert game_state.paddle.velocity == 10


class TestPaddleMovement:
    """Test keyboard-driven paddle movement."""

    def test_friction_without_input(self, game_state, inputs, config):
        update_paddle(game_state.paddle, inputs, config)
        assert game_state.paddle.velocity == pytest.approx(9.0)
        assert game_state.paddle.x == 210

    def test_hold_right_accelerates(self, game_state, config):
        update_paddle(game_state.paddle, InputState(moving_right=True), config)
        assert game_state.paddle.velocity == pytest.approx(10.5)
        assert game_state.paddle.x == pytest.approx(220.5)

    def test_hold_left_accelerates_toward_negative(self, game_state, config):
        """Test that left lowers velocity from its current (positive) value."""
        paddle = game_state.paddle
        update_paddle(paddle, InputState(moving_left=True), config)
        assert paddle.velocity == pytest.approx(9.5)
        assert paddle.x == pytest.approx(219.5)

    def test_speed_capped(self, game_state, config):
        paddle = game_state.paddle
        paddle.x = 0
        paddle.velocity = 19.8
        update_paddle(paddle, InputState(moving_right=True), config)
        assert paddle.velocity == 20

    def test_blocked_at_bound_applies_friction(self, game_state, config):
        paddle = game_state.paddle
        paddle.x = 415
        update_paddle(paddle, InputState(moving_right=True), config)
        assert paddle.x == 415
        assert paddle.velocity == pytest.approx(9.0)

    def test_left_checked_before_right(self, game_state, config):
        paddle = game_state.paddle
        paddle.velocity = 0
        update_paddle(paddle, InputState(moving_left=True, moving_right=True), config)
        assert paddle.velocity == pytest.approx(-0.5)

    @pytest.mark.parametrize("held", [
        InputState(moving_left=True),
        InputState(moving_right=True),
    ])
    def test_stays_in_field(self, game_state, config, held):
        """Test the paddle never leaves [0, field_width - width]."""
        state = game_state
        for _ in range(300):
            state = step(state, held, 0.0, config)
            assert 0 <= state.paddle.x <= config.field_width - state.paddle.width


class TestBallIntegration:
    """Test ball movement through the step."""

    def test_one_frame(self, game_state, inputs):
        result = step(game_state, inputs, FRAME)
        assert result.ball.x == pytest.approx(248)
        assert result.ball.y == pytest.approx(247)

    def test_speed_multiplier_applied(self, game_state, inputs):
        game_state.speed_multiplier = 1.5
        result = step(game_state, inputs, FRAME)
        assert result.ball.x == pytest.approx(249.5)

    def test_frame_rate_independent(self, game_state, inputs):
        """Test two half frames land where one full frame does."""
        once = step(game_state, inputs, FRAME)
        twice = step(step(game_state, inputs, FRAME / 2), inputs, FRAME / 2)
        assert twice.ball.x == pytest.approx(once.ball.x)
        assert twice.ball.y == pytest.approx(once.ball.y)


class TestCollisionsInStep:
    """Test paddle, wall and block responses within a step."""

    def test_paddle_bounce(self, game_state, inputs):
        game_state.ball = Ball(240, 480, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, 0.0)
        assert result.ball.vy == -2
        assert result.ball.vx == 3
        assert not result.game_over

    def test_side_wall_bounce(self, game_state, inputs):
        game_state.ball = Ball(492, 250, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, 0.0)
        assert (result.ball.vx, result.ball.vy) == (-3, 2)

    def test_block_destroyed(self, game_state, inputs):
        game_state.ball = Ball(20, 50, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, 0.0)
        assert result.grid.blocks[0].destroyed
        assert result.grid.live_count == 23
        assert result.score == 100
        assert result.ball.vy == -2

    def test_two_blocks_in_one_frame(self, game_state, config):
        """Test that every block overlapping the ball is destroyed."""
        game_state.ball = Ball(60, 47, 20, 5, vx=3, vy=2)
        destroyed = handle_block_collisions(game_state, config)
        assert destroyed == 2
        assert game_state.grid.blocks[0].destroyed
        assert game_state.grid.blocks[3].destroyed
        assert game_state.score == 200
        assert game_state.grid.live_count == 22
        assert game_state.ball.vy == 2

    def test_destroyed_block_is_ignored(self, game_state, config):
        game_state.grid.destroy(game_state.grid.blocks[0])
        game_state.ball = Ball(20, 50, 10, 10, vx=3, vy=2)
        assert handle_block_collisions(game_state, config) == 0
        assert game_state.score == 0


class TestLoss:
    """Test the game-over transition."""

    def test_ball_past_paddle_ends_game(self, game_state, inputs):
        """Test ball at (245,490) moving (3,2) over a centered paddle."""
        game_state.ball = Ball(245, 490, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, FRAME)
        assert result.game_over

    def test_wall_bounce_happens_before_loss(self, game_state, inputs):
        """Test the bottom bounce still flips vy on the losing frame."""
        game_state.ball = Ball(50, 489, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, FRAME)
        assert result.game_over
        assert result.ball.vy == -2

    def test_no_block_scoring_on_losing_frame(self, game_state, inputs):
        game_state.grid = create_blocks(1, 1, GameConfig())
        game_state.grid.blocks[0].y = 485
        game_state.ball = Ball(20, 491, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, 0.0)
        assert result.game_over
        assert result.score == 0


class TestLevelCompletion:
    """Test that clearing the last block starts the next wave."""

    def test_last_block_triggers_level_up(self, single_block_config, inputs):
        state = reset_game(single_block_config)
        state.ball = Ball(30, 50, 10, 10, vx=3, vy=2)
        result = step(state, inputs, 0.0, single_block_config)
        assert result.score == 100 + 100 * 1 * 1
        assert result.rows == 2
        assert result.speed_multiplier == pytest.approx(1.1)
        assert len(result.grid) == 2
        assert result.grid.live_count == 2
        assert all(block.is_active for block in result.grid)
        assert result.level == 2

    def test_rows_at_max_stay_at_max(self, game_state, config, inputs):
        game_state.rows = 10
        game_state.grid = create_blocks(1, 1, config)
        game_state.ball = Ball(30, 50, 10, 10, vx=3, vy=2)
        result = step(game_state, inputs, 0.0, config)
        assert result.rows == 10
        assert result.score == 100 + 100 * 10 * 8
        assert len(result.grid) == 80
