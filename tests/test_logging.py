"""
Tests for the module logger.
"""

import copy

import pytest

from breakout import logging as breakout_logging
from breakout.logging import LogLevel, configure_logging, disable_logging, get_logger


@pytest.fixture(autouse=True)
def restore_config():
    """Snapshot and restore the global logging configuration."""
    saved = copy.deepcopy(breakout_logging._config)
    yield
    breakout_logging._config.clear()
    breakout_logging._config.update(saved)


class TestLogger:
    """Test level filtering and formatting."""

    def test_loggers_are_cached(self):
        assert get_logger('simulation') is get_logger('simulation')

    def test_format_and_args(self, capsys):
        configure_logging(level='INFO')
        get_logger('test_fmt').info("score %d", 300)
        assert capsys.readouterr().out == "[test_fmt] INFO: score 300\n"

    def test_below_level_suppressed(self, capsys):
        configure_logging(level='WARNING')
        get_logger('test_quiet').info("hidden")
        assert capsys.readouterr().out == ""

    def test_module_override(self, capsys):
        configure_logging(level='OFF', modules={'test_loud': 'DEBUG'})
        get_logger('test_loud').debug("visible")
        get_logger('test_other').error("hidden")
        out = capsys.readouterr().out
        assert "[test_loud] DEBUG: visible" in out
        assert "test_other" not in out

    def test_bad_format_args_fall_back(self, capsys):
        configure_logging(level='INFO')
        get_logger('test_bad').info("no placeholders", 1)
        assert "no placeholders (1,)" in capsys.readouterr().out

    def test_unknown_level_name_is_info(self):
        configure_logging(level='LOUD')
        assert get_logger('test_level').level == LogLevel.INFO

    def test_disable_logging(self, capsys):
        configure_logging(level='DEBUG', modules={'test_dis': 'DEBUG'})
        disable_logging()
        get_logger('test_dis').critical("hidden")
        assert capsys.readouterr().out == ""


class TestEnvConfig:
    """Test BREAKOUT_LOG_* environment variables."""

    def test_env_levels(self, monkeypatch):
        monkeypatch.setenv('BREAKOUT_LOG_LEVEL', 'ERROR')
        monkeypatch.setenv('BREAKOUT_LOG_SIMULATION', 'TRACE')
        breakout_logging._load_env_config()

        assert get_logger('anything_else').level == LogLevel.ERROR
        assert get_logger('simulation').level == LogLevel.TRACE
