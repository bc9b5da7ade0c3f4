"""Breakout - paddle-and-ball arcade game built on pygame."""

__version__ = "1.0.0"
