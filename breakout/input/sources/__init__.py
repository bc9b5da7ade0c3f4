"""Breakout input sources."""

from breakout.input.sources.base import InputSource
from breakout.input.sources.pygame_source import PygameInputSource

__all__ = ['InputSource', 'PygameInputSource']
