"""Breakout game entities."""

from .box import Box
from .paddle import Paddle
from .ball import Ball
from .block import Block, BlockGrid

__all__ = [
    'Box',
    'Paddle',
    'Ball',
    'Block', 'BlockGrid',
]
