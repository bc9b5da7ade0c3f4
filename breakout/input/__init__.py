"""
Input abstraction layer for Breakout.

Sources turn backend events into KeyEvent / PointerEvent records; the
game folds them into an InputState that the simulation reads.
"""

from breakout.input.input_event import InputEvent, KeyEvent, LogicalKey, PointerEvent
from breakout.input.input_state import InputState

__all__ = [
    'InputEvent',
    'KeyEvent',
    'LogicalKey',
    'PointerEvent',
    'InputState',
]
