"""
Input Events - Discrete key edges and pointer moves.

Input sources convert raw backend events (pygame) into these records so
the game never depends on a particular event system.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Union

from breakout.models import Point2D


class LogicalKey(Enum):
    """Keys the game understands."""
    LEFT = "left"
    RIGHT = "right"
    RESTART = "restart"


@dataclass(frozen=True)
class KeyEvent:
    """Immutable key-down or key-up edge for a logical key.

    Attributes:
        key: Logical key that changed
        pressed: True for key-down, False for key-up
        timestamp: Time of the event (seconds, from monotonic clock)
    """
    key: LogicalKey
    pressed: bool
    timestamp: float = 0.0

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        edge = "down" if self.pressed else "up"
        return f"KeyEvent({self.key.value} {edge}, t={self.timestamp:.3f})"


@dataclass(frozen=True)
class PointerEvent:
    """Immutable pointer-move sample.

    Attributes:
        position: Pointer position in window coordinates
        timestamp: Time of the event (seconds, from monotonic clock)
    """
    position: Point2D
    timestamp: float = 0.0

    def __post_init__(self):
        """Validate timestamp is non-negative."""
        if self.timestamp < 0:
            raise ValueError(f'Timestamp must be non-negative, got {self.timestamp}')

    def __str__(self) -> str:
        return (f"PointerEvent(pos=({self.position.x:.2f}, {self.position.y:.2f}), "
                f"t={self.timestamp:.3f})")


InputEvent = Union[KeyEvent, PointerEvent]
