"""
Input State - Current directional intent and last pointer sample.

Updated by the event-dispatch layer and read by the simulation step.
The fields are independent, so a step may see a flag that changes a
moment later.
"""
from dataclasses import dataclass
from typing import Optional

from breakout.models import ORIGIN, Point2D
from breakout.input.input_event import KeyEvent, LogicalKey, PointerEvent


@dataclass
class InputState:
    """Held movement keys and the latest pointer X.

    Attributes:
        moving_left: Left key is held
        moving_right: Right key is held
        pointer_x: Last pointer X relative to the play surface, None until
            the pointer first moves
    """
    moving_left: bool = False
    moving_right: bool = False
    pointer_x: Optional[float] = None

    def handle_key(self, event: KeyEvent) -> None:
        """Apply a key edge to the movement flags.

        RESTART does not change the movement flags; the game mode decides
        whether it applies.
        """
        if event.key == LogicalKey.LEFT:
            self.moving_left = event.pressed
        elif event.key == LogicalKey.RIGHT:
            self.moving_right = event.pressed

    def handle_pointer(self, event: PointerEvent, surface_origin: Point2D = ORIGIN) -> None:
        """Record a pointer move relative to the play surface.

        Args:
            event: Pointer-move event in window coordinates
            surface_origin: Window position of the play surface's top-left
        """
        self.pointer_x = event.position.x - surface_origin.x
