"""
Pygame Input Source - Keyboard and mouse-motion input.

Arrow keys steer, space restarts after a game over, mouse motion places
the paddle. Escape and window close request quit.
"""
import time
from typing import Dict, List, Optional

import pygame

from breakout.input.input_event import InputEvent, KeyEvent, LogicalKey, PointerEvent
from breakout.input.sources.base import InputSource
from breakout.logging import get_logger
from breakout.models import Point2D

log = get_logger('input')

DEFAULT_KEY_MAP: Dict[int, LogicalKey] = {
    pygame.K_LEFT: LogicalKey.LEFT,
    pygame.K_RIGHT: LogicalKey.RIGHT,
    pygame.K_SPACE: LogicalKey.RESTART,
}


def translate_event(
    event: pygame.event.Event,
    key_map: Dict[int, LogicalKey] = DEFAULT_KEY_MAP,
    timestamp: float = 0.0,
) -> Optional[InputEvent]:
    """Convert a pygame event into a game input event.

    Args:
        event: Raw pygame event
        key_map: Mapping of pygame key codes to logical keys
        timestamp: Monotonic time to stamp the event with

    Returns:
        KeyEvent or PointerEvent, or None for events the game ignores
    """
    if event.type in (pygame.KEYDOWN, pygame.KEYUP):
        key = key_map.get(event.key)
        if key is None:
            log.trace("Ignoring key %s", event.key)
            return None
        return KeyEvent(key=key, pressed=event.type == pygame.KEYDOWN, timestamp=timestamp)

    if event.type == pygame.MOUSEMOTION:
        pos_x, pos_y = event.pos
        return PointerEvent(
            position=Point2D(x=float(pos_x), y=float(pos_y)),
            timestamp=timestamp,
        )

    return None


class PygameInputSource(InputSource):
    """Input source that drains the pygame event queue."""

    def __init__(self, key_map: Optional[Dict[int, LogicalKey]] = None):
        """Initialize the pygame input source.

        Args:
            key_map: Override of the default key bindings
        """
        self._key_map = key_map if key_map is not None else DEFAULT_KEY_MAP
        self._event_queue: List[InputEvent] = []
        self._quit_requested = False

    @property
    def quit_requested(self) -> bool:
        return self._quit_requested

    def poll_events(self) -> List[InputEvent]:
        """Get new input events since last poll."""
        events = self._event_queue.copy()
        self._event_queue.clear()
        return events

    def update(self, dt: float) -> None:
        """Process pending pygame events."""
        for event in pygame.event.get():
            self.process(event)

    def process(self, event: pygame.event.Event) -> None:
        """Handle a single pygame event."""
        if event.type == pygame.QUIT:
            self._quit_requested = True
            return
        if event.type == pygame.KEYDOWN and event.key == pygame.K_ESCAPE:
            self._quit_requested = True
            return

        input_event = translate_event(event, self._key_map, time.monotonic())
        if input_event is not None:
            self._event_queue.append(input_event)
