"""
Base Input Source - Abstract interface for input backends.
"""
from abc import ABC, abstractmethod
from typing import List

from breakout.input.input_event import InputEvent


class InputSource(ABC):
    """Abstract base class for input sources.

    All input backends must implement this interface.
    """

    @abstractmethod
    def poll_events(self) -> List[InputEvent]:
        """Poll for new input events.

        Returns:
            List of KeyEvent / PointerEvent objects since last poll.
        """
        pass

    @abstractmethod
    def update(self, dt: float) -> None:
        """Update the input source, collecting events.

        Args:
            dt: Delta time in seconds since last update.
        """
        pass

    @property
    def quit_requested(self) -> bool:
        """Whether the user asked to close the game."""
        return False
