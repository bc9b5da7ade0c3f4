"""Axis-aligned rectangle shared by every entity."""

from dataclasses import dataclass
from typing import Tuple


@dataclass
class Box:
    """Rectangle given by its top-left corner and size."""

    x: float
    y: float
    width: float
    height: float

    @property
    def left(self) -> float:
        return self.x

    @property
    def right(self) -> float:
        return self.x + self.width

    @property
    def top(self) -> float:
        return self.y

    @property
    def bottom(self) -> float:
        return self.y + self.height

    @property
    def rect(self) -> Tuple[float, float, float, float]:
        """Get bounding rectangle (x, y, width, height)."""
        return (self.x, self.y, self.width, self.height)
