"""
Shared primitive data types.

Pydantic models for values that cross the input boundary, where
validation matters more than speed.
"""

from pydantic import BaseModel, ConfigDict


class Point2D(BaseModel):
    """Immutable 2D point for positions and offsets.

    Attributes:
        x: X coordinate (horizontal)
        y: Y coordinate (vertical)

    Examples:
        >>> pos = Point2D(x=100.0, y=200.0)
        >>> origin = Point2D(x=0.0, y=0.0)
    """
    x: float
    y: float

    model_config = ConfigDict(frozen=True)

    def __str__(self) -> str:
        """String representation for debugging."""
        return f"Point2D(x={self.x:.2f}, y={self.y:.2f})"


ORIGIN = Point2D(x=0.0, y=0.0)
