"""Collision detection for Breakout.

Pure functions over axis-aligned rectangles. Anything with left, right,
top and bottom edges works; in practice these are entity Boxes.

The four directional tests are not mutually exclusive. Which side was
struck is decided by checking them in a fixed order: top, bottom, left,
right. A corner hit therefore always resolves as a vertical bounce.
"""

from typing import Literal, Optional, TYPE_CHECKING

if TYPE_CHECKING:
    from ..entities.ball import Ball
    from ..entities.box import Box

Direction = Literal["top", "bottom", "left", "right"]


def overlaps(a: 'Box', b: 'Box') -> bool:
    """Check strict overlap of two rectangles.

    Rectangles that only touch along an edge do not overlap.
    """
    return (
        a.left < b.right
        and a.right > b.left
        and a.top < b.bottom
        and a.bottom > b.top
    )


def hit_from_top(ball: 'Box', rect: 'Box') -> bool:
    """Ball overlaps rect with its bottom edge at or below rect's top."""
    return overlaps(ball, rect) and ball.bottom >= rect.top


def hit_from_bottom(ball: 'Box', rect: 'Box') -> bool:
    """Ball overlaps rect with rect's bottom edge at or below ball's top."""
    return overlaps(ball, rect) and rect.bottom >= ball.top


def hit_from_left(ball: 'Box', rect: 'Box') -> bool:
    """Ball overlaps rect with its right edge at or past rect's left."""
    return overlaps(ball, rect) and ball.right >= rect.left


def hit_from_right(ball: 'Box', rect: 'Box') -> bool:
    """Ball overlaps rect with rect's right edge at or past ball's left."""
    return overlaps(ball, rect) and rect.right >= ball.left


def vertical_hit(ball: 'Box', rect: 'Box') -> bool:
    """Check if the ball struck rect's top or bottom face."""
    return hit_from_top(ball, rect) or hit_from_bottom(ball, rect)


def horizontal_hit(ball: 'Box', rect: 'Box') -> bool:
    """Check if the ball struck rect's left or right face."""
    return hit_from_left(ball, rect) or hit_from_right(ball, rect)


def get_collision_direction(ball: 'Box', rect: 'Box') -> Optional[Direction]:
    """Determine which face of rect the ball struck.

    Args:
        ball: Ball (or any rectangle) to test
        rect: Rectangle that may have been hit

    Returns:
        "top", "bottom", "left" or "right" by priority, or None if the
        rectangles do not overlap
    """
    if hit_from_top(ball, rect):
        return "top"
    if hit_from_bottom(ball, rect):
        return "bottom"
    if hit_from_left(ball, rect):
        return "left"
    if hit_from_right(ball, rect):
        return "right"
    return None


def resolve_collision(ball: 'Ball', direction: Direction) -> None:
    """Bounce the ball off the struck face.

    Args:
        ball: Ball that hit the rectangle
        direction: Face that was struck
    """
    if direction in ("top", "bottom"):
        ball.bounce_vertical()
    else:
        ball.bounce_horizontal()


def check_wall_collision(ball: 'Ball', field_width: float, field_height: float) -> bool:
    """Bounce the ball off the field edges.

    Each axis flips at most once per call. The bottom edge bounces like
    the others; losing the ball is decided by the caller.

    Args:
        ball: Ball to check
        field_width: Field width in pixels
        field_height: Field height in pixels

    Returns:
        True if the ball touched the bottom edge
    """
    if ball.top <= 0 or ball.bottom >= field_height:
        ball.bounce_vertical()
    if ball.left <= 0 or ball.right >= field_width:
        ball.bounce_horizontal()

    return ball.bottom >= field_height
