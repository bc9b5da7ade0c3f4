"""Breakout physics and collision detection."""

from .collision import (
    overlaps,
    hit_from_top,
    hit_from_bottom,
    hit_from_left,
    hit_from_right,
    vertical_hit,
    horizontal_hit,
    get_collision_direction,
    resolve_collision,
    check_wall_collision,
)

__all__ = [
    'overlaps',
    'hit_from_top',
    'hit_from_bottom',
    'hit_from_left',
    'hit_from_right',
    'vertical_hit',
    'horizontal_hit',
    'get_collision_direction',
    'resolve_collision',
    'check_wall_collision',
]
