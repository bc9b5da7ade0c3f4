"""Breakout skins for rendering."""

from .base import BreakoutSkin
from .classic import ClassicSkin

SKINS = {
    ClassicSkin.NAME: ClassicSkin,
}

__all__ = [
    'BreakoutSkin',
    'ClassicSkin',
    'SKINS',
]
