"""Styling module for the colour match task."""

from .color_palette import ColorPalette, ScreenColors
from .styles import Styles

__all__ = ["ColorPalette", "ScreenColors", "Styles"]
