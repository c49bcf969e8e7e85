"""Color palette for the colour match task screens."""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class ScreenColors:
    """Foreground/background pair for one kind of surface."""
    background: str
    text: str


class ColorPalette:
    """Centralized color definitions for the application."""

    # Screens
    START_SCREEN = ScreenColors(background="#0e0e0e", text="#f0f0f0")
    SLIDE_SCREEN = ScreenColors(background="#121212", text="#e6e6e6")
    END_SCREEN = ScreenColors(background="#0e0e0e", text="#f0f0f0")

    # Slide card around the subject label
    CARD_BACKGROUND = "#1c1c1c"
    CARD_BORDER = "#505050"

    TEXT_SECONDARY = "#c8c8c8"
    TEXT_MUTED = "#b4b4b4"

    # Colour tiles
    TILE_BORDER = "#dcdcdc"
    TILE_SELECTED_RING = "#ffffff"
    TILE_USED_BACKGROUND = "#323232"
    TILE_USED_BORDER = "#787878"
    TILE_USED_TEXT = "#8c8c8c"

    # Transition feedback glyphs
    FEEDBACK_CROSS = "#dc3c3c"
    FEEDBACK_TICK = "#50d278"

    # Buttons
    BUTTON_BACKGROUND = "#2d2d2d"
    BUTTON_HOVER_BACKGROUND = "#3a3a3a"
    BUTTON_BORDER = "#555555"
    BUTTON_DISABLED_TEXT = "#6a6a6a"
