"""Centralized styles for the task screens."""

from .color_palette import ColorPalette, ScreenColors


class Styles:
    """Helper class to generate Qt stylesheets for the task widgets."""

    @staticmethod
    def get_main_window_style() -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.SLIDE_SCREEN.background};
                color: {ColorPalette.SLIDE_SCREEN.text};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_BACKGROUND};
                color: {ColorPalette.SLIDE_SCREEN.text};
                border: 1px solid {ColorPalette.BUTTON_BORDER};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BACKGROUND};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BUTTON_DISABLED_TEXT};
            }}
            QProgressBar {{
                border: 1px solid {ColorPalette.CARD_BORDER};
                border-radius: 3px;
                background-color: {ColorPalette.CARD_BACKGROUND};
            }}
            QProgressBar::chunk {{
                background-color: {ColorPalette.TEXT_SECONDARY};
            }}
        """

    @staticmethod
    def get_screen_style(object_name: str, colors: ScreenColors) -> str:
        return (
            f"QWidget#{object_name} {{ background-color: {colors.background};"
            f" color: {colors.text}; }}"
        )

    @staticmethod
    def get_card_style() -> str:
        return (
            f"background-color: {ColorPalette.CARD_BACKGROUND};"
            f" border: 1px solid {ColorPalette.CARD_BORDER}; border-radius: 10px;"
        )

    @staticmethod
    def get_title_style(size_pt: int = 32) -> str:
        return f"font-size: {size_pt}pt; font-weight: bold; background: transparent; border: none;"

    @staticmethod
    def get_caption_style(color: str = ColorPalette.TEXT_SECONDARY, size_pt: int = 12) -> str:
        return f"font-size: {size_pt}pt; color: {color}; background: transparent; border: none;"

    @staticmethod
    def get_tile_style(colour: str, *, selected: bool, used: bool) -> str:
        if used:
            return (
                f"QPushButton {{ background-color: {ColorPalette.TILE_USED_BACKGROUND};"
                f" border: 2px solid {ColorPalette.TILE_USED_BORDER}; border-radius: 6px; }}"
            )
        border = (
            f"3px solid {ColorPalette.TILE_SELECTED_RING}"
            if selected
            else f"1px solid {ColorPalette.TILE_BORDER}"
        )
        return (
            f"QPushButton {{ background-color: {colour}; border: {border}; border-radius: 6px; }}"
            f" QPushButton:hover {{ background-color: {colour}; }}"
        )

    @staticmethod
    def get_feedback_style(color: str) -> str:
        return f"font-size: 14pt; color: {color}; background: transparent; border: none;"
