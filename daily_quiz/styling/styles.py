"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme

class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT, font_size: int = 14) -> str:
        return f"""
            QMainWindow, QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: {font_size}px;
            }}
            QPushButton {{
                background-color: {ColorPalette.CARD_BACKGROUND.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 8px 14px;
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.PRIMARY.get(theme)};
                color: #FFFFFF;
                border: 1px solid {ColorPalette.PRIMARY_DARK.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.DISABLED.get(theme)};
            }}
            QTabBar::tab:selected {{
                color: {ColorPalette.PRIMARY_DARK.get(theme)};
                font-weight: bold;
            }}
        """

    @staticmethod
    def get_header_style() -> str:
        return "font-size: 18pt; font-weight: bold;"

    @staticmethod
    def get_category_button_style(color: str) -> str:
        return (
            f"QPushButton {{ background-color: {color}; color: #FFFFFF; font-weight: bold; "
            "border: none; border-radius: 10px; padding: 18px; }}"
        )

    @staticmethod
    def get_answer_style(state: str, font_size: int = 18, theme: Theme = Theme.LIGHT) -> str:
        """Stylesheet for an answer button in one of: idle, correct, incorrect, eliminated."""
        backgrounds = {
            "idle": ColorPalette.CARD_BACKGROUND.get(theme),
            "correct": ColorPalette.PRIMARY.get(theme),
            "incorrect": ColorPalette.DANGER.get(theme),
            "eliminated": ColorPalette.BORDER_PRIMARY.get(theme),
        }
        text_color = "#FFFFFF" if state in ("correct", "incorrect") else ColorPalette.TEXT_PRIMARY.get(theme)
        decoration = "line-through" if state == "eliminated" else "none"
        return (
            f"QPushButton {{ background-color: {backgrounds[state]}; color: {text_color}; "
            f"text-decoration: {decoration}; text-align: left; padding: 14px; font-size: {font_size}pt; }}"
        )

    @staticmethod
    def get_hint_banner_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.WARNING.get(theme)}; color: #FFFFFF; "
            "border-radius: 10px; padding: 12px; font-size: 16pt; font-weight: bold;"
        )

    @staticmethod
    def get_offline_banner_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.DANGER.get(theme)}; color: #FFFFFF; "
            "border-radius: 8px; padding: 8px; font-weight: bold;"
        )
