"""Color palette for Daily Quiz supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto


class Theme(Enum):
    """Application theme options."""
    LIGHT = auto()
    DARK = auto()


@dataclass(frozen=True)
class ThemeColors:
    """Color definitions for a specific theme."""
    light: str
    dark: str

    def get(self, theme: Theme) -> str:
        """Get color value for the specified theme."""
        return self.light if theme == Theme.LIGHT else self.dark


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#333333",      # Charcoal
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#888888",      # Gray
        dark="#AAAAAA"
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#F7F7F7",      # Off-white
        dark="#1E1E1E"
    )

    CARD_BACKGROUND = ThemeColors(
        light="#FFFFFF",
        dark="#2D2D2D"
    )

    BORDER_PRIMARY = ThemeColors(
        light="#E0E0E0",
        dark="#555555"
    )

    # Turquoise brand color doubles as the success color.
    PRIMARY = ThemeColors(
        light="#4ECDC4",
        dark="#4ECDC4"
    )

    PRIMARY_DARK = ThemeColors(
        light="#3AB5AC",
        dark="#3AB5AC"
    )

    DANGER = ThemeColors(
        light="#FF6B6B",
        dark="#FF6B6B"
    )

    WARNING = ThemeColors(
        light="#FFA07A",      # Light salmon
        dark="#FFA07A"
    )

    DISABLED = ThemeColors(
        light="#CCCCCC",
        dark="#555555"
    )
