"""Color palette supporting light and dark themes plus the badge color scale."""

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

    # Text colors
    TEXT_PRIMARY = ThemeColors(
        light="#111827",      # Gray 900
        dark="#F1F5F9"        # Slate 100
    )

    TEXT_SECONDARY = ThemeColors(
        light="#4B5563",      # Gray 600
        dark="#93C5FD"        # Blue 300
    )

    # Background colors
    BACKGROUND_PRIMARY = ThemeColors(
        light="#FFFFFF",
        dark="#0F172A"        # Slate 900
    )

    BACKGROUND_SECONDARY = ThemeColors(
        light="#F3F4F6",      # Gray 100
        dark="#1E293B"        # Slate 800
    )

    # Accent colors
    ACCENT_PRIMARY = ThemeColors(
        light="#2563EB",      # Blue 600
        dark="#60A5FA"        # Blue 400
    )

    # Status colors
    SUCCESS = ThemeColors(
        light="#15803D",      # Green 700
        dark="#4ADE80"        # Green 400
    )

    WARNING = ThemeColors(
        light="#B45309",      # Amber 700
        dark="#FBBF24"        # Amber 400
    )

    ERROR = ThemeColors(
        light="#DC2626",      # Red 600
        dark="#F87171"        # Red 400
    )

    # Border colors
    BORDER_PRIMARY = ThemeColors(
        light="#D1D5DB",      # Gray 300
        dark="#334155"        # Slate 700
    )

    # Button colors
    BUTTON_PRIMARY_BG = ThemeColors(
        light="#2563EB",
        dark="#3B82F6"
    )

    BUTTON_PRIMARY_TEXT = ThemeColors(
        light="#FFFFFF",
        dark="#FFFFFF"
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#F3F4F6",
        dark="#1E293B"
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#E5E7EB",      # Gray 200
        dark="#334155"
    )


# Shades used by the backend's badge classes ("bg-blue-100 text-blue-800").
# Only the 100 (background) and 800 (text) steps are served today; 600 is
# used for phase accents.
TAILWIND_SHADES: dict[str, dict[int, str]] = {
    "gray": {100: "#F3F4F6", 600: "#4B5563", 800: "#1F2937"},
    "red": {100: "#FEE2E2", 600: "#DC2626", 800: "#991B1B"},
    "orange": {100: "#FFEDD5", 600: "#EA580C", 800: "#9A3412"},
    "yellow": {100: "#FEF9C3", 600: "#CA8A04", 800: "#854D0E"},
    "lime": {100: "#ECFCCB", 600: "#65A30D", 800: "#3F6212"},
    "green": {100: "#DCFCE7", 600: "#16A34A", 800: "#166534"},
    "teal": {100: "#CCFBF1", 600: "#0D9488", 800: "#115E59"},
    "cyan": {100: "#CFFAFE", 600: "#0891B2", 800: "#155E75"},
    "blue": {100: "#DBEAFE", 600: "#2563EB", 800: "#1E40AF"},
    "indigo": {100: "#E0E7FF", 600: "#4F46E5", 800: "#3730A3"},
    "purple": {100: "#F3E8FF", 600: "#9333EA", 800: "#6B21A8"},
    "pink": {100: "#FCE7F3", 600: "#DB2777", 800: "#9D174D"},
}
