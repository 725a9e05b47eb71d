"""Centralized stylesheets and badge colors for the application."""

from __future__ import annotations

from dataclasses import dataclass

from .color_palette import TAILWIND_SHADES, ColorPalette, Theme

_DEFAULT_FAMILY = "gray"


@dataclass(frozen=True, slots=True)
class BadgeColors:
    background: str
    foreground: str


def _lookup(family: str, shade: int) -> str | None:
    return TAILWIND_SHADES.get(family, {}).get(shade)


def parse_badge_classes(classes: str) -> BadgeColors:
    """Translate a ``"bg-<color>-<shade> text-<color>-<shade>"`` string into hex colors.

    Unknown families or shades fall back to the gray badge, so a server that
    starts sending new class names still renders something readable.
    """
    background = _lookup(_DEFAULT_FAMILY, 100)
    foreground = _lookup(_DEFAULT_FAMILY, 800)
    for token in (classes or "").split():
        prefix, _, rest = token.partition("-")
        family, _, shade_text = rest.rpartition("-")
        if prefix not in ("bg", "text") or not shade_text.isdigit():
            continue
        color = _lookup(family, int(shade_text))
        if color is None:
            continue
        if prefix == "bg":
            background = color
        else:
            foreground = color
    return BadgeColors(background=background, foreground=foreground)


def phase_accent(color_name: str) -> str:
    """Return the accent hex for an interview phase color name such as ``"green"``."""
    return _lookup(color_name, 600) or _lookup("blue", 600)


class Styles:
    """Helper class to generate Qt stylesheets based on the current theme."""

    @staticmethod
    def get_main_window_style(theme: Theme = Theme.LIGHT) -> str:
        return f"""
            QMainWindow {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
            }}
            QWidget {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 6px 12px;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked, QPushButton[primary="true"] {{
                background-color: {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
                color: {ColorPalette.BUTTON_PRIMARY_TEXT.get(theme)};
                border: 1px solid {ColorPalette.BUTTON_PRIMARY_BG.get(theme)};
            }}
            QPushButton:disabled {{
                color: {ColorPalette.BORDER_PRIMARY.get(theme)};
            }}
            QLineEdit, QPlainTextEdit, QSpinBox, QComboBox, QDateEdit {{
                background-color: {ColorPalette.BACKGROUND_PRIMARY.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
                padding: 4px;
            }}
            QListWidget, QTableWidget, QTextBrowser {{
                background-color: {ColorPalette.BACKGROUND_SECONDARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 4px;
            }}
            QGroupBox {{
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 6px;
                margin-top: 6px;
                padding-top: 10px;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"

    @staticmethod
    def get_secondary_label_style(theme: Theme = Theme.LIGHT) -> str:
        return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)};"

    @staticmethod
    def get_badge_style(classes: str) -> str:
        colors = parse_badge_classes(classes)
        return (
            f"background-color: {colors.background}; color: {colors.foreground}; "
            "border-radius: 9px; padding: 2px 8px; font-size: 12px; font-weight: 600;"
        )

    @staticmethod
    def get_timer_style(low_on_time: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.ERROR.get(theme) if low_on_time else ColorPalette.TEXT_PRIMARY.get(theme)
        return f"font-family: monospace; font-size: 18pt; font-weight: bold; color: {color};"

    @staticmethod
    def get_result_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if correct else ColorPalette.ERROR.get(theme)
        return f"color: {color}; font-weight: bold;"
