"""Styling module for the DevOps Interview Prep application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
