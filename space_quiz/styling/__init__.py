"""Styling module for the Space Quiz application."""

from .color_palette import ColorPalette, Theme

__all__ = ["ColorPalette", "Theme"]
