"""Styling module for MathMaster 7."""

from .color_palette import ColorPalette, Theme, avatar_hex, pie_color

__all__ = ["ColorPalette", "Theme", "avatar_hex", "pie_color"]
