"""Color palette for MathMaster 7 supporting light and dark themes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, auto

from mathmaster.constants.quiz_constants import AVATAR_COLORS


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


# Hex values of the "-400" shades behind each avatar tag.
AVATAR_HEX: dict[str, str] = {
    "bg-red-400": "#f87171",
    "bg-orange-400": "#fb923c",
    "bg-amber-400": "#fbbf24",
    "bg-yellow-400": "#facc15",
    "bg-lime-400": "#a3e635",
    "bg-green-400": "#4ade80",
    "bg-emerald-400": "#34d399",
    "bg-teal-400": "#2dd4bf",
    "bg-cyan-400": "#22d3ee",
    "bg-sky-400": "#38bdf8",
    "bg-blue-400": "#60a5fa",
    "bg-indigo-400": "#818cf8",
    "bg-violet-400": "#a78bfa",
    "bg-purple-400": "#c084fc",
    "bg-fuchsia-400": "#e879f9",
    "bg-pink-400": "#f472b6",
    "bg-rose-400": "#fb7185",
}
_FALLBACK_AVATAR_HEX = "#94a3b8"


def avatar_hex(avatar_seed: str) -> str:
    """Hex color for an avatar tag; unknown tags from imported files get slate gray."""
    return AVATAR_HEX.get(avatar_seed, _FALLBACK_AVATAR_HEX)


def pie_color(index: int) -> str:
    """Color for the ``index``-th fraction pie, cycling through the avatar palette."""
    return avatar_hex(AVATAR_COLORS[index % len(AVATAR_COLORS)])


class ColorPalette:
    """Centralized color definitions for the application."""

    TEXT_PRIMARY = ThemeColors(
        light="#1F2937",      # Slate 800
        dark="#F5F5F5"        # WhiteSmoke
    )

    TEXT_SECONDARY = ThemeColors(
        light="#6B7280",      # Gray 500
        dark="#AAAAAA"        # Light Gray
    )

    BACKGROUND_PRIMARY = ThemeColors(
        light="#F8FAFC",      # Slate 50
        dark="#1E1E1E"        # Dark Gray
    )

    BACKGROUND_CARD = ThemeColors(
        light="#FFFFFF",      # White
        dark="#2D2D2D"        # Slightly lighter dark
    )

    NAVBAR = ThemeColors(
        light="#4F46E5",      # Indigo 600
        dark="#3730A3"        # Indigo 800
    )

    ACCENT_PRIMARY = ThemeColors(
        light="#4F46E5",      # Indigo
        dark="#818CF8"        # Lighter Indigo
    )

    SELECTION = ThemeColors(
        light="#F97316",      # Orange 500
        dark="#FB923C"        # Orange 400
    )

    SUCCESS = ThemeColors(
        light="#22C55E",      # Green 500
        dark="#4ADE80"        # Green 400
    )

    ERROR = ThemeColors(
        light="#EF4444",      # Red 500
        dark="#F87171"        # Red 400
    )

    BORDER_PRIMARY = ThemeColors(
        light="#E5E7EB",      # Gray 200
        dark="#555555"        # Dark Gray
    )

    BUTTON_SECONDARY_BG = ThemeColors(
        light="#FFFFFF",      # White
        dark="#3A3A3A"        # Dark Gray
    )

    BUTTON_HOVER_BG = ThemeColors(
        light="#EEF2FF",      # Indigo 50
        dark="#505050"        # Medium Gray
    )
