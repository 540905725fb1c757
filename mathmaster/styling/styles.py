"""Centralized styles and font definitions for the application."""

from .color_palette import ColorPalette, Theme, avatar_hex


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
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                font-family: 'Segoe UI', 'Roboto', sans-serif;
                font-size: 14px;
            }}
            QPushButton {{
                background-color: {ColorPalette.BUTTON_SECONDARY_BG.get(theme)};
                color: {ColorPalette.TEXT_PRIMARY.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 6px 12px;
                font-weight: bold;
            }}
            QPushButton:hover {{
                background-color: {ColorPalette.BUTTON_HOVER_BG.get(theme)};
            }}
            QPushButton:checked {{
                background-color: {ColorPalette.SELECTION.get(theme)};
                color: #FFFFFF;
            }}
            QLineEdit {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 2px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 8px;
                padding: 4px 8px;
            }}
            QLineEdit:focus {{
                border-color: {ColorPalette.ACCENT_PRIMARY.get(theme)};
            }}
            QListWidget, QGroupBox {{
                background-color: {ColorPalette.BACKGROUND_CARD.get(theme)};
                border: 1px solid {ColorPalette.BORDER_PRIMARY.get(theme)};
                border-radius: 12px;
            }}
            QGroupBox {{
                margin-top: 8px;
                padding-top: 12px;
                font-weight: bold;
            }}
            QGroupBox::title {{
                subcontrol-origin: margin;
                left: 10px;
                padding: 0 3px 0 3px;
            }}
        """

    @staticmethod
    def get_navbar_style(theme: Theme = Theme.LIGHT) -> str:
        return (
            f"background-color: {ColorPalette.NAVBAR.get(theme)}; color: #FFFFFF; "
            "font-size: 20pt; font-weight: 900; padding: 8px;"
        )

    @staticmethod
    def get_avatar_style(avatar_seed: str, diameter: int = 40) -> str:
        return (
            f"background-color: {avatar_hex(avatar_seed)}; color: #FFFFFF; "
            f"border-radius: {diameter // 2}px; font-weight: bold; "
            f"min-width: {diameter}px; max-width: {diameter}px; "
            f"min-height: {diameter}px; max-height: {diameter}px;"
        )

    @staticmethod
    def get_feedback_style(correct: bool, theme: Theme = Theme.LIGHT) -> str:
        color = ColorPalette.SUCCESS.get(theme) if correct else ColorPalette.ERROR.get(theme)
        return (
            f"background-color: {color}; color: #FFFFFF; font-size: 16pt; "
            "font-weight: 900; padding: 12px; border-radius: 8px;"
        )

    @staticmethod
    def get_option_style(state: str, theme: Theme = Theme.LIGHT) -> str:
        """Answer button look: 'idle', 'correct', 'revealed' or 'dimmed'."""
        if state == "correct":
            return (
                f"background-color: {ColorPalette.SUCCESS.get(theme)}; color: #FFFFFF; "
                "font-size: 18pt; padding: 16px;"
            )
        if state == "revealed":
            return (
                f"background-color: #DCFCE7; color: #166534; "
                f"border: 2px solid {ColorPalette.SUCCESS.get(theme)}; font-size: 18pt; padding: 16px;"
            )
        if state == "dimmed":
            return f"color: {ColorPalette.TEXT_SECONDARY.get(theme)}; font-size: 18pt; padding: 16px;"
        return "font-size: 18pt; padding: 16px;"

    @staticmethod
    def get_noise_warning_style() -> str:
        return "background-color: rgba(0, 0, 0, 200);"

    @staticmethod
    def get_large_label_style() -> str:
        return "font-size: 16pt; font-weight: bold;"
