"""Qt UI components for the classroom console."""

from .dialog_helpers import (
    confirm_replace_roster,
    show_error,
    show_info,
    show_warning,
)
from .main_window import MainWindow, ViewMode
from .qt_scheduler import QtTaskScheduler
from .question_renderer import render_loading_html, render_question_html

__all__ = [
    "MainWindow",
    "QtTaskScheduler",
    "ViewMode",
    "confirm_replace_roster",
    "show_error",
    "show_info",
    "show_warning",
    "render_loading_html",
    "render_question_html",
]
