"""Helper functions for common dialog patterns in the classroom UI."""

from __future__ import annotations

from PySide6.QtWidgets import QMessageBox, QWidget


def confirm_replace_roster(parent: QWidget, student_count: int) -> bool:
    """Ask before a loaded session replaces a non-empty roster.

    Args:
        parent: Parent widget for the dialog
        student_count: Number of students currently registered

    Returns:
        True if user confirmed, False otherwise
    """
    if student_count == 0:
        return True
    reply = QMessageBox.question(
        parent,
        "Cargar sesión",
        f"La sesión cargada reemplazará a los {student_count} estudiantes actuales. ¿Continuar?",
        QMessageBox.Yes | QMessageBox.No,
        QMessageBox.No
    )
    return reply == QMessageBox.Yes


def show_error(parent: QWidget, title: str, message: str) -> None:
    """Show error dialog."""
    QMessageBox.critical(parent, title, message)


def show_info(parent: QWidget, title: str, message: str) -> None:
    """Show information dialog."""
    QMessageBox.information(parent, title, message)


def show_warning(parent: QWidget, title: str, message: str) -> None:
    """Show warning dialog.

    Args:
        parent: Parent widget for the dialog
        title: Dialog title
        message: Warning message
    """
    QMessageBox.warning(parent, title, message)
