"""Qt main window switching between the dashboard and the quiz view."""

from __future__ import annotations

from collections.abc import Callable
from enum import Enum, auto
import logging
from pathlib import Path

from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QFileDialog,
    QHBoxLayout,
    QLabel,
    QMainWindow,
    QPushButton,
    QStackedWidget,
    QVBoxLayout,
    QWidget,
)

from mathmaster.constants.about import APP_ABOUT_TEXT, APP_LICENSE, APP_NAME, APP_VERSION
from mathmaster.constants.noise_constants import DEFAULT_SENSITIVITY
from mathmaster.constants.ui_constants import (
    NAV_BUTTON_ABOUT,
    NAV_BUTTON_EXIT_QUIZ,
    NAV_BUTTON_LOAD,
    NAV_BUTTON_SAVE,
    NO_STUDENT_FOCUSED_MESSAGE,
    NOISE_WARNING_TEXT,
    NOISE_WARNING_TITLE,
    SESSION_BAD_FORMAT_MESSAGE,
    SESSION_DIALOG_LOAD_TITLE,
    SESSION_DIALOG_SAVE_TITLE,
    SESSION_FILE_FILTER,
    SESSION_LOADED_TEMPLATE,
    SESSION_UNREADABLE_MESSAGE,
    WINDOW_TITLE,
)
from mathmaster.core.classroom_manager import ClassroomManager
from mathmaster.core.models import DiagnosticCategory
from mathmaster.core.services.noise_sampler import LevelSource
from mathmaster.core.session_store import SessionFormatError, default_session_filename
from mathmaster.styling.styles import Styles
from mathmaster.ui.components.dashboard_panel import DashboardPanel
from mathmaster.ui.components.noise_monitor import NoiseMonitor
from mathmaster.ui.components.quiz_panel import QuizPanel
from mathmaster.ui.dialog_helpers import (
    confirm_replace_roster,
    show_error,
    show_info,
    show_warning,
)

logger = logging.getLogger(__name__)


class ViewMode(Enum):
    """Which page of the stacked layout is visible."""

    DASHBOARD = auto()
    QUIZ = auto()


class NoiseOverlay(QWidget):
    """Full-window warning raised while the classroom is too loud."""

    def __init__(self, parent: QWidget) -> None:
        super().__init__(parent)
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(Styles.get_noise_warning_style())
        self.setAttribute(Qt.WA_TransparentForMouseEvents, True)

        layout = QVBoxLayout()
        self.setLayout(layout)
        layout.addStretch()
        title = QLabel(NOISE_WARNING_TITLE, self)
        title.setAlignment(Qt.AlignCenter)
        title.setStyleSheet("color: #FFFFFF; font-size: 64pt; font-weight: 900; background: transparent;")
        layout.addWidget(title)
        text = QLabel(NOISE_WARNING_TEXT, self)
        text.setAlignment(Qt.AlignCenter)
        text.setStyleSheet("color: #FFFFFF; font-size: 20pt; background: transparent;")
        layout.addWidget(text)
        layout.addStretch()
        self.hide()

    def cover_parent(self) -> None:
        self.setGeometry(self.parentWidget().rect())
        self.raise_()


class MainWindow(QMainWindow):
    """Main Qt window orchestrating the dashboard, quiz view and noise monitor."""

    def __init__(
        self,
        manager: ClassroomManager,
        level_source_factory: Callable[[], LevelSource],
        default_sensitivity: int = DEFAULT_SENSITIVITY,
    ) -> None:
        super().__init__()
        self.setWindowTitle(WINDOW_TITLE)

        self.manager = manager
        self._level_source_factory = level_source_factory
        self._default_sensitivity = default_sensitivity
        self._mode = ViewMode.DASHBOARD
        self._last_session_dir: Path = Path.home()

        self._build_ui()
        self.setStyleSheet(Styles.get_main_window_style())
        self._set_mode(ViewMode.DASHBOARD)

    def _build_ui(self) -> None:
        central_widget = QWidget(self)
        self.setCentralWidget(central_widget)

        root_layout = QVBoxLayout()
        central_widget.setLayout(root_layout)

        self._build_navbar(root_layout)

        self.mode_stack = QStackedWidget(self)
        self.dashboard_panel = DashboardPanel(
            self.manager,
            on_start_diagnostic=self._handle_start_diagnostic,
            parent=self,
        )
        self.quiz_panel = QuizPanel(self.manager, parent=self)
        self.mode_stack.addWidget(self.dashboard_panel)
        self.mode_stack.addWidget(self.quiz_panel)
        root_layout.addWidget(self.mode_stack, stretch=1)

        self.noise_monitor = NoiseMonitor(
            on_noise_level_change=self._handle_noise_change,
            source_factory=self._level_source_factory,
            sensitivity=self._default_sensitivity,
            parent=self,
        )
        root_layout.addWidget(self.noise_monitor)

        self.noise_overlay = NoiseOverlay(central_widget)

    def _build_navbar(self, layout: QVBoxLayout) -> None:
        navbar = QWidget(self)
        navbar.setAttribute(Qt.WA_StyledBackground, True)
        navbar.setStyleSheet(Styles.get_navbar_style())
        button_row = QHBoxLayout()
        navbar.setLayout(button_row)

        title = QLabel(APP_NAME, navbar)
        button_row.addWidget(title, stretch=1)

        self.save_button = QPushButton(NAV_BUTTON_SAVE, navbar)
        self.save_button.clicked.connect(self._handle_save_session)
        button_row.addWidget(self.save_button)

        self.load_button = QPushButton(NAV_BUTTON_LOAD, navbar)
        self.load_button.clicked.connect(self._handle_load_session)
        button_row.addWidget(self.load_button)

        self.exit_quiz_button = QPushButton(NAV_BUTTON_EXIT_QUIZ, navbar)
        self.exit_quiz_button.clicked.connect(self._handle_exit_quiz)
        button_row.addWidget(self.exit_quiz_button)

        self.about_button = QPushButton(NAV_BUTTON_ABOUT, navbar)
        self.about_button.clicked.connect(self._handle_about)
        button_row.addWidget(self.about_button)

        layout.addWidget(navbar)

    def _set_mode(self, mode: ViewMode) -> None:
        self._mode = mode
        in_quiz = mode == ViewMode.QUIZ
        self.save_button.setVisible(not in_quiz)
        self.load_button.setVisible(not in_quiz)
        self.exit_quiz_button.setVisible(in_quiz)

        index_map = {
            ViewMode.DASHBOARD: 0,
            ViewMode.QUIZ: 1,
        }
        self.mode_stack.setCurrentIndex(index_map[mode])
        if mode == ViewMode.DASHBOARD:
            self.dashboard_panel.refresh()

    def _handle_start_diagnostic(self, category: DiagnosticCategory) -> None:
        if not self.manager.start_diagnostic(category):
            show_warning(self, APP_NAME, NO_STUDENT_FOCUSED_MESSAGE)
            return
        self._set_mode(ViewMode.QUIZ)

    def _handle_exit_quiz(self) -> None:
        self.manager.exit_quiz()
        self._set_mode(ViewMode.DASHBOARD)

    def _handle_noise_change(self, is_loud: bool) -> None:
        if is_loud:
            self.noise_overlay.cover_parent()
            self.noise_overlay.show()
        else:
            self.noise_overlay.hide()

    def _handle_save_session(self) -> None:
        default_path = self._last_session_dir / default_session_filename()
        file_path, _ = QFileDialog.getSaveFileName(
            self,
            SESSION_DIALOG_SAVE_TITLE,
            str(default_path),
            SESSION_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            self.manager.save_session(Path(file_path))
        except OSError as exc:
            show_error(self, SESSION_DIALOG_SAVE_TITLE, str(exc))
            return

        self._last_session_dir = Path(file_path).parent
        logger.info("Session saved to %s", file_path)

    def _handle_load_session(self) -> None:
        if not confirm_replace_roster(self, self.manager.get_student_count()):
            return

        file_path, _ = QFileDialog.getOpenFileName(
            self,
            SESSION_DIALOG_LOAD_TITLE,
            str(self._last_session_dir),
            SESSION_FILE_FILTER,
        )
        if not file_path:
            return

        try:
            count = self.manager.load_session(Path(file_path))
        except SessionFormatError as exc:
            logger.warning("Rejected session file %s: %s", file_path, exc)
            show_error(self, SESSION_DIALOG_LOAD_TITLE, SESSION_BAD_FORMAT_MESSAGE)
            return
        except (OSError, UnicodeDecodeError) as exc:
            logger.warning("Could not read session file %s: %s", file_path, exc)
            show_error(self, SESSION_DIALOG_LOAD_TITLE, SESSION_UNREADABLE_MESSAGE)
            return

        self._last_session_dir = Path(file_path).parent
        self.dashboard_panel.refresh()
        show_info(self, SESSION_DIALOG_LOAD_TITLE, SESSION_LOADED_TEMPLATE.format(count=count))

    def _handle_about(self) -> None:
        details = (
            f"{APP_NAME} v{APP_VERSION}\n"
            f"License: {APP_LICENSE}\n\n"
            f"{APP_ABOUT_TEXT}"
        )
        show_info(self, f"{NAV_BUTTON_ABOUT} {APP_NAME}", details)

    def resizeEvent(self, event) -> None:
        super().resizeEvent(event)
        if self.noise_overlay.isVisible():
            self.noise_overlay.cover_parent()

    def closeEvent(self, event) -> None:
        self.noise_monitor.stop()
        self.manager.exit_quiz()
        super().closeEvent(event)
