"""Component for the diagnostic quiz view."""

from __future__ import annotations

from PySide6.QtCore import Qt
from PySide6.QtWebEngineWidgets import QWebEngineView
from PySide6.QtWidgets import (
    QGridLayout,
    QHBoxLayout,
    QLabel,
    QPushButton,
    QVBoxLayout,
    QWidget,
)

from mathmaster.constants.quiz_constants import (
    CORRECT_ANSWER_POINTS,
    OPTION_COUNT,
    WRONG_ANSWER_POINTS,
)
from mathmaster.constants.ui_constants import (
    FEEDBACK_CORRECT_TEMPLATE,
    FEEDBACK_WRONG_TEMPLATE,
    QUIZ_LOADING,
    QUIZ_NEXT_HINT,
    QUIZ_TITLE,
)
from mathmaster.core.classroom_manager import ClassroomManager
from mathmaster.core.models import Feedback
from mathmaster.core.services.quiz_session import QuizPhase, QuizSessionState
from mathmaster.styling.styles import Styles
from mathmaster.ui.question_renderer import render_loading_html, render_question_html


class QuizPanel(QWidget):
    """Shows the current question, takes one answer and displays feedback."""

    def __init__(self, manager: ClassroomManager, parent: QWidget | None = None) -> None:
        super().__init__(parent)
        self.manager = manager
        self._game_font_size: int = 20
        self._rendered_question_id: str | None = None

        self._build_ui()
        self.manager.add_quiz_listener(self.render_state)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        header_row = QHBoxLayout()
        title_column = QVBoxLayout()
        self.category_label = QLabel("", self)
        title_column.addWidget(self.category_label)
        title_label = QLabel(QUIZ_TITLE, self)
        title_label.setStyleSheet(Styles.get_large_label_style())
        title_column.addWidget(title_label)
        header_row.addLayout(title_column, stretch=1)
        self.student_avatar = QLabel("", self)
        self.student_avatar.setAlignment(Qt.AlignCenter)
        header_row.addWidget(self.student_avatar)
        layout.addLayout(header_row)

        self.question_view = QWebEngineView(self)
        layout.addWidget(self.question_view, stretch=1)

        options_grid = QGridLayout()
        self.option_buttons: list[QPushButton] = []
        for idx in range(OPTION_COUNT):
            button = QPushButton("", self)
            button.clicked.connect(lambda _=False, i=idx: self._handle_answer(i))
            options_grid.addWidget(button, idx // 2, idx % 2)
            self.option_buttons.append(button)
        layout.addLayout(options_grid)

        self.feedback_label = QLabel("", self)
        self.feedback_label.setAlignment(Qt.AlignCenter)
        self.feedback_label.setVisible(False)
        layout.addWidget(self.feedback_label)

        self.next_hint_label = QLabel(QUIZ_NEXT_HINT, self)
        self.next_hint_label.setAlignment(Qt.AlignCenter)
        self.next_hint_label.setVisible(False)
        layout.addWidget(self.next_hint_label)

    def _handle_answer(self, option_index: int) -> None:
        self.manager.submit_answer(option_index)

    def render_state(self, state: QuizSessionState) -> None:
        if state.phase is QuizPhase.IDLE:
            self._rendered_question_id = None
            return

        self.category_label.setText(state.category.value if state.category else "")
        student = self.manager.get_student(state.student_id) if state.student_id else None
        if student is not None:
            self.student_avatar.setText(student.initials)
            self.student_avatar.setStyleSheet(Styles.get_avatar_style(student.avatar_seed, 48))

        question = state.question
        if state.phase is QuizPhase.LOADING or question is None:
            self._rendered_question_id = None
            self.question_view.setHtml(render_loading_html(QUIZ_LOADING, self._game_font_size))
            for button in self.option_buttons:
                button.setVisible(False)
            self.feedback_label.setVisible(False)
            self.next_hint_label.setVisible(False)
            return

        if question.id != self._rendered_question_id:
            self.question_view.setHtml(render_question_html(question, self._game_font_size))
            self._rendered_question_id = question.id

        answered = state.feedback is not None
        for idx, button in enumerate(self.option_buttons):
            button.setVisible(idx < len(question.options))
            if idx >= len(question.options):
                continue
            button.setText(question.options[idx])
            button.setEnabled(not answered)
            button.setStyleSheet(Styles.get_option_style(self._option_state(idx, question.correct_index, state.feedback)))

        self.feedback_label.setVisible(answered)
        self.next_hint_label.setVisible(answered)
        if state.feedback is Feedback.CORRECT:
            self.feedback_label.setText(FEEDBACK_CORRECT_TEMPLATE.format(points=CORRECT_ANSWER_POINTS))
            self.feedback_label.setStyleSheet(Styles.get_feedback_style(correct=True))
        elif state.feedback is Feedback.WRONG:
            self.feedback_label.setText(FEEDBACK_WRONG_TEMPLATE.format(points=WRONG_ANSWER_POINTS))
            self.feedback_label.setStyleSheet(Styles.get_feedback_style(correct=False))

    @staticmethod
    def _option_state(idx: int, correct_index: int, feedback: Feedback | None) -> str:
        if feedback is None:
            return "idle"
        if idx == correct_index:
            return "correct" if feedback is Feedback.CORRECT else "revealed"
        return "dimmed" if feedback is Feedback.WRONG else "idle"

    def apply_font_size(self, font_size: int) -> None:
        self._game_font_size = font_size
        self._rendered_question_id = None
        self.render_state(self.manager.get_quiz_state())
