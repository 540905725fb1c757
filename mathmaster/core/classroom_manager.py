"""Business logic shared by the dashboard, quiz view and session dialogs."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from pathlib import Path

from mathmaster.core.models import DiagnosticCategory, Feedback, Student
from mathmaster.core.services.quiz_session import QuizSessionController, QuizSessionState
from mathmaster.core.services.scoring_ledger import LeaderboardRow, ScoringLedger
from mathmaster.core.session_store import read_session_document, save_session_to_file


class ClassroomManager:
    """Facade over the ScoringLedger and QuizSessionController plus dashboard selection."""

    def __init__(self, ledger: ScoringLedger, quiz: QuizSessionController) -> None:
        self._ledger = ledger
        self._quiz = quiz

        self._selection_mode: bool = False
        self._selected_ids: set[str] = set()
        self._focused_student_id: str | None = None

    # --- Roster ---

    def add_student(self, name: str) -> Student | None:
        return self._ledger.add_student(name)

    def get_leaderboard(self, limit: int | None = None) -> list[LeaderboardRow]:
        return self._ledger.get_leaderboard(limit)

    def get_student(self, student_id: str) -> Student | None:
        return self._ledger.get_student(student_id)

    def get_student_count(self) -> int:
        return self._ledger.get_student_count()

    def adjust_score(self, student_ids: Iterable[str], delta: int) -> int:
        return self._ledger.adjust_score(student_ids, delta)

    def apply_points_input(self, student_ids: Iterable[str], raw_value: str) -> bool:
        return self._ledger.apply_points_input(student_ids, raw_value)

    # --- Session files ---

    def save_session(self, file_path: Path) -> None:
        save_session_to_file(file_path, self._ledger.get_students())

    def load_session(self, file_path: Path) -> int:
        """Replace the roster from ``file_path``; the roster is untouched on error."""
        count = self._ledger.import_roster(read_session_document(file_path))
        self._selected_ids.clear()
        self._focused_student_id = None
        return count

    # --- Dashboard selection ---

    def is_selection_mode(self) -> bool:
        return self._selection_mode

    def toggle_selection_mode(self) -> bool:
        self._selection_mode = not self._selection_mode
        self._selected_ids.clear()
        self._focused_student_id = None
        return self._selection_mode

    def toggle_student_selection(self, student_id: str) -> None:
        if student_id in self._selected_ids:
            self._selected_ids.discard(student_id)
        else:
            self._selected_ids.add(student_id)

    def get_selected_ids(self) -> list[str]:
        return sorted(self._selected_ids)

    def focus_student(self, student_id: str | None) -> None:
        self._focused_student_id = student_id

    def get_focused_student(self) -> Student | None:
        if self._focused_student_id is None:
            return None
        return self._ledger.get_student(self._focused_student_id)

    def handle_student_click(self, student_id: str) -> None:
        """Leaderboard click: toggles selection in multi-select mode, focuses otherwise."""
        if self._selection_mode:
            self.toggle_student_selection(student_id)
        else:
            self.focus_student(student_id)

    def is_student_highlighted(self, student_id: str) -> bool:
        if self._selection_mode:
            return student_id in self._selected_ids
        return student_id == self._focused_student_id

    # --- Quiz delegation ---

    def add_quiz_listener(self, listener: Callable[[QuizSessionState], None]) -> None:
        self._quiz.add_listener(listener)

    def start_diagnostic(self, category: DiagnosticCategory) -> bool:
        """Start a quiz for the focused student. Returns False when nobody is focused."""
        student = self.get_focused_student()
        if student is None:
            return False
        self._quiz.start(category, student.id)
        return True

    def submit_answer(self, option_index: int) -> Feedback | None:
        return self._quiz.submit_answer(option_index)

    def get_quiz_state(self) -> QuizSessionState:
        return self._quiz.get_state()

    def exit_quiz(self) -> None:
        self._quiz.exit()
        self._focused_student_id = None
