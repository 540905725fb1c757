from __future__ import annotations

import logging
import random

import pytest

from mathmaster.core.classroom_manager import ClassroomManager
from mathmaster.core.models import DiagnosticCategory, Feedback
from mathmaster.core.services.quiz_session import QuizPhase, QuizSessionController
from mathmaster.core.session_store import SessionFormatError


@pytest.fixture
def manager(ledger, scheduler) -> ClassroomManager:
    quiz = QuizSessionController(ledger, scheduler, rng=random.Random(11))
    return ClassroomManager(ledger, quiz)


def test_click_focuses_student_outside_selection_mode(manager):
    ana = manager.add_student("Ana")

    manager.handle_student_click(ana.id)

    assert manager.get_focused_student().name == "Ana"
    assert manager.is_student_highlighted(ana.id)
    assert manager.get_selected_ids() == []


def test_click_toggles_selection_in_selection_mode(manager):
    ana = manager.add_student("Ana")
    beto = manager.add_student("Beto")
    manager.focus_student(ana.id)

    assert manager.toggle_selection_mode() is True
    assert manager.get_focused_student() is None

    manager.handle_student_click(ana.id)
    manager.handle_student_click(beto.id)
    manager.handle_student_click(ana.id)

    assert manager.get_selected_ids() == [beto.id]
    assert manager.is_student_highlighted(beto.id)
    assert not manager.is_student_highlighted(ana.id)


def test_leaving_selection_mode_clears_selection(manager):
    ana = manager.add_student("Ana")
    manager.toggle_selection_mode()
    manager.handle_student_click(ana.id)

    assert manager.toggle_selection_mode() is False
    assert manager.get_selected_ids() == []


def test_batch_points_for_selected_students(manager):
    ana = manager.add_student("A")
    beto = manager.add_student("B")
    manager.adjust_score([beto.id], 3)
    manager.toggle_selection_mode()
    manager.handle_student_click(ana.id)
    manager.handle_student_click(beto.id)

    manager.adjust_score(manager.get_selected_ids(), 5)

    assert manager.get_student(ana.id).score == 5
    assert manager.get_student(beto.id).score == 8


def test_start_diagnostic_requires_focused_student(manager):
    assert manager.start_diagnostic(DiagnosticCategory.INTEGERS) is False
    assert manager.get_quiz_state().phase is QuizPhase.IDLE


def test_diagnostic_scores_focused_student(manager):
    ana = manager.add_student("Ana")
    manager.focus_student(ana.id)
    states = []
    manager.add_quiz_listener(states.append)

    assert manager.start_diagnostic(DiagnosticCategory.INTEGERS) is True
    question = manager.get_quiz_state().question

    assert manager.submit_answer(question.correct_index) is Feedback.CORRECT
    assert manager.get_student(ana.id).score == 10
    assert states[-1].feedback is Feedback.CORRECT


def test_exit_quiz_clears_focus(manager):
    ana = manager.add_student("Ana")
    manager.focus_student(ana.id)
    manager.start_diagnostic(DiagnosticCategory.FRACTIONS)

    manager.exit_quiz()

    assert manager.get_quiz_state().phase is QuizPhase.IDLE
    assert manager.get_focused_student() is None


def test_save_and_load_session(tmp_path, manager):
    ana = manager.add_student("Ana")
    manager.adjust_score([ana.id], 12)
    target = tmp_path / "session.json"
    manager.save_session(target)

    manager.add_student("Beto")
    manager.focus_student(ana.id)

    assert manager.load_session(target) == 1
    assert [row.name for row in manager.get_leaderboard()] == ["Ana"]
    assert manager.get_student(ana.id).score == 12
    assert manager.get_focused_student() is None


def test_bad_session_file_keeps_roster(tmp_path, manager):
    manager.add_student("Ana")
    target = tmp_path / "broken.json"
    target.write_text('{"students": []}', encoding="utf-8")

    with pytest.raises(SessionFormatError):
        manager.load_session(target)

    assert manager.get_student_count() == 1


def test_load_session_goes_through_roster_import(tmp_path, manager, caplog):
    target = tmp_path / "session.json"
    target.write_text('[{"id": "x", "name": "Bob", "score": 7}]', encoding="utf-8")

    with caplog.at_level(logging.INFO, logger="mathmaster.core.services.scoring_ledger"):
        assert manager.load_session(target) == 1

    assert "Imported roster with 1 student(s)" in caplog.text
    assert manager.get_student("x").score == 7


def test_undecodable_session_file_keeps_roster(tmp_path, manager):
    manager.add_student("Ana")
    target = tmp_path / "deep.json"
    target.write_text("[" * 100000 + "]" * 100000, encoding="utf-8")

    with pytest.raises(SessionFormatError):
        manager.load_session(target)

    assert [row.name for row in manager.get_leaderboard()] == ["Ana"]
