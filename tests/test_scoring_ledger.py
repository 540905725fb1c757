from __future__ import annotations

import pytest

from mathmaster.constants.quiz_constants import AVATAR_COLORS
from mathmaster.core.services.scoring_ledger import parse_points, rank_titles
from mathmaster.core.session_store import SessionFormatError


def _scores(ledger) -> dict[str, int]:
    return {student.name: student.score for student in ledger.get_students()}


def test_add_student_starts_at_zero_with_palette_avatar(ledger):
    student = ledger.add_student("  Ana  ")

    assert student is not None
    assert student.name == "Ana"
    assert student.score == 0
    assert student.badges == []
    assert student.avatar_seed in AVATAR_COLORS
    assert ledger.get_student_count() == 1


@pytest.mark.parametrize("name", ["", "   ", "\t\n"])
def test_blank_names_are_ignored(ledger, name):
    assert ledger.add_student(name) is None
    assert ledger.get_student_count() == 0


def test_returned_students_are_copies(ledger):
    student = ledger.add_student("Ana")
    student.score = 99
    student.badges.append("hack")

    stored = ledger.get_student(student.id)
    assert stored.score == 0
    assert stored.badges == []


def test_batch_adjustment_applies_to_every_selected_student(ledger):
    ana = ledger.add_student("A")
    bea = ledger.add_student("B")
    ledger.adjust_score([bea.id], 3)

    updated = ledger.adjust_score([ana.id, bea.id], 5)

    assert updated == 2
    assert _scores(ledger) == {"A": 5, "B": 8}


def test_adjustments_are_additive_and_order_independent(ledger):
    student = ledger.add_student("Ana")
    for delta in (10, -2, 5, -1):
        ledger.adjust_score([student.id], delta)

    other = ledger.add_student("Beto")
    for delta in (-1, 5, -2, 10):
        ledger.adjust_score([other.id], delta)

    assert ledger.get_student(student.id).score == 12
    assert ledger.get_student(other.id).score == 12


def test_unknown_ids_and_zero_delta_change_nothing(ledger):
    student = ledger.add_student("Ana")

    assert ledger.adjust_score(["missing"], 5) == 0
    assert ledger.adjust_score([student.id], 0) == 0
    assert ledger.adjust_score([], 5) == 0
    assert ledger.get_student(student.id).score == 0


def test_scores_may_go_negative(ledger):
    student = ledger.add_student("Ana")
    ledger.adjust_score([student.id], -2)

    assert ledger.get_student(student.id).score == -2


@pytest.mark.parametrize(
    ("raw", "expected"),
    [("5", 5), (" -3 ", -3), ("+7", 7), ("0", None), ("", None), ("abc", None), ("2.5", None)],
)
def test_parse_points(raw, expected):
    assert parse_points(raw) == expected


def test_apply_points_input_rejects_invalid_text(ledger):
    student = ledger.add_student("Ana")

    assert ledger.apply_points_input([student.id], "diez") is False
    assert ledger.apply_points_input([student.id], "0") is False
    assert ledger.apply_points_input([student.id], "-4") is True
    assert ledger.get_student(student.id).score == -4


def test_leaderboard_sorted_by_score_with_stable_ties(ledger):
    ana = ledger.add_student("Ana")
    beto = ledger.add_student("Beto")
    caro = ledger.add_student("Caro")
    ledger.adjust_score([beto.id], 30)
    ledger.adjust_score([ana.id, caro.id], 10)

    rows = ledger.get_leaderboard()

    assert [row.name for row in rows] == ["Beto", "Ana", "Caro"]
    assert [row.rank for row in rows] == [1, 2, 3]
    assert rows[0].titles == ["Aprendiz"]
    assert rows[0].initials == "BE"
    assert [row.name for row in ledger.get_leaderboard(limit=1)] == ["Beto"]


@pytest.mark.parametrize(
    ("score", "titles"),
    [(0, []), (20, []), (21, ["Aprendiz"]), (50, ["Aprendiz"]), (51, ["Experto", "Aprendiz"])],
)
def test_rank_titles(score, titles):
    assert rank_titles(score) == titles


def test_import_roster_replaces_students(ledger):
    ledger.add_student("Ana")

    count = ledger.import_roster(
        [{"id": "x", "name": "Bob", "avatarSeed": "bg-blue-400", "score": 7, "badges": []}]
    )

    assert count == 1
    rows = ledger.get_leaderboard()
    assert [(row.name, row.score, row.avatar_seed) for row in rows] == [("Bob", 7, "bg-blue-400")]


def test_import_roster_keeps_current_students_on_bad_document(ledger):
    ledger.add_student("Ana")

    with pytest.raises(SessionFormatError):
        ledger.import_roster({"id": "x", "name": "Bob"})

    assert _scores(ledger) == {"Ana": 0}


def test_export_then_import_restores_roster(ledger):
    ana = ledger.add_student("Ana")
    ledger.adjust_score([ana.id], 15)
    exported = ledger.export_roster()

    ledger.clear()
    assert ledger.get_student_count() == 0

    ledger.import_roster(exported)
    assert ledger.get_student(ana.id).score == 15
