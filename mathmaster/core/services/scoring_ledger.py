"""Service owning the roster of students and their scores."""

from __future__ import annotations

import logging
import random
from collections.abc import Callable, Iterable
from dataclasses import dataclass, field, replace
from typing import Any
from uuid import uuid4

from mathmaster.constants.quiz_constants import (
    APPRENTICE_SCORE_THRESHOLD,
    AVATAR_COLORS,
    EXPERT_SCORE_THRESHOLD,
)
from mathmaster.core.models import Student
from mathmaster.core.session_store import export_records, students_from_records

logger = logging.getLogger(__name__)


@dataclass(slots=True)
class LeaderboardRow:
    """Immutable snapshot returned to consumers."""

    rank: int
    student_id: str
    name: str
    initials: str
    avatar_seed: str
    score: int
    titles: list[str] = field(default_factory=list)


def rank_titles(score: int) -> list[str]:
    """Titles displayed next to a student's name, highest first."""
    titles: list[str] = []
    if score > EXPERT_SCORE_THRESHOLD:
        titles.append("Experto")
    if score > APPRENTICE_SCORE_THRESHOLD:
        titles.append("Aprendiz")
    return titles


def parse_points(raw_value: str) -> int | None:
    """Parse manually typed points; returns None unless it is a nonzero integer."""
    try:
        points = int(raw_value.strip())
    except (AttributeError, ValueError):
        return None
    return points or None


class ScoringLedger:
    """Tracks the roster and applies point adjustments."""

    def __init__(
        self,
        rng: random.Random | None = None,
        id_factory: Callable[[], str] | None = None,
    ) -> None:
        self._students: list[Student] = []
        self._rng = rng or random.Random()
        self._id_factory = id_factory or (lambda: str(uuid4()))

    def add_student(self, name: str) -> Student | None:
        """Register a student with score 0; blank names are ignored."""
        cleaned = name.strip()
        if not cleaned:
            logger.debug("Ignoring blank student name.")
            return None

        student = Student(
            id=self._id_factory(),
            name=cleaned,
            avatar_seed=self._rng.choice(AVATAR_COLORS),
        )
        self._students.append(student)
        logger.info("Registered student %s (%s)", student.name, student.id)
        return replace(student, badges=list(student.badges))

    def adjust_score(self, student_ids: Iterable[str], delta: int) -> int:
        """Add ``delta`` to every listed student. Unknown ids are skipped.

        Returns the number of students whose score changed.
        """
        targets = set(student_ids)
        if not targets or delta == 0:
            return 0

        updated = 0
        for student in self._students:
            if student.id in targets:
                student.score += delta
                updated += 1
        logger.info("Applied %+d points to %d student(s)", delta, updated)
        return updated

    def apply_points_input(self, student_ids: Iterable[str], raw_value: str) -> bool:
        """Apply points typed in by hand. Invalid or zero input leaves the ledger unchanged."""
        points = parse_points(raw_value)
        if points is None:
            logger.debug("Ignoring manual points input %r", raw_value)
            return False
        self.adjust_score(student_ids, points)
        return True

    def import_roster(self, document: object) -> int:
        """Replace the roster with the records in ``document``.

        Raises ``SessionFormatError`` (and keeps the current roster) when the
        document is not a list or a record is invalid.
        """
        students = students_from_records(document)
        self._students = students
        logger.info("Imported roster with %d student(s)", len(students))
        return len(students)

    def export_roster(self) -> list[dict[str, Any]]:
        return export_records(self._students)

    def get_students(self) -> list[Student]:
        """Copies of the roster in registration order."""
        return [replace(student, badges=list(student.badges)) for student in self._students]

    def get_student(self, student_id: str) -> Student | None:
        for student in self._students:
            if student.id == student_id:
                return replace(student, badges=list(student.badges))
        return None

    def get_student_count(self) -> int:
        return len(self._students)

    def get_leaderboard(self, limit: int | None = None) -> list[LeaderboardRow]:
        """Students sorted by score, highest first; ties keep registration order."""
        ordered = sorted(self._students, key=lambda s: -s.score)
        if limit is not None:
            ordered = ordered[:limit]

        return [
            LeaderboardRow(
                rank=position,
                student_id=student.id,
                name=student.name,
                initials=student.initials,
                avatar_seed=student.avatar_seed,
                score=student.score,
                titles=rank_titles(student.score),
            )
            for position, student in enumerate(ordered, start=1)
        ]

    def clear(self) -> None:
        """Remove every student."""
        self._students.clear()
