"""Saving and restoring the roster as a JSON session file.

File format: a JSON array of student records, as produced by the web version
of the app::

    [
      {
        "id": "0b6f...",
        "name": "Ana",
        "avatarSeed": "bg-red-400",
        "score": 10,
        "badges": []
      }
    ]

Loading is all-or-nothing: a document that is not valid JSON, whose top level
is not a list, or that contains a record failing validation raises
``SessionFormatError`` and nothing is returned, so callers keep their current
roster.
"""

from __future__ import annotations

import json
from collections.abc import Iterable
from datetime import date
from pathlib import Path
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, StrictInt, StrictStr, ValidationError

from mathmaster.constants.quiz_constants import AVATAR_COLORS, SESSION_FILENAME_TEMPLATE
from mathmaster.core.models import Student


class SessionFormatError(Exception):
    """Raised when a session document cannot be turned into a roster."""


class StudentRecord(BaseModel):
    """Wire representation of a student inside a session file."""

    model_config = ConfigDict(populate_by_name=True, extra="ignore")

    id: StrictStr = Field(min_length=1)
    name: StrictStr
    avatar_seed: StrictStr = Field(default=AVATAR_COLORS[0], alias="avatarSeed")
    score: StrictInt = 0
    badges: list[StrictStr] = Field(default_factory=list)

    @classmethod
    def from_student(cls, student: Student) -> "StudentRecord":
        return cls(
            id=student.id,
            name=student.name,
            avatar_seed=student.avatar_seed,
            score=student.score,
            badges=list(student.badges),
        )

    def to_student(self) -> Student:
        return Student(
            id=self.id,
            name=self.name,
            avatar_seed=self.avatar_seed,
            score=self.score,
            badges=list(self.badges),
        )


def export_records(students: Iterable[Student]) -> list[dict[str, Any]]:
    """Snapshot students as JSON-ready dictionaries using the file's field names."""
    return [
        StudentRecord.from_student(student).model_dump(by_alias=True)
        for student in students
    ]


def students_from_records(document: object) -> list[Student]:
    """Validate an already-parsed document and build fresh ``Student`` objects."""
    if not isinstance(document, list):
        raise SessionFormatError("Session document must be a JSON array of students.")

    students: list[Student] = []
    seen_ids: set[str] = set()
    for position, raw_record in enumerate(document, start=1):
        try:
            record = StudentRecord.model_validate(raw_record)
        except ValidationError as exc:
            raise SessionFormatError(f"Student record {position} is invalid: {exc}") from exc
        if record.id in seen_ids:
            raise SessionFormatError(f"Student id '{record.id}' appears more than once.")
        seen_ids.add(record.id)
        students.append(record.to_student())
    return students


def save_roster(students: Iterable[Student]) -> str:
    """Serialize the roster to the textual session document."""
    return json.dumps(export_records(students), ensure_ascii=False, indent=2)


def parse_session_document(document: str) -> object:
    """Decode session text; anything ``json`` cannot decode becomes ``SessionFormatError``.

    Besides syntax errors this covers integer literals beyond the interpreter's
    digit limit (``ValueError``) and pathologically deep nesting (``RecursionError``).
    """
    try:
        return json.loads(document)
    except json.JSONDecodeError as exc:
        raise SessionFormatError(f"Session file is not valid JSON: {exc.msg}.") from exc
    except (ValueError, RecursionError) as exc:
        raise SessionFormatError(f"Session file could not be decoded: {exc}") from exc


def load_roster(document: str) -> list[Student]:
    """Parse a session document produced by ``save_roster`` (or the web app)."""
    return students_from_records(parse_session_document(document))


def save_session_to_file(file_path: Path, students: Iterable[Student]) -> None:
    """Persist the roster to ``file_path`` as UTF-8 JSON."""

    file_path = file_path.resolve()
    file_path.parent.mkdir(parents=True, exist_ok=True)
    file_path.write_text(save_roster(students), encoding="utf-8")


def read_session_document(file_path: Path) -> object:
    """Read and decode a session file without validating its records."""
    return parse_session_document(file_path.read_text(encoding="utf-8"))


def load_session_from_file(file_path: Path) -> list[Student]:
    return students_from_records(read_session_document(file_path))


def default_session_filename(today: date | None = None) -> str:
    """File name offered in the save dialog, e.g. ``MathMaster_Sesion_18-10-2026.json``."""
    today = today or date.today()
    stamp = f"{today.day}-{today.month}-{today.year}"
    return SESSION_FILENAME_TEMPLATE.format(date=stamp)
