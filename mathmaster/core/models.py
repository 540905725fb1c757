"""Domain models for the classroom console."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class DiagnosticCategory(Enum):
    """Quiz topics offered from the dashboard."""

    INTEGERS = "Enteros"
    FRACTIONS = "Fracciones"
    THEORY = "Teoría y Conceptos"


class Feedback(Enum):
    """Outcome shown after an answer is submitted."""

    CORRECT = "CORRECT"
    WRONG = "WRONG"


@dataclass(slots=True)
class Student:
    """Registered student and their running score."""

    id: str
    name: str
    avatar_seed: str
    score: int = 0
    badges: list[str] = field(default_factory=list)

    @property
    def initials(self) -> str:
        return self.name[:2].upper()


@dataclass(frozen=True, slots=True)
class FractionData:
    """Numerator/denominator pair drawn as a pie next to a question."""

    numerator: int
    denominator: int

    def __str__(self) -> str:
        return f"{self.numerator}/{self.denominator}"


@dataclass(slots=True)
class Question:
    """Multiple-choice question with exactly four options."""

    id: str
    text: str
    options: list[str]
    correct_index: int
    category: DiagnosticCategory
    fraction_data: list[FractionData] | None = None
    is_remote_generated: bool = False

    @property
    def correct_option(self) -> str:
        return self.options[self.correct_index]
