"""Service for running a diagnostic quiz for one student."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, auto
import logging
import random
from typing import Protocol, TypeVar

from mathmaster.constants.quiz_constants import (
    CORRECT_ANSWER_POINTS,
    FEEDBACK_WINDOW_MS,
    WRONG_ANSWER_POINTS,
)
from mathmaster.core.models import DiagnosticCategory, Feedback, Question
from mathmaster.core.question_generators import (
    generate_integer_question,
    generate_local_question,
)
from mathmaster.core.services.scoring_ledger import ScoringLedger

logger = logging.getLogger(__name__)

T = TypeVar("T")


class QuizPhase(Enum):
    """Lifecycle of the quiz view."""

    IDLE = auto()
    LOADING = auto()
    READY = auto()
    ANSWERED = auto()


class TaskScheduler(Protocol):
    """Deferred execution used by the controller; the Qt UI supplies a QTimer-based one."""

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None: ...

    def run_in_background(self, work: Callable[[], T], on_done: Callable[[T], None]) -> None: ...


class TheorySource(Protocol):
    def fetch_question(self) -> Question | None: ...


@dataclass(slots=True)
class QuizSessionState:
    """Snapshot of the quiz for rendering."""

    phase: QuizPhase
    category: DiagnosticCategory | None
    student_id: str | None
    question: Question | None
    feedback: Feedback | None

    @property
    def is_loading(self) -> bool:
        return self.phase is QuizPhase.LOADING


class QuizSessionController:
    """Owns quiz-turn state: requests questions, scores answers and auto-advances.

    Every deferred callback (remote fetch, feedback timer) carries the session
    generation it was issued under; ``start`` and ``exit`` bump the generation,
    so callbacks from an abandoned session are dropped.
    """

    def __init__(
        self,
        ledger: ScoringLedger,
        scheduler: TaskScheduler,
        theory_source: TheorySource | None = None,
        rng: random.Random | None = None,
        feedback_window_ms: int = FEEDBACK_WINDOW_MS,
    ) -> None:
        self._ledger = ledger
        self._scheduler = scheduler
        self._theory_source = theory_source
        self._rng = rng or random.Random()
        self._feedback_window_ms = feedback_window_ms
        self._listeners: list[Callable[[QuizSessionState], None]] = []

        self._generation: int = 0
        self._phase = QuizPhase.IDLE
        self._category: DiagnosticCategory | None = None
        self._student_id: str | None = None
        self._question: Question | None = None
        self._feedback: Feedback | None = None

    def add_listener(self, listener: Callable[[QuizSessionState], None]) -> None:
        self._listeners.append(listener)

    def get_state(self) -> QuizSessionState:
        return QuizSessionState(
            phase=self._phase,
            category=self._category,
            student_id=self._student_id,
            question=self._question,
            feedback=self._feedback,
        )

    def is_active(self) -> bool:
        return self._phase is not QuizPhase.IDLE

    def get_generation(self) -> int:
        return self._generation

    def start(self, category: DiagnosticCategory, student_id: str | None = None) -> None:
        """Begin a diagnostic for ``student_id`` and request the first question."""
        self._generation += 1
        self._category = category
        self._student_id = student_id
        logger.info("Starting %s diagnostic for student %s", category.value, student_id)
        self._request_question()

    def submit_answer(self, option_index: int) -> Feedback | None:
        """Score the answer once; later submissions for the same question are ignored."""
        question = self._question
        if self._phase is not QuizPhase.READY or question is None or self._feedback is not None:
            logger.debug("Ignoring answer %s in phase %s", option_index, self._phase.name)
            return None

        if option_index == question.correct_index:
            self._feedback = Feedback.CORRECT
            points = CORRECT_ANSWER_POINTS
        else:
            self._feedback = Feedback.WRONG
            points = WRONG_ANSWER_POINTS

        if self._student_id is not None:
            self._ledger.adjust_score([self._student_id], points)

        self._phase = QuizPhase.ANSWERED
        generation = self._generation
        self._scheduler.call_later(
            self._feedback_window_ms, lambda: self._advance(generation)
        )
        self._notify()
        return self._feedback

    def exit(self) -> None:
        """Leave the quiz from any phase; pending callbacks become no-ops."""
        self._generation += 1
        self._phase = QuizPhase.IDLE
        self._category = None
        self._student_id = None
        self._question = None
        self._feedback = None
        logger.info("Quiz session closed")
        self._notify()

    def _request_question(self) -> None:
        category = self._category
        if category is None:
            return

        generation = self._generation
        self._phase = QuizPhase.LOADING
        self._question = None
        self._feedback = None
        self._notify()

        if category is DiagnosticCategory.THEORY:
            if self._theory_source is None:
                self._deliver_question(generation, None)
                return
            self._scheduler.run_in_background(
                self._theory_source.fetch_question,
                lambda question: self._deliver_question(generation, question),
            )
            return

        self._deliver_question(generation, generate_local_question(category, self._rng))

    def _deliver_question(self, generation: int, question: Question | None) -> None:
        if generation != self._generation or self._phase is not QuizPhase.LOADING:
            logger.debug("Dropping question from stale session %s", generation)
            return

        if question is None:
            logger.warning("No question available for %s; using an integer question.", self._category)
            question = generate_integer_question(self._rng)

        self._question = question
        self._phase = QuizPhase.READY
        self._notify()

    def _advance(self, generation: int) -> None:
        if generation != self._generation or self._phase is not QuizPhase.ANSWERED:
            logger.debug("Ignoring stale advance timer from session %s", generation)
            return
        self._request_question()

    def _notify(self) -> None:
        state = self.get_state()
        for listener in list(self._listeners):
            listener(state)
