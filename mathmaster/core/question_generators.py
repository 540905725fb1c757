"""Local question generators for the integer and fraction diagnostics.

Every generator takes an optional ``random.Random`` so tests can pin the
sequence. Options are always four distinct strings and ``correct_index`` is
computed after shuffling, so it points at the right answer whatever order the
random source produces.
"""

from __future__ import annotations

import random
from collections.abc import Callable, Iterable
from uuid import uuid4

from mathmaster.constants.quiz_constants import (
    DISTRACTOR_MAX_ATTEMPTS,
    INTEGER_DISTRACTOR_OFFSET,
    INTEGER_OPERAND_RANGE,
    INTEGER_QUOTIENT_RANGE,
    OPTION_COUNT,
)
from mathmaster.core.models import DiagnosticCategory, FractionData, Question

QuestionGenerator = Callable[[random.Random | None], Question]

_OPERATORS = ("+", "-", "*", "/")
_OPERATOR_SYMBOLS = {"+": "+", "-": "-", "*": "×", "/": "÷"}

GRAPHICAL_FRACTION_PROMPT = "¿Qué fracción representa la siguiente gráfica?"


def generate_integer_question(rng: random.Random | None = None) -> Question:
    """Build a signed-integer arithmetic question such as ``-4 × (7)``."""
    rng = rng or random.Random()
    low, high = INTEGER_OPERAND_RANGE
    operator = rng.choice(_OPERATORS)
    left = rng.randint(low, high)
    right = rng.randint(low, high)

    if operator == "/":
        # Exact division: pick a nonzero divisor, then a dividend that is a multiple of it.
        right = rng.choice([value for value in range(low, high + 1) if value != 0])
        left = right * rng.randint(*INTEGER_QUOTIENT_RANGE)

    answer = _evaluate(operator, left, right)
    values = _integer_options(answer, rng)
    rng.shuffle(values)

    expression = f"{left} {_OPERATOR_SYMBOLS[operator]} ({right})"
    return Question(
        id=str(uuid4()),
        text=f"Resuelve: {expression}",
        options=[str(value) for value in values],
        correct_index=values.index(answer),
        category=DiagnosticCategory.INTEGERS,
    )


def generate_fraction_question(rng: random.Random | None = None) -> Question:
    """Build either a pie-identification or a same-denominator addition question."""
    rng = rng or random.Random()
    if rng.random() < 0.5:
        return _graphical_fraction_question(rng)
    return _fraction_addition_question(rng)


def generate_local_question(
    category: DiagnosticCategory, rng: random.Random | None = None
) -> Question:
    """Generate a question for ``category`` without any network access.

    Theory questions only exist remotely, so that category gets an integer
    question, matching the controller's fallback policy.
    """
    generator = LOCAL_GENERATORS.get(category, generate_integer_question)
    return generator(rng)


LOCAL_GENERATORS: dict[DiagnosticCategory, QuestionGenerator] = {
    DiagnosticCategory.INTEGERS: generate_integer_question,
    DiagnosticCategory.FRACTIONS: generate_fraction_question,
}


def _evaluate(operator: str, left: int, right: int) -> int:
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "*":
        return left * right
    return left // right


def _integer_options(answer: int, rng: random.Random) -> list[int]:
    values = [answer]
    attempts = 0
    while len(values) < OPTION_COUNT and attempts < DISTRACTOR_MAX_ATTEMPTS:
        attempts += 1
        candidate = answer + rng.randint(-INTEGER_DISTRACTOR_OFFSET, INTEGER_DISTRACTOR_OFFSET)
        if candidate not in values:
            values.append(candidate)

    step = 1
    while len(values) < OPTION_COUNT:
        for candidate in (answer + step, answer - step):
            if candidate not in values and len(values) < OPTION_COUNT:
                values.append(candidate)
        step += 1
    return values


def _graphical_fraction_question(rng: random.Random) -> Question:
    numerator = rng.randint(1, 5)
    denominator = numerator + rng.randint(1, 4)
    correct = f"{numerator}/{denominator}"

    options = _fraction_options(
        correct,
        [
            f"{denominator}/{numerator}",
            f"{numerator}/{denominator + 1}",
            f"{max(1, numerator - 1)}/{denominator}",
            # Only used when the floored distractor collides with the answer (numerator 1).
            f"{numerator + 1}/{denominator}",
            f"{numerator}/{denominator + 2}",
        ],
        rng,
    )
    return Question(
        id=str(uuid4()),
        text=GRAPHICAL_FRACTION_PROMPT,
        options=options,
        correct_index=options.index(correct),
        category=DiagnosticCategory.FRACTIONS,
        fraction_data=[FractionData(numerator=numerator, denominator=denominator)],
    )


def _fraction_addition_question(rng: random.Random) -> Question:
    denominator = rng.randint(2, 6)
    first = rng.randint(0, denominator - 1)
    second = rng.randint(0, denominator - first - 1)
    total = first + second
    correct = f"{total}/{denominator}"

    options = _fraction_options(
        correct,
        [
            f"{total + 1}/{denominator}",
            f"{max(1, total - 1)}/{denominator}",
            f"{total}/{denominator + 1}",
            f"{total + 2}/{denominator}",
            f"{total}/{denominator + 2}",
        ],
        rng,
    )
    return Question(
        id=str(uuid4()),
        text=f"Resuelve: {first}/{denominator} + {second}/{denominator}",
        options=options,
        correct_index=options.index(correct),
        category=DiagnosticCategory.FRACTIONS,
    )


def _fraction_options(correct: str, candidates: Iterable[str], rng: random.Random) -> list[str]:
    """Take the first distinct candidates after ``correct`` and shuffle them in."""
    options = [correct]
    for candidate in candidates:
        if len(options) == OPTION_COUNT:
            break
        if candidate not in options:
            options.append(candidate)
    if len(options) != OPTION_COUNT:
        raise ValueError(f"Could not build {OPTION_COUNT} distinct options for {correct}.")
    rng.shuffle(options)
    return options
