from __future__ import annotations

import random
import re

import pytest

from mathmaster.core.models import DiagnosticCategory
from mathmaster.core.question_generators import (
    GRAPHICAL_FRACTION_PROMPT,
    generate_fraction_question,
    generate_integer_question,
    generate_local_question,
)

INTEGER_PATTERN = re.compile(r"^Resuelve: (-?\d+) ([+\-×÷]) \((-?\d+)\)$")
ADDITION_PATTERN = re.compile(r"^Resuelve: (\d+)/(\d+) \+ (\d+)/(\d+)$")


def _evaluate(text: str) -> int:
    match = INTEGER_PATTERN.match(text)
    assert match, text
    left, operator, right = int(match.group(1)), match.group(2), int(match.group(3))
    if operator == "+":
        return left + right
    if operator == "-":
        return left - right
    if operator == "×":
        return left * right
    assert right != 0
    assert left % right == 0, "division must be exact"
    return left // right


@pytest.mark.parametrize("seed", range(200))
def test_integer_question_has_four_distinct_options_and_correct_index(seed):
    question = generate_integer_question(random.Random(seed))

    assert question.category is DiagnosticCategory.INTEGERS
    assert len(question.options) == 4
    assert len(set(question.options)) == 4
    assert 0 <= question.correct_index < 4
    assert int(question.correct_option) == _evaluate(question.text)


@pytest.mark.parametrize("seed", range(200))
def test_integer_operands_stay_in_range(seed):
    question = generate_integer_question(random.Random(seed))
    match = INTEGER_PATTERN.match(question.text)
    left, operator, right = int(match.group(1)), match.group(2), int(match.group(3))

    assert -10 <= right <= 10
    if operator == "÷":
        assert right != 0
        assert -5 <= left // right <= 4
    else:
        assert -10 <= left <= 10


class PinnedRandom(random.Random):
    """Random source whose draws are fixed: lowest bound or a constant, no shuffling."""

    def __init__(self, randint_value=None, random_value=0.0):
        super().__init__(0)
        self._randint_value = randint_value
        self._random_value = random_value

    def choice(self, seq):
        return seq[0]

    def randint(self, a, b):
        return a if self._randint_value is None else self._randint_value

    def random(self):
        return self._random_value

    def shuffle(self, x):
        pass


class ReversingRandom(PinnedRandom):
    def shuffle(self, x):
        x.reverse()


@pytest.mark.parametrize("seed", range(50))
def test_integer_distractors_are_near_the_answer(seed):
    question = generate_integer_question(random.Random(seed))
    answer = int(question.correct_option)

    assert all(abs(int(option) - answer) <= 5 for option in question.options)


def test_integer_distractors_fill_deterministically_when_random_offsets_repeat():
    question = generate_integer_question(PinnedRandom(randint_value=0))

    assert question.text == "Resuelve: 0 + (0)"
    assert question.options == ["0", "1", "-1", "2"]
    assert question.correct_index == 0


def test_integer_distractors_fill_after_one_distinct_offset():
    # Every offset draw is -5, so only one random distractor is ever accepted.
    question = generate_integer_question(PinnedRandom())

    assert question.text == "Resuelve: -10 + (-10)"
    assert question.options == ["-20", "-25", "-19", "-21"]


def test_correct_index_follows_the_shuffle():
    question = generate_integer_question(ReversingRandom(randint_value=0))

    assert question.options == ["2", "-1", "1", "0"]
    assert question.correct_index == 3



@pytest.mark.parametrize("seed", range(200))
def test_fraction_question_has_exactly_one_correct_option(seed):
    question = generate_fraction_question(random.Random(seed))

    assert question.category is DiagnosticCategory.FRACTIONS
    assert len(question.options) == 4
    assert len(set(question.options)) == 4

    if question.fraction_data:
        assert question.text == GRAPHICAL_FRACTION_PROMPT
        fraction = question.fraction_data[0]
        assert 1 <= fraction.numerator <= 5
        assert fraction.numerator < fraction.denominator <= fraction.numerator + 4
        expected = str(fraction)
    else:
        match = ADDITION_PATTERN.match(question.text)
        assert match, question.text
        first, denominator, second = int(match.group(1)), int(match.group(2)), int(match.group(3))
        assert match.group(4) == match.group(2)
        assert first + second < denominator
        expected = f"{first + second}/{denominator}"

    assert question.options.count(expected) == 1
    assert question.correct_option == expected


def test_graphical_fraction_skips_distractor_equal_to_answer():
    # numerator 1 floors "n - 1" back to the answer, so the next candidate is used.
    question = generate_fraction_question(PinnedRandom(random_value=0.0))

    assert question.text == GRAPHICAL_FRACTION_PROMPT
    assert str(question.fraction_data[0]) == "1/2"
    assert question.options == ["1/2", "2/1", "1/3", "2/2"]
    assert question.correct_index == 0


def test_fraction_addition_skips_repeated_distractor():
    question = generate_fraction_question(PinnedRandom(random_value=0.9))

    assert question.text == "Resuelve: 0/2 + 0/2"
    assert question.fraction_data is None
    assert question.options == ["0/2", "1/2", "0/3", "2/2"]
    assert question.correct_index == 0



def test_both_fraction_variants_are_produced():
    kinds = {
        bool(generate_fraction_question(random.Random(seed)).fraction_data)
        for seed in range(50)
    }

    assert kinds == {True, False}


def test_local_theory_request_falls_back_to_integer_question(rng):
    question = generate_local_question(DiagnosticCategory.THEORY, rng)

    assert question.category is DiagnosticCategory.INTEGERS
    assert not question.is_remote_generated


def test_generated_question_ids_are_unique(rng):
    ids = {generate_local_question(DiagnosticCategory.INTEGERS, rng).id for _ in range(20)}

    assert len(ids) == 20
