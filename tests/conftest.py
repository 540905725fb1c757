"""Shared fixtures for the core test-suite."""

from __future__ import annotations

from collections.abc import Callable
import itertools
import random
from typing import Any

import pytest

from mathmaster.core.services.scoring_ledger import ScoringLedger


class ManualScheduler:
    """Records deferred work so tests decide when timers fire and fetches finish."""

    def __init__(self) -> None:
        self.timers: list[tuple[int, Callable[[], None]]] = []
        self.background: list[tuple[Callable[[], Any], Callable[[Any], None]]] = []

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        self.timers.append((delay_ms, callback))

    def run_in_background(self, work: Callable[[], Any], on_done: Callable[[Any], None]) -> None:
        self.background.append((work, on_done))

    def fire_timers(self) -> None:
        pending, self.timers = self.timers, []
        for _, callback in pending:
            callback()

    def finish_background(self) -> None:
        pending, self.background = self.background, []
        for work, on_done in pending:
            on_done(work())


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def ledger(rng: random.Random) -> ScoringLedger:
    counter = itertools.count(1)
    return ScoringLedger(rng=rng, id_factory=lambda: f"s{next(counter)}")
