"""Service that turns microphone readings into a "too loud" signal."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass
import logging
from typing import Protocol

from mathmaster.constants.noise_constants import (
    DEFAULT_SENSITIVITY,
    MAX_SENSITIVITY,
    MIN_SENSITIVITY,
)
from mathmaster.core.audio_analyser import normalized_loudness

logger = logging.getLogger(__name__)


class MicrophoneUnavailableError(Exception):
    """Raised when the microphone cannot be opened or stops delivering audio."""


class LevelSource(Protocol):
    """Audio input exposing analyser byte bins (0..255 per frequency bin)."""

    def read_frequency_bins(self) -> Sequence[int]: ...

    def close(self) -> None: ...


@dataclass(frozen=True, slots=True)
class NoiseReading:
    level: int
    threshold: int
    is_loud: bool


def clamp_sensitivity(value: int) -> int:
    return max(MIN_SENSITIVITY, min(MAX_SENSITIVITY, int(value)))


def loudness_threshold(sensitivity: int) -> int:
    """Higher sensitivity means a lower loudness threshold."""
    return 100 - clamp_sensitivity(sensitivity)


class NoiseSampler:
    """Samples a ``LevelSource`` and reports whether the room is too loud.

    The owner drives ``sample()`` on a timer. Sensitivity can change at any
    time and is read fresh on every sample.
    """

    def __init__(
        self,
        on_noise_change: Callable[[bool], None],
        source_factory: Callable[[], LevelSource],
        sensitivity: int = DEFAULT_SENSITIVITY,
    ) -> None:
        self._on_noise_change = on_noise_change
        self._source_factory = source_factory
        self._sensitivity = clamp_sensitivity(sensitivity)
        self._source: LevelSource | None = None
        self._level: int = 0
        self._is_loud: bool = False

    @property
    def sensitivity(self) -> int:
        return self._sensitivity

    @sensitivity.setter
    def sensitivity(self, value: int) -> None:
        self._sensitivity = clamp_sensitivity(value)

    @property
    def threshold(self) -> int:
        return loudness_threshold(self._sensitivity)

    @property
    def level(self) -> int:
        return self._level

    @property
    def is_loud(self) -> bool:
        return self._is_loud

    def is_listening(self) -> bool:
        return self._source is not None

    def start(self) -> None:
        """Open the microphone. Raises ``MicrophoneUnavailableError`` on failure."""
        if self._source is not None:
            return
        try:
            self._source = self._source_factory()
        except MicrophoneUnavailableError:
            logger.warning("Microphone unavailable; noise monitor stays off.")
            raise
        logger.info("Noise monitor started (sensitivity %d)", self._sensitivity)

    def sample(self) -> NoiseReading | None:
        """Take one reading and report it to the subscriber.

        Returns None when not listening. A failing source is released before
        ``MicrophoneUnavailableError`` propagates.
        """
        source = self._source
        if source is None:
            return None

        try:
            bins = source.read_frequency_bins()
        except MicrophoneUnavailableError:
            logger.warning("Microphone stopped delivering audio; stopping noise monitor.")
            self.stop()
            raise

        threshold = loudness_threshold(self._sensitivity)
        level = normalized_loudness(bins)
        self._level = level
        self._is_loud = level > threshold
        self._on_noise_change(self._is_loud)
        return NoiseReading(level=level, threshold=threshold, is_loud=self._is_loud)

    def stop(self) -> None:
        """Release the microphone and report "not loud"."""
        source, self._source = self._source, None
        if source is not None:
            try:
                source.close()
            finally:
                logger.info("Noise monitor stopped")
        self._level = 0
        self._is_loud = False
        self._on_noise_change(False)
