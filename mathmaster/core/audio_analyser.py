"""Frequency analysis of microphone blocks, mirroring a browser AnalyserNode.

The loudness scale used by the noise monitor was tuned against the byte
frequency data of a Web Audio analyser (FFT size 256, Blackman window,
smoothing 0.8, -100..-30 dB mapped onto 0..255). ``SpectrumAnalyser``
reproduces that pipeline with numpy so the same sensitivity values behave
the same way.
"""

from __future__ import annotations

import math
from collections.abc import Sequence

import numpy as np

from mathmaster.constants.noise_constants import (
    FFT_SIZE,
    LOUDNESS_GAIN,
    MAX_DECIBELS,
    MIN_DECIBELS,
    SMOOTHING_TIME_CONSTANT,
)


class SpectrumAnalyser:
    """Turns time-domain sample blocks into byte-scaled frequency bins."""

    def __init__(
        self,
        fft_size: int = FFT_SIZE,
        smoothing: float = SMOOTHING_TIME_CONSTANT,
        min_decibels: float = MIN_DECIBELS,
        max_decibels: float = MAX_DECIBELS,
    ) -> None:
        if fft_size <= 0 or fft_size & (fft_size - 1):
            raise ValueError("fft_size must be a positive power of two.")
        if min_decibels >= max_decibels:
            raise ValueError("min_decibels must be lower than max_decibels.")
        self.fft_size = fft_size
        self.smoothing = smoothing
        self.min_decibels = min_decibels
        self.max_decibels = max_decibels
        self._window = np.blackman(fft_size)
        self._smoothed = np.zeros(self.frequency_bin_count)

    @property
    def frequency_bin_count(self) -> int:
        return self.fft_size // 2

    def byte_frequency_data(self, samples: Sequence[float] | np.ndarray) -> np.ndarray:
        """Analyse the most recent ``fft_size`` samples (floats in [-1, 1]).

        Shorter blocks are zero-padded at the front.
        """
        block = np.asarray(samples, dtype=np.float64).reshape(-1)[-self.fft_size:]
        if block.size < self.fft_size:
            block = np.concatenate([np.zeros(self.fft_size - block.size), block])

        spectrum = np.fft.rfft(block * self._window)[: self.frequency_bin_count]
        magnitude = np.abs(spectrum) / self.fft_size
        self._smoothed = self.smoothing * self._smoothed + (1.0 - self.smoothing) * magnitude

        with np.errstate(divide="ignore"):
            decibels = 20.0 * np.log10(self._smoothed)
        scaled = (decibels - self.min_decibels) * (255.0 / (self.max_decibels - self.min_decibels))
        return np.clip(np.nan_to_num(scaled, neginf=0.0), 0, 255).astype(np.uint8)


def normalized_loudness(byte_bins: Sequence[int] | np.ndarray) -> int:
    """Average byte magnitude mapped to 0..100 (rounded half up)."""
    values = np.asarray(byte_bins, dtype=np.float64)
    if values.size == 0:
        return 0
    average = float(values.mean())
    return min(100, math.floor(average / 255.0 * LOUDNESS_GAIN + 0.5))
