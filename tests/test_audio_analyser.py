from __future__ import annotations

import numpy as np
import pytest

from mathmaster.core.audio_analyser import SpectrumAnalyser, normalized_loudness


def test_silence_produces_zero_bins():
    analyser = SpectrumAnalyser()

    bins = analyser.byte_frequency_data(np.zeros(256))

    assert bins.shape == (128,)
    assert bins.dtype == np.uint8
    assert not bins.any()
    assert normalized_loudness(bins) == 0


def test_loud_tone_raises_level():
    analyser = SpectrumAnalyser(smoothing=0.0)
    t = np.arange(256) / 44100
    tone = 0.8 * np.sin(2 * np.pi * 1000 * t)

    bins = analyser.byte_frequency_data(tone)

    assert bins.max() == 255
    assert normalized_loudness(bins) > 0


def test_smoothing_ramps_up_over_blocks():
    analyser = SpectrumAnalyser()
    noise = np.random.default_rng(3).uniform(-0.5, 0.5, 256)

    first = normalized_loudness(analyser.byte_frequency_data(noise))
    later = first
    for _ in range(20):
        later = normalized_loudness(analyser.byte_frequency_data(noise))

    assert later >= first


def test_short_blocks_are_padded():
    analyser = SpectrumAnalyser()

    assert analyser.byte_frequency_data(np.zeros(10)).shape == (128,)


@pytest.mark.parametrize("fft_size", [0, 100, -256])
def test_fft_size_must_be_power_of_two(fft_size):
    with pytest.raises(ValueError):
        SpectrumAnalyser(fft_size=fft_size)


def test_decibel_range_must_be_ordered():
    with pytest.raises(ValueError):
        SpectrumAnalyser(min_decibels=-30, max_decibels=-100)


@pytest.mark.parametrize(
    ("bins", "expected"),
    [([], 0), ([0] * 128, 0), ([255] * 128, 100), ([127.5] * 128, 100), ([51] * 128, 40)],
)
def test_normalized_loudness(bins, expected):
    assert normalized_loudness(bins) == expected
