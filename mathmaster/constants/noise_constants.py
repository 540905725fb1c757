"""Microphone and loudness constants for the noise monitor."""

DEFAULT_SENSITIVITY: int = 65
MIN_SENSITIVITY: int = 1
MAX_SENSITIVITY: int = 95

# Roughly one display refresh.
SAMPLE_INTERVAL_MS: int = 16

SAMPLE_RATE_HZ: int = 44100
FFT_SIZE: int = 256
MIN_DECIBELS: float = -100.0
MAX_DECIBELS: float = -30.0
SMOOTHING_TIME_CONSTANT: float = 0.8

# Average byte magnitude is scaled by this factor before clamping to 100.
LOUDNESS_GAIN: float = 200.0
