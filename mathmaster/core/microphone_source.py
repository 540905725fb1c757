"""Microphone capture through sounddevice, exposed as analyser byte bins."""

from __future__ import annotations

import logging
from threading import Lock

import numpy as np
import sounddevice as sd

from mathmaster.constants.noise_constants import FFT_SIZE, SAMPLE_RATE_HZ
from mathmaster.core.audio_analyser import SpectrumAnalyser
from mathmaster.core.services.noise_sampler import MicrophoneUnavailableError

logger = logging.getLogger(__name__)


class MicrophoneLevelSource:
    """Keeps the latest input block from the default microphone.

    The PortAudio callback runs on its own thread and only copies samples;
    analysis happens in ``read_frequency_bins`` on the caller's thread.
    """

    def __init__(
        self,
        sample_rate: int = SAMPLE_RATE_HZ,
        fft_size: int = FFT_SIZE,
        device: int | str | None = None,
    ) -> None:
        self._analyser = SpectrumAnalyser(fft_size=fft_size)
        self._latest = np.zeros(fft_size, dtype=np.float32)
        self._lock = Lock()
        try:
            self._stream = sd.InputStream(
                samplerate=sample_rate,
                blocksize=fft_size,
                channels=1,
                dtype="float32",
                device=device,
                callback=self._on_audio_block,
            )
        except (sd.PortAudioError, OSError, ValueError) as exc:
            raise MicrophoneUnavailableError(str(exc)) from exc
        try:
            self._stream.start()
        except sd.PortAudioError as exc:
            self._stream.close()
            raise MicrophoneUnavailableError(str(exc)) from exc
        logger.info("Microphone stream opened at %d Hz", sample_rate)

    def _on_audio_block(self, indata, frames, time_info, status) -> None:
        if status.input_overflow:
            logger.debug("Microphone input overflow")
        with self._lock:
            self._latest = indata[:, 0].copy()

    def read_frequency_bins(self) -> np.ndarray:
        if not self._stream.active:
            raise MicrophoneUnavailableError("Microphone stream stopped unexpectedly.")
        with self._lock:
            block = self._latest
        return self._analyser.byte_frequency_data(block)

    def close(self) -> None:
        try:
            self._stream.stop()
        except sd.PortAudioError as exc:
            logger.warning("Error while stopping microphone stream: %s", exc)
        finally:
            self._stream.close()
            logger.info("Microphone stream closed")
