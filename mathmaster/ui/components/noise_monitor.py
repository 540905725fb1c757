"""Component with the microphone toggle, level bar and sensitivity slider."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import Qt, QTimer
from PySide6.QtWidgets import (
    QHBoxLayout,
    QLabel,
    QProgressBar,
    QPushButton,
    QSlider,
    QVBoxLayout,
    QWidget,
)

from mathmaster.constants.noise_constants import (
    DEFAULT_SENSITIVITY,
    MAX_SENSITIVITY,
    MIN_SENSITIVITY,
    SAMPLE_INTERVAL_MS,
)
from mathmaster.constants.ui_constants import (
    MICROPHONE_ERROR_MESSAGE,
    NOISE_LEVEL_LABEL,
    NOISE_SENSITIVITY_LABEL,
    NOISE_START_BUTTON,
    NOISE_STOP_BUTTON,
)
from mathmaster.core.services.noise_sampler import (
    LevelSource,
    MicrophoneUnavailableError,
    NoiseSampler,
)
from mathmaster.styling.color_palette import ColorPalette, Theme
from mathmaster.ui.dialog_helpers import show_warning


class NoiseMonitor(QWidget):
    """Drives a NoiseSampler from a QTimer and forwards the "too loud" flag."""

    def __init__(
        self,
        on_noise_level_change: Callable[[bool], None],
        source_factory: Callable[[], LevelSource],
        sensitivity: int = DEFAULT_SENSITIVITY,
        parent: QWidget | None = None,
    ) -> None:
        super().__init__(parent)
        self.sampler = NoiseSampler(
            on_noise_change=on_noise_level_change,
            source_factory=source_factory,
            sensitivity=sensitivity,
        )
        self._build_ui()
        self._configure_sample_timer()
        self._set_listening_ui(False)

    def _build_ui(self) -> None:
        layout = QVBoxLayout()
        self.setLayout(layout)

        top_row = QHBoxLayout()
        self.toggle_button = QPushButton(NOISE_START_BUTTON, self)
        self.toggle_button.clicked.connect(self._handle_toggle)
        top_row.addWidget(self.toggle_button)

        self.level_label = QLabel(NOISE_LEVEL_LABEL, self)
        top_row.addWidget(self.level_label)
        self.level_bar = QProgressBar(self)
        self.level_bar.setRange(0, 100)
        self.level_bar.setTextVisible(False)
        top_row.addWidget(self.level_bar, stretch=1)
        layout.addLayout(top_row)

        slider_row = QHBoxLayout()
        self.sensitivity_label = QLabel(self._sensitivity_text(), self)
        slider_row.addWidget(self.sensitivity_label)
        self.sensitivity_slider = QSlider(Qt.Horizontal, self)
        self.sensitivity_slider.setRange(MIN_SENSITIVITY, MAX_SENSITIVITY)
        self.sensitivity_slider.setValue(self.sampler.sensitivity)
        self.sensitivity_slider.valueChanged.connect(self._handle_sensitivity_changed)
        slider_row.addWidget(self.sensitivity_slider, stretch=1)
        layout.addLayout(slider_row)

    def _configure_sample_timer(self) -> None:
        self.sample_timer = QTimer(self)
        self.sample_timer.setInterval(SAMPLE_INTERVAL_MS)
        self.sample_timer.timeout.connect(self._tick)

    def _handle_toggle(self) -> None:
        if self.sampler.is_listening():
            self.stop()
        else:
            self.start()

    def start(self) -> None:
        try:
            self.sampler.start()
        except MicrophoneUnavailableError:
            show_warning(self, NOISE_LEVEL_LABEL, MICROPHONE_ERROR_MESSAGE)
            self._set_listening_ui(False)
            return
        self._set_listening_ui(True)
        self.sample_timer.start()

    def stop(self) -> None:
        self.sample_timer.stop()
        self.sampler.stop()
        self._set_listening_ui(False)

    def _tick(self) -> None:
        try:
            reading = self.sampler.sample()
        except MicrophoneUnavailableError:
            self.sample_timer.stop()
            self._set_listening_ui(False)
            show_warning(self, NOISE_LEVEL_LABEL, MICROPHONE_ERROR_MESSAGE)
            return
        if reading is None:
            return
        self.level_bar.setValue(reading.level)
        color = ColorPalette.ERROR if reading.is_loud else ColorPalette.SUCCESS
        self.level_bar.setStyleSheet(
            f"QProgressBar::chunk {{ background-color: {color.get(Theme.LIGHT)}; }}"
        )

    def _handle_sensitivity_changed(self, value: int) -> None:
        self.sampler.sensitivity = value
        self.sensitivity_label.setText(self._sensitivity_text())

    def _sensitivity_text(self) -> str:
        return f"{NOISE_SENSITIVITY_LABEL}: {self.sampler.sensitivity}%"

    def _set_listening_ui(self, listening: bool) -> None:
        self.toggle_button.setText(NOISE_STOP_BUTTON if listening else NOISE_START_BUTTON)
        self.level_label.setVisible(listening)
        self.level_bar.setVisible(listening)
        self.level_bar.setValue(0)
        self.sensitivity_label.setVisible(listening)
        self.sensitivity_slider.setVisible(listening)
