"""Application entry point for MathMaster 7."""

from __future__ import annotations

import sys

from PySide6.QtWidgets import QApplication

from mathmaster.core.app_config import AppConfig
from mathmaster.core.classroom_manager import ClassroomManager
from mathmaster.core.services.noise_sampler import LevelSource, MicrophoneUnavailableError
from mathmaster.core.services.quiz_session import QuizSessionController
from mathmaster.core.services.scoring_ledger import ScoringLedger
from mathmaster.core.theory_provider import TheoryQuestionProvider
from mathmaster.ui.main_window import MainWindow
from mathmaster.ui.qt_scheduler import QtTaskScheduler
from mathmaster.utils.logging_config import configure_logging


def _open_microphone() -> LevelSource:
    """Open the default microphone; PortAudio is only loaded when the monitor is switched on."""
    try:
        from mathmaster.core.microphone_source import MicrophoneLevelSource
    except OSError as exc:
        raise MicrophoneUnavailableError(f"PortAudio library not found: {exc}") from exc
    return MicrophoneLevelSource()


def main() -> None:
    """Read settings, wire the services together and launch the Qt UI."""
    config = AppConfig()
    logger = configure_logging(config.log_level)
    logger.info("Starting MathMaster 7…")
    if not config.has_gemini:
        logger.warning("No Gemini API key configured; theory questions will be generated locally.")

    app = QApplication(sys.argv)

    scheduler = QtTaskScheduler(app)
    theory_provider = TheoryQuestionProvider(
        api_key=config.gemini_api_key,
        model_name=config.gemini_model,
        timeout_seconds=config.request_timeout_seconds,
    )
    ledger = ScoringLedger()
    quiz = QuizSessionController(
        ledger=ledger,
        scheduler=scheduler,
        theory_source=theory_provider,
        feedback_window_ms=config.feedback_window_ms,
    )
    manager = ClassroomManager(ledger=ledger, quiz=quiz)

    window = MainWindow(
        manager=manager,
        level_source_factory=_open_microphone,
        default_sensitivity=config.default_sensitivity,
    )
    window.show()
    sys.exit(app.exec())


if __name__ == "__main__":
    main()
