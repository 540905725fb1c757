"""Qt implementation of the quiz controller's TaskScheduler."""

from __future__ import annotations

from collections.abc import Callable
import logging
from typing import Any

from PySide6.QtCore import QObject, QRunnable, Qt, QThreadPool, QTimer, Signal

logger = logging.getLogger(__name__)


class _TaskSignals(QObject):
    finished = Signal(object)


class _BackgroundTask(QRunnable):
    def __init__(self, work: Callable[[], Any], signals: _TaskSignals) -> None:
        super().__init__()
        self._work = work
        self._signals = signals

    def run(self) -> None:
        result = None
        try:
            result = self._work()
        except Exception:
            logger.exception("Background task failed")
        self._signals.finished.emit(result)


class QtTaskScheduler(QObject):
    """Runs timers on the GUI thread and blocking work on the global thread pool.

    ``on_done`` always runs on the GUI thread: the worker emits from the pool
    thread and the explicitly queued connection delivers the result through
    the GUI event loop.
    """

    def __init__(self, parent: QObject | None = None) -> None:
        super().__init__(parent)
        self._pool = QThreadPool.globalInstance()
        self._pending: set[_TaskSignals] = set()

    def call_later(self, delay_ms: int, callback: Callable[[], None]) -> None:
        QTimer.singleShot(delay_ms, self, callback)

    def run_in_background(self, work: Callable[[], Any], on_done: Callable[[Any], None]) -> None:
        signals = _TaskSignals(self)
        self._pending.add(signals)

        def finish(result: Any) -> None:
            self._pending.discard(signals)
            signals.deleteLater()
            on_done(result)

        signals.finished.connect(finish, Qt.ConnectionType.QueuedConnection)
        self._pool.start(_BackgroundTask(work, signals))
