from __future__ import annotations

import threading
import time

import pytest

QtCore = pytest.importorskip("PySide6.QtCore")
qt_scheduler = pytest.importorskip("mathmaster.ui.qt_scheduler")


@pytest.fixture(scope="module")
def qt_app():
    return QtCore.QCoreApplication.instance() or QtCore.QCoreApplication([])


def _process_events_until(condition, timeout: float = 5.0) -> None:
    deadline = time.monotonic() + timeout
    while not condition() and time.monotonic() < deadline:
        QtCore.QCoreApplication.processEvents()
        time.sleep(0.01)


def test_background_result_is_delivered_on_the_gui_thread(qt_app):
    scheduler = qt_scheduler.QtTaskScheduler()
    gui_thread = threading.get_ident()
    seen = {}

    def work():
        seen["work_thread"] = threading.get_ident()
        return 42

    def on_done(result):
        seen["result"] = result
        seen["done_thread"] = threading.get_ident()

    scheduler.run_in_background(work, on_done)
    QtCore.QThreadPool.globalInstance().waitForDone(5000)
    # Nothing is delivered until the GUI thread spins its event loop.
    assert "result" not in seen

    _process_events_until(lambda: "result" in seen)

    assert seen["result"] == 42
    assert seen["work_thread"] != gui_thread
    assert seen["done_thread"] == gui_thread


def test_failing_background_work_delivers_none(qt_app):
    scheduler = qt_scheduler.QtTaskScheduler()
    results = []

    def work():
        raise RuntimeError("boom")

    scheduler.run_in_background(work, results.append)
    QtCore.QThreadPool.globalInstance().waitForDone(5000)
    _process_events_until(lambda: bool(results))

    assert results == [None]


def test_call_later_runs_callback_after_delay(qt_app):
    scheduler = qt_scheduler.QtTaskScheduler()
    fired = []

    scheduler.call_later(10, lambda: fired.append(True))
    _process_events_until(lambda: bool(fired))

    assert fired == [True]
