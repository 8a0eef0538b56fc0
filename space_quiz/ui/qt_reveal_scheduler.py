"""Reveal scheduler backed by single-shot QTimers on the Qt event loop."""

from __future__ import annotations

from collections.abc import Callable

from PySide6.QtCore import QObject, QTimer


class QtScheduledCallback:
    """Handle for one pending QTimer callback."""

    def __init__(self, timer: QTimer, callback: Callable[[], None]) -> None:
        self._timer = timer
        self._callback = callback
        self._pending = True
        self._timer.timeout.connect(self._fire)

    @property
    def is_pending(self) -> bool:
        return self._pending

    def cancel(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.stop()
        self._timer.deleteLater()

    def _fire(self) -> None:
        if not self._pending:
            return
        self._pending = False
        self._timer.deleteLater()
        self._callback()


class QtRevealScheduler:
    """Schedules reveal callbacks as children of ``parent`` so they die with it."""

    def __init__(self, parent: QObject | None = None) -> None:
        self._parent = parent

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> QtScheduledCallback:
        timer = QTimer(self._parent)
        timer.setSingleShot(True)
        timer.setInterval(delay_ms)
        handle = QtScheduledCallback(timer, callback)
        timer.start()
        return handle
