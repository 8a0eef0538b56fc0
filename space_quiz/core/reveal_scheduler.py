"""One-shot, cancellable timer abstraction used for the reveal window.

The controller only depends on these protocols. The Qt application provides
an implementation backed by single-shot QTimers; tests drive a manual one.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Protocol


class ScheduledCallback(Protocol):
    """Handle for a pending callback."""

    def cancel(self) -> None:
        """Prevent the callback from running. Calling twice is harmless."""

    @property
    def is_pending(self) -> bool: ...


class RevealScheduler(Protocol):
    """Runs a callback once after a delay on the caller's event loop."""

    def schedule(self, delay_ms: int, callback: Callable[[], None]) -> ScheduledCallback: ...
