"""Analytics singleton and the seam for replacing it in tests.

Code that reaches for ``Analytics.shared()`` directly cannot be tested
without the real tracker. Screen shows the refactored shape: the tracker is
passed in, and the canonical instance is only the production default.
"""

from __future__ import annotations

import threading
from typing import Protocol

from unittesting.sinks import ConsoleSink, Logger


class Tracker(Protocol):
    def track(self, event: str) -> None: ...


class Analytics:
    """Event tracker with one canonical, process-wide instance."""

    _shared: Analytics | None = None
    _shared_lock = threading.Lock()

    def __init__(self, sink: Logger | None = None):
        self._sink = sink or ConsoleSink()

    @classmethod
    def shared(cls, sink: Logger | None = None) -> Analytics:
        """Return the canonical instance, creating it on first use.

        ``sink`` only takes effect on the call that creates the instance.
        """
        if Analytics._shared is None:
            with Analytics._shared_lock:
                if Analytics._shared is None:
                    Analytics._shared = Analytics(sink=sink)
        return Analytics._shared

    def track(self, event: str) -> None:
        """Record an event, noting when this is not the canonical instance."""
        self._sink.info(f">> {event}")
        if self is not Analytics.shared():
            self._sink.info(">> ...Not the Analytics singleton")


class Screen:
    """A screen that reports when it appears."""

    def __init__(self, analytics: Tracker | None = None):
        self.analytics = analytics or Analytics.shared()

    def did_appear(self) -> None:
        self.analytics.track(f"did_appear - {type(self).__name__}")
