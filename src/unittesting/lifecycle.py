"""Instance lifecycle observation.

Each LifeCycle object takes the next ordinal from a counter when it is
constructed and reports both its construction and its destruction, so tests
can see exactly when the test framework creates and releases the object
under test.
"""

from __future__ import annotations

import threading

from unittesting.sinks import ConsoleSink, Logger


class InstanceCounter:
    """A monotonically increasing ordinal source."""

    def __init__(self, start: int = 0):
        self._value = start
        self._lock = threading.Lock()

    @property
    def value(self) -> int:
        """The last ordinal handed out (0 before the first)."""
        return self._value

    def next(self) -> int:
        """Increment the counter and return the new value."""
        with self._lock:
            self._value += 1
            return self._value

    def reset(self) -> None:
        """Start counting from zero again."""
        with self._lock:
            self._value = 0


# Shared by every LifeCycle built without an explicit counter.
_default_counter = InstanceCounter()


def reset_counter() -> None:
    """Reset the process-wide instance counter (for testing)."""
    _default_counter.reset()


def get_counter() -> int:
    """Get the current process-wide instance counter."""
    return _default_counter.value


class LifeCycle:
    """An object that reports its own construction and destruction."""

    def __init__(self, counter: InstanceCounter | None = None, sink: Logger | None = None):
        self._sink = sink or ConsoleSink()
        self.instance = (counter or _default_counter).next()
        self._sink.info(f">> LifeCycle.init() #{self.instance}")

    def __del__(self):
        self._sink.info(f">> LifeCycle.deinit #{self.instance}")

    def __repr__(self) -> str:
        return f"LifeCycle(instance={self.instance})"

    def method_one(self) -> None:
        self._sink.info(">> method one")

    def method_two(self) -> None:
        self._sink.info(">> method two")
