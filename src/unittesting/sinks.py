"""Diagnostic sinks.

Every observable event in this package is a message delivered to a sink.
Production code prints to the console; tests inject a capturing sink and
assert on the recorded messages instead of scraping stdout.
"""

import sys
from typing import Protocol


class Logger(Protocol):
    def info(self, message: str) -> None: ...
    def error(self, message: str) -> None: ...


class ConsoleSink:
    """Logger that prints records to stdout and errors to stderr."""

    def info(self, message: str) -> None:
        print(message)

    def error(self, message: str) -> None:
        print(message, file=sys.stderr)


class NullSink:
    """Logger that discards all messages."""

    def info(self, message: str) -> None:
        pass

    def error(self, message: str) -> None:
        pass


class CapturingSink:
    """Logger that captures messages for assertion."""

    def __init__(self):
        self.messages: list[tuple[str, str]] = []

    def info(self, message: str) -> None:
        self.messages.append(("info", message))

    def error(self, message: str) -> None:
        self.messages.append(("error", message))

    @property
    def lines(self) -> list[str]:
        """Captured message text, in order, without levels."""
        return [message for _, message in self.messages]

    def clear(self) -> None:
        self.messages.clear()


def make_sink(kind: str) -> Logger:
    """Build a sink from its configured name ("console" or "null")."""
    if kind == "null":
        return NullSink()
    return ConsoleSink()
