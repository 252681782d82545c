"""Output capture for unittesting.

ConsoleSink writes diagnostic records to stdout; this module collects that
output so the demonstration runner can attach it to scenario results.
"""

from __future__ import annotations

import sys
from contextlib import contextmanager
from dataclasses import dataclass
from io import StringIO
from typing import Any, Generator, TextIO


@dataclass
class CapturedOutput:
    """Container for captured stdout/stderr."""

    stdout: str = ""
    stderr: str = ""

    @property
    def has_output(self) -> bool:
        return bool(self.stdout or self.stderr)

    @property
    def stdout_lines(self) -> list[str]:
        """Captured stdout split into lines, without the trailing newline."""
        return self.stdout.splitlines()

    def as_logs(self) -> list[str]:
        """Convert captured output to log entries for a ScenarioResult."""
        logs = []
        if self.stdout:
            logs.append(f"[stdout]\n{self.stdout.rstrip()}")
        if self.stderr:
            logs.append(f"[stderr]\n{self.stderr.rstrip()}")
        return logs


@contextmanager
def capture_output() -> Generator[CapturedOutput, None, None]:
    """Context manager that captures stdout and stderr.

    Usage:
        with capture_output() as captured:
            ConsoleSink().info(">> signup")

        assert captured.stdout == ">> signup\\n"
    """
    capture = OutputCapture()
    capture.start()
    captured = CapturedOutput()
    try:
        yield captured
    finally:
        result = capture.stop()
        captured.stdout = result.stdout
        captured.stderr = result.stderr


class OutputCapture:
    """Reusable output capture that can be enabled/disabled."""

    def __init__(self, enabled: bool = True):
        """Initialize the capture.

        Args:
            enabled: Whether capture is enabled. If False, acts as a no-op.
        """
        self.enabled = enabled
        self._old_stdout: TextIO | Any | None = None
        self._old_stderr: TextIO | Any | None = None
        self._new_stdout: StringIO | None = None
        self._new_stderr: StringIO | None = None

    def start(self) -> None:
        """Start capturing output."""
        if not self.enabled:
            return

        self._old_stdout = sys.stdout
        self._old_stderr = sys.stderr
        self._new_stdout = StringIO()
        self._new_stderr = StringIO()

        sys.stdout = self._new_stdout
        sys.stderr = self._new_stderr

    def stop(self) -> CapturedOutput:
        """Stop capturing and return captured output."""
        if not self.enabled or self._old_stdout is None:
            return CapturedOutput()

        sys.stdout = self._old_stdout
        sys.stderr = self._old_stderr

        captured = CapturedOutput(
            stdout=self._new_stdout.getvalue() if self._new_stdout else "",
            stderr=self._new_stderr.getvalue() if self._new_stderr else "",
        )

        self._old_stdout = None
        self._old_stderr = None
        self._new_stdout = None
        self._new_stderr = None

        return captured
