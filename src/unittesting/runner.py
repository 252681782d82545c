"""Scenario runner - executes demonstration scenarios and reports results."""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Callable

from unittesting.capture import OutputCapture


class ResultStatus(str, Enum):
    """Scenario result status."""

    PASSED = "passed"
    FAILED = "failed"  # An assertion did not hold
    ERROR = "error"  # Scenario raised something other than AssertionError


@dataclass
class Scenario:
    """A named zero-argument check."""

    name: str
    description: str
    func: Callable[[], None]


@dataclass
class ScenarioResult:
    """Result of running a single scenario."""

    scenario: Scenario
    status: ResultStatus
    message: str | None = None
    exception: Exception | None = None
    duration_ms: float = 0.0
    logs: list[str] = field(default_factory=list)


def run_scenario(scenario: Scenario, capture_output: bool = True) -> ScenarioResult:
    """Run one scenario, capturing anything it prints."""
    start = time.perf_counter()
    capture = OutputCapture(enabled=capture_output)
    status = ResultStatus.PASSED
    message: str | None = None
    exception: Exception | None = None

    capture.start()
    try:
        scenario.func()
    except AssertionError as e:
        status = ResultStatus.FAILED
        message = str(e) or "Assertion failed"
        exception = e
    except Exception as e:
        status = ResultStatus.ERROR
        message = f"{type(e).__name__}: {e}"
        exception = e
    finally:
        captured = capture.stop()

    return ScenarioResult(
        scenario=scenario,
        status=status,
        message=message,
        exception=exception,
        duration_ms=(time.perf_counter() - start) * 1000,
        logs=captured.as_logs() if captured.has_output else [],
    )


def run_scenarios(scenarios: list[Scenario], capture_output: bool = True) -> list[ScenarioResult]:
    """Run scenarios in order.

    Args:
        scenarios: Scenarios to run.
        capture_output: Capture stdout/stderr of each scenario into its result logs.

    Returns:
        List of scenario results.
    """
    return [run_scenario(s, capture_output=capture_output) for s in scenarios]


def format_results(results: list[ScenarioResult], show_all_logs: bool = False) -> str:
    """Format scenario results for display.

    Args:
        results: List of scenario results.
        show_all_logs: If True, show captured output for passing scenarios too.

    Returns:
        Formatted string for display.
    """
    lines = []
    passed = 0
    failed = 0
    errors = 0

    for result in results:
        status_icon = {
            ResultStatus.PASSED: "\u2713",  # checkmark
            ResultStatus.FAILED: "\u2717",  # x mark
            ResultStatus.ERROR: "!",
        }[result.status]

        line = f"  {status_icon} {result.scenario.name}: {result.scenario.description}"

        if result.status == ResultStatus.PASSED:
            passed += 1
            if show_all_logs and result.logs:
                line += _format_logs(result.logs)
        else:
            if result.status == ResultStatus.FAILED:
                failed += 1
            else:
                errors += 1
            if result.message:
                line += f"\n      {result.message}"
            if result.logs:
                line += _format_logs(result.logs)

        lines.append(line)

    total = len(results)
    summary = f"\n{passed} passed, {failed} failed, {errors} errors ({total} total)"

    return "\n".join(lines) + summary


def _format_logs(logs: list[str]) -> str:
    """Indent captured logs under their scenario line."""
    formatted = []
    for log in logs:
        for line in log.split("\n"):
            formatted.append(f"      {line}")
    return "\n" + "\n".join(formatted)
