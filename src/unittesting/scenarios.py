"""Built-in demonstration scenarios.

Each scenario is a small self-checking walkthrough of one concept: object
lifecycle, the analytics singleton, the injection seam, the testing launch
delegate, and the coverage example.
"""

from __future__ import annotations

import gc
from typing import Callable

from unittesting.analytics import Analytics, Screen
from unittesting.app import Application, TestingAppDelegate
from unittesting.capture import capture_output
from unittesting.covered import CoveredClass
from unittesting.diagnostics import DiagnosticContext, ResolutionError
from unittesting.lifecycle import InstanceCounter, LifeCycle
from unittesting.runner import Scenario
from unittesting.sinks import CapturingSink

NOT_SINGLETON = ">> ...Not the Analytics singleton"

SCENARIOS: list[Scenario] = []


def scenario(name: str, description: str) -> Callable[[Callable[[], None]], Callable[[], None]]:
    """Register a function as a built-in scenario."""

    def register(func: Callable[[], None]) -> Callable[[], None]:
        SCENARIOS.append(Scenario(name=name, description=description, func=func))
        return func

    return register


def get_scenarios(names: list[str] | None = None) -> list[Scenario]:
    """Look up scenarios by name, preserving registration order.

    Raises:
        ResolutionError: If a requested name is not registered.
    """
    if not names:
        return list(SCENARIOS)

    known = {s.name: s for s in SCENARIOS}
    missing = [n for n in names if n not in known]
    if missing:
        ctx = DiagnosticContext(target=", ".join(missing))
        for name in missing:
            ctx.add_search(f"scenario {name!r}", found=False, reason="not registered")
        ctx.add_suggestion(f"Available scenarios: {', '.join(known)}")
        raise ResolutionError(f"Unknown scenario: {', '.join(missing)}", context=ctx)

    return [s for s in SCENARIOS if s.name in names]


@scenario("lifecycle-ordinals", "instances take consecutive ordinals")
def lifecycle_ordinals() -> None:
    counter = InstanceCounter()
    first = LifeCycle(counter=counter)
    second = LifeCycle(counter=counter)
    assert (first.instance, second.instance) == (1, 2), (
        f"expected ordinals (1, 2), got ({first.instance}, {second.instance})"
    )


@scenario("lifecycle-release", "releasing an instance reports the same ordinal")
def lifecycle_release() -> None:
    sink = CapturingSink()
    sut = LifeCycle(counter=InstanceCounter(), sink=sink)
    sut.method_one()
    sut.method_two()
    del sut
    gc.collect()
    assert sink.lines == [
        ">> LifeCycle.init() #1",
        ">> method one",
        ">> method two",
        ">> LifeCycle.deinit #1",
    ], f"unexpected records: {sink.lines}"


@scenario("analytics-shared", "the shared accessor always returns the same instance")
def analytics_shared() -> None:
    assert Analytics.shared() is Analytics.shared(), "Analytics.shared() returned different objects"


@scenario("analytics-canonical", "tracking on the shared instance")
def analytics_canonical() -> None:
    with capture_output() as captured:
        Analytics.shared().track("signup")
    assert captured.stdout_lines == [">> signup"], f"unexpected output: {captured.stdout_lines}"


@scenario("analytics-substitute", "tracking on a directly constructed instance")
def analytics_substitute() -> None:
    sink = CapturingSink()
    Analytics(sink=sink).track("signup")
    assert sink.lines == [">> signup", NOT_SINGLETON], f"unexpected records: {sink.lines}"


@scenario("screen-injection", "a screen reports to the tracker it was given")
def screen_injection() -> None:
    sink = CapturingSink()
    Screen(analytics=Analytics(sink=sink)).did_appear()
    assert sink.lines[0] == ">> did_appear - Screen", f"unexpected records: {sink.lines}"


@scenario("testing-launch", "the testing delegate lets startup continue")
def testing_launch() -> None:
    sink = CapturingSink()
    app = Application(TestingAppDelegate(sink=sink), sink=sink)
    assert app.launch({"mode": "test"}) is True, "testing delegate did not return True"
    assert sink.lines == ["<< Launching with testing app delegate"], f"unexpected records: {sink.lines}"


@scenario("covered-class", "coverage example behaves as documented")
def covered_class() -> None:
    assert CoveredClass.max(1, 2) == 2
    assert CoveredClass.max(3, 2) == 3
    assert CoveredClass.comma_separated(2, 4) == "2,3,4"
    assert CoveredClass(width=7).area == 49
