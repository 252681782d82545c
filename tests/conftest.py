"""
Pytest configuration and shared fixtures for unittesting tests.

Fixtures:
    sink: CapturingSink for asserting on diagnostic records
    counter: Fresh InstanceCounter so ordinals start at 1
    fresh_shared: Clears the canonical Analytics instance for the test
    project_dir: Temporary project root for configuration files
"""

from pathlib import Path

import pytest

from unittesting.analytics import Analytics
from unittesting.lifecycle import InstanceCounter
from unittesting.sinks import CapturingSink

NOT_SINGLETON = ">> ...Not the Analytics singleton"


@pytest.fixture
def sink() -> CapturingSink:
    """Capturing sink injected in place of the console."""
    return CapturingSink()


@pytest.fixture
def counter() -> InstanceCounter:
    """Counter owned by the test, independent of the process-wide one."""
    return InstanceCounter()


@pytest.fixture
def fresh_shared(monkeypatch):
    """
    Remove the canonical Analytics instance for the duration of a test.

    The next Analytics.shared() call creates a new canonical instance; the
    original one is restored afterwards.
    """
    monkeypatch.setattr(Analytics, "_shared", None)


@pytest.fixture
def project_dir(tmp_path: Path) -> Path:
    """Empty project root."""
    return tmp_path


def write_config(project_root: Path, text: str, name: str = "unittesting.yaml") -> Path:
    """Write a config file into a project root and return its path."""
    path = project_root / name
    path.write_text(text)
    return path


def pytest_configure(config):
    """Register custom markers."""
    config.addinivalue_line("markers", "unit: mark test as a unit test")
    config.addinivalue_line("markers", "cli: mark test as exercising the command line interface")
