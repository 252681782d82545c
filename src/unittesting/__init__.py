"""unittesting - test doubles, singleton seams and lifecycle observation."""

__version__ = "0.1.0"

from unittesting.analytics import Analytics, Screen, Tracker
from unittesting.app import AppDelegate, Application, TestingAppDelegate
from unittesting.covered import CoveredClass
from unittesting.lifecycle import InstanceCounter, LifeCycle
from unittesting.sinks import CapturingSink, ConsoleSink, Logger, NullSink

__all__ = [
    "Analytics",
    "AppDelegate",
    "Application",
    "CapturingSink",
    "ConsoleSink",
    "CoveredClass",
    "InstanceCounter",
    "LifeCycle",
    "Logger",
    "NullSink",
    "Screen",
    "TestingAppDelegate",
    "Tracker",
]
