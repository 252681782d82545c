"""Application host and launch delegates.

The host calls its delegate's ``did_finish_launching`` hook once at startup.
Under test, the host is pointed at TestingAppDelegate instead of the
production delegate so that launching the app does no real startup work.
"""

from __future__ import annotations

import importlib
import sys
from pathlib import Path
from typing import TYPE_CHECKING, Any, Protocol

from unittesting.diagnostics import (
    ConstructionError,
    DiagnosticContext,
    LaunchError,
    ResolutionError,
    suggest_delegate_class,
)
from unittesting.sinks import ConsoleSink, Logger

if TYPE_CHECKING:
    from unittesting.config import UnitTestingConfig


class ApplicationDelegate(Protocol):
    def did_finish_launching(self, options: dict[str, Any] | None) -> bool: ...


class AppDelegate:
    """Production application delegate."""

    def __init__(self, sink: Logger | None = None):
        self._sink = sink or ConsoleSink()

    def did_finish_launching(self, options: dict[str, Any] | None) -> bool:
        self._sink.info("<< Launching with production app delegate")
        return True


class TestingAppDelegate:
    """Delegate installed while tests run. Does nothing but report itself."""

    __test__ = False  # not a pytest test class

    def __init__(self, sink: Logger | None = None):
        self._sink = sink or ConsoleSink()

    def did_finish_launching(self, options: dict[str, Any] | None) -> bool:
        self._sink.info("<< Launching with testing app delegate")
        return True


class Application:
    """Minimal application host that launches exactly once."""

    def __init__(self, delegate: ApplicationDelegate, sink: Logger | None = None):
        self.delegate = delegate
        self._sink = sink or ConsoleSink()
        self._launched = False

    @property
    def launched(self) -> bool:
        return self._launched

    def launch(self, options: dict[str, Any] | None = None) -> bool:
        """Hand control to the delegate's launch hook.

        Returns:
            The delegate's result; True means continue normal startup.

        Raises:
            LaunchError: If the application was already launched.
        """
        if self._launched:
            message = f"{type(self.delegate).__name__} has already been launched"
            self._sink.error(f"<< {message}")
            raise LaunchError(message)
        self._launched = True
        return self.delegate.did_finish_launching(options)


def resolve_delegate(path: str, source_paths: list[str] | None = None) -> type:
    """Resolve a dotted path like "myapp.delegates.AppDelegate" to a class.

    Args:
        path: Dotted path to the delegate class.
        source_paths: Extra directories to add to sys.path first.

    Raises:
        ResolutionError: If the path cannot be imported or is not a class.
    """
    for source_path in source_paths or []:
        source_path = str(Path(source_path))
        if source_path not in sys.path:
            sys.path.insert(0, source_path)

    ctx = DiagnosticContext(target=path)
    module_path, _, class_name = path.rpartition(".")
    if not module_path:
        ctx.add_suggestion("Use format: 'module.ClassName'")
        raise ResolutionError(f"Invalid delegate path: {path}", context=ctx)

    try:
        module = importlib.import_module(module_path)
        ctx.add_search(f"import {module_path}", found=True)
    except ImportError as e:
        ctx.add_search(f"import {module_path}", found=False, reason=str(e))
        ctx.add_suggestion("Check that source_paths in unittesting.yaml includes your source directory")
        raise ResolutionError(f"Could not resolve delegate: {path}", context=ctx) from e

    cls = getattr(module, class_name, None)
    if not isinstance(cls, type):
        reason = "attribute not found" if cls is None else "not a class"
        ctx.add_search(path, found=False, reason=reason)
        ctx.add_suggestion(suggest_delegate_class(class_name, module_path))
        raise ResolutionError(f"Could not resolve delegate: {path}", context=ctx)

    ctx.add_search(path, found=True)
    return cls


def _try_resolve(path: str, source_paths: list[str]) -> tuple[type | None, str | None]:
    """Try to resolve a delegate class.

    Returns:
        Tuple of (class, error_message). Class is None on failure.
    """
    try:
        return resolve_delegate(path, source_paths), None
    except ResolutionError as e:
        return None, str(e)


def select_delegate(config: UnitTestingConfig, sink: Logger | None = None) -> type:
    """Pick the delegate class for a launch.

    Uses the testing delegate when testing is enabled and it resolves,
    otherwise the production delegate.
    """
    app_config = config.app
    if app_config.testing:
        cls, error = _try_resolve(app_config.testing_delegate, app_config.source_paths)
        if cls is not None:
            return cls
        if sink is not None and config.output.debug_mode:
            sink.error(f"[DEBUG] Testing delegate unavailable, using production delegate:\n{error}")
    return resolve_delegate(app_config.delegate, app_config.source_paths)


def build_delegate(cls: type, sink: Logger | None = None) -> ApplicationDelegate:
    """Instantiate a delegate class.

    Resolution order:
    1. ``cls(sink=sink)`` for delegates that report through a sink
    2. Zero-arg constructor
    3. Raise ConstructionError with what was tried

    Raises:
        ConstructionError: If neither constructor accepts the call.
    """
    ctx = DiagnosticContext(target=f"{cls.__module__}.{cls.__qualname__}")

    try:
        return cls(sink=sink)
    except TypeError as e:
        ctx.add_search(f"{cls.__name__}(sink=...)", found=False, reason=str(e))

    try:
        return cls()
    except TypeError as e:
        ctx.add_search(f"{cls.__name__}() (zero-arg constructor)", found=False, reason=str(e))

    ctx.add_suggestion(f"Give {cls.__name__} a zero-argument constructor or accept a 'sink' keyword")
    raise ConstructionError(f"Cannot construct {cls.__name__}", context=ctx)
