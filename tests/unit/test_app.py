"""
Unit tests for the application host, launch delegates and delegate resolution.
"""

import sys
from unittest.mock import Mock

import pytest

from unittesting.app import (
    AppDelegate,
    Application,
    TestingAppDelegate,
    build_delegate,
    resolve_delegate,
    select_delegate,
)
from unittesting.config import UnitTestingConfig
from unittesting.diagnostics import ConstructionError, LaunchError, ResolutionError


class TestDelegates:
    """Test cases for the launch delegates."""

    @pytest.mark.parametrize("options", [None, {}, {"url": "app://open", "flag": True}])
    def test_testing_delegate_always_succeeds(self, sink, options):
        """The testing hook ignores options and returns True."""
        assert TestingAppDelegate(sink=sink).did_finish_launching(options) is True

    def test_testing_delegate_record(self, sink):
        TestingAppDelegate(sink=sink).did_finish_launching(None)

        assert sink.lines == ["<< Launching with testing app delegate"]

    def test_production_delegate(self, sink):
        assert AppDelegate(sink=sink).did_finish_launching({}) is True
        assert sink.lines == ["<< Launching with production app delegate"]

    def test_testing_delegate_default_sink_prints(self, capsys):
        TestingAppDelegate().did_finish_launching(None)

        assert capsys.readouterr().out == "<< Launching with testing app delegate\n"


class TestApplication:
    """Test cases for the Application host."""

    def test_launch_returns_delegate_result(self, sink):
        app = Application(TestingAppDelegate(sink=sink), sink=sink)

        assert app.launched is False
        assert app.launch() is True
        assert app.launched is True

    def test_launch_passes_options_once(self):
        """The hook is called exactly once with the launch options."""
        delegate = Mock()
        delegate.did_finish_launching.return_value = True
        options = {"source": "test"}

        Application(delegate).launch(options)

        delegate.did_finish_launching.assert_called_once_with(options)

    def test_delegate_can_refuse(self):
        delegate = Mock()
        delegate.did_finish_launching.return_value = False

        assert Application(delegate).launch() is False

    def test_second_launch_raises(self, sink):
        app = Application(TestingAppDelegate(sink=sink), sink=sink)
        app.launch()

        with pytest.raises(LaunchError, match="already been launched"):
            app.launch()

        assert sink.messages == [
            ("info", "<< Launching with testing app delegate"),
            ("error", "<< TestingAppDelegate has already been launched"),
        ]


class TestResolveDelegate:
    """Test cases for resolve_delegate()."""

    def test_resolves_builtin_delegate(self):
        assert resolve_delegate("unittesting.app.TestingAppDelegate") is TestingAppDelegate

    def test_invalid_format(self):
        with pytest.raises(ResolutionError, match="Invalid delegate path"):
            resolve_delegate("TestingAppDelegate")

    def test_missing_module(self):
        with pytest.raises(ResolutionError) as exc_info:
            resolve_delegate("no_such_module_for_delegates.Delegate")

        message = str(exc_info.value)
        assert "Could not resolve delegate" in message
        assert "✗ import no_such_module_for_delegates" in message
        assert exc_info.value.context is not None

    def test_missing_class(self):
        with pytest.raises(ResolutionError) as exc_info:
            resolve_delegate("unittesting.app.MissingDelegate")

        message = str(exc_info.value)
        assert "attribute not found" in message
        assert "class MissingDelegate:" in message

    def test_attribute_that_is_not_a_class(self):
        with pytest.raises(ResolutionError, match="not a class"):
            resolve_delegate("unittesting.app.resolve_delegate")

    def test_source_paths(self, tmp_path, monkeypatch):
        """Delegates outside the package resolve through source_paths."""
        monkeypatch.setattr(sys, "path", list(sys.path))
        (tmp_path / "custom_launch_delegates.py").write_text(
            "class CustomDelegate:\n"
            "    def __init__(self, sink=None):\n"
            "        pass\n"
            "\n"
            "    def did_finish_launching(self, options):\n"
            "        return True\n"
        )

        cls = resolve_delegate("custom_launch_delegates.CustomDelegate", [str(tmp_path)])

        assert cls.__name__ == "CustomDelegate"
        assert Application(cls()).launch() is True


class TestSelectDelegate:
    """Test cases for select_delegate()."""

    def test_production_by_default(self):
        assert select_delegate(UnitTestingConfig()) is AppDelegate

    def test_testing_when_enabled(self):
        config = UnitTestingConfig.model_validate({"app": {"testing": True}})

        assert select_delegate(config) is TestingAppDelegate

    def test_falls_back_to_production(self):
        """An unavailable testing delegate falls back to the production one."""
        config = UnitTestingConfig.model_validate(
            {"app": {"testing": True, "testing_delegate": "unittesting.app.NotThere"}}
        )

        assert select_delegate(config) is AppDelegate

    def test_fallback_reported_in_debug_mode(self, sink):
        config = UnitTestingConfig.model_validate(
            {
                "app": {"testing": True, "testing_delegate": "unittesting.app.NotThere"},
                "output": {"debug_mode": True},
            }
        )

        select_delegate(config, sink=sink)

        assert sink.messages[0][0] == "error"
        assert "Testing delegate unavailable" in sink.messages[0][1]

    def test_unresolvable_production_delegate_raises(self):
        config = UnitTestingConfig.model_validate({"app": {"delegate": "unittesting.app.Nope"}})

        with pytest.raises(ResolutionError):
            select_delegate(config)


class TestBuildDelegate:
    """Test cases for build_delegate()."""

    def test_passes_sink_when_accepted(self, sink):
        delegate = build_delegate(TestingAppDelegate, sink=sink)
        delegate.did_finish_launching(None)

        assert sink.lines == ["<< Launching with testing app delegate"]

    def test_falls_back_to_zero_arg_constructor(self, sink):
        """A delegate shaped like the suggested skeleton still builds."""

        class PlainDelegate:
            def did_finish_launching(self, options):
                return True

        delegate = build_delegate(PlainDelegate, sink=sink)

        assert isinstance(delegate, PlainDelegate)
        assert Application(delegate, sink=sink).launch() is True

    def test_unconstructible_delegate(self, sink):
        class NeedsConfig:
            def __init__(self, settings):
                self.settings = settings

            def did_finish_launching(self, options):
                return True

        with pytest.raises(ConstructionError) as exc_info:
            build_delegate(NeedsConfig, sink=sink)

        message = str(exc_info.value)
        assert "Cannot construct NeedsConfig" in message
        assert "NeedsConfig() (zero-arg constructor)" in message
        assert exc_info.value.context is not None
