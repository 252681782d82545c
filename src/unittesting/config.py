"""Configuration management for unittesting.

Loads and validates unittesting.yaml configuration files.
"""

from enum import Enum
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field, field_validator


class SinkKind(str, Enum):
    """Where diagnostic records go."""

    CONSOLE = "console"  # Print to stdout
    NULL = "null"  # Discard


class AppConfig(BaseModel):
    """Configuration for the application host."""

    delegate: str = "unittesting.app.AppDelegate"
    """Dotted path of the production application delegate."""

    testing_delegate: str = "unittesting.app.TestingAppDelegate"
    """Dotted path of the delegate used when launching under test."""

    testing: bool = False
    """Prefer the testing delegate when it can be resolved."""

    source_paths: list[str] = Field(default_factory=list)
    """Paths to add to sys.path for delegate resolution."""

    @field_validator("source_paths", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            return [v]
        return v


class OutputConfig(BaseModel):
    """Configuration for diagnostic output."""

    sink: SinkKind = SinkKind.CONSOLE
    """Sink used by the CLI commands."""

    capture_output: bool = True
    """Capture stdout/stderr while running demonstration scenarios."""

    debug_mode: bool = False
    """Enable verbose debug output."""


class UnitTestingConfig(BaseModel):
    """Root configuration for unittesting."""

    version: str = "0.1"
    """Config file version."""

    app: AppConfig = Field(default_factory=AppConfig)
    """Application host configuration."""

    output: OutputConfig = Field(default_factory=OutputConfig)
    """Diagnostic output configuration."""

    scenarios: list[str] = Field(default_factory=list)
    """Names of the demonstration scenarios to run. Empty runs all of them."""

    @field_validator("scenarios", mode="before")
    @classmethod
    def ensure_list(cls, v: Any) -> list[str]:
        if isinstance(v, str):
            return [v]
        return v

    # A section whose keys are all commented out parses as None.
    @field_validator("app", "output", mode="before")
    @classmethod
    def empty_section(cls, v: Any) -> Any:
        return {} if v is None else v


def load_config(config_path: Path | None = None, project_root: Path | None = None) -> UnitTestingConfig:
    """Load configuration from a YAML file.

    Args:
        config_path: Explicit path to config file. If None, searches for unittesting.yaml.
        project_root: Project root directory. Defaults to cwd.

    Returns:
        Parsed configuration. Returns default config if no file found.
    """
    project_root = project_root or Path.cwd()

    if config_path is None:
        candidates = [
            project_root / "unittesting.yaml",
            project_root / "unittesting.yml",
            project_root / ".unittesting.yaml",
            project_root / ".unittesting.yml",
        ]
        for candidate in candidates:
            if candidate.exists():
                config_path = candidate
                break

    if config_path is None or not config_path.exists():
        return UnitTestingConfig()

    with open(config_path) as f:
        data = yaml.safe_load(f) or {}

    return UnitTestingConfig.model_validate(data)


def resolve_paths(config: UnitTestingConfig, project_root: Path) -> UnitTestingConfig:
    """Resolve relative source paths in config to absolute paths.

    Args:
        config: The configuration to update.
        project_root: Base directory for relative paths.

    Returns:
        Config with resolved paths (new instance).
    """
    resolved_source_paths = [
        str((project_root / p).resolve()) if not Path(p).is_absolute() else p
        for p in config.app.source_paths
    ]
    return config.model_copy(
        update={"app": config.app.model_copy(update={"source_paths": resolved_source_paths})}
    )
