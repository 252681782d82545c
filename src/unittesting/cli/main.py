"""unittesting CLI entry point."""

import gc
from pathlib import Path

import click
from rich.console import Console
from rich.markup import escape
from rich.panel import Panel

from unittesting import __version__

console = Console()


def _load_config(config_path: Path | None, project_root: Path):
    """Load configuration, exiting with a red message if it is malformed."""
    import yaml
    from pydantic import ValidationError

    from unittesting.config import load_config

    try:
        return load_config(config_path=config_path, project_root=project_root)
    except (ValidationError, yaml.YAMLError) as e:
        console.print(f"[red]Error loading config:[/red] {escape(str(e))}")
        raise SystemExit(1)


@click.group()
@click.version_option(__version__, prog_name="unittesting")
def cli() -> None:
    """unittesting - test doubles, singleton seams and lifecycle observation."""
    pass


@cli.command()
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, path_type=Path),
    help="Project root directory. Defaults to current directory.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to unittesting.yaml config file.",
)
@click.option(
    "--testing/--production",
    default=None,
    help="Launch with the testing or the production delegate. Defaults to the config.",
)
@click.option("--debug", is_flag=True, help="Enable debug output.")
def launch(project: Path | None, config: Path | None, testing: bool | None, debug: bool) -> None:
    """Launch the application host with the selected delegate."""
    from unittesting.app import Application, build_delegate, select_delegate
    from unittesting.config import resolve_paths
    from unittesting.diagnostics import ConstructionError, ResolutionError
    from unittesting.sinks import make_sink

    project_root = project or Path.cwd()
    cfg = resolve_paths(_load_config(config, project_root), project_root)

    if testing is not None:
        cfg.app.testing = testing
    if debug:
        cfg.output.debug_mode = True

    sink = make_sink(cfg.output.sink.value)

    try:
        delegate_cls = select_delegate(cfg, sink=sink)
    except ResolutionError as e:
        console.print(f"[red]Error resolving delegate:[/red] {escape(str(e))}")
        raise SystemExit(1)

    if cfg.output.debug_mode:
        console.print(f"[dim]Delegate: {delegate_cls.__module__}.{delegate_cls.__qualname__}[/dim]")

    try:
        delegate = build_delegate(delegate_cls, sink=sink)
    except ConstructionError as e:
        console.print(f"[red]Error constructing delegate:[/red] {escape(str(e))}")
        raise SystemExit(1)

    app = Application(delegate, sink=sink)
    if app.launch({"source": "cli"}):
        console.print(f"[green]\u2713[/green] Launched with {delegate_cls.__name__}")
    else:
        console.print(f"[red]\u2717[/red] {delegate_cls.__name__} refused to launch")
        raise SystemExit(1)


@cli.command()
@click.option("--count", "-n", type=click.IntRange(min=1), default=2, show_default=True,
              help="Number of instances to create.")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to unittesting.yaml config file.",
)
def lifecycle(count: int, config: Path | None) -> None:
    """Create and release LifeCycle instances, showing each record."""
    from unittesting.lifecycle import LifeCycle
    from unittesting.sinks import make_sink

    cfg = _load_config(config, Path.cwd())
    sink = make_sink(cfg.output.sink.value)

    instances = [LifeCycle(sink=sink) for _ in range(count)]
    for sut in instances:
        sut.method_one()
        sut.method_two()

    del sut
    instances.clear()
    gc.collect()


@cli.command()
@click.argument("event")
@click.option("--substitute", is_flag=True, help="Track on a new instance instead of the shared one.")
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to unittesting.yaml config file.",
)
def track(event: str, substitute: bool, config: Path | None) -> None:
    """Track EVENT with the analytics singleton."""
    from unittesting.analytics import Analytics
    from unittesting.sinks import make_sink

    cfg = _load_config(config, Path.cwd())
    sink = make_sink(cfg.output.sink.value)

    analytics = Analytics(sink=sink) if substitute else Analytics.shared(sink=sink)
    analytics.track(event)


@cli.command()
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, path_type=Path),
    help="Project root directory. Defaults to current directory.",
)
@click.option(
    "--config",
    "-c",
    type=click.Path(exists=True, path_type=Path),
    help="Path to unittesting.yaml config file.",
)
@click.option("--scenario", "-s", "names", multiple=True, help="Run only the named scenario (repeatable).")
@click.option("--verbose", "-v", is_flag=True, help="Show captured output for passing scenarios too.")
def demo(project: Path | None, config: Path | None, names: tuple[str, ...], verbose: bool) -> None:
    """Run the built-in demonstration scenarios."""
    from unittesting.diagnostics import ResolutionError
    from unittesting.runner import ResultStatus, format_results, run_scenarios
    from unittesting.scenarios import get_scenarios

    project_root = project or Path.cwd()
    cfg = _load_config(config, project_root)

    try:
        scenarios = get_scenarios(list(names) or cfg.scenarios)
    except ResolutionError as e:
        console.print(f"[red]Error selecting scenarios:[/red] {escape(str(e))}")
        raise SystemExit(1)

    results = run_scenarios(scenarios, capture_output=cfg.output.capture_output)
    output = format_results(results, show_all_logs=verbose or cfg.output.debug_mode)

    has_failures = any(r.status != ResultStatus.PASSED for r in results)
    if has_failures:
        console.print(Panel(output, title="[red]Scenarios Failed[/red]", border_style="red"))
        raise SystemExit(1)
    else:
        console.print(Panel(output, title="[green]Scenarios Passed[/green]", border_style="green"))


@cli.command()
def init() -> None:
    """Create unittesting.yaml in the current directory."""
    config_file = Path.cwd() / "unittesting.yaml"
    if config_file.exists():
        console.print(f"[yellow]-[/yellow] {config_file.name} already exists")
        return

    config_file.write_text(
        """\
# unittesting configuration
version: "0.1"

app:
  # Production application delegate
  # delegate: "unittesting.app.AppDelegate"

  # Delegate used when launching under test
  # testing_delegate: "unittesting.app.TestingAppDelegate"

  # Prefer the testing delegate when it can be resolved
  # testing: false

  # Paths to add to Python's sys.path for delegate resolution
  # source_paths:
  #   - "./src"

output:
  # Diagnostic sink: console | null
  # sink: console

  # Capture stdout/stderr while running demo scenarios
  # capture_output: true

  # Enable verbose debug output
  # debug_mode: false

# Demo scenarios to run (empty runs all)
# scenarios:
#   - lifecycle-ordinals
"""
    )
    console.print(f"[green]\u2713[/green] Created {config_file.name}")


@cli.command()
@click.option(
    "--project",
    "-p",
    type=click.Path(exists=True, path_type=Path),
    help="Project root directory. Defaults to current directory.",
)
def config(project: Path | None) -> None:
    """Show the current configuration."""
    project_root = project or Path.cwd()
    cfg = _load_config(None, project_root)

    console.print(Panel(cfg.model_dump_json(indent=2), title="unittesting Config"))


if __name__ == "__main__":
    cli()
