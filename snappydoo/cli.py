"""CLI entry point for snappydoo."""

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Optional

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from snappydoo.errors import ConfigError, SnappydooError
from snappydoo.models.config import SnappydooConfig
from snappydoo.orchestrator import Orchestrator

console = Console()
err_console = Console(stderr=True)

DEFAULT_CONFIG = "package.json"


def setup_logging(verbose: bool = False) -> None:
    level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, rich_tracebacks=True)],
    )


def load_config(config: str) -> SnappydooConfig:
    """Load the config file, tolerating a missing default package.json."""
    try:
        return SnappydooConfig.load(config)
    except FileNotFoundError:
        if config == DEFAULT_CONFIG:
            logging.getLogger(__name__).debug(
                "No %s in %s, using command line options only", config, Path.cwd()
            )
            return SnappydooConfig()
        err_console.print(f"[red]Config file not found: {config}[/red]")
        sys.exit(1)
    except ConfigError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)


def _resolve(config: str, input_path: Optional[str], output_path: Optional[str]) -> Orchestrator:
    cfg = load_config(config).with_overrides(input_path, output_path)
    try:
        return Orchestrator(cfg)
    except ConfigError as e:
        err_console.print(f"[red]Error: {escape(str(e))}[/red]")
        sys.exit(1)


def path_options(func):
    func = click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")(func)
    func = click.option("--out", "-o", "output_path", help="Output folder that images will be saved to")(func)
    func = click.option("--in", "-i", "input_path", help="Input folder containing Jest snapshots")(func)
    return func


@click.group(invoke_without_command=True)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
@path_options
@click.pass_context
def cli(
    ctx: click.Context,
    verbose: bool,
    input_path: Optional[str],
    output_path: Optional[str],
    config: str,
) -> None:
    """Render Jest snapshots of chat messages to PNG images.

    Without a command, renders using --in/--out and the config file.
    """
    setup_logging(verbose)
    if ctx.invoked_subcommand is None:
        run_render(input_path, output_path, config)


@cli.command()
@path_options
def render(input_path: Optional[str], output_path: Optional[str], config: str) -> None:
    """Extract snapshots and render each one to an image."""
    run_render(input_path, output_path, config)


def run_render(input_path: Optional[str], output_path: Optional[str], config: str) -> None:
    orchestrator = _resolve(config, input_path, output_path)
    try:
        summary = orchestrator.run()
    except SnappydooError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    table = Table(title="Render Summary")
    table.add_column("Metric", style="bold")
    table.add_column("Value")
    table.add_row("Jobs", str(summary.jobs_total))
    table.add_row("Created", f"[green]{summary.files_created}[/green]")
    table.add_row("Render failures", f"[red]{len(summary.render_failures)}[/red]")
    table.add_row("Skipped entries", f"[yellow]{len(summary.extraction_errors)}[/yellow]")
    table.add_row("Duration", f"{summary.duration_seconds}s")
    console.print(table)

    for failure in summary.render_failures:
        console.print(f"  [red]✗[/red] {escape(failure.error or '')}")


@cli.command("list")
@path_options
def list_jobs(input_path: Optional[str], output_path: Optional[str], config: str) -> None:
    """Show the images a render would create, without opening a browser."""
    orchestrator = _resolve(config, input_path, output_path)
    try:
        jobs = orchestrator.plan()
    except SnappydooError as e:
        err_console.print(f"[red]{escape(str(e))}[/red]")
        sys.exit(1)

    if not jobs:
        console.print("[yellow]No snapshots to render[/yellow]")
        return
    for output, job in jobs.items():
        console.print(f"  [blue]{escape(output)}[/blue]  ← {escape(job.source)}")
    console.print(f"[green]{len(jobs)}[/green] image(s) planned")


@cli.command()
@click.option("--in", "-i", "input_path", required=True, help="Input folder containing Jest snapshots")
@click.option("--out", "-o", "output_path", required=True, help="Output folder for images")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def init(input_path: str, output_path: str, config: str) -> None:
    """Write a snappydoo configuration block."""
    config_path = Path(config)
    existing = SnappydooConfig()
    if config_path.exists():
        existing = load_config(config)
        if existing.input_path or existing.output_path:
            if not click.confirm(f"{config} already configures snappydoo. Overwrite?"):
                return

    cfg = existing.with_overrides(input_path, output_path)
    cfg.save(config_path)
    console.print(f"[green]Wrote snappydoo config to {config_path}[/green]")
    console.print("\nYou can now run:")
    console.print("  [blue]snappydoo render[/blue]")


@cli.group()
def exclude() -> None:
    """Manage the list of excluded snapshot categories."""
    pass


@exclude.command("add")
@click.argument("category")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def exclude_add(category: str, config: str) -> None:
    """Exclude a category from rendering."""
    cfg = load_config(config)
    if category in cfg.exclude:
        console.print(f"[yellow]Already excluded:[/yellow] {escape(category)}")
        return
    cfg.exclude.append(category)
    cfg.save(config)
    console.print(f"[green]Excluded:[/green] {escape(category)}")


@exclude.command("list")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def exclude_list(config: str) -> None:
    """List excluded categories."""
    cfg = load_config(config)
    if not cfg.exclude:
        console.print("[yellow]No categories excluded[/yellow]")
        return
    for i, category in enumerate(cfg.exclude, 1):
        console.print(f"  {i}. {escape(category)}")


@exclude.command("clear")
@click.option("--config", "-c", default=DEFAULT_CONFIG, help="Config file path")
def exclude_clear(config: str) -> None:
    """Remove all exclusions."""
    cfg = load_config(config)
    cfg.exclude = []
    cfg.save(config)
    console.print("[green]All exclusions cleared[/green]")


if __name__ == "__main__":
    cli()
