"""Command-line interface for Minimal Task."""

import logging
import sys
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.table import Table

from .config import ConfigModel, get_config_path, load_config, save_config
from .exceptions import MinimalTaskError
from .processor import PassResult, TaskProcessor
from .watcher import TaskFileWatcher


console = Console()


def setup_logging(verbose: bool) -> None:
    """Route log records through rich so they match console output."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        datefmt="[%X]",
        handlers=[RichHandler(console=console, show_path=verbose)],
        force=True,
    )


def get_processor(ctx: click.Context) -> TaskProcessor:
    """Build a processor from the configuration loaded by the group."""
    return TaskProcessor(ctx.obj["config"])


def report_process(result: PassResult) -> None:
    if result.skipped_reason:
        console.print(f"[yellow]Nothing to do: {result.skipped_reason}[/yellow]")
        return
    console.print(f"[green]✅ Archived {result.archived} task(s)[/green]")
    if result.rescheduled:
        console.print(f"[cyan]🔁 Rescheduled {result.rescheduled} recurring task(s)[/cyan]")


def report_roll(result: PassResult) -> None:
    if result.task_written:
        console.print(f"[cyan]🔁 Unchecked {result.rolled} recurring task(s) due today[/cyan]")
    else:
        console.print(f"[dim]No change: {result.skipped_reason}[/dim]")


@click.group()
@click.option("--config", "config_path", type=click.Path(dir_okay=False, path_type=Path),
              help="Path to config file")
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.pass_context
def main(ctx, config_path, verbose):
    """Minimal Task - archive completed tasks from a Markdown task list."""
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose
    ctx.obj["config_path"] = config_path or get_config_path()
    setup_logging(verbose)

    try:
        ctx.obj["config"] = load_config(ctx.obj["config_path"])
    except MinimalTaskError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)


@main.command()
@click.pass_context
def process(ctx):
    """Archive checked tasks and reschedule recurring ones."""
    try:
        result = get_processor(ctx).process_task_file()
    except MinimalTaskError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)
    report_process(result)


@main.command()
@click.pass_context
def roll(ctx):
    """Uncheck recurring tasks that are scheduled for today."""
    try:
        result = get_processor(ctx).check_repeat_dates()
    except MinimalTaskError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)
    report_roll(result)


@main.command()
@click.pass_context
def startup(ctx):
    """Run the repeat-date check followed by a processing pass."""
    try:
        roll_result, process_result = get_processor(ctx).startup()
    except MinimalTaskError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)
    report_roll(roll_result)
    report_process(process_result)


@main.command()
@click.pass_context
def watch(ctx):
    """Process the task file every time it changes (Ctrl+C to stop)."""
    processor = get_processor(ctx)
    watcher = TaskFileWatcher(processor, on_result=lambda r: report_process(r) if r.changed else None)

    if not watcher.watch_dir.is_dir():
        console.print(f"[red]Error: directory does not exist: {watcher.watch_dir}[/red]")
        sys.exit(1)

    console.print(f"[bold]Watching {watcher.handler.task_path}[/bold] [dim](Ctrl+C to stop)[/dim]")
    try:
        watcher.run_forever()
    except MinimalTaskError as e:
        console.print(f"[red]❌ {e}[/red]")
        sys.exit(1)


@main.group(name="config")
def config_group():
    """Show or change settings."""


@config_group.command(name="show")
@click.pass_context
def config_show(ctx):
    """Show the current settings."""
    config = ctx.obj["config"]
    table = Table(title=f"Settings ({ctx.obj['config_path']})")
    table.add_column("Key", style="cyan")
    table.add_column("Value")
    for key, value in config.to_dict().items():
        table.add_row(key, repr(value) if isinstance(value, str) else str(value))
    console.print(table)


@config_group.command(name="set")
@click.argument("key")
@click.argument("value")
@click.pass_context
def config_set(ctx, key, value):
    """Change a setting and save it."""
    config = ctx.obj["config"]
    try:
        config.set_value(key, value)
        path = save_config(config, ctx.obj["config_path"])
    except MinimalTaskError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    console.print(f"[green]Set {key} = {getattr(config, key)!r} in {path}[/green]")


@config_group.command(name="init")
@click.option("--force", is_flag=True, help="Overwrite an existing config file")
@click.pass_context
def config_init(ctx, force):
    """Write a config file with default settings."""
    path = ctx.obj["config_path"]
    if path.exists() and not force:
        console.print(f"[yellow]Config already exists at {path} (use --force to overwrite)[/yellow]")
        return
    try:
        save_config(ConfigModel(), path)
    except MinimalTaskError as e:
        console.print(f"[red]Error: {e}[/red]")
        sys.exit(1)
    console.print(f"[green]Created default configuration at {path}[/green]")


if __name__ == "__main__":
    main()
