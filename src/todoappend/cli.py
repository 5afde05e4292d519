"""CLI interface for todoappend."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import click
from rich.console import Console
from rich.logging import RichHandler
from rich.markup import escape
from rich.table import Table

from todoappend import __version__
from todoappend.config import AppConfig, Template, default_config_path
from todoappend.engine import TodoEngine
from todoappend.models import OperationResult

console = Console()
err_console = Console(stderr=True)

PRIORITY_CHOICE = click.Choice(
    [chr(c) for c in range(ord("A"), ord("Z") + 1)], case_sensitive=False
)


def _printable(text: str) -> str:
    """Replace undecodable bytes carried through from the task file."""
    return text.encode("utf-8", "surrogateescape").decode("utf-8", "replace")


def _setup_logging(verbose: bool) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(message)s",
        handlers=[RichHandler(console=err_console, show_path=False)],
        force=True,
    )


def _engine(ctx: click.Context) -> TodoEngine:
    return TodoEngine(ctx.obj["config"])


def _save_config(ctx: click.Context) -> None:
    config: AppConfig = ctx.obj["config"]
    config.save(ctx.obj["config_path"])


def _report(ctx: click.Context, result: OperationResult, success: str) -> None:
    if result.ok:
        console.print(success)
        return
    console.print(f"[red]Error:[/red] {result.error}")
    ctx.exit(1)


@click.group(invoke_without_command=True)
@click.version_option(version=__version__, prog_name="todoappend")
@click.option(
    "--config",
    "config_path",
    type=click.Path(dir_okay=False, path_type=Path),
    help="Config file (default: per-user app directory)",
)
@click.option("--verbose", "-v", is_flag=True, help="Show debug logging")
@click.pass_context
def main(ctx: click.Context, config_path: Path | None, verbose: bool) -> None:
    """todoappend - Quick capture for todo.txt.

    \b
    Examples:
      todoappend add Buy milk            # Append a task
      todoappend add -t 2 -d Sync        # Use template 2, due today
      todoappend urgent                  # Priority A or due within a week
      todoappend done 4                  # Complete line 4
    """
    _setup_logging(verbose)

    if config_path is None:
        config_path = default_config_path()

    ctx.ensure_object(dict)
    ctx.obj["config_path"] = config_path
    ctx.obj["config"] = AppConfig.load(config_path)

    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@main.command()
@click.argument("text", nargs=-1, required=True)
@click.option("--priority", "-p", type=PRIORITY_CHOICE, help="Priority letter")
@click.option("--due-today", "-d", is_flag=True, help="Add due:<today>")
@click.option("--template", "-t", "template", type=int, help="Template number (1-based)")
@click.pass_context
def add(
    ctx: click.Context,
    text: tuple[str, ...],
    priority: str | None,
    due_today: bool,
    template: int | None,
) -> None:
    """Append a task to the todo file."""
    engine = _engine(ctx)
    template_index = template - 1 if template else -1

    result = engine.compose(
        " ".join(text),
        priority=priority,
        due_today=due_today,
        template_index=template_index,
    )
    _report(ctx, result, f"[green]Added to[/green] {engine.file_path}")


@main.command()
@click.option("--json", "as_json", is_flag=True, help="Print the raw result as JSON")
@click.pass_context
def urgent(ctx: click.Context, as_json: bool) -> None:
    """List priority-A tasks and tasks due within the urgent window."""
    result = _engine(ctx).list_urgent()

    if as_json:
        payload = json.dumps(result.model_dump(by_alias=True), indent=2, ensure_ascii=False)
        click.echo(_printable(payload))
        if not result.ok:
            ctx.exit(1)
        return

    if not result.ok:
        console.print(f"[red]Error:[/red] {result.error}")
        ctx.exit(1)

    if not result.todos:
        console.print("[dim]Nothing urgent.[/dim]")
        return

    table = Table(title="Urgent", show_header=True)
    table.add_column("Line", style="cyan", justify="right")
    table.add_column("Pri", style="dim", width=3)
    table.add_column("Due", style="white")
    table.add_column("Task", style="white")

    for todo in result.todos:
        due = todo.due or ""
        if todo.is_overdue:
            due = f"[red]{due}[/red]"
        desc = escape(_printable(todo.desc))
        table.add_row(str(todo.line_index), todo.priority or "", due, desc)

    console.print(table)


@main.command()
@click.argument("line_index", type=int)
@click.pass_context
def done(ctx: click.Context, line_index: int) -> None:
    """Mark the task on LINE_INDEX (as shown by `urgent`) as done."""
    result = _engine(ctx).complete(line_index)
    _report(ctx, result, f"[green]Completed line[/green] {line_index}")


@main.group()
def config() -> None:
    """Show or change settings."""
    pass


@config.command("show")
@click.pass_context
def config_show(ctx: click.Context) -> None:
    """Show current settings."""
    cfg: AppConfig = ctx.obj["config"]

    table = Table(title="Settings", show_header=True)
    table.add_column("Setting", style="cyan")
    table.add_column("Value", style="white")
    table.add_row("Config file", str(ctx.obj["config_path"]))
    table.add_row("Todo file", cfg.file_path)
    table.add_row("Time zone", cfg.timezone)
    table.add_row("Urgent window", f"{cfg.urgent_window_days} days")
    table.add_row("Templates", str(len(cfg.templates)))

    console.print(table)


@config.command("set-file")
@click.argument("path")
@click.pass_context
def config_set_file(ctx: click.Context, path: str) -> None:
    """Set the todo file location."""
    cfg: AppConfig = ctx.obj["config"]
    cfg.file_path = path
    _save_config(ctx)

    console.print(f"[green]Todo file:[/green] {path}")


@config.command("set-timezone")
@click.argument("zone")
@click.pass_context
def config_set_timezone(ctx: click.Context, zone: str) -> None:
    """Set the time zone used to decide what "today" is."""
    cfg: AppConfig = ctx.obj["config"]

    try:
        updated = AppConfig.model_validate({**cfg.model_dump(), "timezone": zone})
    except ValueError:
        console.print(f"[red]Unknown time zone:[/red] {zone}")
        ctx.exit(1)

    ctx.obj["config"] = updated
    _save_config(ctx)

    console.print(f"[green]Time zone:[/green] {zone}")


@main.group()
def template() -> None:
    """Manage task templates."""
    pass


@template.command("list")
@click.pass_context
def template_list(ctx: click.Context) -> None:
    """List configured templates."""
    cfg: AppConfig = ctx.obj["config"]

    if not cfg.templates:
        console.print(
            "[dim]No templates configured.[/dim] Use [cyan]todoappend template add[/cyan]"
        )
        return

    for i, tmpl in enumerate(cfg.templates, 1):
        tags = tmpl.tag_string()
        pri = f" ({tmpl.priority})" if tmpl.priority else ""
        console.print(f"  {i}. [cyan]{tmpl.name}[/cyan]{pri} [dim]{tags}[/dim]")


@template.command("add")
@click.argument("name")
@click.option("--project", "-p", "projects", multiple=True, help="Project tag (repeatable)")
@click.option("--context", "-c", "contexts", multiple=True, help="Context tag (repeatable)")
@click.option("--priority", type=PRIORITY_CHOICE, help="Default priority letter")
@click.pass_context
def template_add(
    ctx: click.Context,
    name: str,
    projects: tuple[str, ...],
    contexts: tuple[str, ...],
    priority: str | None,
) -> None:
    """Add a template."""
    cfg: AppConfig = ctx.obj["config"]

    new_template = Template(
        name=name,
        projects=[p.lstrip("+") for p in projects],
        contexts=[c.lstrip("@") for c in contexts],
        priority=priority,
    )
    cfg.templates.append(new_template)
    _save_config(ctx)

    console.print(f"[green]Added template:[/green] {name}")


@template.command("remove")
@click.argument("index", type=int)
@click.pass_context
def template_remove(ctx: click.Context, index: int) -> None:
    """Remove a template by index (1-based)."""
    cfg: AppConfig = ctx.obj["config"]

    if index < 1 or index > len(cfg.templates):
        console.print(f"[red]Invalid index.[/red] Must be 1-{len(cfg.templates)}")
        return

    removed = cfg.templates.pop(index - 1)
    _save_config(ctx)

    console.print(f"[green]Removed template:[/green] {removed.name}")


if __name__ == "__main__":
    main()
