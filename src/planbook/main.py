# src/planbook/main.py
"""Entry-point for the planbook CLI."""

from __future__ import annotations

import asyncio
import json
import logging
from typing import Any, List, Optional

import typer
from pydantic import ValidationError
from rich.console import Console
from rich.markup import escape
from rich.text import Text

from planbook.config.defaults import DEFAULT_LOG_LEVEL
from planbook.config.enums import LogFormat, PlanToolName, ReadySortField, TaskAction
from planbook.config.env_vars import EnvVar
from planbook.config.logging import setup_logging
from planbook.errors import PlanbookError
from planbook.planning.context import PlanningContext
from planbook.tools.models import ToolResult
from planbook.tools.registry import get_plan_tools_as_dicts, run_plan_tool
from planbook.ui.formatting import create_ready_table, create_tools_table

logger = logging.getLogger(__name__)

console = Console()
err_console = Console(stderr=True)

app = typer.Typer(add_completion=False, help="Inspect and update plan files.")


def _error(message: str) -> typer.Exit:
    err_console.print(f"[red]Error:[/red] {escape(message)}")
    return typer.Exit(code=1)


def _load_context(ctx: typer.Context) -> PlanningContext:
    try:
        return PlanningContext.load(ctx.obj)
    except PlanbookError as e:
        raise _error(str(e)) from e


def _run_tool(
    ctx: typer.Context, tool_name: PlanToolName, arguments: dict[str, Any]
) -> ToolResult[Any]:
    context = _load_context(ctx)
    try:
        return asyncio.run(run_plan_tool(tool_name.value, arguments, context))
    except ValidationError as e:
        logger.debug("Argument validation failed", exc_info=True)
        raise _error(f"Invalid arguments: {e}") from e
    except PlanbookError as e:
        raise _error(str(e)) from e


@app.callback()
def main_callback(
    ctx: typer.Context,
    config: Optional[str] = typer.Option(None, "--config", help="Configuration file path"),
    quiet: bool = typer.Option(False, "-q", "--quiet", help="Suppress most log output"),
    verbose: bool = typer.Option(False, "-v", "--verbose", help="Enable verbose logging"),
    log_level: str = typer.Option(
        DEFAULT_LOG_LEVEL,
        "--log-level",
        help="Set log level",
        envvar=EnvVar.LOG_LEVEL.value,
    ),
    log_file: Optional[str] = typer.Option(
        None, "--log-file", help="Also log to this file", envvar=EnvVar.LOG_FILE.value
    ),
    log_format: LogFormat = typer.Option(
        LogFormat.SIMPLE,
        "--log-format",
        help="Console log format",
        envvar=EnvVar.LOG_FORMAT.value,
    ),
) -> None:
    """planbook - plans as files in your repository."""
    try:
        setup_logging(
            level=log_level,
            quiet=quiet,
            verbose=verbose,
            log_format=log_format,
            log_file=log_file,
        )
    except ValueError as e:
        raise typer.BadParameter(str(e), param_hint="--log-level") from e
    ctx.obj = config


@app.command()
def show(
    ctx: typer.Context,
    plan: str = typer.Argument(..., help="Plan ID, slug or file path"),
) -> None:
    """Show a plan, read fresh from disk."""
    result = _run_tool(ctx, PlanToolName.GET_PLAN, {"plan": plan})
    console.print(Text(result.text))


@app.command()
def ready(
    ctx: typer.Context,
    priority: Optional[str] = typer.Option(None, "--priority", help="Filter by priority"),
    limit: Optional[int] = typer.Option(None, "--limit", help="Maximum plans to show"),
    pending_only: bool = typer.Option(
        False, "--pending-only", help="Exclude plans already in progress"
    ),
    sort: ReadySortField = typer.Option(
        ReadySortField.PRIORITY, "--sort", help="Sort field"
    ),
    as_json: bool = typer.Option(False, "--json", help="Print raw JSON"),
) -> None:
    """List plans whose dependencies are all done."""
    result = _run_tool(
        ctx,
        PlanToolName.LIST_READY_PLANS,
        {
            "priority": priority,
            "limit": limit,
            "pendingOnly": pending_only,
            "sortBy": sort.value,
        },
    )
    if as_json:
        typer.echo(json.dumps(result.data, indent=2))
        return
    if not result.data["plans"]:
        console.print("[yellow]No ready plans[/yellow]")
        return
    console.print(create_ready_table(result.data["plans"]))


@app.command()
def create(
    ctx: typer.Context,
    title: str = typer.Argument(..., help="Plan title"),
    goal: Optional[str] = typer.Option(None, "--goal", help="High-level goal"),
    details: Optional[str] = typer.Option(None, "--details", help="Markdown details"),
    priority: Optional[str] = typer.Option(None, "--priority", help="Priority level"),
    parent: Optional[int] = typer.Option(None, "--parent", help="Parent plan ID"),
    depends_on: Optional[List[int]] = typer.Option(
        None, "--depends-on", help="Plan ID this plan depends on (repeatable)"
    ),
    tags: Optional[List[str]] = typer.Option(None, "--tag", help="Tag (repeatable)"),
) -> None:
    """Create a new pending plan."""
    result = _run_tool(
        ctx,
        PlanToolName.CREATE_PLAN,
        {
            "title": title,
            "goal": goal,
            "details": details,
            "priority": priority,
            "parent": parent,
            "dependsOn": depends_on or [],
            "tags": tags or [],
        },
    )
    console.print(f"[green]{escape(result.message)}[/green]")


@app.command()
def research(
    ctx: typer.Context,
    plan: str = typer.Argument(..., help="Plan ID, slug or file path"),
    text: str = typer.Argument(..., help="Research notes to append"),
    heading: Optional[str] = typer.Option(None, "--heading", help="Section heading"),
    timestamp: bool = typer.Option(
        False, "--timestamp", help="Add a timestamped sub-heading"
    ),
) -> None:
    """Append research notes to a plan."""
    result = _run_tool(
        ctx,
        PlanToolName.APPEND_RESEARCH,
        {"plan": plan, "research": text, "heading": heading, "timestamp": timestamp},
    )
    console.print(f"[green]{escape(result.message)}[/green]")


@app.command()
def details(
    ctx: typer.Context,
    plan: str = typer.Argument(..., help="Plan ID, slug or file path"),
    text: str = typer.Argument(..., help="New generated details"),
    append: bool = typer.Option(
        False, "--append", help="Extend the generated section instead of replacing it"
    ),
) -> None:
    """Replace or extend the generated part of a plan's details."""
    result = _run_tool(
        ctx,
        PlanToolName.UPDATE_PLAN_DETAILS,
        {"plan": plan, "details": text, "append": append},
    )
    console.print(f"[green]{escape(result.message)}[/green]")


@app.command()
def task(
    ctx: typer.Context,
    plan: str = typer.Argument(..., help="Plan ID, slug or file path"),
    action: TaskAction = typer.Argument(..., help="add, update or remove"),
    title: Optional[str] = typer.Option(None, "--title", help="Task title or new title"),
    description: Optional[str] = typer.Option(
        None, "--description", help="Task description or new description"
    ),
    files: Optional[List[str]] = typer.Option(None, "--file", help="File (repeatable)"),
    docs: Optional[List[str]] = typer.Option(None, "--doc", help="Doc path (repeatable)"),
    done: Optional[bool] = typer.Option(None, "--done/--not-done", help="Done status"),
    select_title: Optional[str] = typer.Option(
        None, "--select-title", help="Select the task by title substring"
    ),
    select_index: Optional[int] = typer.Option(
        None, "--select-index", help="Select the task by 0-based index"
    ),
) -> None:
    """Add, update or remove one task of a plan."""
    result = _run_tool(
        ctx,
        PlanToolName.MANAGE_PLAN_TASK,
        {
            "plan": plan,
            "action": action.value,
            "title": title,
            "description": description,
            "files": files or [],
            "docs": docs or [],
            "done": done,
            "taskTitle": select_title,
            "taskIndex": select_index,
        },
    )
    console.print(f"[green]{escape(result.message)}[/green]")


@app.command()
def tools(
    details: bool = typer.Option(False, "--details", help="Show parameters"),
) -> None:
    """List the plan tools offered to agent runtimes."""
    console.print(create_tools_table(get_plan_tools_as_dicts(), show_details=details))


def main() -> None:
    """Main entry point."""
    app()


if __name__ == "__main__":
    main()
