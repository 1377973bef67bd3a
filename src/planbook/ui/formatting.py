# planbook/ui/formatting.py
"""Helper functions for plan and tool display."""

from __future__ import annotations

from typing import Any

from rich.table import Table


def format_tool_for_display(tool: dict[str, Any]) -> dict[str, str]:
    """Flatten an OpenAI-format tool definition into display columns."""
    function = tool.get("function", {})
    parameters = function.get("parameters", {})
    required = set(parameters.get("required", []))

    params = []
    for name, details in parameters.get("properties", {}).items():
        param_type = details.get("type") or "|".join(
            option.get("type", "any") for option in details.get("anyOf", [])
        )
        params.append(f"{name}{' (required)' if name in required else ''}: {param_type}")

    return {
        "name": function.get("name", ""),
        "description": function.get("description") or "No description",
        "parameters": "\n".join(params) if params else "None",
    }


def create_tools_table(tools: list[dict[str, Any]], show_details: bool = False) -> Table:
    """Create a Rich table listing the plan tools."""
    table = Table(title=f"{len(tools)} Plan Tools")
    table.add_column("Tool", style="green")
    table.add_column("Description")
    if show_details:
        table.add_column("Parameters", style="yellow")

    for tool in tools:
        row = format_tool_for_display(tool)
        cells = [row["name"], row["description"]]
        if show_details:
            cells.append(row["parameters"])
        table.add_row(*cells)

    return table


def create_ready_table(plans: list[dict[str, Any]]) -> Table:
    """Create a Rich table from list-ready-plans entries."""
    table = Table(title=f"{len(plans)} Ready Plans")
    table.add_column("ID", style="cyan", justify="right")
    table.add_column("Priority", style="magenta")
    table.add_column("Status", style="green")
    table.add_column("Title")
    table.add_column("Tasks", justify="right")
    table.add_column("File", style="dim")

    for plan in plans:
        task_count = plan.get("taskCount", 0)
        tasks = f"{plan.get('completedTasks', 0)}/{task_count}" if task_count else "-"
        table.add_row(
            str(plan.get("id", "")),
            plan.get("priority") or "",
            plan.get("status") or "",
            plan.get("title") or "",
            tasks,
            plan.get("filename") or "",
        )

    return table
