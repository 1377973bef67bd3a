"""Argument models and JSON-schema descriptors for the plan tools.

Each ``*Arguments`` model validates one tool's input; the matching
``*_parameters`` dict is its JSON schema as advertised to the host
runtime. Field aliases are the camelCase names hosts send.
"""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from planbook.config.enums import PlanPriority, ReadySortField, TaskAction


class _ToolArguments(BaseModel):
    model_config = ConfigDict(
        populate_by_name=True, use_enum_values=True, validate_default=True
    )


class GetPlanArguments(_ToolArguments):
    """Retrieve the full plan text for a given plan ID or file path."""

    plan: int | str = Field(description="Plan ID or file path to retrieve")


class CreatePlanArguments(_ToolArguments):
    """Create a new plan file in the tasks directory."""

    title: str = Field(min_length=1, description="Plan title")
    goal: str | None = Field(default=None, description="High-level goal of the plan")
    details: str | None = Field(
        default=None, description="Plan details in markdown format"
    )
    priority: PlanPriority | None = Field(
        default=None, description="Priority level (maybe|low|medium|high|urgent)"
    )
    parent: int | None = Field(default=None, gt=0, description="Parent plan ID")
    depends_on: list[int] = Field(
        default_factory=list,
        alias="dependsOn",
        description="IDs of plans this plan depends on",
    )
    discovered_from: int | None = Field(
        default=None,
        gt=0,
        alias="discoveredFrom",
        description="ID of the plan during which this work was discovered",
    )
    assigned_to: str | None = Field(
        default=None, alias="assignedTo", description="Who the plan is assigned to"
    )
    issue: list[str] = Field(default_factory=list, description="Issue URLs")
    docs: list[str] = Field(default_factory=list, description="Documentation paths")
    tags: list[str] = Field(default_factory=list, description="Tags for the plan")
    container: bool = Field(
        default=False, description="Whether this plan only groups child plans"
    )
    temp: bool = Field(default=False, description="Whether this is a temporary plan")


class ListReadyPlansArguments(_ToolArguments):
    """List all ready plans that can be executed."""

    priority: PlanPriority | None = Field(
        default=None, description="Filter by priority level"
    )
    limit: int | None = Field(
        default=None, gt=0, description="Maximum number of plans to return"
    )
    pending_only: bool = Field(
        default=False,
        alias="pendingOnly",
        description="Show only pending plans, exclude in_progress",
    )
    sort_by: ReadySortField = Field(
        default=ReadySortField.PRIORITY,
        alias="sortBy",
        description="Sort field (default: priority)",
    )


class AppendResearchArguments(_ToolArguments):
    """Append research notes to a plan's details."""

    plan: int | str = Field(description="Plan ID or file path to update")
    research: str = Field(
        min_length=1, description="Research notes to append under the Research section"
    )
    heading: str | None = Field(
        default=None, description='Override the section heading (defaults to "## Research")'
    )
    timestamp: bool = Field(
        default=False, description="Include an automatic timestamp heading"
    )


class UpdatePlanDetailsArguments(_ToolArguments):
    """Replace or extend the generated section of a plan's details."""

    plan: int | str = Field(description="Plan ID or file path to update")
    details: str = Field(
        description="New details text to add or replace within the generated section"
    )
    append: bool = Field(
        default=False,
        description="Append to the existing generated content instead of replacing it",
    )


class ManagePlanTaskArguments(_ToolArguments):
    """Add, update or remove one task of a plan."""

    plan: int | str = Field(description="Plan ID or file path to update")
    action: TaskAction = Field(description="What to do: add, update or remove")
    title: str | None = Field(
        default=None, description="Task title (add) or new title (update)"
    )
    description: str | None = Field(
        default=None, description="Task description (add) or new description (update)"
    )
    files: list[str] = Field(
        default_factory=list, description="Files the new task touches (add only)"
    )
    docs: list[str] = Field(
        default_factory=list, description="Documentation paths for the new task (add only)"
    )
    done: bool | None = Field(
        default=None, description="New done status (update only)"
    )
    task_title: str | None = Field(
        default=None,
        alias="taskTitle",
        description="Select the task whose title contains this text, case-insensitive",
    )
    task_index: int | None = Field(
        default=None,
        ge=0,
        alias="taskIndex",
        description="Select the task at this 0-based index",
    )


def _schema(model: type[BaseModel]) -> dict[str, Any]:
    schema: dict[str, Any] = model.model_json_schema(by_alias=True)
    return schema


get_plan_parameters = _schema(GetPlanArguments)
create_plan_parameters = _schema(CreatePlanArguments)
list_ready_plans_parameters = _schema(ListReadyPlansArguments)
append_research_parameters = _schema(AppendResearchArguments)
update_plan_details_parameters = _schema(UpdatePlanDetailsArguments)
manage_plan_task_parameters = _schema(ManagePlanTaskArguments)
