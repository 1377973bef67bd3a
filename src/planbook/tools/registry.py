# src/planbook/tools/registry.py
"""Plan tool definitions and the dispatcher hosts call into.

Tools:
- get-plan: full text of one plan, fresh from disk
- create-plan: write a new plan with the next free id
- list-ready-plans: plans whose dependencies are all done
- append-plan-research: add research notes to a plan
- update-plan-details: replace or extend the generated part of the details
- manage-plan-task: add, update or remove one task
"""

from __future__ import annotations

import json
import logging
from collections.abc import Awaitable, Callable
from typing import Any

from pydantic import BaseModel, ValidationError

from planbook.config.enums import PlanToolName
from planbook.errors import PlanError
from planbook.planning.context import PlanningContext
from planbook.tools.append_research import append_research_tool
from planbook.tools.create_plan import create_plan_tool
from planbook.tools.get_plan import get_plan_tool
from planbook.tools.list_ready import list_ready_plans_tool
from planbook.tools.manage_task import manage_plan_task_tool
from planbook.tools.models import ToolResult
from planbook.tools.schemas import (
    AppendResearchArguments,
    CreatePlanArguments,
    GetPlanArguments,
    ListReadyPlansArguments,
    ManagePlanTaskArguments,
    UpdatePlanDetailsArguments,
    append_research_parameters,
    create_plan_parameters,
    get_plan_parameters,
    list_ready_plans_parameters,
    manage_plan_task_parameters,
    update_plan_details_parameters,
)
from planbook.tools.update_details import update_plan_details_tool

logger = logging.getLogger(__name__)

# Tool names for interception by the host runtime
_PLAN_TOOL_NAMES = frozenset(name.value for name in PlanToolName)

_ToolHandler = Callable[[Any, PlanningContext], Awaitable[ToolResult[Any]]]

_TOOLS: dict[str, tuple[type[BaseModel], _ToolHandler, str, dict[str, Any]]] = {
    PlanToolName.GET_PLAN.value: (
        GetPlanArguments,
        get_plan_tool,
        "Retrieve the full plan text for a given plan ID or file path. "
        "Always reads the plan fresh from disk.",
        get_plan_parameters,
    ),
    PlanToolName.CREATE_PLAN.value: (
        CreatePlanArguments,
        create_plan_tool,
        "Create a new pending plan in the tasks directory. "
        "When a parent is given the new plan is added to its dependencies.",
        create_plan_parameters,
    ),
    PlanToolName.LIST_READY_PLANS.value: (
        ListReadyPlansArguments,
        list_ready_plans_tool,
        "List plans that are pending or in progress and whose "
        "dependencies are all done, sorted by priority by default.",
        list_ready_plans_parameters,
    ),
    PlanToolName.APPEND_RESEARCH.value: (
        AppendResearchArguments,
        append_research_tool,
        "Append research notes to a plan's details under a Research heading.",
        append_research_parameters,
    ),
    PlanToolName.UPDATE_PLAN_DETAILS.value: (
        UpdatePlanDetailsArguments,
        update_plan_details_tool,
        "Update plan details within the generated section. Can append to or "
        "replace the generated content; manual sections such as Research are kept.",
        update_plan_details_parameters,
    ),
    PlanToolName.MANAGE_PLAN_TASK.value: (
        ManagePlanTaskArguments,
        manage_plan_task_tool,
        'Manage tasks in a plan. action="add" creates a task, action="update" '
        'modifies one selected by title or index, action="remove" deletes one.',
        manage_plan_task_parameters,
    ),
}


def is_plan_tool(tool_name: str) -> bool:
    return tool_name in _PLAN_TOOL_NAMES


def get_plan_tools_as_dicts() -> list[dict[str, Any]]:
    """Return OpenAI-format tool definitions for plan tools."""
    return [
        {
            "type": "function",
            "function": {
                "name": name,
                "description": description,
                "parameters": parameters,
            },
        }
        for name, (_, _, description, parameters) in _TOOLS.items()
    ]


async def run_plan_tool(
    tool_name: str,
    arguments: dict[str, Any],
    context: PlanningContext,
) -> ToolResult[Any]:
    """Validate ``arguments`` and run the named tool.

    Raises:
        PlanError: Resolution or validation failed inside the tool.
        pydantic.ValidationError: Arguments do not match the tool schema.
        KeyError: ``tool_name`` is not a plan tool.
    """
    if tool_name not in _TOOLS:
        raise KeyError(tool_name)
    model, handler, _, _ = _TOOLS[tool_name]
    args = model.model_validate(arguments)
    return await handler(args, context)


async def handle_plan_tool(
    tool_name: str,
    arguments: dict[str, Any],
    context: PlanningContext,
) -> str:
    """Execute a plan tool and return the result as a JSON string.

    Args:
        tool_name: One of the names in ``PlanToolName``.
        arguments: Tool arguments from the host, camelCase or snake_case.
        context: PlanningContext holding config, cache and store.

    Returns:
        JSON string with ``text``, ``data`` and ``message``, or with a
        single ``error`` key when the call failed.
    """
    if not is_plan_tool(tool_name):
        return json.dumps({"error": f"Unknown plan tool: {tool_name}"})

    try:
        result = await run_plan_tool(tool_name, arguments, context)
    except ValidationError as e:
        logger.warning("Invalid arguments for %s: %s", tool_name, e)
        return json.dumps({"error": f"Invalid arguments for {tool_name}: {e}"})
    except PlanError as e:
        logger.info("%s failed: %s", tool_name, e)
        return json.dumps({"error": str(e)})

    return json.dumps(result.model_dump(mode="json", by_alias=True, exclude_none=True))
