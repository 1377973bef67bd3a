"""Plan tools exposed to host runtimes.

Every tool function, its argument model and its parameters descriptor
is importable from here.
"""

from planbook.tools.append_research import append_research_section, append_research_tool
from planbook.tools.create_plan import create_plan_tool, normalize_tags
from planbook.tools.failure_report import send_failure_report
from planbook.tools.get_plan import get_plan_tool, retrieved_plan_message
from planbook.tools.list_ready import is_ready, list_ready_plans_tool, sort_plans
from planbook.tools.manage_task import TaskChange, find_task_index, manage_plan_task_tool
from planbook.tools.models import ToolResult
from planbook.tools.registry import (
    get_plan_tools_as_dicts,
    handle_plan_tool,
    is_plan_tool,
    run_plan_tool,
)
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
from planbook.tools.update_details import update_generated_section, update_plan_details_tool

__all__ = [
    # Results
    "ToolResult",
    # get-plan
    "GetPlanArguments",
    "get_plan_parameters",
    "get_plan_tool",
    "retrieved_plan_message",
    # create-plan
    "CreatePlanArguments",
    "create_plan_parameters",
    "create_plan_tool",
    "normalize_tags",
    # list-ready-plans
    "ListReadyPlansArguments",
    "is_ready",
    "list_ready_plans_parameters",
    "list_ready_plans_tool",
    "sort_plans",
    # append-plan-research
    "AppendResearchArguments",
    "append_research_parameters",
    "append_research_section",
    "append_research_tool",
    # update-plan-details
    "UpdatePlanDetailsArguments",
    "update_generated_section",
    "update_plan_details_parameters",
    "update_plan_details_tool",
    # manage-plan-task
    "ManagePlanTaskArguments",
    "TaskChange",
    "find_task_index",
    "manage_plan_task_parameters",
    "manage_plan_task_tool",
    # Notifications
    "send_failure_report",
    # Dispatch
    "get_plan_tools_as_dicts",
    "handle_plan_tool",
    "is_plan_tool",
    "run_plan_tool",
]
