"""list-ready-plans: plans whose dependencies are all done."""

from __future__ import annotations

import json
import logging
from functools import cmp_to_key
from typing import Any

from planbook.config.enums import PRIORITY_RANK, PlanStatus, ReadySortField
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.plans.models import PlanSummary
from planbook.tools.models import ToolResult
from planbook.tools.schemas import ListReadyPlansArguments

logger = logging.getLogger(__name__)


def is_ready(
    plan: PlanSummary,
    plans_by_id: dict[int, PlanSummary],
    pending_only: bool = False,
) -> bool:
    """A plan is ready when its status allows work and every dependency is done."""
    allowed = {PlanStatus.PENDING.value}
    if not pending_only:
        allowed.add(PlanStatus.IN_PROGRESS.value)
    if plan.status not in allowed:
        return False

    for dep_id in plan.dependencies:
        dep = plans_by_id.get(dep_id)
        if dep is None or dep.status != PlanStatus.DONE.value:
            return False
    return True


def _sort_value(plan: PlanSummary, sort_by: str) -> Any:
    if sort_by == ReadySortField.TITLE.value:
        return (plan.title or plan.goal or "").lower()
    if sort_by == ReadySortField.ID.value:
        return plan.id
    if sort_by == ReadySortField.CREATED.value:
        return plan.created_at or ""
    if sort_by == ReadySortField.UPDATED.value:
        return plan.updated_at or ""
    return PRIORITY_RANK.get(plan.priority or "", 0)


def sort_plans(plans: list[PlanSummary], sort_by: str) -> list[PlanSummary]:
    """Priority sorts urgent first; every other field sorts ascending.

    Ties fall back to creation time (or id when sorting by creation time).
    """

    def compare(a: PlanSummary, b: PlanSummary) -> int:
        a_val, b_val = _sort_value(a, sort_by), _sort_value(b, sort_by)
        if a_val == b_val:
            if sort_by == ReadySortField.CREATED.value:
                a_val, b_val = a.id, b.id
            else:
                a_val, b_val = a.created_at or "", b.created_at or ""
        result = (a_val > b_val) - (a_val < b_val)
        if sort_by == ReadySortField.PRIORITY.value and a.priority != b.priority:
            return -result
        return result

    return sorted(plans, key=cmp_to_key(compare))


def _plan_entry(plan: PlanSummary, context: PlanningContext) -> dict[str, Any]:
    return {
        "id": plan.id,
        "title": plan.title or plan.goal or "",
        "goal": plan.goal or "",
        "priority": plan.priority,
        "status": plan.status,
        "taskCount": plan.task_count,
        "completedTasks": plan.completed_tasks,
        "dependencies": list(plan.dependencies),
        "assignedTo": plan.assigned_to,
        "filename": context.relative_path(plan.filename),
        "createdAt": plan.created_at,
        "updatedAt": plan.updated_at,
    }


async def list_ready_plans_tool(
    args: ListReadyPlansArguments,
    context: PlanningContext,
) -> ToolResult[dict[str, Any]]:
    """List ready plans as JSON."""
    clear_plan_cache(context)
    plans_by_id = context.store.plans_by_id()

    ready = [p for p in plans_by_id.values() if is_ready(p, plans_by_id, args.pending_only)]
    if args.priority:
        ready = [p for p in ready if p.priority == args.priority]
    ready = sort_plans(ready, args.sort_by)
    if args.limit is not None:
        ready = ready[: args.limit]

    data: dict[str, Any] = {
        "count": len(ready),
        "plans": [_plan_entry(p, context) for p in ready],
    }
    logger.debug("list-ready-plans found %d plans", len(ready))

    noun = "plan" if len(ready) == 1 else "plans"
    return ToolResult[dict[str, Any]](
        text=json.dumps(data, indent=2),
        data=data,
        message=f"Found {len(ready)} ready {noun}",
    )
