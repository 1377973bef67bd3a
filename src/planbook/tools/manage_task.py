"""manage-plan-task: add, update or remove a single task of a plan."""

from __future__ import annotations

import logging

from pydantic import BaseModel, ConfigDict, Field

from planbook.config.enums import TaskAction
from planbook.errors import PlanValidationError
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.resolver import resolve_plan
from planbook.plans.models import PlanRecord, PlanTask
from planbook.tools.models import ToolResult
from planbook.tools.schemas import ManagePlanTaskArguments

logger = logging.getLogger(__name__)


class TaskChange(BaseModel):
    """Structured result of a manage-plan-task call."""

    model_config = ConfigDict(populate_by_name=True, use_enum_values=True)

    action: TaskAction
    plan_id: int | None = Field(default=None, alias="planId")
    index: int
    task: PlanTask
    task_count: int = Field(alias="taskCount")


def find_task_index(
    tasks: list[PlanTask],
    *,
    title: str | None,
    index: int | None,
    verb: str,
) -> int:
    """Index of the task selected by ``index`` or by a title substring.

    An explicit index wins. Title matching is case-insensitive and picks
    the first task whose title contains ``title``.
    """
    if index is not None:
        if index >= len(tasks):
            raise PlanValidationError(
                f"Task index {index} is out of bounds (plan has {len(tasks)} tasks)"
            )
        return index

    if title is None or not title.strip():
        raise PlanValidationError(
            f"Provide either taskTitle or taskIndex to {verb} a task."
        )

    needle = title.strip().lower()
    for i, task in enumerate(tasks):
        if needle in task.title.lower():
            return i
    raise PlanValidationError(f'No task found with title containing "{title}"')


def _add_task(plan: PlanRecord, args: ManagePlanTaskArguments) -> tuple[int, str]:
    title = (args.title or "").strip()
    description = (args.description or "").strip()
    if not title or not description:
        raise PlanValidationError("title and description are required for add action")

    plan.tasks.append(
        PlanTask(
            title=title,
            description=description,
            files=list(args.files),
            docs=list(args.docs),
        )
    )
    index = len(plan.tasks) - 1
    return index, f'Added task "{title}" at index {index}'


def _update_task(plan: PlanRecord, args: ManagePlanTaskArguments) -> tuple[int, str]:
    if args.title is None and args.description is None and args.done is None:
        raise PlanValidationError(
            "At least one of title, description or done must be provided "
            "to update a task."
        )
    index = find_task_index(
        plan.tasks, title=args.task_title, index=args.task_index, verb="update"
    )
    task = plan.tasks[index]
    original_title = task.title

    changes: list[str] = []
    if args.title is not None:
        if not args.title.strip():
            raise PlanValidationError("New task title cannot be empty")
        task.title = args.title.strip()
        changes.append(f'title to "{task.title}"')
    if args.description is not None:
        if not args.description.strip():
            raise PlanValidationError("New task description cannot be empty")
        task.description = args.description.strip()
        changes.append("description")
    if args.done is not None:
        task.done = args.done
        changes.append(f"done status to {str(args.done).lower()}")

    return index, f'Updated task "{original_title}": {", ".join(changes)}'


def _remove_task(plan: PlanRecord, args: ManagePlanTaskArguments) -> tuple[int, str, PlanTask]:
    index = find_task_index(
        plan.tasks, title=args.task_title, index=args.task_index, verb="remove"
    )
    removed = plan.tasks.pop(index)
    message = f'Removed task "{removed.title}" from index {index}'
    if index < len(plan.tasks):
        message += "; indexes of the tasks after it have shifted down by one"
    return index, message, removed


async def manage_plan_task_tool(
    args: ManagePlanTaskArguments,
    context: PlanningContext,
) -> ToolResult[TaskChange]:
    """Apply one task edit and write the plan back.

    Raises:
        PlanValidationError: Missing fields for the action or no such task.
    """
    clear_plan_cache(context)
    resolved = await resolve_plan(args.plan, context)
    plan = resolved.plan

    if args.action == TaskAction.ADD:
        index, message = _add_task(plan, args)
        task = plan.tasks[index]
    elif args.action == TaskAction.UPDATE:
        index, message = _update_task(plan, args)
        task = plan.tasks[index]
    else:
        index, message, task = _remove_task(plan, args)

    written = context.store.write(resolved.plan_path, plan)
    logger.info("manage-plan-task %s on %s: %s", args.action, resolved.plan_path, message)

    change = TaskChange(
        action=args.action,
        plan_id=written.id,
        index=index,
        task=task,
        task_count=len(written.tasks),
    )
    return ToolResult[TaskChange](text=message, data=change, message=message)
