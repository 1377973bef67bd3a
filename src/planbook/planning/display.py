# planbook/planning/display.py
"""Render a resolved plan as a text block for people and agents."""

from __future__ import annotations

from pathlib import Path

from planbook.planning.context import PlanningContext
from planbook.plans.models import PlanRecord, PlanTask


def _text(value: object) -> str:
    return "" if value is None else str(value)


def _format_task(index: int, task: PlanTask) -> list[str]:
    mark = "[x]" if task.done else "[ ]"
    lines = [f"{index}. {mark} {task.title}"]
    if task.description:
        for desc_line in task.description.strip().splitlines():
            lines.append(f"   {desc_line}")
    if task.files:
        lines.append(f"   Files: {', '.join(task.files)}")
    if task.steps:
        lines.append("   Steps:")
        for step_index, step in enumerate(task.steps, 1):
            step_mark = "[x]" if step.done else "[ ]"
            first_line = step.prompt.strip().split("\n", 1)[0] if step.prompt else ""
            lines.append(f"   {step_mark} {step_index}. {first_line}")
    return lines


def build_plan_context(
    plan: PlanRecord,
    plan_path: Path,
    context: PlanningContext,
) -> str:
    """Build the display text for ``plan``.

    Pure: no I/O and no mutation. Header lines are always present and
    left empty when the field is unset; list sections are omitted when
    empty.
    """
    lines = [
        f"Plan file: {context.relative_path(plan_path)}",
        f"Plan ID: {_text(plan.id)}",
        f"Status: {_text(plan.status)}",
        f"Priority: {_text(plan.priority)}",
        f"Title: {_text(plan.title)}",
        f"Goal: {_text(plan.goal)}",
    ]

    if plan.dependencies:
        lines.append(f"Dependencies: {', '.join(str(d) for d in plan.dependencies)}")
    if plan.parent is not None:
        lines.append(f"Parent: {plan.parent}")
    if plan.discovered_from is not None:
        lines.append(f"Discovered from: {plan.discovered_from}")
    if plan.assigned_to:
        lines.append(f"Assigned to: {plan.assigned_to}")
    if plan.tags:
        lines.append(f"Tags: {', '.join(plan.tags)}")
    if plan.issue:
        lines.append("Issues:")
        lines.extend(f"- {url}" for url in plan.issue)
    if plan.docs:
        lines.append("Docs:")
        lines.extend(f"- {doc}" for doc in plan.docs)

    if plan.details and plan.details.strip():
        lines.extend(["", "Details:", plan.details.strip()])

    if plan.tasks:
        done = sum(1 for t in plan.tasks if t.done)
        lines.extend(["", f"Tasks ({done}/{len(plan.tasks)} done):"])
        for index, task in enumerate(plan.tasks, 1):
            lines.extend(_format_task(index, task))

    return "\n".join(lines)
