"""create-plan: write a new plan file with the next free id."""

from __future__ import annotations

import logging

from planbook.config.enums import PlanStatus
from planbook.errors import PlanValidationError
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.display import build_plan_context
from planbook.plans.models import PlanRecord
from planbook.tools.models import ToolResult
from planbook.tools.schemas import CreatePlanArguments

logger = logging.getLogger(__name__)


def normalize_tags(tags: list[str], allowed: list[str] | None = None) -> list[str]:
    """Trim, lowercase, dedupe and sort tags; enforce the allowlist if set."""
    normalized = sorted({t.strip().lower() for t in tags if t.strip()})
    if allowed is not None:
        invalid = [t for t in normalized if t not in allowed]
        if invalid:
            raise PlanValidationError(
                f"Invalid tag(s): {', '.join(invalid)}. "
                f"Allowed tags: {', '.join(allowed) or '(none)'}"
            )
    return normalized


async def create_plan_tool(
    args: CreatePlanArguments,
    context: PlanningContext,
) -> ToolResult[PlanRecord]:
    """Create a pending plan; link it into its parent when one is given."""
    clear_plan_cache(context)
    store = context.store

    tags = normalize_tags(args.tags, context.config.tags.allowed)

    parent_summary = None
    if args.parent is not None:
        parent_summary = store.plans_by_id().get(args.parent)
        if parent_summary is None:
            raise PlanValidationError(f"Parent plan {args.parent} not found")

    plan_id = store.next_id()
    plan = PlanRecord(
        id=plan_id,
        title=args.title,
        goal=args.goal,
        details=args.details,
        status=PlanStatus.PENDING,
        priority=args.priority,
        dependencies=list(args.depends_on),
        parent=args.parent,
        discovered_from=args.discovered_from,
        assigned_to=args.assigned_to,
        issue=list(args.issue),
        docs=list(args.docs),
        tags=tags,
        container=args.container,
        temp=args.temp,
    )

    plan_path = store.path_for_new_plan(plan_id, args.title)
    if plan_path.exists():
        raise PlanValidationError(f"Plan file already exists: {plan_path}")

    written = store.write(plan_path, plan)

    if parent_summary is not None:
        parent = store.read(parent_summary.filename)
        if plan_id not in parent.dependencies:
            parent.dependencies.append(plan_id)
            store.write(parent_summary.filename, parent)
            logger.debug("Added plan %s to parent %s dependencies", plan_id, parent.id)

    relative = context.relative_path(plan_path)
    logger.info("Created plan %s at %s", plan_id, relative)
    return ToolResult[PlanRecord](
        text=build_plan_context(written, plan_path, context),
        data=written,
        message=f"Created plan {plan_id} at {relative}",
    )
