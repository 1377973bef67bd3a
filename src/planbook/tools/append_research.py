"""append-plan-research: add research notes to a plan's details."""

from __future__ import annotations

import logging

from planbook.config.defaults import DEFAULT_RESEARCH_HEADING
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.display import build_plan_context
from planbook.planning.resolver import resolve_plan
from planbook.plans.io import utc_now_iso
from planbook.plans.models import PlanRecord
from planbook.tools.models import ToolResult
from planbook.tools.schemas import AppendResearchArguments

logger = logging.getLogger(__name__)


def append_research_section(
    details: str | None,
    research: str,
    heading: str = DEFAULT_RESEARCH_HEADING,
    timestamp: str | None = None,
) -> str:
    """Return ``details`` with ``research`` appended under ``heading``.

    The heading is added once; later appends go to the end of the text.
    """
    block = research.strip()
    if timestamp:
        block = f"### {timestamp}\n\n{block}"

    existing = (details or "").rstrip()
    has_heading = any(line.strip() == heading for line in existing.splitlines())

    parts = [existing] if existing else []
    if not has_heading:
        parts.append(heading)
    parts.append(block)
    return "\n\n".join(parts)


async def append_research_tool(
    args: AppendResearchArguments,
    context: PlanningContext,
) -> ToolResult[PlanRecord]:
    clear_plan_cache(context)
    resolved = await resolve_plan(args.plan, context)

    plan = resolved.plan
    plan.details = append_research_section(
        plan.details,
        args.research,
        heading=args.heading or DEFAULT_RESEARCH_HEADING,
        timestamp=utc_now_iso() if args.timestamp else None,
    )
    written = context.store.write(resolved.plan_path, plan)

    target = (
        f"plan {written.id}"
        if written.id is not None
        else context.relative_path(resolved.plan_path)
    )
    logger.info("Appended research to %s", target)
    return ToolResult[PlanRecord](
        text=build_plan_context(written, resolved.plan_path, context),
        data=written,
        message=f"Appended research to {target}",
    )
