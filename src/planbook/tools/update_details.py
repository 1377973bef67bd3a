"""update-plan-details: rewrite the generated part of a plan's details.

Agents own the text between the generated-section markers. Everything
outside them, the Research section in particular, is left alone.
"""

from __future__ import annotations

import logging
import re

from planbook.config.defaults import (
    DEFAULT_RESEARCH_HEADING,
    GENERATED_SECTION_END,
    GENERATED_SECTION_START,
)
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.display import build_plan_context
from planbook.planning.resolver import resolve_plan
from planbook.plans.models import PlanRecord
from planbook.tools.models import ToolResult
from planbook.tools.schemas import UpdatePlanDetailsArguments

logger = logging.getLogger(__name__)


def _wrap(content: str) -> str:
    return f"{GENERATED_SECTION_START}\n{content}\n{GENERATED_SECTION_END}"


def update_generated_section(
    details: str | None,
    new_content: str,
    *,
    append: bool = False,
    research_heading: str = DEFAULT_RESEARCH_HEADING,
) -> str:
    """Return ``details`` with the generated section replaced or extended.

    Without markers yet, the section is inserted just before the
    research heading, or at the end when there is none. Text outside
    the markers is kept as is.
    """
    existing = (details or "").strip()
    block = new_content.strip()

    start = existing.find(GENERATED_SECTION_START)
    end = existing.find(GENERATED_SECTION_END, start + 1) if start != -1 else -1
    if start != -1 and end != -1:
        current = existing[start + len(GENERATED_SECTION_START) : end].strip()
        if append and current:
            block = f"{current}\n\n{block}" if block else current
        before = existing[:start]
        after = existing[end + len(GENERATED_SECTION_END) :]
        return f"{before}{_wrap(block)}{after}".strip()

    research = re.search(
        rf"^{re.escape(research_heading)}[ \t]*$", existing, re.MULTILINE
    )
    if research:
        before = existing[: research.start()].rstrip()
        after = existing[research.start() :]
        parts = [before, _wrap(block), after]
    else:
        parts = [existing, _wrap(block)]
    return "\n\n".join(p for p in parts if p)


async def update_plan_details_tool(
    args: UpdatePlanDetailsArguments,
    context: PlanningContext,
) -> ToolResult[PlanRecord]:
    clear_plan_cache(context)
    resolved = await resolve_plan(args.plan, context)

    plan = resolved.plan
    plan.details = update_generated_section(plan.details, args.details, append=args.append)
    written = context.store.write(resolved.plan_path, plan)

    target = (
        f"plan {written.id}"
        if written.id is not None
        else context.relative_path(resolved.plan_path)
    )
    verb = "Appended to" if args.append else "Replaced"
    logger.info("%s generated details of %s", verb, target)
    return ToolResult[PlanRecord](
        text=build_plan_context(written, resolved.plan_path, context),
        data=written,
        message=f"{verb} generated details of {target}",
    )
