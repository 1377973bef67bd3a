"""get-plan: fetch one plan, fresh from disk."""

from __future__ import annotations

import logging

from planbook.config.defaults import RETRIEVED_PLAN_MESSAGE
from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.display import build_plan_context
from planbook.planning.resolver import resolve_plan
from planbook.plans.models import PlanRecord
from planbook.tools.models import ToolResult
from planbook.tools.schemas import GetPlanArguments

logger = logging.getLogger(__name__)


def retrieved_plan_message(plan: PlanRecord) -> str:
    if plan.id is None:
        return RETRIEVED_PLAN_MESSAGE
    return f"{RETRIEVED_PLAN_MESSAGE} {plan.id}"


async def get_plan_tool(
    args: GetPlanArguments,
    context: PlanningContext,
) -> ToolResult[PlanRecord]:
    """Resolve ``args.plan`` and return its text, record and summary.

    The cache is cleared first so the caller never sees a plan read
    earlier in this process. Resolution errors propagate.
    """
    clear_plan_cache(context)
    resolved = await resolve_plan(args.plan, context)
    text = build_plan_context(resolved.plan, resolved.plan_path, context)
    logger.debug("get-plan %s -> %s", args.plan, resolved.plan_path)
    return ToolResult[PlanRecord](
        text=text,
        data=resolved.plan,
        message=retrieved_plan_message(resolved.plan),
    )
