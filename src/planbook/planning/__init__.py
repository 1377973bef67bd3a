"""Plan resolution and context building.

Key components:
- PlanningContext: config, git root, plan cache and store for one caller
- resolve_plan / parse_plan_identifier: identifier to (plan, path)
- build_plan_context: plan and path to display text
"""

from planbook.planning.context import PlanningContext, clear_plan_cache
from planbook.planning.display import build_plan_context
from planbook.planning.resolver import parse_plan_identifier, plan_slug, resolve_plan

__all__ = [
    "PlanningContext",
    "build_plan_context",
    "clear_plan_cache",
    "parse_plan_identifier",
    "plan_slug",
    "resolve_plan",
]
