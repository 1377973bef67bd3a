"""Plan records, file formats, caching and storage."""

from planbook.plans.cache import PlanCache
from planbook.plans.io import (
    generate_plan_filename,
    read_plan_file,
    slugify,
    write_plan_file,
)
from planbook.plans.models import (
    ById,
    ByPath,
    PlanIdentifier,
    PlanRecord,
    PlanStep,
    PlanSummary,
    PlanTask,
    ResolvedPlan,
)
from planbook.plans.store import PlanStore

__all__ = [
    "ById",
    "ByPath",
    "PlanCache",
    "PlanIdentifier",
    "PlanRecord",
    "PlanStep",
    "PlanStore",
    "PlanSummary",
    "PlanTask",
    "ResolvedPlan",
    "generate_plan_filename",
    "read_plan_file",
    "slugify",
    "write_plan_file",
]
