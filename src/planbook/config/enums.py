"""Configuration enums - no magic strings!"""

from __future__ import annotations

from enum import Enum


class PlanStatus(str, Enum):
    """Lifecycle status of a plan."""

    PENDING = "pending"
    IN_PROGRESS = "in_progress"
    DONE = "done"
    CANCELLED = "cancelled"
    DEFERRED = "deferred"


class PlanPriority(str, Enum):
    """Priority levels, lowest to highest."""

    MAYBE = "maybe"
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"
    URGENT = "urgent"


# Ranking used when sorting by priority; missing priority ranks 0.
PRIORITY_RANK: dict[str, int] = {
    PlanPriority.URGENT.value: 5,
    PlanPriority.HIGH.value: 4,
    PlanPriority.MEDIUM.value: 3,
    PlanPriority.LOW.value: 2,
    PlanPriority.MAYBE.value: 1,
}


class ReadySortField(str, Enum):
    """Sort keys accepted by list-ready-plans."""

    PRIORITY = "priority"
    ID = "id"
    TITLE = "title"
    CREATED = "created"
    UPDATED = "updated"


class PlanToolName(str, Enum):
    """Names of the tools exposed to the host runtime."""

    GET_PLAN = "get-plan"
    CREATE_PLAN = "create-plan"
    LIST_READY_PLANS = "list-ready-plans"
    APPEND_RESEARCH = "append-plan-research"
    UPDATE_PLAN_DETAILS = "update-plan-details"
    MANAGE_PLAN_TASK = "manage-plan-task"


class TaskAction(str, Enum):
    """Edits accepted by manage-plan-task."""

    ADD = "add"
    UPDATE = "update"
    REMOVE = "remove"


class IdentifierKind(str, Enum):
    """Tag of a parsed plan identifier."""

    BY_ID = "by_id"
    BY_PATH = "by_path"


class LogFormat(str, Enum):
    """Console log formats accepted by ``--log-format``."""

    SIMPLE = "simple"
    DETAILED = "detailed"
    JSON = "json"
