"""Pydantic models for plan records, identifiers and store summaries."""

from __future__ import annotations

from datetime import date, datetime
from pathlib import Path
from typing import Annotated, Any, Literal, Union

from pydantic import BaseModel, ConfigDict, Field, field_validator

from planbook.config.enums import IdentifierKind, PlanPriority, PlanStatus


class PlanStep(BaseModel):
    """A single prompt-sized step inside a task."""

    model_config = ConfigDict(extra="allow")

    prompt: str = ""
    done: bool = False


class PlanTask(BaseModel):
    """A task within a plan."""

    model_config = ConfigDict(extra="allow")

    title: str
    description: str = ""
    done: bool = False
    files: list[str] = Field(default_factory=list)
    docs: list[str] = Field(default_factory=list)
    steps: list[PlanStep] = Field(default_factory=list)


class PlanRecord(BaseModel):
    """A plan as stored on disk.

    Keys on disk are camelCase; the aliases map them to snake_case
    attributes. Unknown keys survive a read/write round trip.
    """

    model_config = ConfigDict(
        extra="allow",
        populate_by_name=True,
        use_enum_values=True,
    )

    id: int | None = Field(default=None, gt=0)
    title: str | None = None
    goal: str | None = None
    details: str | None = None
    status: PlanStatus | None = None
    priority: PlanPriority | None = None
    dependencies: list[int] = Field(default_factory=list)
    parent: int | None = None
    discovered_from: int | None = Field(default=None, alias="discoveredFrom")
    assigned_to: str | None = Field(default=None, alias="assignedTo")
    issue: list[str] = Field(default_factory=list)
    docs: list[str] = Field(default_factory=list)
    tags: list[str] = Field(default_factory=list)
    container: bool = False
    temp: bool = False
    created_at: str | None = Field(default=None, alias="createdAt")
    updated_at: str | None = Field(default=None, alias="updatedAt")
    tasks: list[PlanTask] = Field(default_factory=list)

    @field_validator("created_at", "updated_at", mode="before")
    @classmethod
    def _timestamps_as_text(cls, v: Any) -> Any:
        # YAML turns unquoted ISO timestamps into datetime objects
        if isinstance(v, (datetime, date)):
            return v.isoformat()
        return v

    @field_validator("dependencies", mode="before")
    @classmethod
    def _none_is_empty(cls, v: Any) -> Any:
        return [] if v is None else v

    @property
    def effective_status(self) -> str:
        """Status with the implicit ``pending`` default applied."""
        return str(self.status) if self.status else PlanStatus.PENDING.value

    def to_file_dict(self) -> dict[str, Any]:
        """Serialize with on-disk key names, dropping unset optionals."""
        data: dict[str, Any] = self.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        return data


class ById(BaseModel):
    """Identifier naming a plan by id or slug inside the tasks directory."""

    kind: Literal[IdentifierKind.BY_ID] = IdentifierKind.BY_ID
    value: str


class ByPath(BaseModel):
    """Identifier naming a plan file directly."""

    kind: Literal[IdentifierKind.BY_PATH] = IdentifierKind.BY_PATH
    path: Path
    raw: str


PlanIdentifier = Annotated[Union[ById, ByPath], Field(discriminator="kind")]


class ResolvedPlan(BaseModel):
    """A plan paired with the file it was loaded from."""

    plan: PlanRecord
    plan_path: Path


class PlanSummary(BaseModel):
    """Index entry produced when scanning a tasks directory."""

    id: int
    filename: Path
    title: str | None = None
    goal: str | None = None
    status: str = PlanStatus.PENDING.value
    priority: str | None = None
    dependencies: list[int] = Field(default_factory=list)
    parent: int | None = None
    assigned_to: str | None = None
    created_at: str | None = None
    updated_at: str | None = None
    task_count: int = 0
    completed_tasks: int = 0
    step_count: int = 0

    @classmethod
    def from_record(cls, plan: PlanRecord, filename: Path) -> PlanSummary:
        if plan.id is None:
            raise ValueError("Only plans with an id can be summarized")
        return cls(
            id=plan.id,
            filename=filename,
            title=plan.title,
            goal=plan.goal,
            status=plan.effective_status,
            priority=plan.priority,
            dependencies=list(plan.dependencies),
            parent=plan.parent,
            assigned_to=plan.assigned_to,
            created_at=plan.created_at,
            updated_at=plan.updated_at,
            task_count=len(plan.tasks),
            completed_tasks=sum(1 for t in plan.tasks if t.done),
            step_count=sum(len(t.steps) for t in plan.tasks),
        )
