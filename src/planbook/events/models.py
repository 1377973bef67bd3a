"""Pydantic models for structured events."""

from __future__ import annotations

from datetime import datetime, timezone
from typing import Any, Literal

from pydantic import BaseModel, ConfigDict, Field


def _now_iso() -> str:
    return datetime.now(timezone.utc).isoformat()


class StructuredEvent(BaseModel):
    """Base for tagged, timestamped events sent to the structured sink."""

    model_config = ConfigDict(populate_by_name=True)

    type: str
    timestamp: str = Field(default_factory=_now_iso)

    def to_payload(self) -> dict[str, Any]:
        """Wire form: camelCase keys, unset optionals omitted."""
        payload: dict[str, Any] = self.model_dump(
            mode="json", by_alias=True, exclude_none=True
        )
        return payload


class FailureReportEvent(StructuredEvent):
    """An agent giving up on a task and explaining why."""

    type: Literal["failure_report"] = "failure_report"
    summary: str
    requirements: str | None = None
    problems: str | None = None
    solutions: str | None = None
    source_agent: str | None = Field(default=None, alias="sourceAgent")
