"""Pydantic configuration models for planbook."""

from __future__ import annotations

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator


class PathsConfig(BaseModel):
    """Filesystem locations."""

    tasks: str | None = Field(
        default=None,
        description="Directory containing plan files (absolute or relative to git root)",
    )


class TagsConfig(BaseModel):
    """Tag policy for new plans."""

    allowed: list[str] | None = Field(
        default=None,
        description="If set, only these tags may be applied to plans",
    )

    @field_validator("allowed")
    @classmethod
    def normalize_allowed(cls, v: list[str] | None) -> list[str] | None:
        if v is None:
            return None
        return sorted({t.strip().lower() for t in v if t.strip()})


class PlanbookConfig(BaseModel):
    """Top-level project configuration loaded from YAML."""

    model_config = ConfigDict(extra="ignore")

    paths: PathsConfig = Field(default_factory=PathsConfig)
    tags: TagsConfig = Field(default_factory=TagsConfig)

    def resolve_tasks_dir(self, git_root: Path) -> Path:
        """Return the absolute tasks directory.

        Relative paths are resolved against the git root; with no
        configured path the git root itself is scanned.
        """
        if not self.paths.tasks:
            return git_root
        tasks = Path(self.paths.tasks).expanduser()
        if tasks.is_absolute():
            return tasks
        return git_root / tasks
