"""Configuration for planbook: defaults, enums, models, loading and logging."""

from planbook.config.enums import (
    IdentifierKind,
    PlanPriority,
    PlanStatus,
    PlanToolName,
    ReadySortField,
)
from planbook.config.loader import (
    find_config_path,
    find_git_root,
    load_config,
    load_effective_config,
)
from planbook.config.models import PathsConfig, PlanbookConfig, TagsConfig

__all__ = [
    "IdentifierKind",
    "PathsConfig",
    "PlanPriority",
    "PlanStatus",
    "PlanToolName",
    "PlanbookConfig",
    "ReadySortField",
    "TagsConfig",
    "find_config_path",
    "find_git_root",
    "load_config",
    "load_effective_config",
]
