"""Environment variable names - centralized, type-safe, no magic strings!

All environment variable access should go through this module.
"""

from __future__ import annotations

import os
from enum import Enum


class EnvVar(str, Enum):
    """All environment variable names used by planbook."""

    CONFIG = "PLANBOOK_CONFIG"
    TASKS_DIR = "PLANBOOK_TASKS_DIR"
    LOG_LEVEL = "PLANBOOK_LOG_LEVEL"
    LOG_FILE = "PLANBOOK_LOG_FILE"
    LOG_FORMAT = "PLANBOOK_LOG_FORMAT"


def get_env(var: EnvVar, default: str | None = None) -> str | None:
    """Get environment variable value (type-safe).

    Example:
        >>> tasks = get_env(EnvVar.TASKS_DIR)
    """
    return os.getenv(var.value, default)
