# planbook/plans/cache.py
"""Plan lookup caching.

Read-through memoization of directory scans and individual plan file
reads, keyed by resolved path. Entries never expire on their own; the
only invalidation is an explicit ``clear()``. One cache lives on each
PlanningContext, so separate contexts (and tests) never share state.
"""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path

from pydantic import BaseModel, Field

from planbook.plans.models import PlanRecord, PlanSummary

log = logging.getLogger(__name__)


class PlanCache(BaseModel):
    """Memoizes plan directory scans and plan file reads."""

    directories: dict[str, list[PlanSummary]] = Field(default_factory=dict)
    files: dict[str, PlanRecord] = Field(default_factory=dict)
    hits: int = Field(default=0)
    misses: int = Field(default=0)

    def get_plans(
        self,
        directory: Path,
        loader: Callable[[Path], list[PlanSummary]],
    ) -> list[PlanSummary]:
        """Return the summaries for ``directory``, scanning on a miss."""
        key = str(directory.resolve())
        cached = self.directories.get(key)
        if cached is not None:
            self.hits += 1
            return list(cached)

        self.misses += 1
        plans = loader(directory)
        self.directories[key] = plans
        log.debug("Cached %d plans for %s", len(plans), key)
        return list(plans)

    def get_plan_file(
        self,
        path: Path,
        loader: Callable[[Path], PlanRecord],
    ) -> PlanRecord:
        """Return the parsed plan at ``path``, reading it on a miss."""
        key = str(path.resolve())
        cached = self.files.get(key)
        if cached is not None:
            self.hits += 1
            return cached.model_copy(deep=True)

        self.misses += 1
        plan = loader(path)
        self.files[key] = plan
        return plan.model_copy(deep=True)

    def get_stats(self) -> dict[str, int]:
        """Get cache statistics."""
        return {
            "cached_directories": len(self.directories),
            "cached_files": len(self.files),
            "hits": self.hits,
            "misses": self.misses,
        }

    def clear(self) -> None:
        """Invalidate every memoized lookup."""
        if self.directories or self.files:
            log.debug(
                "Clearing plan cache (%d directories, %d files)",
                len(self.directories),
                len(self.files),
            )
        self.directories.clear()
        self.files.clear()
