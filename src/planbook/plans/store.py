"""File-based plan store.

Owns every filesystem access for plans: scanning a tasks directory,
reading single plan files, and writing them back. Reads go through the
PlanCache; writes invalidate it.
"""

from __future__ import annotations

import logging
from pathlib import Path

from planbook.config.defaults import PLAN_FILE_EXTENSIONS
from planbook.errors import PlanError
from planbook.plans.cache import PlanCache
from planbook.plans.io import generate_plan_filename, read_plan_file, write_plan_file
from planbook.plans.models import PlanRecord, PlanSummary

logger = logging.getLogger(__name__)


def iter_plan_files(directory: Path) -> list[Path]:
    """Return plan-like files under ``directory``, sorted, skipping dot-dirs."""
    if not directory.is_dir():
        logger.debug("Tasks directory does not exist: %s", directory)
        return []

    found: list[Path] = []
    for path in sorted(directory.rglob("*")):
        rel_parts = path.relative_to(directory).parts
        if any(part.startswith(".") for part in rel_parts):
            continue
        if path.is_file() and path.name.endswith(PLAN_FILE_EXTENSIONS):
            found.append(path)
    return found


def scan_plans(directory: Path) -> list[PlanSummary]:
    """Read every plan with an id under ``directory``.

    Files that fail to parse, or that have no id, are skipped.
    """
    logger.debug("Scanning directory for plan files: %s", directory)
    summaries: list[PlanSummary] = []
    for path in iter_plan_files(directory):
        try:
            plan = read_plan_file(path)
        except PlanError as e:
            # Markdown docs without front matter land here too
            logger.debug("Skipping %s: %s", path, e)
            continue
        if plan.id is None:
            continue
        summaries.append(PlanSummary.from_record(plan, path.resolve()))

    logger.debug("Found %d plans with ids in %s", len(summaries), directory)
    return summaries


class PlanStore:
    """Plan persistence for one tasks directory."""

    def __init__(self, tasks_dir: Path, cache: PlanCache) -> None:
        self.tasks_dir = tasks_dir
        self.cache = cache

    def all_plans(self) -> list[PlanSummary]:
        """Every plan with an id, duplicates included, in path order."""
        return self.cache.get_plans(self.tasks_dir, scan_plans)

    def plans_by_id(self) -> dict[int, PlanSummary]:
        """Index plans by id; on duplicate ids the first path wins."""
        index: dict[int, PlanSummary] = {}
        for summary in self.all_plans():
            if summary.id in index:
                logger.warning(
                    "Duplicate plan id %s in %s and %s",
                    summary.id,
                    index[summary.id].filename,
                    summary.filename,
                )
                continue
            index[summary.id] = summary
        return index

    def read(self, path: Path) -> PlanRecord:
        """Read one plan file through the cache."""
        return self.cache.get_plan_file(path, read_plan_file)

    def write(
        self,
        path: Path,
        plan: PlanRecord,
        *,
        skip_updated_at: bool = False,
    ) -> PlanRecord:
        """Write a plan and invalidate cached lookups."""
        written = write_plan_file(path, plan, skip_updated_at=skip_updated_at)
        self.cache.clear()
        return written

    def next_id(self) -> int:
        """One past the highest id in the store (1 when empty)."""
        ids = [s.id for s in self.all_plans()]
        return max(ids, default=0) + 1

    def path_for_new_plan(self, plan_id: int, title: str) -> Path:
        return self.tasks_dir / generate_plan_filename(plan_id, title)
