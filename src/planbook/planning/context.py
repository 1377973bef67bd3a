# planbook/planning/context.py
"""PlanningContext: state container for plan operations.

Holds the loaded configuration, the git root and working directory that
identifiers are resolved against, the plan cache and the plan store.
Every tool receives one; nothing reads module-level state.
"""

from __future__ import annotations

import logging
from pathlib import Path

from planbook.config.loader import find_git_root, load_effective_config
from planbook.config.models import PlanbookConfig
from planbook.plans.cache import PlanCache
from planbook.plans.store import PlanStore

logger = logging.getLogger(__name__)


class PlanningContext:
    """State container for plan operations.

    Centralizes access to configuration, the plan cache and the plan
    store. Passed to the resolver, the context builder and every tool.
    """

    def __init__(
        self,
        config: PlanbookConfig,
        git_root: Path,
        *,
        config_path: Path | None = None,
        cwd: Path | None = None,
        cache: PlanCache | None = None,
    ) -> None:
        """Initialize planning context.

        Args:
            config: Validated project configuration.
            git_root: Repository root; relative config paths hang off it.
            config_path: File the config was loaded from, if any.
            cwd: Directory relative plan paths are resolved against.
                Defaults to the process working directory.
            cache: Plan cache to use. A fresh one is created when omitted.
        """
        self.config = config
        self.config_path = config_path
        self.git_root = git_root
        self.cwd = cwd or Path.cwd()
        self.cache = cache if cache is not None else PlanCache()
        self.tasks_dir = config.resolve_tasks_dir(git_root)
        self.store = PlanStore(self.tasks_dir, self.cache)

        logger.debug(
            "PlanningContext initialized, git_root=%s tasks_dir=%s",
            self.git_root,
            self.tasks_dir,
        )

    @classmethod
    def load(
        cls,
        config_path: str | Path | None = None,
        *,
        cwd: Path | None = None,
    ) -> PlanningContext:
        """Discover the git root and config, then build a context."""
        start = cwd or Path.cwd()
        git_root = find_git_root(start)
        config, resolved_path = load_effective_config(config_path, git_root)
        return cls(config, git_root, config_path=resolved_path, cwd=start)

    def clear_plan_cache(self) -> None:
        """Drop every memoized plan lookup held by this context."""
        self.cache.clear()

    def relative_path(self, path: Path) -> str:
        """Path relative to the git root when inside it, else absolute."""
        try:
            return str(path.resolve().relative_to(self.git_root.resolve()))
        except ValueError:
            return str(path)


def clear_plan_cache(context: PlanningContext) -> None:
    """Invalidate memoized plan lookups for ``context``."""
    context.clear_plan_cache()
