"""Common test fixtures for planbook tests."""

from __future__ import annotations

import logging
from collections.abc import Callable
from pathlib import Path
from typing import Any

import pytest
import yaml

from planbook.config.env_vars import EnvVar
from planbook.config.models import PlanbookConfig
from planbook.events.sink import set_structured_sink
from planbook.planning.context import PlanningContext

WritePlan = Callable[..., Path]


@pytest.fixture(autouse=True)
def clean_env(monkeypatch: pytest.MonkeyPatch) -> None:
    """Keep the developer's PLANBOOK_* variables out of tests."""
    for var in EnvVar:
        monkeypatch.delenv(var.value, raising=False)


@pytest.fixture(autouse=True)
def restore_logging():
    """Undo any handler or level changes made by setup_logging."""
    root = logging.getLogger()
    handlers = root.handlers[:]
    level = root.level
    planbook_level = logging.getLogger("planbook").level
    yield
    for handler in root.handlers[:]:
        if handler not in handlers:
            root.removeHandler(handler)
            handler.close()
    for handler in handlers:
        if handler not in root.handlers:
            root.addHandler(handler)
    root.setLevel(level)
    logging.getLogger("planbook").setLevel(planbook_level)


@pytest.fixture(autouse=True)
def reset_structured_sink():
    """Restore the default structured event sink after each test."""
    yield
    set_structured_sink(None)


@pytest.fixture
def repo(tmp_path: Path) -> Path:
    """An empty git repository root."""
    (tmp_path / ".git").mkdir()
    return tmp_path


@pytest.fixture
def context(repo: Path) -> PlanningContext:
    """PlanningContext scanning the whole repo, with cwd at its root."""
    return PlanningContext(PlanbookConfig(), repo, cwd=repo)


@pytest.fixture
def write_plan(repo: Path) -> WritePlan:
    """Write a front matter plan file and return its path.

    Usage: ``write_plan(42, "Add auth", status="done", body="Notes")``.
    Keyword arguments use the on-disk (camelCase) key names.
    """

    def _write(
        plan_id: int | None,
        title: str,
        *,
        body: str = "",
        directory: Path | None = None,
        filename: str | None = None,
        **fields: Any,
    ) -> Path:
        data: dict[str, Any] = {}
        if plan_id is not None:
            data["id"] = plan_id
        data["title"] = title
        data.update(fields)

        target_dir = directory or repo
        target_dir.mkdir(parents=True, exist_ok=True)
        if filename is None:
            slug = title.lower().replace(" ", "-")
            filename = f"{plan_id}-{slug}.plan.md" if plan_id else f"{slug}.plan.md"

        text = f"---\n{yaml.safe_dump(data, sort_keys=False)}---\n"
        if body:
            text += f"\n{body}\n"
        path = target_dir / filename
        path.write_text(text, encoding="utf-8")
        return path

    return _write
