# tests/tools/test_create_plan.py
"""Tests for the create-plan tool."""

from __future__ import annotations

from pathlib import Path

import pytest
from pydantic import ValidationError

from planbook.config.models import PlanbookConfig
from planbook.errors import PlanValidationError
from planbook.planning.context import PlanningContext
from planbook.plans.io import read_plan_file
from planbook.tools.create_plan import create_plan_tool, normalize_tags
from planbook.tools.get_plan import get_plan_tool
from planbook.tools.schemas import CreatePlanArguments, GetPlanArguments


# ── Tests: tags ──────────────────────────────────────────────────────────────


def test_normalize_tags():
    assert normalize_tags([" Backend", "api", "backend", ""]) == ["api", "backend"]


def test_normalize_tags_with_allowlist():
    assert normalize_tags(["API"], ["api", "ui"]) == ["api"]


def test_normalize_tags_rejects_unknown():
    with pytest.raises(PlanValidationError, match="Invalid tag"):
        normalize_tags(["api", "infra"], ["api"])


# ── Tests: create_plan_tool ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_first_plan_gets_id_one(context: PlanningContext, repo: Path):
    result = await create_plan_tool(CreatePlanArguments(title="Add auth"), context)

    path = repo / "1-add-auth.plan.md"
    assert path.is_file()
    assert result.data.id == 1
    assert result.data.status == "pending"
    assert result.data.created_at is not None
    assert result.message == "Created plan 1 at 1-add-auth.plan.md"
    assert "Plan ID: 1" in result.text


@pytest.mark.asyncio
async def test_next_id_follows_highest(context: PlanningContext, write_plan):
    write_plan(4, "Four")
    write_plan(9, "Nine")

    result = await create_plan_tool(CreatePlanArguments(title="Ten"), context)

    assert result.data.id == 10


@pytest.mark.asyncio
async def test_fields_written_to_disk(context: PlanningContext, repo: Path):
    args = CreatePlanArguments.model_validate(
        {
            "title": "Search",
            "goal": "Find things",
            "details": "## Notes\nUse an index.",
            "priority": "high",
            "dependsOn": [2],
            "assignedTo": "alice",
            "tags": ["Backend"],
        }
    )

    await create_plan_tool(args, context)

    plan = read_plan_file(repo / "1-search.plan.md")
    assert plan.goal == "Find things"
    assert plan.details == "## Notes\nUse an index."
    assert plan.priority == "high"
    assert plan.dependencies == [2]
    assert plan.assigned_to == "alice"
    assert plan.tags == ["backend"]


@pytest.mark.asyncio
async def test_parent_gains_child_dependency(context: PlanningContext, write_plan):
    parent_path = write_plan(1, "Epic", container=True, dependencies=[])

    result = await create_plan_tool(
        CreatePlanArguments(title="Child", parent=1), context
    )

    parent = read_plan_file(parent_path)
    assert result.data.parent == 1
    assert parent.dependencies == [result.data.id]


@pytest.mark.asyncio
async def test_missing_parent_raises(context: PlanningContext, repo: Path):
    with pytest.raises(PlanValidationError, match="Parent plan 5 not found"):
        await create_plan_tool(CreatePlanArguments(title="Orphan", parent=5), context)
    assert not list(repo.glob("*.plan.md"))


@pytest.mark.asyncio
async def test_tag_allowlist_from_config(repo: Path):
    config = PlanbookConfig.model_validate({"tags": {"allowed": ["api"]}})
    ctx = PlanningContext(config, repo, cwd=repo)

    with pytest.raises(PlanValidationError, match="Invalid tag"):
        await create_plan_tool(CreatePlanArguments(title="X", tags=["ui"]), ctx)


@pytest.mark.asyncio
async def test_created_plan_visible_to_next_call(context: PlanningContext):
    await create_plan_tool(CreatePlanArguments(title="One"), context)
    second = await create_plan_tool(CreatePlanArguments(title="Two"), context)
    assert second.data.id == 2


@pytest.mark.asyncio
async def test_goal_with_markdown_rule_is_retrievable(context: PlanningContext):
    await create_plan_tool(
        CreatePlanArguments(title="Rule", goal="Intro\n---\nOutro"), context
    )

    fetched = await get_plan_tool(GetPlanArguments(plan="1"), context)
    second = await create_plan_tool(CreatePlanArguments(title="Next"), context)

    assert fetched.data.goal == "Intro\n---\nOutro"
    assert second.data.id == 2


@pytest.mark.asyncio
async def test_uses_configured_tasks_dir(repo: Path):
    config = PlanbookConfig.model_validate({"paths": {"tasks": "tasks"}})
    ctx = PlanningContext(config, repo, cwd=repo)

    result = await create_plan_tool(CreatePlanArguments(title="Nested"), ctx)

    assert (repo / "tasks" / "1-nested.plan.md").is_file()
    assert result.message == "Created plan 1 at tasks/1-nested.plan.md"


def test_empty_title_rejected():
    with pytest.raises(ValidationError):
        CreatePlanArguments(title="")


def test_bad_priority_rejected():
    with pytest.raises(ValidationError):
        CreatePlanArguments(title="x", priority="asap")
