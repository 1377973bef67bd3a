# tests/tools/test_registry.py
"""Tests for plan tool definitions and the dispatcher."""

from __future__ import annotations

import json
from pathlib import Path

import pytest

from planbook.config.enums import PlanToolName
from planbook.planning.context import PlanningContext
from planbook.tools.registry import (
    _PLAN_TOOL_NAMES,
    get_plan_tools_as_dicts,
    handle_plan_tool,
    is_plan_tool,
)


# ── Tests: tool definitions ──────────────────────────────────────────────────


class TestToolDefinitions:
    def test_names_match_enum(self):
        names = {t["function"]["name"] for t in get_plan_tools_as_dicts()}
        assert names == {n.value for n in PlanToolName}
        assert names == _PLAN_TOOL_NAMES

    def test_openai_format(self):
        for tool in get_plan_tools_as_dicts():
            assert tool["type"] == "function"
            assert tool["function"]["description"]
            assert tool["function"]["parameters"]["type"] == "object"

    def test_is_plan_tool(self):
        assert is_plan_tool("get-plan")
        assert not is_plan_tool("read_file")


# ── Tests: handle_plan_tool ──────────────────────────────────────────────────


@pytest.mark.asyncio
async def test_get_plan_round_trip(context: PlanningContext, write_plan):
    write_plan(42, "Add auth", assignedTo="alice")

    raw = await handle_plan_tool("get-plan", {"plan": "42"}, context)
    result = json.loads(raw)

    assert result["message"] == "Retrieved plan 42"
    assert result["data"]["id"] == 42
    assert result["data"]["assignedTo"] == "alice"
    assert "Plan ID: 42" in result["text"]


@pytest.mark.asyncio
async def test_camel_case_arguments(context: PlanningContext, repo: Path):
    raw = await handle_plan_tool(
        "create-plan", {"title": "Thing", "assignedTo": "bob"}, context
    )
    result = json.loads(raw)

    assert result["data"]["assignedTo"] == "bob"
    assert (repo / "1-thing.plan.md").is_file()


@pytest.mark.asyncio
async def test_list_ready_plans(context: PlanningContext, write_plan):
    write_plan(1, "One", priority="low")

    result = json.loads(await handle_plan_tool("list-ready-plans", {}, context))

    assert result["data"]["count"] == 1


@pytest.mark.asyncio
async def test_append_research(context: PlanningContext, write_plan):
    write_plan(1, "One")

    result = json.loads(
        await handle_plan_tool(
            "append-plan-research", {"plan": 1, "research": "Note"}, context
        )
    )

    assert result["message"] == "Appended research to plan 1"


@pytest.mark.asyncio
async def test_plan_errors_become_error_results(context: PlanningContext):
    result = json.loads(await handle_plan_tool("get-plan", {"plan": "77"}, context))
    assert result == {"error": "No plan found with ID or file path: 77"}


@pytest.mark.asyncio
async def test_invalid_arguments(context: PlanningContext):
    result = json.loads(await handle_plan_tool("create-plan", {}, context))
    assert result["error"].startswith("Invalid arguments for create-plan")


@pytest.mark.asyncio
async def test_unknown_tool(context: PlanningContext):
    result = json.loads(await handle_plan_tool("delete-plan", {}, context))
    assert result == {"error": "Unknown plan tool: delete-plan"}


@pytest.mark.asyncio
async def test_write_failures_become_error_results(
    context: PlanningContext, monkeypatch: pytest.MonkeyPatch
):
    def read_only(self, *args, **kwargs):
        raise PermissionError(13, "Permission denied", str(self))

    monkeypatch.setattr(Path, "write_text", read_only)

    result = json.loads(
        await handle_plan_tool("create-plan", {"title": "Blocked"}, context)
    )

    assert result["error"].startswith("Could not write plan file")
    assert "Permission denied" in result["error"]


@pytest.mark.asyncio
async def test_manage_plan_task_uses_wire_names(context: PlanningContext, write_plan):
    write_plan(3, "Three", tasks=[{"title": "Only", "description": "d"}])

    result = json.loads(
        await handle_plan_tool(
            "manage-plan-task",
            {"plan": "3", "action": "update", "taskIndex": 0, "done": True},
            context,
        )
    )

    assert result["data"]["planId"] == 3
    assert result["data"]["taskCount"] == 1
    assert result["data"]["task"]["done"] is True


@pytest.mark.asyncio
async def test_manage_plan_task_errors_become_error_results(
    context: PlanningContext, write_plan
):
    write_plan(3, "Three")

    result = json.loads(
        await handle_plan_tool(
            "manage-plan-task", {"plan": "3", "action": "remove"}, context
        )
    )

    assert result == {"error": "Provide either taskTitle or taskIndex to remove a task."}


@pytest.mark.asyncio
async def test_update_plan_details(context: PlanningContext, write_plan):
    write_plan(4, "Four")

    result = json.loads(
        await handle_plan_tool(
            "update-plan-details", {"plan": 4, "details": "Generated"}, context
        )
    )

    assert result["message"] == "Replaced generated details of plan 4"
    assert "Generated" in result["data"]["details"]
