# tests/test_cli.py
"""Tests for the planbook command line."""

from __future__ import annotations

import json
import logging
from pathlib import Path

import pytest
from typer.testing import CliRunner

from planbook.main import app
from planbook.plans.io import read_plan_file

runner = CliRunner()


@pytest.fixture(autouse=True)
def in_repo(repo: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    monkeypatch.chdir(repo)
    return repo


def test_show(write_plan):
    write_plan(42, "Add auth", goal="Log in")

    result = runner.invoke(app, ["show", "42"])

    assert result.exit_code == 0, result.output
    assert "Plan ID: 42" in result.output
    assert "Goal: Log in" in result.output


def test_show_keeps_task_marks(write_plan):
    write_plan(1, "One", tasks=[{"title": "Write it", "done": True}])

    result = runner.invoke(app, ["show", "1"])

    assert "1. [x] Write it" in result.output


def test_show_unknown_plan_exits_nonzero():
    result = runner.invoke(app, ["show", "99"])

    assert result.exit_code == 1
    assert "No plan found with ID or file path: 99" in result.output


def test_ready_json(write_plan):
    write_plan(1, "Base", status="done")
    write_plan(2, "Next", dependencies=[1])

    result = runner.invoke(app, ["ready", "--json"])

    assert result.exit_code == 0, result.output
    data = json.loads(result.output)
    assert data["count"] == 1
    assert data["plans"][0]["id"] == 2


def test_ready_table(write_plan):
    write_plan(3, "Api", priority="high")

    result = runner.invoke(app, ["ready", "--sort", "id"])

    assert result.exit_code == 0, result.output
    assert "Api" in result.output


def test_ready_empty():
    result = runner.invoke(app, ["ready"])
    assert result.exit_code == 0
    assert "No ready plans" in result.output


def test_create_with_parent_and_tags(in_repo: Path, write_plan):
    write_plan(1, "Epic")

    result = runner.invoke(
        app, ["create", "Child task", "--parent", "1", "--tag", "API", "--priority", "low"]
    )

    assert result.exit_code == 0, result.output
    assert "Created plan 2" in result.output
    child = read_plan_file(in_repo / "2-child-task.plan.md")
    assert child.tags == ["api"]
    assert child.priority == "low"


def test_create_invalid_priority():
    result = runner.invoke(app, ["create", "X", "--priority", "asap"])
    assert result.exit_code == 1
    assert "Invalid arguments" in result.output


def test_research(in_repo: Path, write_plan):
    path = write_plan(1, "One")

    result = runner.invoke(app, ["research", "1", "Benchmarks look fine"])

    assert result.exit_code == 0, result.output
    assert "Appended research to plan 1" in result.output
    assert "Benchmarks look fine" in read_plan_file(path).details


def test_tools_lists_catalog():
    result = runner.invoke(app, ["tools"])
    assert result.exit_code == 0
    assert "get-plan" in result.output


def test_tasks_dir_from_config(in_repo: Path, write_plan):
    config = in_repo / ".planbook" / "config.yml"
    config.parent.mkdir()
    config.write_text("paths:\n  tasks: tasks\n", encoding="utf-8")
    write_plan(5, "Nested", directory=in_repo / "tasks")

    result = runner.invoke(app, ["show", "5"])

    assert result.exit_code == 0, result.output
    assert "Plan file: tasks/5-nested.plan.md" in result.output


def test_missing_config_file():
    result = runner.invoke(app, ["--config", "nope.yml", "ready"])
    assert result.exit_code == 1
    assert "Config file not found" in result.output


def test_invalid_log_level():
    result = runner.invoke(app, ["--log-level", "LOUD", "tools"])
    assert result.exit_code != 0


def test_log_format_option():
    result = runner.invoke(app, ["--log-format", "json", "tools"])

    assert result.exit_code == 0, result.output
    formatter = logging.getLogger().handlers[0].formatter
    assert formatter is not None
    assert formatter._fmt.startswith('{"timestamp"')


def test_unknown_log_format_rejected():
    result = runner.invoke(app, ["--log-format", "xml", "tools"])
    assert result.exit_code != 0


def test_details_keeps_research(in_repo: Path, write_plan):
    path = write_plan(1, "One", body="## Research\n\nNotes")

    result = runner.invoke(app, ["details", "1", "Generated plan"])

    assert result.exit_code == 0, result.output
    assert "Replaced generated details of plan 1" in result.output
    details = read_plan_file(path).details
    assert details.index("Generated plan") < details.index("## Research")


def test_task_add_then_complete(in_repo: Path, write_plan):
    path = write_plan(2, "Two")

    added = runner.invoke(
        app, ["task", "2", "add", "--title", "Write tests", "--description", "Cover it"]
    )
    done = runner.invoke(app, ["task", "2", "update", "--select-title", "tests", "--done"])

    assert added.exit_code == 0, added.output
    assert done.exit_code == 0, done.output
    assert "done status to true" in done.output
    assert read_plan_file(path).tasks[0].done is True


def test_task_error_exits_one(write_plan):
    write_plan(2, "Two")

    result = runner.invoke(app, ["task", "2", "remove"])

    assert result.exit_code == 1
    assert "Provide either taskTitle or taskIndex" in result.output
