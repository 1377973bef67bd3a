# tests/tools/test_tools_index.py
"""Tests for the planbook.tools re-export surface."""

from __future__ import annotations

import inspect

import planbook.tools as tools


def test_all_names_resolve():
    for name in tools.__all__:
        assert getattr(tools, name, None) is not None, name


def test_all_has_no_duplicates():
    assert len(tools.__all__) == len(set(tools.__all__))


def test_tool_functions_are_exported():
    for name in (
        "get_plan_tool",
        "create_plan_tool",
        "list_ready_plans_tool",
        "append_research_tool",
        "update_plan_details_tool",
        "manage_plan_task_tool",
    ):
        assert inspect.iscoroutinefunction(getattr(tools, name))
    assert callable(tools.send_failure_report)


def test_parameter_descriptors_are_object_schemas():
    for name in (
        "get_plan_parameters",
        "create_plan_parameters",
        "list_ready_plans_parameters",
        "append_research_parameters",
        "update_plan_details_parameters",
        "manage_plan_task_parameters",
    ):
        schema = getattr(tools, name)
        assert schema["type"] == "object"
        assert "properties" in schema


def test_parameter_descriptors_use_wire_names():
    assert "dependsOn" in tools.create_plan_parameters["properties"]
    assert "sortBy" in tools.list_ready_plans_parameters["properties"]
    assert tools.get_plan_parameters["required"] == ["plan"]
    assert "taskIndex" in tools.manage_plan_task_parameters["properties"]
