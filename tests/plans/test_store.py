# tests/plans/test_store.py
"""Tests for directory scanning and the PlanStore."""

from __future__ import annotations

import logging
from pathlib import Path

import pytest

from planbook.plans.cache import PlanCache
from planbook.plans.models import PlanRecord
from planbook.plans.store import PlanStore, iter_plan_files, scan_plans


@pytest.fixture
def store(repo: Path) -> PlanStore:
    return PlanStore(repo, PlanCache())


# ── Tests: scanning ──────────────────────────────────────────────────────────


def test_iter_plan_files_filters(repo: Path, write_plan):
    write_plan(1, "Visible")
    write_plan(2, "Nested", directory=repo / "tasks" / "backend")
    write_plan(3, "Hidden", directory=repo / ".archive")
    (repo / "notes.txt").write_text("not a plan", encoding="utf-8")

    names = [p.name for p in iter_plan_files(repo)]

    assert names == ["1-visible.plan.md", "2-nested.plan.md"]


def test_iter_plan_files_missing_directory(tmp_path: Path):
    assert iter_plan_files(tmp_path / "absent") == []


def test_scan_plans_skips_invalid_and_id_less(repo: Path, write_plan):
    write_plan(1, "Good", status="in_progress", tasks=[{"title": "t", "done": True}])
    write_plan(None, "No id")
    (repo / "README.md").write_text("# Readme\n\nNo front matter here.\n")
    (repo / "broken.plan.md").write_text("---\nid: [oops\n---\n")

    summaries = scan_plans(repo)

    assert [s.id for s in summaries] == [1]
    assert summaries[0].status == "in_progress"
    assert summaries[0].task_count == 1
    assert summaries[0].completed_tasks == 1
    assert summaries[0].filename.is_absolute()


def test_summary_defaults_status_to_pending(repo: Path, write_plan):
    write_plan(1, "No status")
    assert scan_plans(repo)[0].status == "pending"


# ── Tests: PlanStore ─────────────────────────────────────────────────────────


def test_next_id_empty_store(store: PlanStore):
    assert store.next_id() == 1


def test_next_id_is_max_plus_one(store: PlanStore, write_plan):
    write_plan(3, "Three")
    write_plan(10, "Ten")
    assert store.next_id() == 11


def test_all_plans_is_cached_until_cleared(store: PlanStore, write_plan):
    write_plan(1, "One")
    assert len(store.all_plans()) == 1

    write_plan(2, "Two")
    assert len(store.all_plans()) == 1

    store.cache.clear()
    assert len(store.all_plans()) == 2


def test_write_invalidates_cache(store: PlanStore, repo: Path, write_plan):
    write_plan(1, "One")
    store.all_plans()

    store.write(repo / "2-two.plan.md", PlanRecord(id=2, title="Two"))

    assert sorted(store.plans_by_id()) == [1, 2]


def test_plans_by_id_keeps_first_duplicate(store: PlanStore, write_plan, caplog):
    first = write_plan(4, "Alpha")
    write_plan(4, "Beta")

    with caplog.at_level(logging.WARNING, logger="planbook.plans.store"):
        index = store.plans_by_id()

    assert index[4].filename == first.resolve()
    assert "Duplicate plan id 4" in caplog.text


def test_read_goes_through_cache(store: PlanStore, write_plan):
    path = write_plan(1, "One")
    store.read(path)
    store.read(path)
    assert store.cache.get_stats()["hits"] == 1


def test_path_for_new_plan(store: PlanStore, repo: Path):
    assert store.path_for_new_plan(7, "Ship it") == repo / "7-ship-it.plan.md"
