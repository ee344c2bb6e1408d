"""Shared builders for task review tests."""

from __future__ import annotations

from datetime import datetime, timedelta

import pytest

from taskreview.models.task import Project, Task

PROJECT = Project(id="p1", name="Thesis")
OTHER_PROJECT = Project(id="p2", name="Chores")


def build_task(
    task_id: str,
    begin: str | None = None,
    end: str | None = None,
    estimate: int | None = None,
    project: Project | None = PROJECT,
    group: str | None = None,
    comment: str | None = None,
    name: str | None = None,
) -> Task:
    """Build a task from ``YYYY-MM-DD HH:MM`` strings and an estimate in minutes."""
    return Task(
        id=task_id,
        name=name or f"Task {task_id}",
        group=group,
        project=project,
        comment=comment,
        estimated_time=timedelta(minutes=estimate) if estimate else None,
        begin_time=datetime.strptime(begin, "%Y-%m-%d %H:%M") if begin else None,
        end_time=datetime.strptime(end, "%Y-%m-%d %H:%M") if end else None,
    )


@pytest.fixture
def make_task():
    return build_task


@pytest.fixture
def sample_tasks() -> list[Task]:
    """A small export: three tasks of p1 out of order, one unstarted, one of p2."""
    return [
        build_task("t3", "2024-01-03 09:00", "2024-01-03 10:30", estimate=60, group="writing"),
        build_task("t1", "2024-01-01 10:00", "2024-01-01 10:20", estimate=30, group="reading"),
        build_task("t4", project=PROJECT, estimate=45),
        build_task("t2", "2024-01-02 13:00", "2024-01-02 13:30", group="writing"),
        build_task("o1", "2024-01-01 08:00", "2024-01-01 09:00", project=OTHER_PROJECT),
    ]


@pytest.fixture
def export_bytes() -> bytes:
    """A TSV export with the default Japanese headers."""
    header = "\t".join([
        "タスクID", "実行日", "タスク名", "見積時間", "実績時間", "開始時間", "終了時間",
        "コメント", "プロジェクト名", "プロジェクトID", "セクション名",
    ])
    rows = [
        ["a1", "2024-01-05", "Draft intro", "01:00", "01:30", "09:00", "10:30", "slow start", "Thesis", "p1", "writing"],
        ["a2", "2024-01-04", "Read papers", "00:00", "", "22:30", "00:30", "", "Thesis", "p1", ""],
        ["a3", "2024-01-06", "Planned only", "00:45", "", "", "", "", "Thesis", "p1", ""],
        ["a4", "not-a-date", "Broken", "", "", "09:00", "10:00", "", "Thesis", "p1", ""],
        ["a5", "2024-01-05", "Laundry", "", "", "11:00", "11:20", "", "Chores", "p2", ""],
        ["a6", "2024-01-05", "No project", "", "", "12:00", "12:10", "", "", "", ""],
    ]
    lines = [header] + ["\t".join(row) for row in rows]
    return ("\n".join(lines) + "\n").encode("utf-8")
