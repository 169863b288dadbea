# tests/test_task_query.py

from __future__ import annotations

from typing import Optional

from task_tracker.application.tasks.task_query import (
    TaskSortKey,
    count_by_status,
    filter_tasks,
    sort_tasks,
)
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId, TaskPriority, TaskStatus


def _task(
    task_id: str,
    *,
    status: TaskStatus = TaskStatus.TODO,
    priority: TaskPriority = TaskPriority.MEDIUM,
    due_date: Optional[str] = None,
    created_at: str = "2025-01-01T10:00:00.000Z",
) -> Task:
    return Task(
        id=TaskId(task_id),
        title=task_id,
        status=status,
        priority=priority,
        due_date=due_date,
        created_at=created_at,
    )


def _ids(tasks) -> list[str]:
    return [t.id for t in tasks]


def test_filter_by_status() -> None:
    tasks = [
        _task("a", status=TaskStatus.DONE),
        _task("b"),
        _task("c", status=TaskStatus.DONE),
    ]

    assert _ids(filter_tasks(tasks, TaskStatus.DONE)) == ["a", "c"]
    assert _ids(filter_tasks(tasks, None)) == ["a", "b", "c"]


def test_no_sort_keeps_storage_order() -> None:
    tasks = [_task("b"), _task("a"), _task("c")]

    assert _ids(sort_tasks(tasks, None)) == ["b", "a", "c"]


def test_sort_by_priority_high_first_and_stable() -> None:
    tasks = [
        _task("low", priority=TaskPriority.LOW),
        _task("med1"),
        _task("high", priority=TaskPriority.HIGH),
        _task("med2"),
    ]

    assert _ids(sort_tasks(tasks, TaskSortKey.PRIORITY)) == ["high", "med1", "med2", "low"]


def test_sort_by_due_date_puts_missing_last() -> None:
    tasks = [
        _task("none"),
        _task("late", due_date="2025-05-01"),
        _task("garbage", due_date="next tuesday"),
        _task("early", due_date="2025-01-15T08:00:00.000Z"),
    ]

    assert _ids(sort_tasks(tasks, TaskSortKey.DUE_DATE)) == ["early", "late", "garbage", "none"]


def test_sort_by_created_at_newest_first() -> None:
    tasks = [
        _task("old", created_at="2024-01-01T00:00:00.000Z"),
        _task("new", created_at="2025-06-01T00:00:00.000Z"),
        _task("mid", created_at="2024-12-31T23:59:59.999Z"),
    ]

    assert _ids(sort_tasks(tasks, TaskSortKey.CREATED_AT)) == ["new", "mid", "old"]


def test_count_by_status() -> None:
    tasks = [
        _task("a"),
        _task("b", status=TaskStatus.IN_PROGRESS),
        _task("c", status=TaskStatus.DONE),
        _task("d", status=TaskStatus.DONE),
    ]

    assert count_by_status(tasks) == {"total": 4, "todo": 1, "inProgress": 1, "done": 2}
    assert count_by_status([]) == {"total": 0, "todo": 0, "inProgress": 0, "done": 0}
