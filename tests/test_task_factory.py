# tests/test_task_factory.py

from __future__ import annotations

import re
from datetime import datetime, timedelta, timezone

import pytest

from task_tracker.application.tasks import task_factory
from task_tracker.application.tasks.task_factory import (
    build_task,
    format_timestamp,
    generate_task_id,
    merge_task_update,
)
from task_tracker.domain.errors import TaskValidationError
from task_tracker.domain.value_objects import TaskId, TaskPriority, TaskStatus

_TIMESTAMP_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z$")


def _parse(value: str) -> datetime:
    return datetime.strptime(value, "%Y-%m-%dT%H:%M:%S.%fZ").replace(tzinfo=timezone.utc)


def _truncate_ms(moment: datetime) -> datetime:
    return moment.replace(microsecond=moment.microsecond // 1000 * 1000)


def test_build_task_applies_defaults() -> None:
    before = _truncate_ms(datetime.now(timezone.utc))
    task = build_task({"title": "Buy milk"}, task_id=TaskId("t1"))
    after = datetime.now(timezone.utc)

    assert task.id == "t1"
    assert task.title == "Buy milk"
    assert task.status is TaskStatus.TODO
    assert task.priority is TaskPriority.MEDIUM
    assert task.description is None
    assert task.due_date is None
    assert _TIMESTAMP_RE.match(task.created_at)
    assert before <= _parse(task.created_at) <= after


def test_build_task_keeps_given_values() -> None:
    now = datetime(2025, 1, 2, 3, 4, 5, 678901, tzinfo=timezone.utc)

    task = build_task(
        {
            "title": "Report",
            "description": "Q1",
            "status": "in-progress",
            "priority": TaskPriority.HIGH,
            "due_date": "2025-03-31",
        },
        task_id=TaskId("t2"),
        now=now,
    )

    assert task.status is TaskStatus.IN_PROGRESS
    assert task.priority is TaskPriority.HIGH
    assert task.description == "Q1"
    assert task.due_date == "2025-03-31"
    assert task.created_at == "2025-01-02T03:04:05.678Z"


def test_build_task_treats_none_as_default() -> None:
    task = build_task({"title": "x", "status": None, "priority": None}, task_id=TaskId("t"))

    assert task.status is TaskStatus.TODO
    assert task.priority is TaskPriority.MEDIUM


def test_build_task_requires_title() -> None:
    with pytest.raises(TaskValidationError):
        build_task({"description": "no title"}, task_id=TaskId("t"))


def test_build_task_rejects_unknown_status() -> None:
    with pytest.raises(TaskValidationError):
        build_task({"title": "x", "status": "someday"}, task_id=TaskId("t"))


def test_format_timestamp_converts_to_utc() -> None:
    moment = datetime(2025, 6, 1, 12, 0, 0, tzinfo=timezone(timedelta(hours=3)))

    assert format_timestamp(moment) == "2025-06-01T09:00:00.000Z"


def test_merge_applies_only_present_fields() -> None:
    task = build_task(
        {"title": "Old", "description": "keep me", "priority": "low"},
        task_id=TaskId("t"),
    )

    merged = merge_task_update(task, {"status": "done"})

    assert merged.status is TaskStatus.DONE
    assert merged.title == "Old"
    assert merged.description == "keep me"
    assert merged.priority is TaskPriority.LOW
    assert merged.created_at == task.created_at


def test_merge_never_touches_id_and_created_at() -> None:
    task = build_task({"title": "x"}, task_id=TaskId("t"))

    merged = merge_task_update(
        task,
        {"id": "hijack", "created_at": "1970-01-01T00:00:00.000Z", "title": "y"},
    )

    assert merged.id == "t"
    assert merged.created_at == task.created_at
    assert merged.title == "y"


def test_merge_none_clears_optional_fields() -> None:
    task = build_task(
        {"title": "x", "description": "d", "due_date": "2025-01-01"},
        task_id=TaskId("t"),
    )

    merged = merge_task_update(task, {"description": None, "due_date": None})

    assert merged.description is None
    assert merged.due_date is None


@pytest.mark.parametrize("field", ["title", "status", "priority"])
def test_merge_none_for_required_field_is_rejected(field: str) -> None:
    task = build_task({"title": "x"}, task_id=TaskId("t"))

    with pytest.raises(TaskValidationError):
        merge_task_update(task, {field: None})


def test_merge_accepts_blank_title() -> None:
    task = build_task({"title": "x"}, task_id=TaskId("t"))

    assert merge_task_update(task, {"title": ""}).title == ""


def test_merge_without_changes_returns_same_task() -> None:
    task = build_task({"title": "x"}, task_id=TaskId("t"))

    assert merge_task_update(task, {}) is task


def test_generated_ids_are_unique() -> None:
    ids = {generate_task_id() for _ in range(500)}

    assert len(ids) == 500
    assert all(i.isalnum() for i in ids)


def test_generate_task_id_skips_existing(monkeypatch: pytest.MonkeyPatch) -> None:
    chars = iter("aaaaaaa" + "bbbbbbb")
    monkeypatch.setattr(task_factory.time, "time", lambda: 1.0)
    monkeypatch.setattr(task_factory.secrets, "choice", lambda seq: next(chars))

    assert generate_task_id({"1000aaaaaaa"}) == "1000bbbbbbb"
