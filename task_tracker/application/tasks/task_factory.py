from __future__ import annotations

import secrets
import time
from dataclasses import replace
from datetime import datetime, timezone
from typing import Any, Collection, Dict, Mapping, Optional

from task_tracker.domain.errors import TaskValidationError
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import (
    DEFAULT_TASK_PRIORITY,
    DEFAULT_TASK_STATUS,
    TaskId,
    TaskPriority,
    TaskStatus,
)

# Fields a client may change after creation; id and created_at are not among them.
UPDATABLE_FIELDS = ("title", "description", "status", "priority", "due_date")

# Fields that must always hold a value.
_REQUIRED_FIELDS = ("title", "status", "priority")


def generate_task_id(existing_ids: Collection[str] = ()) -> TaskId:
    """
    Millisecond timestamp followed by a random base-36 suffix,
    e.g. ``1718000000000k3j9x2a``. Regenerated on collision.
    """
    while True:
        millis = int(time.time() * 1000)
        suffix = "".join(secrets.choice("0123456789abcdefghijklmnopqrstuvwxyz") for _ in range(7))
        candidate = f"{millis}{suffix}"
        if candidate not in existing_ids:
            return TaskId(candidate)


def format_timestamp(moment: datetime) -> str:
    """
    ISO 8601 in UTC with milliseconds and a ``Z`` suffix.
    """
    moment = moment.astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def build_task(
    fields: Mapping[str, Any],
    *,
    task_id: TaskId,
    now: Optional[datetime] = None,
) -> Task:
    """
    Turns create input into a fully populated Task.

    Missing status / priority fall back to todo / medium.
    created_at is stamped from ``now`` (current UTC time by default).
    """
    title = fields.get("title")
    if not isinstance(title, str):
        raise TaskValidationError("Title is required")

    moment = now if now is not None else datetime.now(timezone.utc)

    return Task(
        id=task_id,
        title=title,
        description=fields.get("description"),
        status=_coerce_status(fields.get("status") or DEFAULT_TASK_STATUS),
        priority=_coerce_priority(fields.get("priority") or DEFAULT_TASK_PRIORITY),
        due_date=fields.get("due_date"),
        created_at=format_timestamp(moment),
    )


def merge_task_update(task: Task, changes: Mapping[str, Any]) -> Task:
    """
    Shallow merge of ``changes`` over ``task``.

    Only keys present in ``changes`` are applied. Explicit None clears
    description / due_date. id and created_at are never touched.
    """
    updates: Dict[str, Any] = {}

    for name in UPDATABLE_FIELDS:
        if name not in changes:
            continue

        value = changes[name]
        if value is None and name in _REQUIRED_FIELDS:
            raise TaskValidationError(f"Field '{name}' cannot be null")

        if name == "status":
            value = _coerce_status(value)
        elif name == "priority":
            value = _coerce_priority(value)

        updates[name] = value

    if not updates:
        return task

    return replace(task, **updates)


def _coerce_status(value: Any) -> TaskStatus:
    try:
        return TaskStatus(value)
    except ValueError as exc:
        raise TaskValidationError(f"Invalid status: {value!r}") from exc


def _coerce_priority(value: Any) -> TaskPriority:
    try:
        return TaskPriority(value)
    except ValueError as exc:
        raise TaskValidationError(f"Invalid priority: {value!r}") from exc
