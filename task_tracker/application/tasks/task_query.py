from __future__ import annotations

from datetime import datetime, timezone
from enum import Enum
from typing import Dict, Iterable, List, Optional, Tuple

from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskPriority, TaskStatus


class TaskSortKey(str, Enum):
    PRIORITY = "priority"
    DUE_DATE = "dueDate"
    CREATED_AT = "createdAt"


_PRIORITY_RANK: Dict[TaskPriority, int] = {
    TaskPriority.HIGH: 3,
    TaskPriority.MEDIUM: 2,
    TaskPriority.LOW: 1,
}


def filter_tasks(tasks: Iterable[Task], status: Optional[TaskStatus]) -> List[Task]:
    if status is None:
        return list(tasks)
    return [t for t in tasks if t.status == status]


def sort_tasks(tasks: Iterable[Task], sort_by: Optional[TaskSortKey]) -> List[Task]:
    """
    priority : high first, storage order inside one priority
    dueDate  : earliest first, tasks without a due date at the end
    createdAt: newest first
    None     : storage order
    """
    items = list(tasks)

    if sort_by is None:
        return items

    if sort_by is TaskSortKey.PRIORITY:
        return sorted(items, key=lambda t: -_PRIORITY_RANK[t.priority])

    if sort_by is TaskSortKey.DUE_DATE:
        return sorted(items, key=_due_date_key)

    return sorted(items, key=lambda t: _parse_iso(t.created_at) or datetime.min, reverse=True)


def count_by_status(tasks: Iterable[Task]) -> Dict[str, int]:
    counts = {status: 0 for status in TaskStatus}
    total = 0
    for t in tasks:
        counts[t.status] += 1
        total += 1

    return {
        "total": total,
        "todo": counts[TaskStatus.TODO],
        "inProgress": counts[TaskStatus.IN_PROGRESS],
        "done": counts[TaskStatus.DONE],
    }


def _due_date_key(task: Task) -> Tuple[int, datetime]:
    if not task.due_date:
        return 2, datetime.min

    parsed = _parse_iso(task.due_date)
    if parsed is None:
        return 1, datetime.min

    return 0, parsed


def _parse_iso(value: str) -> Optional[datetime]:
    """
    Naive UTC datetime from an ISO string, None if it does not parse.
    Offsets are normalised so that dates with and without "Z" compare.
    """
    try:
        parsed = datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc).replace(tzinfo=None)
    return parsed
