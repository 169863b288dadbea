from .task_factory import (
    UPDATABLE_FIELDS,
    build_task,
    format_timestamp,
    generate_task_id,
    merge_task_update,
)
from .task_query import TaskSortKey, count_by_status, filter_tasks, sort_tasks

__all__ = [
    "UPDATABLE_FIELDS",
    "build_task",
    "format_timestamp",
    "generate_task_id",
    "merge_task_update",
    "TaskSortKey",
    "count_by_status",
    "filter_tasks",
    "sort_tasks",
]
