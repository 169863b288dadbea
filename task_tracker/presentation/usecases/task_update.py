from __future__ import annotations

from typing import Any, Mapping, Optional

from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def update_task_usecase(
    task_id: str,
    changes: Mapping[str, Any],
) -> Optional[Task]:
    """
    Частичное обновление задачи.

    ``changes`` holds only the fields the client sent (snake_case keys).
    A key with None clears optional fields. Returns None if the task does not exist.
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))
    return await repo.update(TaskId(task_id), changes)
