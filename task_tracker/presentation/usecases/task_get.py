from __future__ import annotations

from typing import Optional

from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def get_task_usecase(task_id: str) -> Optional[Task]:
    """
    Возвращает одну задачу по id или None.
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))
    return await repo.find_by_id(TaskId(task_id))
