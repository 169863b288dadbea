from __future__ import annotations

import asyncio
import sys

from task_tracker.domain.value_objects import TaskId
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def delete_task_usecase(task_id: str) -> bool:
    """
    Удаляет задачу. False means there was nothing to delete.
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))
    return await repo.delete(TaskId(task_id))


async def _main_cli(task_id: str) -> None:
    deleted = await delete_task_usecase(task_id)
    if deleted:
        print(f"Task deleted: {task_id}")
    else:
        print(f"Task not found: {task_id}")


if __name__ == "__main__":
    if len(sys.argv) != 2:
        print("usage: python -m task_tracker.presentation.usecases.task_delete <task_id>")
        sys.exit(2)
    asyncio.run(_main_cli(sys.argv[1]))
