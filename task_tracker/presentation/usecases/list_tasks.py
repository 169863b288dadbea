from __future__ import annotations

import asyncio
from typing import List, Optional

from task_tracker.application.tasks.task_query import TaskSortKey, filter_tasks, sort_tasks
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskStatus
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def list_tasks_usecase(
    status: Optional[TaskStatus] = None,
    sort_by: Optional[TaskSortKey] = None,
) -> List[Task]:
    """
    Возвращает список задач.
    Without arguments the tasks come back in storage (creation) order.
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))
    tasks = await repo.find_all()
    return sort_tasks(filter_tasks(tasks, status), sort_by)


async def _main_cli() -> None:
    """
    CLI-режим — используется только при запуске файла как скрипта.
    """
    tasks = await list_tasks_usecase()

    print("=== Tasks ===")
    if not tasks:
        print("No tasks found.")
        return

    for idx, t in enumerate(tasks, start=1):
        print(f"{idx:02d}. [{t.status.value}] {t.title} (priority={t.priority.value}, id={t.id})")


if __name__ == "__main__":
    asyncio.run(_main_cli())
