from __future__ import annotations

import asyncio
import sys
from typing import Optional

from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskPriority, TaskStatus
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def create_task_usecase(
    title: str,
    description: Optional[str] = None,
    status: Optional[TaskStatus] = None,
    priority: Optional[TaskPriority] = None,
    due_date: Optional[str] = None,
) -> Task:
    """
    Создаёт задачу и возвращает её.
    id, created_at and missing status / priority are filled in by the repository.
    Title validation is the caller's job (the HTTP layer rejects blank titles).
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))

    return await repo.create(
        {
            "title": title,
            "description": description,
            "status": status,
            "priority": priority,
            "due_date": due_date,
        }
    )


async def _main_cli(title: str) -> None:
    task = await create_task_usecase(title=title)
    print(f"Задача создана → {task.id} ({task.status.value}, {task.priority.value})")


if __name__ == "__main__":
    asyncio.run(_main_cli(" ".join(sys.argv[1:]) or "Тестовая задача"))
