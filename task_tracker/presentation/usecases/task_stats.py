from __future__ import annotations

import asyncio
import json
from typing import Dict

from task_tracker.application.tasks.task_query import count_by_status
from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository


async def task_stats_usecase() -> Dict[str, int]:
    """
    Счётчики задач: всего и по каждому статусу.
    """
    repo = TaskJsonRepository(TaskRecordStore(load_config_from_env()))
    return count_by_status(await repo.find_all())


if __name__ == "__main__":
    print(json.dumps(asyncio.run(task_stats_usecase()), ensure_ascii=False, indent=2))
