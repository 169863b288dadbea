from __future__ import annotations

import logging
from typing import Any, List, Mapping, Optional

from task_tracker.application.tasks.task_factory import (
    build_task,
    generate_task_id,
    merge_task_update,
)
from task_tracker.domain.repositories.task_repository import TaskRepository
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId
from task_tracker.infrastructure.db.json_store import TaskRecordStore

logger = logging.getLogger(__name__)


class TaskJsonRepository(TaskRepository):
    """
    JSON-file implementation of TaskRepository.

    Each call loads the whole collection from the store, works on it in
    memory and writes it back. Nothing is kept between calls.
    """

    def __init__(self, store: TaskRecordStore) -> None:
        self._store = store

    async def find_all(self) -> List[Task]:
        return self._store.load()

    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        for task in self._store.load():
            if task.id == task_id:
                return task
        return None

    async def create(self, fields: Mapping[str, Any]) -> Task:
        """
        Appends a new task to the end of the collection.
        """
        tasks = self._store.load()

        task = build_task(
            fields,
            task_id=generate_task_id({t.id for t in tasks}),
        )

        tasks.append(task)
        self._store.save(tasks)

        logger.info("Task created id=%s", task.id)
        return task

    async def update(
        self,
        task_id: TaskId,
        changes: Mapping[str, Any],
    ) -> Optional[Task]:
        """
        Replaces the task in place, keeping its position in the collection.
        """
        tasks = self._store.load()

        index = self._index_of(tasks, task_id)
        if index is None:
            return None

        updated = merge_task_update(tasks[index], changes)
        tasks[index] = updated
        self._store.save(tasks)

        logger.info("Task updated id=%s fields=%s", task_id, sorted(changes))
        return updated

    async def delete(self, task_id: TaskId) -> bool:
        """
        Removes the task. The file is only rewritten when something was removed.
        """
        tasks = self._store.load()
        remaining = [t for t in tasks if t.id != task_id]

        if len(remaining) == len(tasks):
            return False

        self._store.save(remaining)

        logger.info("Task deleted id=%s", task_id)
        return True

    @staticmethod
    def _index_of(tasks: List[Task], task_id: TaskId) -> Optional[int]:
        for index, task in enumerate(tasks):
            if task.id == task_id:
                return index
        return None
