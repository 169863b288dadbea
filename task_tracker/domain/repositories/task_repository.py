from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Any, List, Mapping, Optional

from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId


class TaskRepository(ABC):
    """
    Абстракция над хранилищем задач.

    Absence is not an error: lookups return None, delete returns False.
    Storage failures propagate to the caller unchanged.
    """

    @abstractmethod
    async def find_all(self) -> List[Task]:
        """
        Return all tasks in storage (creation) order.
        """
        raise NotImplementedError

    @abstractmethod
    async def find_by_id(self, task_id: TaskId) -> Optional[Task]:
        """
        Return task entity by id or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def create(self, fields: Mapping[str, Any]) -> Task:
        """
        Build a new task from create input, persist it and return it.
        """
        raise NotImplementedError

    @abstractmethod
    async def update(
        self,
        task_id: TaskId,
        changes: Mapping[str, Any],
    ) -> Optional[Task]:
        """
        Merge the given fields over the stored task.
        Return the merged task or None if not found.
        """
        raise NotImplementedError

    @abstractmethod
    async def delete(self, task_id: TaskId) -> bool:
        """
        Remove the task. Return True when something was removed.
        """
        raise NotImplementedError
