from __future__ import annotations

from enum import Enum
from typing import NewType

TaskId = NewType("TaskId", str)


class TaskStatus(str, Enum):
    TODO = "todo"
    IN_PROGRESS = "in-progress"
    DONE = "done"


class TaskPriority(str, Enum):
    LOW = "low"
    MEDIUM = "medium"
    HIGH = "high"


DEFAULT_TASK_STATUS = TaskStatus.TODO
DEFAULT_TASK_PRIORITY = TaskPriority.MEDIUM
