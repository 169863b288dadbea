from .task import Task
from .errors import (
    TaskError,
    TaskValidationError,
    TaskStorageError,
    TaskDecodeError,
)
from .value_objects import (
    TaskId,
    TaskStatus,
    TaskPriority,
    DEFAULT_TASK_STATUS,
    DEFAULT_TASK_PRIORITY,
)

__all__ = [
    "Task",
    "TaskId",
    "TaskStatus",
    "TaskPriority",
    "DEFAULT_TASK_STATUS",
    "DEFAULT_TASK_PRIORITY",
    "TaskError",
    "TaskValidationError",
    "TaskStorageError",
    "TaskDecodeError",
]
