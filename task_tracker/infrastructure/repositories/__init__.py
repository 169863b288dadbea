from .task_json_repository import TaskJsonRepository

__all__ = [
    "TaskJsonRepository",
]
