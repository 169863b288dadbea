from __future__ import annotations

import contextlib
import json
import logging
import os
import tempfile
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, List, Optional

from dotenv import load_dotenv

from task_tracker.config import DEFAULT_TASKS_FILE
from task_tracker.domain.errors import TaskDecodeError, TaskStorageError
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskId, TaskPriority, TaskStatus

load_dotenv()

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class JsonStoreConfig:
    path: Path


def load_config_from_env() -> JsonStoreConfig:
    """
    Загружает путь к файлу задач из переменных окружения.
    Read on every call so each request sees the current TASKS_FILE.
    """
    raw = os.getenv("TASKS_FILE")
    path = Path(raw) if raw else DEFAULT_TASKS_FILE
    return JsonStoreConfig(path=path)


class TaskRecordStore:
    """
    Keeps the whole task collection in one JSON document (an array of objects).

    - every load() reads the full file, every save() rewrites it
    - a missing file is created as "[]" on first access
    - a file that cannot be decoded is logged and treated as empty
    - saves go through a temp file + os.replace, so readers never see half a document

    There is no locking: two overlapping load/save cycles can lose an update.
    """

    def __init__(self, config: JsonStoreConfig) -> None:
        self._path = config.path

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> List[Task]:
        """
        Return all stored tasks in file order.
        Raises TaskStorageError only when the file cannot be read at all.
        """
        self._ensure_file()

        try:
            raw = self._path.read_bytes()
        except OSError as exc:
            logger.error("Failed to read tasks file %s: %s", self._path, exc)
            raise TaskStorageError(f"Failed to read {self._path}") from exc

        try:
            return decode_tasks(raw)
        except TaskDecodeError as exc:
            logger.error("Tasks file %s is corrupted, treating as empty: %s", self._path, exc)
            return []

    def save(self, tasks: List[Task]) -> None:
        """
        Overwrite the document with the given collection.
        Raises TaskStorageError if the write does not complete.
        """
        payload = encode_tasks(tasks)

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._write_atomic(payload)
        except OSError as exc:
            logger.error("Failed to save tasks to %s: %s", self._path, exc)
            raise TaskStorageError(f"Failed to save {self._path}") from exc

        logger.debug("Saved %d tasks to %s", len(tasks), self._path)

    def reset(self) -> None:
        """
        Replace the collection with an empty one.
        """
        self.save([])

    def _ensure_file(self) -> None:
        if self._path.exists():
            return

        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            self._path.write_text("[]", encoding="utf-8")
        except OSError as exc:
            logger.error("Failed to initialise tasks file %s: %s", self._path, exc)
            raise TaskStorageError(f"Failed to initialise {self._path}") from exc

        logger.info("Created empty tasks file %s", self._path)

    def _write_atomic(self, payload: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.",
            suffix=".tmp",
            dir=str(self._path.parent),
        )
        try:
            with os.fdopen(fd, "w", encoding="utf-8") as fh:
                fh.write(payload)
                fh.flush()
                os.fsync(fh.fileno())
            os.replace(tmp_name, self._path)
        except OSError:
            with contextlib.suppress(OSError):
                os.unlink(tmp_name)
            raise


def encode_tasks(tasks: List[Task]) -> str:
    return json.dumps(
        [_map_task_to_record(t) for t in tasks],
        ensure_ascii=False,
        indent=2,
    )


def decode_tasks(raw: bytes) -> List[Task]:
    try:
        text = raw.decode("utf-8")
    except UnicodeDecodeError as exc:
        raise TaskDecodeError(f"not valid UTF-8: {exc}") from exc

    try:
        data = json.loads(text)
    except (json.JSONDecodeError, RecursionError) as exc:
        raise TaskDecodeError(f"invalid JSON: {exc}") from exc

    if not isinstance(data, list):
        raise TaskDecodeError(f"expected a JSON array, got {type(data).__name__}")

    return [_map_record_to_task(item, index) for index, item in enumerate(data)]


def _map_task_to_record(task: Task) -> Dict[str, Any]:
    """
    Maps Task domain model to the stored JSON object.
    Optional fields are left out when unset.
    """
    record: Dict[str, Any] = {"id": task.id, "title": task.title}
    if task.description is not None:
        record["description"] = task.description
    record["status"] = task.status.value
    record["priority"] = task.priority.value
    if task.due_date is not None:
        record["dueDate"] = task.due_date
    record["createdAt"] = task.created_at
    return record


def _map_record_to_task(item: Any, index: int) -> Task:
    """
    Maps a stored JSON object to Task domain model.
    """
    if not isinstance(item, dict):
        raise TaskDecodeError(f"record #{index} is not an object")

    try:
        return Task(
            id=TaskId(_require_str(item, "id")),
            title=_require_str(item, "title"),
            description=_optional_str(item, "description"),
            status=TaskStatus(item["status"]),
            priority=TaskPriority(item["priority"]),
            due_date=_optional_str(item, "dueDate"),
            created_at=_require_str(item, "createdAt"),
        )
    except (KeyError, TypeError, ValueError) as exc:
        raise TaskDecodeError(f"record #{index} is malformed: {exc!r}") from exc


def _require_str(item: Dict[str, Any], key: str) -> str:
    value = item[key]
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value


def _optional_str(item: Dict[str, Any], key: str) -> Optional[str]:
    value = item.get(key)
    if value is None:
        return None
    if not isinstance(value, str):
        raise TypeError(f"{key} must be a string")
    return value

