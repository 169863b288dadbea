# tests/conftest.py

from __future__ import annotations

from pathlib import Path

import pytest
from fastapi.testclient import TestClient

from task_tracker.infrastructure.db.json_store import JsonStoreConfig, TaskRecordStore
from task_tracker.infrastructure.repositories.task_json_repository import TaskJsonRepository
from task_tracker.presentation.http.app import create_app


@pytest.fixture()
def tasks_file(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> Path:
    """
    Per-test tasks document. The parent directory does not exist yet,
    so lazy initialisation is exercised as well.

    TASKS_FILE is read on every request, so the HTTP layer picks it up too.
    """
    path = tmp_path / "data" / "tasks.json"
    monkeypatch.setenv("TASKS_FILE", str(path))
    return path


@pytest.fixture()
def store(tasks_file: Path) -> TaskRecordStore:
    return TaskRecordStore(JsonStoreConfig(path=tasks_file))


@pytest.fixture()
def repo(store: TaskRecordStore) -> TaskJsonRepository:
    return TaskJsonRepository(store)


@pytest.fixture()
def client(tasks_file: Path) -> TestClient:
    return TestClient(create_app())
