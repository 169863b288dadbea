from __future__ import annotations

from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parents[1]

DATA_DIR = PROJECT_ROOT / "data"
DEFAULT_TASKS_FILE = DATA_DIR / "tasks.json"

DEFAULT_LOG_DIR = PROJECT_ROOT / ".local" / "task_tracker"
