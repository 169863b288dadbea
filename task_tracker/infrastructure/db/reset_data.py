from __future__ import annotations

from task_tracker.infrastructure.db.json_store import TaskRecordStore, load_config_from_env


def reset_domain_data() -> None:
    """
    Полностью очищает файл задач.
    The file is rewritten as an empty array, not removed.
    """
    config = load_config_from_env()
    store = TaskRecordStore(config)

    print(f"=== Resetting tasks in {store.path} ===")
    store.reset()
    print("=== Reset DONE ===")


if __name__ == "__main__":
    reset_domain_data()
