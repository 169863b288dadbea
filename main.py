from __future__ import annotations

import uvicorn

from task_tracker.env_config import (
    APP_HOST,
    APP_PORT,
    APP_RELOAD,
    LOG_DIR,
    LOG_LEVEL,
    parse_log_level,
)
from task_tracker.logging_setup import setup_logging
from task_tracker.presentation.http.app import create_app

# Runs in the reload worker too, which imports this module as "main".
setup_logging(log_dir=LOG_DIR, console_level=parse_log_level(LOG_LEVEL))

app = create_app()


if __name__ == "__main__":
    # Для reload нужно указывать строку "main:app",
    # иначе uvicorn не сможет отслеживать изменения в файлах
    uvicorn.run(
        "main:app",
        host=APP_HOST,
        port=APP_PORT,
        reload=APP_RELOAD,
        log_config=None,
    )
