import logging
import os
from typing import List

from dotenv import load_dotenv

from task_tracker.config import DEFAULT_LOG_DIR

load_dotenv()


APP_HOST = os.getenv("APP_HOST", "0.0.0.0")
APP_PORT = int(os.getenv("APP_PORT", "8001"))
APP_RELOAD = os.getenv("APP_RELOAD", "1") == "1"

LOG_DIR = os.getenv("LOG_DIR", str(DEFAULT_LOG_DIR))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


def parse_origins(raw: str) -> List[str]:
    origins = [o.strip() for o in raw.split(",")]
    return [o for o in origins if o] or ["*"]


def parse_log_level(name: str) -> int:
    level = logging.getLevelName(name.strip().upper())
    if not isinstance(level, int):
        return logging.INFO
    return level


CORS_ORIGINS = parse_origins(os.getenv("CORS_ORIGINS", "*"))
