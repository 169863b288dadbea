from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .value_objects import TaskId, TaskPriority, TaskStatus


@dataclass(frozen=True)
class Task:
    """
    Task entity, the only persisted record of the tracker.

    id          — opaque identifier assigned on creation
    title       — short human readable name
    status      — workflow state (todo / in-progress / done)
    priority    — low / medium / high
    created_at  — creation timestamp (ISO string), never changes
    description — optional free text
    due_date    — optional deadline (ISO string, not validated)
    """
    id: TaskId
    title: str
    status: TaskStatus
    priority: TaskPriority
    created_at: str
    description: Optional[str] = None
    due_date: Optional[str] = None
