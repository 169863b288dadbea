from __future__ import annotations

import logging
from typing import List, Optional

from fastapi import APIRouter, HTTPException, Query
from pydantic import BaseModel, ConfigDict, Field

from task_tracker.application.tasks.task_query import TaskSortKey
from task_tracker.domain.errors import TaskValidationError
from task_tracker.domain.task import Task
from task_tracker.domain.value_objects import TaskPriority, TaskStatus
from task_tracker.presentation.usecases.list_tasks import list_tasks_usecase
from task_tracker.presentation.usecases.task_create import create_task_usecase
from task_tracker.presentation.usecases.task_delete import delete_task_usecase
from task_tracker.presentation.usecases.task_get import get_task_usecase
from task_tracker.presentation.usecases.task_stats import task_stats_usecase
from task_tracker.presentation.usecases.task_update import update_task_usecase

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/tasks",
    tags=["tasks"],
)

# {
#   "title": "Buy milk",
#   "description": "2 liters",
#   "status": "todo",
#   "priority": "high",
#   "dueDate": "2025-01-01T10:00:00.000Z"
# }


# ---------- Schemas ----------


class CreateTaskRequest(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    # Optional here so that a missing title yields 400 "Title is required", not a schema error.
    title: Optional[str] = Field(
        None,
        description="Short name of the task, required and non-blank",
        examples=["Buy milk"],
    )
    description: Optional[str] = Field(
        None,
        description="Free text details",
    )
    status: Optional[TaskStatus] = Field(
        None,
        description="Initial status, todo when omitted",
        examples=["todo"],
    )
    priority: Optional[TaskPriority] = Field(
        None,
        description="Priority, medium when omitted",
        examples=["medium"],
    )
    due_date: Optional[str] = Field(
        None,
        alias="dueDate",
        description="Deadline (ISO 8601), not validated",
        examples=["2025-01-01T10:00:00.000Z"],
    )


class UpdateTaskRequest(BaseModel):
    """
    Partial update: only the keys present in the request body are applied.
    id and createdAt are not part of the schema and are ignored if sent.
    """

    model_config = ConfigDict(populate_by_name=True)

    title: Optional[str] = None
    description: Optional[str] = None
    status: Optional[TaskStatus] = None
    priority: Optional[TaskPriority] = None
    due_date: Optional[str] = Field(None, alias="dueDate")


class TaskResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(
        ...,
        description="Идентификатор задачи",
    )
    title: str
    description: Optional[str] = None
    status: TaskStatus
    priority: TaskPriority
    due_date: Optional[str] = Field(None, alias="dueDate")
    created_at: str = Field(
        ...,
        alias="createdAt",
        description="Creation time (ISO 8601, UTC)",
        examples=["2025-01-01T10:00:00.000Z"],
    )


class TaskStatsResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    total: int
    todo: int
    in_progress: int = Field(..., alias="inProgress")
    done: int


class DeleteTaskResponse(BaseModel):
    message: str = Field(
        ...,
        examples=["Task deleted successfully"],
    )


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(
        id=str(task.id),
        title=task.title,
        description=task.description,
        status=task.status,
        priority=task.priority,
        due_date=task.due_date,
        created_at=task.created_at,
    )


# ---------- Endpoints ----------


@router.get(
    "",
    response_model=List[TaskResponse],
    response_model_exclude_none=True,
    summary="List tasks",
    description=(
        "Returns all tasks in creation order. "
        "Optional status filter and sorting (priority, dueDate, createdAt)."
    ),
)
async def list_tasks(
    status: Optional[TaskStatus] = Query(None, description="Only tasks with this status"),
    sort: Optional[TaskSortKey] = Query(None, description="priority | dueDate | createdAt"),
) -> List[TaskResponse]:
    try:
        tasks = await list_tasks_usecase(status=status, sort_by=sort)
    except Exception:
        logger.exception("GET /tasks failed")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")

    return [_to_response(t) for t in tasks]


@router.get(
    "/stats",
    response_model=TaskStatsResponse,
    summary="Task counters",
    description="Total number of tasks and the number of tasks per status.",
)
async def get_task_stats() -> TaskStatsResponse:
    try:
        stats = await task_stats_usecase()
    except Exception:
        logger.exception("GET /tasks/stats failed")
        raise HTTPException(status_code=500, detail="Failed to fetch tasks")

    return TaskStatsResponse(**stats)


@router.post(
    "",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    status_code=201,
    summary="Create task",
    description="Creates a task. status defaults to todo, priority to medium.",
)
async def create_task(payload: CreateTaskRequest) -> TaskResponse:
    if payload.title is None or not payload.title.strip():
        raise HTTPException(status_code=400, detail="Title is required")

    try:
        task = await create_task_usecase(
            title=payload.title,
            description=payload.description,
            status=payload.status,
            priority=payload.priority,
            due_date=payload.due_date,
        )
    except Exception:
        logger.exception("POST /tasks failed")
        raise HTTPException(status_code=500, detail="Failed to create task")

    return _to_response(task)


@router.get(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    summary="Get task",
)
async def get_task(task_id: str) -> TaskResponse:
    try:
        task = await get_task_usecase(task_id)
    except Exception:
        logger.exception("GET /tasks/%s failed", task_id)
        raise HTTPException(status_code=500, detail="Failed to fetch task")

    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")

    return _to_response(task)


@router.put(
    "/{task_id}",
    response_model=TaskResponse,
    response_model_exclude_none=True,
    summary="Update task",
    description=(
        "Partial update. Fields missing from the body keep their values, "
        "null clears description / dueDate."
    ),
)
async def update_task(task_id: str, payload: UpdateTaskRequest) -> TaskResponse:
    # Unlike POST, a blank title is accepted here.
    changes = payload.model_dump(exclude_unset=True)

    try:
        task = await update_task_usecase(task_id, changes)
    except TaskValidationError as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    except Exception:
        logger.exception("PUT /tasks/%s failed", task_id)
        raise HTTPException(status_code=500, detail="Failed to update task")

    if task is None:
        raise HTTPException(status_code=404, detail="Task not found")

    return _to_response(task)


@router.delete(
    "/{task_id}",
    response_model=DeleteTaskResponse,
    summary="Delete task",
)
async def delete_task(task_id: str) -> DeleteTaskResponse:
    try:
        deleted = await delete_task_usecase(task_id)
    except Exception:
        logger.exception("DELETE /tasks/%s failed", task_id)
        raise HTTPException(status_code=500, detail="Failed to delete task")

    if not deleted:
        raise HTTPException(status_code=404, detail="Task not found")

    return DeleteTaskResponse(message="Task deleted successfully")
