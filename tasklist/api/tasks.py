"""
Tasks API

CRUD operations for tasks. Every handler makes exactly one store call;
missing tasks surface as TaskNotFoundError and are translated to 404 by
the application-level exception handler.
"""

from typing import List

from fastapi import APIRouter, Depends, Response, status

from tasklist.tasks import Task, TaskStore
from .deps import get_store
from .models import TaskRequest, TaskResponse, ErrorResponse


router = APIRouter(prefix="/tasks", tags=["tasks"])

NOT_FOUND = {404: {"model": ErrorResponse, "description": "Task not found"}}


def _to_response(task: Task) -> TaskResponse:
    return TaskResponse(id=task.id, title=task.title)


@router.get("", response_model=List[TaskResponse])
async def list_tasks(store: TaskStore = Depends(get_store)):
    """List all tasks."""
    return [_to_response(task) for task in store.list()]


@router.get("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def get_task(task_id: int, store: TaskStore = Depends(get_store)):
    """Get single task by ID."""
    return _to_response(store.get(task_id))


@router.post("", response_model=TaskResponse, status_code=status.HTTP_201_CREATED)
async def create_task(data: TaskRequest, store: TaskStore = Depends(get_store)):
    """Create a new task."""
    return _to_response(store.create(Task(id=data.id, title=data.title)))


@router.put("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
@router.patch("/{task_id}", response_model=TaskResponse, responses=NOT_FOUND)
async def update_task(task_id: int, data: TaskRequest, store: TaskStore = Depends(get_store)):
    """Replace a task's title. PUT and PATCH behave the same."""
    return _to_response(store.update(task_id, Task(id=data.id, title=data.title)))


@router.delete(
    "/{task_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    responses=NOT_FOUND,
)
async def delete_task(task_id: int, store: TaskStore = Depends(get_store)):
    """Delete a task."""
    store.delete(task_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
