"""
Tasklist - Task Domain

Task entity, not-found error, and the stores that hold tasks.
"""
from .models import Task
from .store import (
    TaskStore,
    TaskNotFoundError,
    InMemoryTaskStore,
    SqliteTaskStore,
    create_store,
)

__all__ = [
    "Task",
    "TaskStore",
    "TaskNotFoundError",
    "InMemoryTaskStore",
    "SqliteTaskStore",
    "create_store",
]
