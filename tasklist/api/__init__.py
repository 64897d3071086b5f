"""
Tasklist API Layer

REST API for the task list.

Run:
    python run_api.py
    # or
    uvicorn tasklist.api.app:app --reload

Endpoints:
    GET    /health            - Health check

    GET    /tasks             - List tasks
    POST   /tasks             - Create task
    GET    /tasks/{id}        - Get task
    PUT    /tasks/{id}        - Update task title
    PATCH  /tasks/{id}        - Update task title
    DELETE /tasks/{id}        - Delete task
"""

from .app import create_app, app
from .tasks import router as tasks_router

__all__ = [
    "create_app",
    "app",
    "tasks_router",
]
