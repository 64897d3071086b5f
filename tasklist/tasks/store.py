"""
Tasklist - Task Stores

Keyed task collections behind one contract:

    list()                -> all tasks, in creation order
    get(task_id)          -> task, or TaskNotFoundError
    create(task)          -> task with a store-assigned id
    update(task_id, task) -> task with the new title, or TaskNotFoundError
    delete(task_id)       -> None, or TaskNotFoundError

Ids come from a sequence starting at 1 and are never reused.
Any id carried by the incoming task is ignored.
"""
import threading
from abc import ABC, abstractmethod
from collections import OrderedDict
from typing import Optional, List

from .models import Task
from ..config.logging import get_logger
from ..storage import Database

logger = get_logger("tasks.store")


class TaskNotFoundError(Exception):
    """Raised when no task with the given id exists."""

    def __init__(self, task_id: int):
        self.task_id = task_id
        super().__init__(f"Task not found: {task_id}")


class TaskStore(ABC):
    """Contract shared by all task stores."""

    name = "abstract"

    @abstractmethod
    def list(self) -> List[Task]:
        ...

    @abstractmethod
    def get(self, task_id: int) -> Task:
        ...

    @abstractmethod
    def create(self, task: Task) -> Task:
        ...

    @abstractmethod
    def update(self, task_id: int, task: Task) -> Task:
        ...

    @abstractmethod
    def delete(self, task_id: int) -> None:
        ...


class InMemoryTaskStore(TaskStore):
    """Process-local store. Lost on restart."""

    name = "memory"

    def __init__(self):
        self._tasks: "OrderedDict[int, Task]" = OrderedDict()
        self._last_id = 0
        self._lock = threading.Lock()

    def list(self) -> List[Task]:
        with self._lock:
            return [Task(id=t.id, title=t.title) for t in self._tasks.values()]

    def get(self, task_id: int) -> Task:
        with self._lock:
            task = self._find(task_id)
            return Task(id=task.id, title=task.title)

    def create(self, task: Task) -> Task:
        with self._lock:
            self._last_id += 1
            created = Task(id=self._last_id, title=task.title)
            self._tasks[created.id] = created
        logger.info("Task created: id=%d", created.id)
        return Task(id=created.id, title=created.title)

    def update(self, task_id: int, task: Task) -> Task:
        with self._lock:
            existing = self._find(task_id)
            existing.title = task.title
            updated = Task(id=existing.id, title=existing.title)
        logger.info("Task updated: id=%d", task_id)
        return updated

    def delete(self, task_id: int) -> None:
        with self._lock:
            self._find(task_id)
            del self._tasks[task_id]
        logger.info("Task deleted: id=%d", task_id)

    def _find(self, task_id: int) -> Task:
        task = self._tasks.get(task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task


# Ids outside SQLite's signed 64-bit INTEGER range can never be stored
SQLITE_MIN_ID = -(2 ** 63)
SQLITE_MAX_ID = 2 ** 63 - 1


class SqliteTaskStore(TaskStore):
    """Store persisted in the `tasks` table of a SQLite database."""

    name = "sqlite"

    def __init__(self, db: Optional[Database] = None):
        self._db = db or Database()

    @property
    def db(self) -> Database:
        return self._db

    def list(self) -> List[Task]:
        rows = self._db.fetch_all("SELECT id, title FROM tasks ORDER BY id")
        return [Task.from_row(row) for row in rows]

    def get(self, task_id: int) -> Task:
        self._check_id(task_id)
        row = self._db.fetch_one("SELECT id, title FROM tasks WHERE id = ?", (task_id,))
        if row is None:
            raise TaskNotFoundError(task_id)
        return Task.from_row(row)

    def create(self, task: Task) -> Task:
        task_id = self._db.execute(
            "INSERT INTO tasks (title) VALUES (?)",
            (task.title,),
        )
        logger.info("Task created: id=%d", task_id)
        return Task(id=task_id, title=task.title)

    def update(self, task_id: int, task: Task) -> Task:
        self._check_id(task_id)
        updated = self._db.execute_rowcount(
            "UPDATE tasks SET title = ?, updated_at = datetime('now') WHERE id = ?",
            (task.title, task_id),
        )
        if not updated:
            raise TaskNotFoundError(task_id)
        logger.info("Task updated: id=%d", task_id)
        return Task(id=task_id, title=task.title)

    def delete(self, task_id: int) -> None:
        self._check_id(task_id)
        deleted = self._db.execute_rowcount("DELETE FROM tasks WHERE id = ?", (task_id,))
        if not deleted:
            raise TaskNotFoundError(task_id)
        logger.info("Task deleted: id=%d", task_id)

    @staticmethod
    def _check_id(task_id: int) -> None:
        if not SQLITE_MIN_ID <= task_id <= SQLITE_MAX_ID:
            raise TaskNotFoundError(task_id)


def create_store(settings=None) -> TaskStore:
    """Build the store selected by settings.store.backend."""
    if settings is None:
        from ..config.settings import settings

    backend = settings.store.backend
    if backend == "memory":
        return InMemoryTaskStore()
    if backend == "sqlite":
        return SqliteTaskStore(Database(settings.database.path))
    raise ValueError(f"Unknown task store backend: {backend!r}")
