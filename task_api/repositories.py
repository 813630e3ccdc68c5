"""
Task repositories.

``TaskRepository`` is the storage abstraction the controller depends
on.  Every method is a coroutine so that implementations backed by
network stores can suspend; the bundled implementations complete
without suspending.

Implementations:
  * ``InMemoryTaskRepository`` -- dict-backed, insertion ordered.  Used
    by tests and by ``TASK_REPOSITORY=memory``.
  * ``SqlAlchemyTaskRepository`` -- backed by the Flask-SQLAlchemy
    session; requires an application context.
"""

from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Iterable

from flask_sqlalchemy import SQLAlchemy
from sqlalchemy import select

from .models import Task

logger = logging.getLogger(__name__)


class TaskRepository(ABC):
    """CRUD primitives over tasks."""

    @abstractmethod
    async def get_tasks(self) -> list[Task]:
        """Return every task in the repository's natural order."""

    @abstractmethod
    async def get_task_by_id(self, task_id: str) -> Task | None:
        """Return the task with ``task_id``, or ``None`` when absent."""

    @abstractmethod
    async def create_task(self, task: Task) -> None:
        """Store a new task whose ``id`` is already populated."""

    @abstractmethod
    async def update_task(self, task: Task) -> None:
        """Persist the current field values of an existing task."""

    @abstractmethod
    async def delete_task(self, task_id: str) -> bool:
        """Remove a task; return True if one existed and was removed."""


class InMemoryTaskRepository(TaskRepository):
    def __init__(self, tasks: Iterable[Task] = ()) -> None:
        self._tasks: dict[str, Task] = {task.id: task for task in tasks}

    async def get_tasks(self) -> list[Task]:
        return list(self._tasks.values())

    async def get_task_by_id(self, task_id: str) -> Task | None:
        return self._tasks.get(task_id)

    async def create_task(self, task: Task) -> None:
        if task.id in self._tasks:
            raise ValueError(f"Task {task.id} already exists")
        self._tasks[task.id] = task

    async def update_task(self, task: Task) -> None:
        if task.id not in self._tasks:
            raise KeyError(task.id)
        self._tasks[task.id] = task

    async def delete_task(self, task_id: str) -> bool:
        return self._tasks.pop(task_id, None) is not None

    def __len__(self) -> int:
        return len(self._tasks)


class SqlAlchemyTaskRepository(TaskRepository):
    """
    Repository over the ``tasks`` table.

    Each mutating call commits its own unit of work; transactions
    spanning several calls are not offered.
    """

    def __init__(self, database: SQLAlchemy) -> None:
        self._db = database

    async def get_tasks(self) -> list[Task]:
        return list(self._db.session.scalars(select(Task)).all())

    async def get_task_by_id(self, task_id: str) -> Task | None:
        return self._db.session.get(Task, task_id)

    async def create_task(self, task: Task) -> None:
        self._db.session.add(task)
        self._db.session.commit()

    async def update_task(self, task: Task) -> None:
        # merge() also covers tasks loaded outside this session
        self._db.session.merge(task)
        self._db.session.commit()

    async def delete_task(self, task_id: str) -> bool:
        task = self._db.session.get(Task, task_id)
        if task is None:
            return False
        self._db.session.delete(task)
        self._db.session.commit()
        return True
