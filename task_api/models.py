"""
Database model for the task service.

Defines the SQLAlchemy ORM model for a task together with the id
generator used when a task is created.  The same ``Task`` class is the
entity handed to every repository implementation, including the
in-memory one, so controllers never see storage-specific types.
"""

from __future__ import annotations

import uuid
from typing import Any

from . import db

TITLE_MAX_LENGTH = 50


def new_task_id() -> str:
    """Return a fresh random 128-bit identifier in canonical string form."""
    return str(uuid.uuid4())


class Task(db.Model):
    """
    A unit of work.

    Attributes:
        id: UUID string assigned on creation and never changed afterwards.
        title: Short summary of the task (max 50 characters).
        description: Optional longer text with details about the task.
    """

    __tablename__ = "tasks"

    id: str = db.Column(db.String(36), primary_key=True)
    title: str = db.Column(db.String(TITLE_MAX_LENGTH), nullable=False)
    description: str | None = db.Column(db.Text, nullable=True)

    def to_dict(self) -> dict[str, Any]:
        """Serialise the task to a JSON-safe dictionary."""
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
        }

    def __repr__(self) -> str:
        return f"<Task {self.id}: {self.title}>"
