"""
Request payloads accepted by the task controller.

These are transient values scoped to a single request; they carry no
``id`` and are never persisted themselves.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(slots=True)
class CreateTaskRequest:
    title: str
    description: str | None = None


@dataclass(slots=True)
class UpdateTaskRequest:
    title: str
    description: str | None = None
