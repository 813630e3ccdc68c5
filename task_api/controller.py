"""
Task controller.

Translates task-management requests into repository calls and maps the
outcomes to action results:

    get_tasks()                   -> 200 list of tasks
    get_task(id)                  -> 200 task | 404 (no body)
    create_task(request)          -> 201 created at get_task | 400 field errors
    update_task(id, request)      -> 204 | 400 field errors | 404 with body
    delete_task(id)               -> 204 | 404 with body

Payload validation happens before the handler runs and is recorded in
``controller.model_state``; a controller instance serves a single
request.
"""

from __future__ import annotations

import logging
import uuid

from .models import Task, new_task_id
from .repositories import TaskRepository
from .results import (
    ActionResult,
    BadRequestObjectResult,
    CreatedAtActionResult,
    NoContentResult,
    NotFoundObjectResult,
    NotFoundResult,
    OkObjectResult,
)
from .schemas import CreateTaskRequest, UpdateTaskRequest
from .validation import ModelState

logger = logging.getLogger(__name__)


def _normalise_id(task_id: uuid.UUID | str) -> str:
    return str(task_id)


def _not_found_body(task_id: str) -> dict[str, str]:
    return {"error": f"Task with id {task_id} not found", "id": task_id}


class TaskController:
    """
    CRUD operations over tasks, backed by a ``TaskRepository``.

    Args:
        repository: Storage collaborator; all state lives there.
        model_state: Result of request pre-validation.  Defaults to an
            empty (valid) state.
    """

    def __init__(self, repository: TaskRepository, model_state: ModelState | None = None) -> None:
        self.repository = repository
        self.model_state = model_state if model_state is not None else ModelState()

    async def get_tasks(self) -> ActionResult:
        tasks = await self.repository.get_tasks()
        return OkObjectResult(tasks)

    async def get_task(self, task_id: uuid.UUID | str) -> ActionResult:
        task = await self.repository.get_task_by_id(_normalise_id(task_id))
        if task is None:
            logger.debug("Task %s not found", task_id)
            return NotFoundResult()
        return OkObjectResult(task)

    async def create_task(self, request: CreateTaskRequest) -> ActionResult:
        """
        Create a task with a freshly generated id.

        Returns a 400 carrying the field-error mapping, without touching
        the repository, when pre-validation failed.
        """
        if not self.model_state.is_valid:
            return BadRequestObjectResult(self.model_state.to_dict())

        task = Task(id=new_task_id(), title=request.title, description=request.description)
        await self.repository.create_task(task)
        logger.info("Created task %s", task.id)
        return CreatedAtActionResult(
            action_name="get_task",
            route_values={"task_id": task.id},
            value=task,
        )

    async def update_task(self, task_id: uuid.UUID | str, request: UpdateTaskRequest) -> ActionResult:
        """Replace title and description of an existing task; the id is kept."""
        if not self.model_state.is_valid:
            return BadRequestObjectResult(self.model_state.to_dict())

        task_id = _normalise_id(task_id)
        task = await self.repository.get_task_by_id(task_id)
        if task is None:
            logger.info("Update skipped, task %s not found", task_id)
            return NotFoundObjectResult(_not_found_body(task_id))

        task.title = request.title
        task.description = request.description
        await self.repository.update_task(task)
        logger.info("Updated task %s", task_id)
        return NoContentResult()

    async def delete_task(self, task_id: uuid.UUID | str) -> ActionResult:
        task_id = _normalise_id(task_id)
        if not await self.repository.delete_task(task_id):
            logger.info("Delete skipped, task %s not found", task_id)
            return NotFoundObjectResult(_not_found_body(task_id))

        logger.info("Deleted task %s", task_id)
        return NoContentResult()
