"""
REST API endpoints for the task service.

Each request gets its own ``TaskController`` bound to the application's
task repository.  Request bodies are validated by the ``validated_body``
decorator before the view runs; the controller's action result is then
rendered into a Flask response.

Endpoints:
    GET    /api/health          - Service health check
    GET    /api/tasks           - List tasks
    GET    /api/tasks/<id>      - Retrieve a single task
    POST   /api/tasks           - Create a new task
    PUT    /api/tasks/<id>      - Replace title and description of a task
    DELETE /api/tasks/<id>      - Delete a task
"""

from __future__ import annotations

import logging
import os
import uuid
from collections.abc import Awaitable, Callable
from functools import wraps
from typing import Any

from flask import Blueprint, Response, current_app, jsonify, request, url_for

from ..controller import TaskController
from ..models import Task
from ..results import ActionResult, CreatedAtActionResult
from ..schemas import CreateTaskRequest, UpdateTaskRequest
from ..validation import ModelState, validate_task_payload

logger = logging.getLogger(__name__)

api_bp = Blueprint("task_api", __name__)


# =====================================================================
# Helper Functions
# =====================================================================


def get_controller(model_state: ModelState | None = None) -> TaskController:
    """Build a controller for the current request."""
    return TaskController(current_app.extensions["task_repository"], model_state)


def validated_body(request_type: type[CreateTaskRequest] | type[UpdateTaskRequest]):
    """
    Decorator that validates the JSON body before the view runs.

    The wrapped view receives ``payload`` (the request object, or
    ``None`` when invalid) and ``model_state`` keyword arguments and is
    responsible for checking ``model_state.is_valid``.
    """

    def decorator(view_func: Callable[..., Awaitable[Response]]):
        @wraps(view_func)
        async def wrapper(*args, **kwargs):
            payload, model_state = validate_task_payload(
                request.get_json(silent=True), request_type
            )
            return await view_func(*args, payload=payload, model_state=model_state, **kwargs)

        return wrapper

    return decorator


def _serialise(value: Any) -> Any:
    if isinstance(value, Task):
        return value.to_dict()
    if isinstance(value, list):
        return [_serialise(item) for item in value]
    return value


def render(result: ActionResult) -> Response:
    """
    Convert a controller result into a Flask response.

    Results without a value produce an empty body.  Created results get
    a ``Location`` header built from their action name and route values.
    """
    if result.value is None:
        return Response(status=result.status_code)

    response = jsonify(_serialise(result.value))
    response.status_code = result.status_code
    if isinstance(result, CreatedAtActionResult):
        response.headers["Location"] = url_for(
            f".{result.action_name}", **result.route_values
        )
    return response


# =====================================================================
# API Endpoints
# =====================================================================


@api_bp.route("/health", methods=["GET"])
def health_check() -> tuple[Response, int]:
    """Return service health status for liveness probes."""
    return (
        jsonify(
            {
                "status": "healthy",
                "service": "tasks",
                "environment": os.getenv("ENVIRONMENT", "unknown"),
            }
        ),
        200,
    )


@api_bp.route("/tasks", methods=["GET"])
async def get_tasks() -> Response:
    """List every task known to the repository."""
    logger.info("GET /api/tasks")
    return render(await get_controller().get_tasks())


@api_bp.route("/tasks/<uuid:task_id>", methods=["GET"])
async def get_task(task_id: uuid.UUID) -> Response:
    """Retrieve a single task; 404 with an empty body when missing."""
    return render(await get_controller().get_task(task_id))


@api_bp.route("/tasks", methods=["POST"])
@validated_body(CreateTaskRequest)
async def create_task(payload: CreateTaskRequest | None, model_state: ModelState) -> Response:
    """Create a task; 201 with a Location header, or 400 with field errors."""
    return render(await get_controller(model_state).create_task(payload))


@api_bp.route("/tasks/<uuid:task_id>", methods=["PUT"])
@validated_body(UpdateTaskRequest)
async def update_task(
    task_id: uuid.UUID, payload: UpdateTaskRequest | None, model_state: ModelState
) -> Response:
    """Replace title and description of a task; 204 on success."""
    return render(await get_controller(model_state).update_task(task_id, payload))


@api_bp.route("/tasks/<uuid:task_id>", methods=["DELETE"])
async def delete_task(task_id: uuid.UUID) -> Response:
    """Delete a task; 204 on success, 404 with a message otherwise."""
    return render(await get_controller().delete_task(task_id))


# =====================================================================
# Error Handlers
# =====================================================================


@api_bp.app_errorhandler(404)
def not_found(_: Exception) -> tuple[Response, int]:
    """Return a JSON 404 Not Found error."""
    return jsonify({"error": "Resource not found"}), 404


@api_bp.app_errorhandler(405)
def method_not_allowed(_: Exception) -> tuple[Response, int]:
    """Return a JSON 405 Method Not Allowed error."""
    return jsonify({"error": "Method not allowed"}), 405


@api_bp.errorhandler(500)
def internal_error(error: Exception) -> tuple[Response, int]:
    """Log the exception and return a JSON 500 Internal Server Error."""
    logger.error("Internal server error: %s", error)
    return jsonify({"error": "Internal server error"}), 500
