"""
Action results returned by the task controller.

Each result pairs an HTTP status code with an optional payload.  They
carry no Flask objects; the route layer renders them into responses,
which keeps the controller testable without a request context.
"""

from __future__ import annotations

from typing import Any


class ActionResult:
    """Base result: a status code and an optional value."""

    status_code: int = 200

    def __init__(self, value: Any = None) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"<{type(self).__name__} {self.status_code}>"


class OkObjectResult(ActionResult):
    status_code = 200


class CreatedAtActionResult(ActionResult):
    """
    201 result pointing at the action that retrieves the new resource.

    Attributes:
        action_name: Name of the controller operation (and blueprint
            endpoint) serving the created resource.
        route_values: Parameters for that action, e.g. ``{"task_id": ...}``.
    """

    status_code = 201

    def __init__(self, action_name: str, route_values: dict[str, Any], value: Any) -> None:
        super().__init__(value)
        self.action_name = action_name
        self.route_values = route_values


class NoContentResult(ActionResult):
    status_code = 204

    def __init__(self) -> None:
        super().__init__(None)


class BadRequestObjectResult(ActionResult):
    status_code = 400


class NotFoundResult(ActionResult):
    """404 without a body."""

    status_code = 404

    def __init__(self) -> None:
        super().__init__(None)


class NotFoundObjectResult(ActionResult):
    """404 carrying a body that names the missing resource."""

    status_code = 404
