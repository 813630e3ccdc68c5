"""
Request pre-validation for task payloads.

Validation runs before any controller logic.  Its outcome is recorded
in a ``ModelState`` that the controller inspects: when the state holds
errors the controller answers with a 400 whose body is the field-error
mapping, for example::

    {"Title": ["Title cannot be longer than 50 characters."]}

Field keys are capitalised to match the public payload property names.
"""

from __future__ import annotations

import logging
from typing import Any, TypeVar

from .models import TITLE_MAX_LENGTH
from .schemas import CreateTaskRequest, UpdateTaskRequest

logger = logging.getLogger(__name__)

RequestT = TypeVar("RequestT", CreateTaskRequest, UpdateTaskRequest)


class ModelState:
    """Field-level validation errors collected for one request."""

    def __init__(self) -> None:
        self._errors: dict[str, list[str]] = {}

    def add_model_error(self, field: str, message: str) -> None:
        self._errors.setdefault(field, []).append(message)

    @property
    def is_valid(self) -> bool:
        return not self._errors

    def to_dict(self) -> dict[str, list[str]]:
        """Return a copy of the field-error mapping, safe to serialise."""
        return {field: list(messages) for field, messages in self._errors.items()}

    def __contains__(self, field: object) -> bool:
        return field in self._errors

    def __repr__(self) -> str:
        return f"<ModelState errors={self._errors!r}>"


def validate_task_payload(
    payload: Any,
    request_type: type[RequestT],
    model_state: ModelState | None = None,
) -> tuple[RequestT | None, ModelState]:
    """
    Validate a decoded JSON body and build the matching request object.

    Checks that the body is an object, that ``title`` is a non-blank
    string of at most ``TITLE_MAX_LENGTH`` characters, and that
    ``description`` is a string when supplied.

    Args:
        payload: The deserialised JSON request body (may be ``None``).
        request_type: ``CreateTaskRequest`` or ``UpdateTaskRequest``.
        model_state: Existing state to record errors into.  A new one is
            created when omitted.

    Returns:
        A two-element tuple ``(request, model_state)``.  ``request`` is
        ``None`` whenever ``model_state`` holds errors.
    """
    if model_state is None:
        model_state = ModelState()

    if not isinstance(payload, dict):
        model_state.add_model_error("", "A non-empty request body is required.")
        return None, model_state

    title = payload.get("title")
    if title is None or (isinstance(title, str) and not title.strip()):
        model_state.add_model_error("Title", "The Title field is required.")
    elif not isinstance(title, str):
        model_state.add_model_error("Title", "The Title field must be a string.")
    elif len(title) > TITLE_MAX_LENGTH:
        model_state.add_model_error(
            "Title", f"Title cannot be longer than {TITLE_MAX_LENGTH} characters."
        )

    description = payload.get("description")
    if description is not None and not isinstance(description, str):
        model_state.add_model_error("Description", "The Description field must be a string.")

    if not model_state.is_valid:
        logger.info("Rejected %s: %s", request_type.__name__, model_state.to_dict())
        return None, model_state

    return request_type(title=title, description=description), model_state
