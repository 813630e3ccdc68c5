"""
Shared pytest fixtures for the task service test suite.

Provides the Flask application (SQLAlchemy-backed and in-memory
variants), test clients, a clean database per test, and Faker-driven
task factories.

Key Concepts Demonstrated:
- Session-scoped vs function-scoped fixtures
- Factory fixtures for flexible test-data creation
- Fixture teardown to prevent test pollution
- Swapping the repository collaborator behind the controller
"""

from __future__ import annotations

import os
from typing import Any

import pytest
from faker import Faker

# Set testing environment before importing the app
os.environ["FLASK_ENV"] = "testing"

from task_api import create_app, db
from task_api.models import Task, new_task_id
from task_api.repositories import InMemoryTaskRepository
from tests.fakes import RecordingTaskRepository

fake = Faker()


# -----------------------------------------------------------------------------
# Application Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture(scope="session")
def app():
    """
    Provide the SQLAlchemy-backed application for the whole session.

    The factory runs once with the 'testing' configuration; per-test
    isolation comes from the ``db_session`` fixture.
    """
    application = create_app("testing")
    yield application


@pytest.fixture(scope="function")
def client(app):
    """Provide a Flask test client for the SQLAlchemy-backed app."""
    with app.test_client() as test_client:
        yield test_client


@pytest.fixture(scope="function")
def db_session(app):
    """
    Provide a clean database for each test function.

    Creates all tables before the test, yields the db instance, then
    rolls back and drops all tables.
    """
    with app.app_context():
        db.create_all()
        yield db
        db.session.rollback()
        db.drop_all()


@pytest.fixture
def memory_repository() -> InMemoryTaskRepository:
    """Provide an empty in-memory repository."""
    return InMemoryTaskRepository()


@pytest.fixture
def memory_app(memory_repository):
    """
    Provide an application wired to ``memory_repository``.

    Function-scoped so each test starts from an empty store.
    """
    return create_app("testing", repository=memory_repository)


@pytest.fixture
def memory_client(memory_app):
    """Provide a test client for the in-memory application."""
    with memory_app.test_client() as test_client:
        yield test_client


# -----------------------------------------------------------------------------
# Test Data Factory Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def make_task():
    """
    Factory for detached ``Task`` entities with Faker defaults.

    Example:
        def test_something(make_task):
            task = make_task(title="My Task")
    """

    def _make_task(
        task_id: str | None = None,
        title: str | None = None,
        description: str | None = None,
    ) -> Task:
        return Task(
            id=task_id or new_task_id(),
            title=title or fake.text(max_nb_chars=50),
            description=description or fake.paragraph(),
        )

    return _make_task


@pytest.fixture
def seeded_repository(make_task) -> RecordingTaskRepository:
    """Provide a recording repository holding two tasks."""
    return RecordingTaskRepository(
        [
            make_task(title="Task 1", description="Description 1"),
            make_task(title="Task 2", description="Description 2"),
        ]
    )


@pytest.fixture
def task_factory(db_session, make_task):
    """
    Factory fixture that inserts tasks into the test database.

    Returns a callable accepting the same arguments as ``make_task``.
    """

    def _create_task(**kwargs) -> Task:
        task = make_task(**kwargs)
        db_session.session.add(task)
        db_session.session.commit()
        return task

    return _create_task


@pytest.fixture
def sample_task(task_factory) -> Task:
    """Create a single task with known values."""
    return task_factory(
        title="Sample Task",
        description="This is a sample task for testing",
    )


@pytest.fixture
def multiple_tasks(task_factory) -> list[Task]:
    """Create three tasks in the database."""
    return [task_factory(title=f"Task {index}") for index in range(1, 4)]


# -----------------------------------------------------------------------------
# Test Data Fixtures
# -----------------------------------------------------------------------------

@pytest.fixture
def valid_task_data() -> dict[str, Any]:
    """Provide a complete, valid task payload."""
    return {
        "title": "Test Task",
        "description": "This is a test task description",
    }


@pytest.fixture
def minimal_task_data() -> dict[str, str]:
    """Provide the smallest valid task payload (title only)."""
    return {"title": "Minimal Task"}


@pytest.fixture
def api_headers() -> dict[str, str]:
    """Provide common headers for API requests."""
    return {
        "Content-Type": "application/json",
        "Accept": "application/json",
    }
