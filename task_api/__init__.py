"""
Task API application factory.

Provides the ``create_app`` factory that assembles the task service: it
loads configuration, initialises SQLAlchemy, chooses the task repository
backing the controller, and registers the JSON API blueprint under
``/api``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
from typing import TYPE_CHECKING

from flask import Flask
from flask_sqlalchemy import SQLAlchemy

from config import get_config

if TYPE_CHECKING:
    from .repositories import TaskRepository

db = SQLAlchemy()

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def _ensure_sqlite_db_parent_exists(database_uri: str) -> None:
    """Create parent directories for file-based SQLite URIs when missing."""
    sqlite_prefix = "sqlite:///"
    if not database_uri.startswith(sqlite_prefix):
        return

    sqlite_path = database_uri[len(sqlite_prefix) :].split("?", 1)[0]
    if sqlite_path == ":memory:":
        return

    Path(sqlite_path).parent.mkdir(parents=True, exist_ok=True)


def _build_repository(name: str) -> TaskRepository:
    """Instantiate the task repository named in configuration."""
    from .repositories import InMemoryTaskRepository, SqlAlchemyTaskRepository

    if name == "sqlalchemy":
        return SqlAlchemyTaskRepository(db)
    if name == "memory":
        return InMemoryTaskRepository()
    raise ValueError(f"Unknown TASK_REPOSITORY: {name!r}")


def create_app(
    config_name: str | None = None, repository: TaskRepository | None = None
) -> Flask:
    """
    Create and configure the task service application.

    Args:
        config_name: Configuration environment name.  If None, uses the
            FLASK_ENV environment variable.
        repository: Optional task repository instance.  When omitted, the
            repository named by the ``TASK_REPOSITORY`` setting is built.

    Returns:
        Configured Flask application instance.
    """
    app = Flask(__name__, instance_relative_config=True)
    config_class = get_config(config_name)
    app.config.from_object(config_class)

    logger.info("Creating app with config: %s", config_class.__name__)

    os.makedirs(app.instance_path, exist_ok=True)
    _ensure_sqlite_db_parent_exists(app.config.get("SQLALCHEMY_DATABASE_URI", ""))

    db.init_app(app)

    if repository is None:
        repository = _build_repository(app.config["TASK_REPOSITORY"])
    app.extensions["task_repository"] = repository
    logger.info("Task repository: %s", type(repository).__name__)

    from .routes.api import api_bp

    app.register_blueprint(api_bp, url_prefix="/api")

    with app.app_context():
        db.create_all()
        logger.info("Database tables created")

    return app
