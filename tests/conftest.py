# tests/conftest.py

from pathlib import Path

import pytest

from taskapi.app import create_app
from taskapi.config import TestConfig
from taskapi.models.task_model import Task
from taskapi.repositories.task_repository import TaskRepository
from taskapi.utils.db import db


@pytest.fixture()
def app(tmp_path: Path):
    """App bound to a throwaway SQLite file, one per test."""

    class _Config(TestConfig):
        SQLALCHEMY_DATABASE_URI = f"sqlite:///{tmp_path / 'tasks.sqlite3'}"

    app = create_app(_Config)
    with app.app_context():
        yield app
        db.session.remove()
        db.drop_all()
        db.engine.dispose()


@pytest.fixture()
def client(app):
    return app.test_client()


@pytest.fixture()
def repo(app) -> TaskRepository:
    return TaskRepository()


@pytest.fixture()
def make_task(app):
    """Insert a task directly, bypassing request validation. Returns its id."""

    def _make(**fields) -> int:
        fields.setdefault("title", "Sample task")
        task = Task(**fields)
        db.session.add(task)
        db.session.commit()
        return task.id

    return _make


@pytest.fixture()
def fetch_task(app):
    """Read a task straight from the database, ignoring cached instances."""

    def _fetch(task_id):
        db.session.expire_all()
        return db.session.query(Task).filter_by(id=task_id).first()

    return _fetch
