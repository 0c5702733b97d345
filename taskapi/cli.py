from datetime import date, timedelta

import click
from flask import Flask

from taskapi.models.task_model import STATUS_COMPLETED, STATUS_PENDING
from taskapi.repositories.task_repository import TaskRepository
from taskapi.utils.db import db


def seed_tasks(repository=None):
    """Insert the two sample tasks and return them."""
    repository = repository or TaskRepository()
    today = date.today()
    samples = [
        {
            "title": "Prepare project report",
            "description": "Prepare report for Q4",
            "due_date": today + timedelta(days=3),
            "status": STATUS_PENDING,
        },
        {
            "title": "Send client email",
            "description": "Update client on project status",
            "due_date": today + timedelta(days=1),
            "status": STATUS_COMPLETED,
        },
    ]
    return [repository.create_task(data) for data in samples]


def register_commands(app: Flask):
    @app.cli.command("init-db")
    def init_db_command():
        """Create the tasks table if it does not exist."""
        db.create_all()
        click.echo("Database initialized.")

    @app.cli.command("seed")
    def seed_command():
        """Insert sample tasks."""
        tasks = seed_tasks()
        click.echo(f"Seeded {len(tasks)} tasks.")
