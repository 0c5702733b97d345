import logging

from sqlalchemy.exc import SQLAlchemyError

from taskapi.errors import TaskNotFoundError
from taskapi.models.task_model import STATUS_PENDING, Task
from taskapi.utils.db import db

logger = logging.getLogger(__name__)

# Largest value an Integer primary key can hold (signed 64-bit)
MAX_TASK_ID = 2**63 - 1


class TaskRepository:
    """Data access for tasks on top of the Flask-SQLAlchemy session."""

    def __init__(self, session=None):
        self._session = session

    @property
    def session(self):
        return self._session if self._session is not None else db.session

    def get_all_tasks(self, filters=None):
        filters = filters or {}
        query = self.session.query(Task)

        if filters.get("status"):
            query = query.filter(Task.status == filters["status"])
        if filters.get("due_date_from"):
            query = query.filter(Task.due_date >= filters["due_date_from"])
        if filters.get("due_date_to"):
            query = query.filter(Task.due_date <= filters["due_date_to"])
        if filters.get("title"):
            query = query.filter(Task.title.contains(filters["title"], autoescape=True))

        # Undated tasks go last, newest first among equal due dates
        return query.order_by(
            Task.due_date.is_(None),
            Task.due_date.asc(),
            Task.created_at.desc(),
            Task.id.desc(),
        ).all()

    def get_task_by_id(self, task_id):
        if task_id > MAX_TASK_ID:
            raise TaskNotFoundError(task_id)
        task = self.session.get(Task, task_id)
        if task is None:
            raise TaskNotFoundError(task_id)
        return task

    def create_task(self, data):
        task = Task(
            title=data["title"],
            description=data.get("description"),
            due_date=data.get("due_date"),
            status=data.get("status") or STATUS_PENDING,
        )
        self.session.add(task)
        self._commit()
        logger.info("Created task id=%s", task.id)
        return task

    def update_task(self, task_id, data):
        task = self.get_task_by_id(task_id)
        task.title = data["title"]
        task.description = data.get("description")
        task.due_date = data.get("due_date")
        if data.get("status"):
            task.status = data["status"]
        self._commit()
        logger.info("Updated task id=%s", task.id)
        return task

    def update_task_status(self, task_id, status):
        task = self.get_task_by_id(task_id)
        task.status = status
        self._commit()
        logger.info("Task id=%s status -> %s", task.id, task.status)
        return task

    def delete_task(self, task_id):
        task = self.get_task_by_id(task_id)
        self.session.delete(task)
        self._commit()
        logger.info("Deleted task id=%s", task_id)
        return True

    def _commit(self):
        try:
            self.session.commit()
        except SQLAlchemyError:
            self.session.rollback()
            raise
