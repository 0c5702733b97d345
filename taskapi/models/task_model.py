from datetime import datetime, timezone

from sqlalchemy.orm import validates

from taskapi.utils.db import db

STATUS_PENDING = "pending"
STATUS_COMPLETED = "completed"
TASK_STATUSES = (STATUS_PENDING, STATUS_COMPLETED)


def _utcnow():
    return datetime.now(timezone.utc)


class Task(db.Model):
    __tablename__ = "tasks"

    id = db.Column(db.Integer, primary_key=True)
    title = db.Column(db.String(255), nullable=False)
    description = db.Column(db.String(1000), nullable=True)
    due_date = db.Column(db.Date, nullable=True)
    status = db.Column(db.String(20), nullable=False, default=STATUS_PENDING)
    created_at = db.Column(db.DateTime, nullable=False, default=_utcnow)
    updated_at = db.Column(db.DateTime, nullable=False, default=_utcnow, onupdate=_utcnow)

    @validates("status")
    def _normalize_status(self, _key, value):
        # pending | completed, always stored lowercase
        if not isinstance(value, str):
            raise ValueError(f"Invalid task status: {value!r}")
        value = value.lower()
        if value not in TASK_STATUSES:
            raise ValueError(f"Invalid task status: {value!r}")
        return value

    @validates("title")
    def _check_title(self, _key, value):
        if not isinstance(value, str) or not value.strip():
            raise ValueError("Task title must not be empty")
        return value

    def to_dict(self):
        return {
            "id": self.id,
            "title": self.title,
            "description": self.description,
            "due_date": self.due_date.isoformat() if self.due_date else None,
            "status": self.status,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }

    def __repr__(self):
        return f"<Task {self.id} {self.title!r} {self.status}>"
