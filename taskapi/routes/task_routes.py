from flask import Blueprint, current_app, jsonify, request
from sqlalchemy.exc import SQLAlchemyError
from werkzeug.exceptions import HTTPException

from taskapi.errors import RequestValidationError, TaskNotFoundError
from taskapi.repositories.task_repository import TaskRepository
from taskapi.utils.db import db
from taskapi.validators.task_request import validate_task_id, validate_task_request

tasks_bp = Blueprint("tasks", __name__)

repository = TaskRepository()

# endpoint -> message used when the operation fails server side
FAILURE_MESSAGES = {
    "tasks.list_tasks": "Failed to retrieve tasks",
    "tasks.create_task": "Failed to create task",
    "tasks.get_task": "Failed to retrieve task",
    "tasks.update_task": "Failed to update task",
    "tasks.update_task_status": "Failed to update task status",
    "tasks.delete_task": "Failed to delete task",
}


def _ok(message, data=None, status=200):
    body = {"success": True}
    if data is not None:
        body["data"] = data
    body["message"] = message
    return jsonify(body), status


def _fail(message, status, **extra):
    return jsonify(success=False, message=message, **extra), status


def _failure_message():
    return FAILURE_MESSAGES.get(request.endpoint, "Request failed")


def _payload():
    payload = request.get_json(silent=True)
    return payload if isinstance(payload, dict) else {}


@tasks_bp.errorhandler(TaskNotFoundError)
def handle_not_found(_exc):
    return _fail("Task not found", 404)


@tasks_bp.errorhandler(RequestValidationError)
def handle_validation_error(exc):
    return _fail(exc.message, 422, errors=exc.errors)


@tasks_bp.errorhandler(SQLAlchemyError)
def handle_store_error(exc):
    db.session.rollback()
    current_app.logger.exception("Database error on %s: %s", request.endpoint, exc)
    return _fail(_failure_message(), 500, error="Database error occurred")


@tasks_bp.errorhandler(Exception)
def handle_unexpected_error(exc):
    if isinstance(exc, HTTPException):
        return exc
    current_app.logger.exception("Unhandled error on %s: %s", request.endpoint, exc)
    return _fail(_failure_message(), 500, error=str(exc))


@tasks_bp.get("")
def list_tasks():
    filters = validate_task_request("GET", request.args.to_dict())
    tasks = repository.get_all_tasks(filters)
    return _ok("Tasks retrieved successfully", [t.to_dict() for t in tasks])


@tasks_bp.post("")
def create_task():
    data = validate_task_request("POST", _payload())
    task = repository.create_task(data)
    return _ok("Task created successfully", task.to_dict(), 201)


@tasks_bp.get("/<task_id>")
def get_task(task_id):
    task = repository.get_task_by_id(validate_task_id(task_id))
    return _ok("Task retrieved successfully", task.to_dict())


@tasks_bp.put("/<task_id>")
def update_task(task_id):
    task_id = validate_task_id(task_id)
    data = validate_task_request("PUT", _payload())
    task = repository.update_task(task_id, data)
    return _ok("Task updated successfully", task.to_dict())


@tasks_bp.patch("/<task_id>/status")
def update_task_status(task_id):
    task_id = validate_task_id(task_id)
    data = validate_task_request("PATCH", _payload())
    task = repository.update_task_status(task_id, data["status"])
    return _ok("Task status updated successfully", task.to_dict())


@tasks_bp.delete("/<task_id>")
def delete_task(task_id):
    if not repository.delete_task(validate_task_id(task_id)):
        return _fail(_failure_message(), 500)
    return _ok("Task deleted successfully")
