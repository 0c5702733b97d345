"""Declarative request rules for the task endpoints.

Each HTTP method gets its own pydantic model. Incoming data is normalized
first (strings trimmed, empty values dropped, status lowercased) and then
checked against the model for that method. Failures are flattened into a
``{field: [message, ...]}`` mapping and raised as
:class:`~taskapi.errors.RequestValidationError`.
"""
from datetime import date, datetime
from typing import Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, ValidationInfo, field_validator, model_validator
from pydantic_core import PydanticCustomError

from taskapi.errors import RequestValidationError
from taskapi.models.task_model import STATUS_PENDING

MESSAGES = {
    "title.required": "The task title is required.",
    "title.max": "The task title may not be greater than 255 characters.",
    "description.max": "The description may not be greater than 1000 characters.",
    "due_date.date": "The due date must be a valid date.",
    "due_date.after_or_equal": "The due date must be today or in the future.",
    "status.in": "The status must be either pending or completed.",
    "status.required": "The status field is required when updating task status.",
    "due_date_to.after_or_equal": "The end date must be after or equal to the start date.",
}

ATTRIBUTES = {
    "due_date_from": "start date",
    "due_date_to": "end date",
}

GENERIC_MESSAGES = {
    "required": "The {attribute} field is required.",
    "string": "The {attribute} must be a string.",
    "date": "The {attribute} must be a valid date.",
    "max": "The {attribute} is too long.",
    "in": "The selected {attribute} is invalid.",
}

# pydantic error type -> rule name used in MESSAGES keys
RULES = {
    "missing": "required",
    "string_type": "string",
    "string_too_long": "max",
    "literal_error": "in",
}

Status = Literal["pending", "completed"]


def parse_date(value):
    """Accept a date, a datetime, ``YYYY-MM-DD`` or an ISO datetime string."""
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value)
        except ValueError:
            pass
        try:
            return datetime.fromisoformat(value).date()
        except ValueError:
            pass
    raise PydanticCustomError("date", "Value is not a valid date")


class _TaskRequest(BaseModel):
    model_config = ConfigDict(extra="ignore")

    @model_validator(mode="before")
    @classmethod
    def _normalize(cls, data):
        if not isinstance(data, dict):
            return data
        cleaned = {}
        for key, value in data.items():
            if isinstance(value, str):
                value = value.strip()
                if key == "status":
                    value = value.lower()
            if value is None or value == "":
                continue
            cleaned[key] = value
        return cleaned


class TaskCreateRequest(_TaskRequest):
    title: str = Field(max_length=255)
    description: Optional[str] = Field(default=None, max_length=1000)
    due_date: Optional[date] = None
    status: Status = STATUS_PENDING

    @field_validator("due_date", mode="before")
    @classmethod
    def _parse_due_date(cls, value):
        return parse_date(value)

    @field_validator("due_date")
    @classmethod
    def _not_in_past(cls, value):
        if value is not None and value < date.today():
            raise PydanticCustomError("after_or_equal", "Date must be today or later")
        return value


class TaskUpdateRequest(TaskCreateRequest):
    # Absent status keeps the stored one
    status: Optional[Status] = None


class TaskStatusRequest(_TaskRequest):
    status: Status


class TaskFilterRequest(_TaskRequest):
    status: Optional[Status] = None
    due_date_from: Optional[date] = None
    due_date_to: Optional[date] = None
    title: Optional[str] = Field(default=None, max_length=255)

    @field_validator("due_date_from", "due_date_to", mode="before")
    @classmethod
    def _parse_dates(cls, value):
        return parse_date(value)

    @field_validator("due_date_to")
    @classmethod
    def _range_order(cls, value, info: ValidationInfo):
        start = info.data.get("due_date_from")
        if value is not None and start is not None and value < start:
            raise PydanticCustomError("after_or_equal", "End date must not precede start date")
        return value


RULE_SETS = {
    "POST": TaskCreateRequest,
    "PUT": TaskUpdateRequest,
    "PATCH": TaskStatusRequest,
    "GET": TaskFilterRequest,
}


def _message_for(field, rule, fallback):
    message = MESSAGES.get(f"{field}.{rule}")
    if message is not None:
        return message
    template = GENERIC_MESSAGES.get(rule)
    if template is None:
        return fallback
    return template.format(attribute=ATTRIBUTES.get(field, field.replace("_", " ")))


def format_errors(exc: ValidationError) -> dict:
    errors = {}
    for err in exc.errors():
        field = str(err["loc"][0]) if err["loc"] else "request"
        rule = RULES.get(err["type"], err["type"])
        errors.setdefault(field, []).append(_message_for(field, rule, err["msg"]))
    return errors


def validate_task_request(method: str, data) -> dict:
    """Validate ``data`` with the rule set for ``method`` and return clean values."""
    schema = RULE_SETS.get(method.upper())
    if schema is None:
        raise ValueError(f"No task request rules for method {method!r}")
    try:
        validated = schema.model_validate(data if isinstance(data, dict) else {})
    except ValidationError as exc:
        raise RequestValidationError(format_errors(exc)) from exc
    return validated.model_dump()


def validate_task_id(raw) -> int:
    """Return ``raw`` as a positive int or raise a validation error on ``id``."""
    text = str(raw).strip()
    if text.isdigit() and text.isascii() and int(text) > 0:
        return int(text)
    raise RequestValidationError(
        {"id": ["The task ID must be a positive integer."]},
        message="Invalid task ID",
    )
