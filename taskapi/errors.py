"""Exception types raised by the validation and repository layers.

The task blueprint maps each of them onto an HTTP status and the JSON
envelope; nothing below the routes knows about HTTP.
"""


class TaskNotFoundError(LookupError):
    """Raised when no task row exists for the requested id."""

    def __init__(self, task_id):
        super().__init__(f"Task {task_id} not found")
        self.task_id = task_id


class RequestValidationError(ValueError):
    """Field-level validation failure.

    ``errors`` maps each offending field to a list of human readable messages.
    """

    def __init__(self, errors, message=None):
        self.errors = errors
        super().__init__(message or self._summary(errors))

    @property
    def message(self):
        return str(self)

    @staticmethod
    def _summary(errors):
        messages = [msg for msgs in errors.values() for msg in msgs]
        if not messages:
            return "The given data was invalid."
        first = messages[0]
        extra = len(messages) - 1
        if extra:
            first += f" (and {extra} more error{'s' if extra > 1 else ''})"
        return first
