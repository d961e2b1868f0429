# errors.py
from typing import List, Optional

from starlette.status import (
    HTTP_400_BAD_REQUEST,
    HTTP_404_NOT_FOUND,
    HTTP_405_METHOD_NOT_ALLOWED,
    HTTP_500_INTERNAL_SERVER_ERROR,
)


class TaskApiError(Exception):
    """Base class for errors that map onto an HTTP status."""

    status_code = HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail


class PersistenceError(TaskApiError):
    """The tasks file exists but could not be read or parsed. Fatal at startup."""


class DecodeError(TaskApiError):
    status_code = HTTP_400_BAD_REQUEST


class ParseError(TaskApiError):
    status_code = HTTP_400_BAD_REQUEST

    def __init__(self, detail: str = "Invalid or missing ID"):
        super().__init__(detail)


class NotFoundError(TaskApiError):
    status_code = HTTP_404_NOT_FOUND

    def __init__(self, task_id: int):
        super().__init__("Task not found")
        self.task_id = task_id


class MethodNotAllowedError(TaskApiError):
    status_code = HTTP_405_METHOD_NOT_ALLOWED

    def __init__(self, allowed: Optional[List[str]] = None):
        super().__init__("Method Not Allowed")
        self.allowed = allowed or []
