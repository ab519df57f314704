"""
Typed errors raised by the stores and services.

The HTTP layer renders every ``TaskTrackerError`` as ``{"message": ...}``
with the error's status code.
"""

from __future__ import annotations


class TaskTrackerError(Exception):
    status_code: int = 500
    message: str = "Internal Server Error"

    def __init__(self, message: str | None = None):
        if message is not None:
            self.message = message
        super().__init__(self.message)


class DuplicateEmail(TaskTrackerError):
    status_code = 400
    message = "Email already in use"


class DuplicateUsername(TaskTrackerError):
    status_code = 400
    message = "Username already in use"


class InvalidCredentials(TaskTrackerError):
    status_code = 400
    message = "Invalid email or password"


class UserNotFound(TaskTrackerError):
    status_code = 404
    message = "User not found"


class TaskNotFound(TaskTrackerError):
    status_code = 404
    message = "Task not found"


class InvalidPassword(TaskTrackerError):
    status_code = 400
    message = "Invalid password"


class InvalidToken(TaskTrackerError):
    status_code = 401
    message = "Invalid token"
