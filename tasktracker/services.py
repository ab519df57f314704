"""
Auth and task services.

Both services receive their stores and helpers through the constructor;
``tasktracker.dependencies`` is the only place they get wired together.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional

from tasktracker.db import TaskRecord, TaskStore, UserRecord, UserStore
from tasktracker.errors import (
    DuplicateEmail,
    InvalidCredentials,
    TaskNotFound,
    UserNotFound,
)
from tasktracker.security import PasswordHasher, TokenIssuer

logger = logging.getLogger(__name__)


@dataclass
class LoginResult:
    token: str
    user_id: int


class AuthService:
    def __init__(
        self, users: UserStore, hasher: PasswordHasher, issuer: TokenIssuer
    ):
        self.users = users
        self.hasher = hasher
        self.issuer = issuer

    def signup(self, username: str, email: str, password: str) -> UserRecord:
        """
        Register a new user. Raises DuplicateEmail if the email is taken;
        the store raises DuplicateUsername for a taken username.
        """
        if self.users.exists_by_email(email):
            raise DuplicateEmail()
        user = self.users.create_user(
            username=username,
            email=email,
            password_hash=self.hasher.hash(password),
        )
        logger.info("Registered user %s", user.id)
        return user

    def login(self, email: str, password: str) -> LoginResult:
        # Unknown email and wrong password fail the same way.
        user = self.users.get_user_by_email(email)
        if user is None or not self.hasher.verify(password, user.password_hash):
            logger.info("Rejected login attempt")
            raise InvalidCredentials()
        return LoginResult(token=self.issuer.issue(user.email), user_id=user.id)


class TaskService:
    def __init__(self, users: UserStore, tasks: TaskStore):
        self.users = users
        self.tasks = tasks

    def _require_user(self, user_id: int) -> UserRecord:
        user = self.users.get_user(user_id)
        if user is None:
            raise UserNotFound()
        return user

    def list_tasks(self, user_id: int) -> list[TaskRecord]:
        user = self._require_user(user_id)
        return self.tasks.list_tasks_for_user(user.id)

    def create_task(
        self, user_id: int, title: Optional[str], description: Optional[str]
    ) -> TaskRecord:
        user = self._require_user(user_id)
        task = self.tasks.create_task(
            user_id=user.id, title=title, description=description, completed=False
        )
        logger.info("Created task %s for user %s", task.id, user.id)
        return task

    def update_task(
        self,
        task_id: int,
        title: Optional[str],
        description: Optional[str],
        completed: bool,
    ) -> TaskRecord:
        """Overwrite all mutable fields of a task. Ownership is left untouched."""
        task = self.tasks.get_task(task_id)
        if task is None:
            raise TaskNotFound()
        task.title = title
        task.description = description
        task.completed = completed
        return self.tasks.save_task(task)

    def delete_task(self, task_id: int) -> None:
        if not self.tasks.delete_task(task_id):
            raise TaskNotFound()
        logger.info("Deleted task %s", task_id)
