"""
Database abstraction for users and tasks, backed by SQLAlchemy or memory.
"""

from __future__ import annotations

import itertools
import logging
from dataclasses import dataclass
from typing import Dict, Optional, Protocol

from sqlalchemy import (
    Boolean,
    Column,
    ForeignKey,
    Integer,
    String,
    create_engine,
    select,
)
from sqlalchemy.orm import Session, declarative_base, sessionmaker

from tasktracker.errors import (
    DuplicateEmail,
    DuplicateUsername,
    TaskNotFound,
    UserNotFound,
)

logger = logging.getLogger(__name__)


class UserStore(Protocol):
    """Credential storage. Enforces unique emails and usernames."""

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> "UserRecord":
        ...

    def get_user(self, user_id: int) -> Optional["UserRecord"]:
        ...

    def get_user_by_email(self, email: str) -> Optional["UserRecord"]:
        ...

    def exists_by_email(self, email: str) -> bool:
        ...


class TaskStore(Protocol):
    """
    Task storage. Every task references exactly one owning user;
    create_task raises UserNotFound for an unknown owner.
    """

    def create_task(
        self,
        user_id: int,
        title: Optional[str],
        description: Optional[str],
        completed: bool = False,
    ) -> "TaskRecord":
        ...

    def get_task(self, task_id: int) -> Optional["TaskRecord"]:
        ...

    def list_tasks_for_user(self, user_id: int) -> list["TaskRecord"]:
        ...

    def save_task(self, task: "TaskRecord") -> "TaskRecord":
        ...

    def delete_task(self, task_id: int) -> bool:
        ...


@dataclass
class UserRecord:
    id: int
    username: str
    email: str
    password_hash: str


@dataclass
class TaskRecord:
    id: int
    title: Optional[str]
    description: Optional[str]
    completed: bool
    user_id: int


class InMemoryDbClient:
    """Simple in-memory database for development and tests."""

    def __init__(self):
        self.users: Dict[int, UserRecord] = {}
        self.tasks: Dict[int, TaskRecord] = {}
        self._user_ids = itertools.count(1)
        self._task_ids = itertools.count(1)

    def reset(self) -> None:
        """Clear all stored data (useful in tests)."""
        self.users.clear()
        self.tasks.clear()
        self._user_ids = itertools.count(1)
        self._task_ids = itertools.count(1)

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> UserRecord:
        if self.exists_by_email(email):
            raise DuplicateEmail()
        if any(user.username == username for user in self.users.values()):
            raise DuplicateUsername()
        record = UserRecord(
            id=next(self._user_ids),
            username=username,
            email=email,
            password_hash=password_hash,
        )
        self.users[record.id] = record
        return record

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        return self.users.get(user_id)

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        for user in self.users.values():
            if user.email == email:
                return user
        return None

    def exists_by_email(self, email: str) -> bool:
        return self.get_user_by_email(email) is not None

    def create_task(
        self,
        user_id: int,
        title: Optional[str],
        description: Optional[str],
        completed: bool = False,
    ) -> TaskRecord:
        if user_id not in self.users:
            raise UserNotFound()
        record = TaskRecord(
            id=next(self._task_ids),
            title=title,
            description=description,
            completed=completed,
            user_id=user_id,
        )
        self.tasks[record.id] = record
        return record

    def get_task(self, task_id: int) -> Optional[TaskRecord]:
        task = self.tasks.get(task_id)
        if task is None:
            return None
        # Hand out copies so callers only change state through save_task.
        return TaskRecord(**vars(task))

    def list_tasks_for_user(self, user_id: int) -> list[TaskRecord]:
        return [
            TaskRecord(**vars(task))
            for task in self.tasks.values()
            if task.user_id == user_id
        ]

    def save_task(self, task: TaskRecord) -> TaskRecord:
        if task.id not in self.tasks:
            raise TaskNotFound()
        self.tasks[task.id] = TaskRecord(**vars(task))
        return task

    def delete_task(self, task_id: int) -> bool:
        return self.tasks.pop(task_id, None) is not None


class SqlDbClient:
    """
    SQLAlchemy-backed implementation. Accepts any SQLAlchemy URL (e.g., Postgres or SQLite for tests).
    """

    def __init__(self, database_url: str):
        if not database_url:
            raise ValueError("DATABASE_URL is required for SqlDbClient")
        self.engine = create_engine(
            database_url,
            future=True,
            pool_pre_ping=True,
            pool_recycle=1800,
        )
        self.Session = sessionmaker(
            bind=self.engine, class_=Session, expire_on_commit=False, future=True
        )
        Base.metadata.create_all(self.engine)
        logger.info("SQL store ready (%s)", self.engine.url.get_backend_name())

    @staticmethod
    def _to_user_record(row: "UserRow") -> UserRecord:
        return UserRecord(
            id=row.id,
            username=row.username,
            email=row.email,
            password_hash=row.password_hash,
        )

    @staticmethod
    def _to_task_record(row: "TaskRow") -> TaskRecord:
        return TaskRecord(
            id=row.id,
            title=row.title,
            description=row.description,
            completed=row.completed,
            user_id=row.user_id,
        )

    def create_user(
        self, username: str, email: str, password_hash: str
    ) -> UserRecord:
        with self.Session() as session:
            if session.execute(
                select(UserRow.id).where(UserRow.email == email)
            ).first():
                raise DuplicateEmail()
            if session.execute(
                select(UserRow.id).where(UserRow.username == username)
            ).first():
                raise DuplicateUsername()
            row = UserRow(
                username=username, email=email, password_hash=password_hash
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_user_record(row)

    def get_user(self, user_id: int) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.get(UserRow, user_id)
            return self._to_user_record(row) if row else None

    def get_user_by_email(self, email: str) -> Optional[UserRecord]:
        with self.Session() as session:
            row = session.execute(
                select(UserRow).where(UserRow.email == email)
            ).scalar_one_or_none()
            return self._to_user_record(row) if row else None

    def exists_by_email(self, email: str) -> bool:
        with self.Session() as session:
            found = session.execute(
                select(UserRow.id).where(UserRow.email == email)
            ).first()
            return found is not None

    def create_task(
        self,
        user_id: int,
        title: Optional[str],
        description: Optional[str],
        completed: bool = False,
    ) -> TaskRecord:
        with self.Session() as session:
            if session.get(UserRow, user_id) is None:
                raise UserNotFound()
            row = TaskRow(
                title=title,
                description=description,
                completed=completed,
                user_id=user_id,
            )
            session.add(row)
            session.commit()
            session.refresh(row)
            return self._to_task_record(row)

    def get_task(self, task_id: int) -> Optional[TaskRecord]:
        with self.Session() as session:
            row = session.get(TaskRow, task_id)
            return self._to_task_record(row) if row else None

    def list_tasks_for_user(self, user_id: int) -> list[TaskRecord]:
        with self.Session() as session:
            rows = session.execute(
                select(TaskRow).where(TaskRow.user_id == user_id)
            ).scalars()
            return [self._to_task_record(row) for row in rows]

    def save_task(self, task: TaskRecord) -> TaskRecord:
        with self.Session() as session:
            row = session.get(TaskRow, task.id)
            if row is None:
                raise TaskNotFound()
            row.title = task.title
            row.description = task.description
            row.completed = task.completed
            session.commit()
            session.refresh(row)
            return self._to_task_record(row)

    def delete_task(self, task_id: int) -> bool:
        with self.Session() as session:
            row = session.get(TaskRow, task_id)
            if not row:
                return False
            session.delete(row)
            session.commit()
            return True


Base = declarative_base()


class UserRow(Base):
    __tablename__ = "users"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String, nullable=False, unique=True)
    email = Column(String, nullable=False, unique=True)
    password_hash = Column("password", String, nullable=False)


class TaskRow(Base):
    __tablename__ = "tasks"

    id = Column(Integer, primary_key=True, autoincrement=True)
    title = Column(String, nullable=True)
    description = Column(String, nullable=True)
    completed = Column(Boolean, nullable=False, default=False)
    user_id = Column(Integer, ForeignKey("users.id"), nullable=False, index=True)
