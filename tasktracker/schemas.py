"""
Pydantic schemas for the task tracker API.
"""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel

from tasktracker.db import TaskRecord


class SignupRequest(BaseModel):
    username: str
    email: str
    password: str


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    token: str
    userId: str


class MessageResponse(BaseModel):
    message: str


class TaskCreateRequest(BaseModel):
    title: Optional[str] = None
    description: Optional[str] = None


class TaskUpdateRequest(BaseModel):
    # Whole-record update: omitted fields fall back to these defaults.
    title: Optional[str] = None
    description: Optional[str] = None
    completed: Optional[bool] = False


class TaskResponse(BaseModel):
    id: int
    title: Optional[str] = None
    description: Optional[str] = None
    completed: bool
    userId: int

    @classmethod
    def from_record(cls, task: TaskRecord) -> "TaskResponse":
        return cls(
            id=task.id,
            title=task.title,
            description=task.description,
            completed=task.completed,
            userId=task.user_id,
        )


class HealthResponse(BaseModel):
    status: str
