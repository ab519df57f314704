"""
HTTP routes for the task tracker API.
"""

from __future__ import annotations

from fastapi import APIRouter, Depends, Response

from tasktracker.dependencies import get_auth_service, get_task_service
from tasktracker.errors import TaskNotFound
from tasktracker.schemas import (
    HealthResponse,
    LoginRequest,
    LoginResponse,
    MessageResponse,
    SignupRequest,
    TaskCreateRequest,
    TaskResponse,
    TaskUpdateRequest,
)
from tasktracker.services import AuthService, TaskService

router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok")


@router.post("/auth/signup", response_model=MessageResponse)
def signup(payload: SignupRequest, auth: AuthService = Depends(get_auth_service)):
    auth.signup(payload.username, payload.email, payload.password)
    return MessageResponse(message="User registered successfully")


@router.post("/auth/login", response_model=LoginResponse)
def login(payload: LoginRequest, auth: AuthService = Depends(get_auth_service)):
    result = auth.login(payload.email, payload.password)
    return LoginResponse(token=result.token, userId=str(result.user_id))


@router.get("/tasks/{user_id}", response_model=list[TaskResponse])
def list_tasks(user_id: int, tasks: TaskService = Depends(get_task_service)):
    return [TaskResponse.from_record(task) for task in tasks.list_tasks(user_id)]


@router.post("/tasks/{user_id}", response_model=TaskResponse)
def create_task(
    user_id: int,
    payload: TaskCreateRequest,
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.create_task(user_id, payload.title, payload.description)
    return TaskResponse.from_record(task)


# TODO: require a bearer token from the owning user once task mutation
# is meant to be restricted to the owner.
@router.put("/tasks/{task_id}", response_model=TaskResponse)
def update_task(
    task_id: int,
    payload: TaskUpdateRequest,
    tasks: TaskService = Depends(get_task_service),
):
    task = tasks.update_task(
        task_id,
        payload.title,
        payload.description,
        bool(payload.completed),
    )
    return TaskResponse.from_record(task)


@router.delete("/tasks/{task_id}", response_model=MessageResponse)
def delete_task(task_id: int, tasks: TaskService = Depends(get_task_service)):
    try:
        tasks.delete_task(task_id)
    except TaskNotFound:
        return Response(status_code=404)
    return MessageResponse(message="Task deleted successfully")
