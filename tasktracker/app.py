"""
FastAPI application entry point for the task tracker backend.
"""

from __future__ import annotations

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from tasktracker.config import get_settings
from tasktracker.errors import TaskTrackerError
from tasktracker.routes import router


async def handle_task_tracker_error(
    request: Request, exc: TaskTrackerError
) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


def create_app() -> FastAPI:
    settings = get_settings()
    app = FastAPI(title="Task Tracker Backend", version="0.1.0")
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(TaskTrackerError, handle_task_tracker_error)
    app.include_router(router, prefix=settings.api_prefix)
    return app


app = create_app()
