"""
Task tracker backend.

This package provides a FastAPI application for user signup/login and
per-user task CRUD, with storage and database abstractions so the same
services run against Postgres or an in-memory store.
"""
