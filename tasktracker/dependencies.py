"""
Dependency wiring for the FastAPI app.
"""

from __future__ import annotations

import logging

from fastapi import Depends

from tasktracker.config import get_settings
from tasktracker.db import InMemoryDbClient, SqlDbClient
from tasktracker.security import PasswordHasher, TokenIssuer
from tasktracker.services import AuthService, TaskService

logger = logging.getLogger(__name__)

_db_client: InMemoryDbClient | SqlDbClient | None = None
_password_hasher: PasswordHasher | None = None
_token_issuer: TokenIssuer | None = None


def get_db_client() -> InMemoryDbClient | SqlDbClient:
    """
    Return a singleton DB client so users and tasks persist across requests.
    The client implements both UserStore and TaskStore.
    """
    global _db_client
    if _db_client:
        return _db_client

    settings = get_settings()
    if settings.use_in_memory_backends or not settings.database_url:
        logger.info("Using in-memory store")
        _db_client = InMemoryDbClient()
    else:
        _db_client = SqlDbClient(settings.database_url)
    return _db_client


def get_password_hasher() -> PasswordHasher:
    global _password_hasher
    if _password_hasher:
        return _password_hasher
    _password_hasher = PasswordHasher(rounds=get_settings().bcrypt_rounds)
    return _password_hasher


def get_token_issuer() -> TokenIssuer:
    global _token_issuer
    if _token_issuer:
        return _token_issuer
    settings = get_settings()
    _token_issuer = TokenIssuer(
        secret=settings.jwt_secret,
        algorithm=settings.jwt_algorithm,
        expires_in=settings.jwt_expires_in,
    )
    return _token_issuer


def get_auth_service(
    db=Depends(get_db_client),
    hasher: PasswordHasher = Depends(get_password_hasher),
    issuer: TokenIssuer = Depends(get_token_issuer),
) -> AuthService:
    return AuthService(users=db, hasher=hasher, issuer=issuer)


def get_task_service(db=Depends(get_db_client)) -> TaskService:
    return TaskService(users=db, tasks=db)
