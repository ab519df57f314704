"""
Password hashing and token issuance.
"""

from __future__ import annotations

from datetime import datetime, timedelta, timezone
from typing import Any, Dict

import jwt
from passlib.context import CryptContext
from passlib.exc import PasswordValueError
from pydantic import BaseModel

from tasktracker.errors import InvalidPassword, InvalidToken


class TokenClaims(BaseModel):
    sub: str
    iat: int
    exp: int


class PasswordHasher:
    """One-way bcrypt hashing of user passwords."""

    def __init__(self, rounds: int = 12):
        self._context = CryptContext(
            schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=rounds
        )

    def hash(self, password: str) -> str:
        try:
            return self._context.hash(password)
        except PasswordValueError:
            # bcrypt cannot hash some inputs, e.g. passwords containing NUL.
            raise InvalidPassword()

    def verify(self, password: str, password_hash: str) -> bool:
        try:
            return self._context.verify(password, password_hash)
        except ValueError:
            # Stored value is not a hash this context recognizes.
            return False


class TokenIssuer:
    """Issues and verifies signed JWTs bound to a subject (the user's email)."""

    def __init__(self, secret: str, algorithm: str = "HS256", expires_in: int = 86400):
        if not secret:
            raise ValueError("A signing secret is required")
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in

    def issue(self, subject: str) -> str:
        now = datetime.now(timezone.utc)
        payload: Dict[str, Any] = {
            "sub": subject,
            "iat": int(now.timestamp()),
            "exp": int((now + timedelta(seconds=self.expires_in)).timestamp()),
        }
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> TokenClaims:
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError:
            raise InvalidToken("Token has expired")
        except jwt.InvalidTokenError:
            raise InvalidToken()
        return TokenClaims(**payload)
