"""User service - account creation, login and token checks."""

from __future__ import annotations

import logging
import threading
from typing import Optional

from auth.security import generate_salt, generate_token, hash_password, verify_password
from core.errors import BadRequestError, ForbiddenError
from models.user import User
from repositories.user_repository import UserRepository

logger = logging.getLogger(__name__)


class UserService:
    """Service for account business logic."""

    def __init__(
        self,
        repository: Optional[UserRepository] = None,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        self.repository = repository or UserRepository()
        self._lock = lock or threading.RLock()

    def create_account(self, username: Optional[str], password: Optional[str]) -> str:
        """Register ``username`` and return its first token."""
        if not username or not password:
            raise BadRequestError("username and password are required")
        salt = generate_salt()
        user = User(
            name=username,
            idtoken=generate_token(),
            password_hash=hash_password(password, salt),
            salt=salt,
        )
        with self._lock:
            self.repository.add(user)
        logger.info("Created account for %s", username)
        return user.idtoken

    def login(self, username: str, password: Optional[str]) -> str:
        """Check the password and hand out a fresh token."""
        if not password:
            raise BadRequestError("password is required")
        with self._lock:
            user = self.repository.get_by_name(username)
            if user is None or not verify_password(password, user.salt, user.password_hash):
                logger.warning("Rejected login for %s", username)
                raise ForbiddenError("invalid username or password")
            token = generate_token()
            self.repository.set_token(user.name, token)
        logger.info("Issued new token for %s", username)
        return token

    def verify(self, name: str, token: str) -> bool:
        # Plain equality, not constant-time.
        user = self.repository.get_by_name(name)
        return user is not None and user.idtoken == token
