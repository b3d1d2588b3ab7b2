"""User repository - in-memory account storage."""

from __future__ import annotations

import threading
from typing import List, Optional

from core.errors import ConflictError
from models.user import User

# Fixed development account. Its hash is a placeholder, not a real PBKDF2
# value, so it can only authenticate with its token, never via login.
ADMIN_USER = User(
    name="admin",
    idtoken="faketoken",
    password_hash="unhashedpassword",
    salt="nosalt",
)


class UserRepository:
    def __init__(self, *, seed_admin: bool = True) -> None:
        self._lock = threading.Lock()
        self._seed_admin = seed_admin
        self._users: List[User] = []
        self._seed()

    def _seed(self) -> None:
        if self._seed_admin:
            self._users.append(ADMIN_USER.model_copy())

    def get_all(self) -> List[User]:
        with self._lock:
            return list(self._users)

    def get_by_name(self, name: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.name == name:
                    return user
        return None

    def add(self, user: User) -> User:
        """Append ``user``; raises ConflictError when the name is taken."""
        with self._lock:
            if any(existing.name == user.name for existing in self._users):
                raise ConflictError(f"User {user.name!r} already exists")
            self._users.append(user)
            return user

    def set_token(self, name: str, token: str) -> Optional[User]:
        with self._lock:
            for user in self._users:
                if user.name == name:
                    user.idtoken = token
                    return user
        return None

    def clear(self) -> None:
        """Drop every account and re-seed the admin user (testing helper)."""
        with self._lock:
            self._users.clear()
            self._seed()
