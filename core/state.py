"""Per-application in-memory state."""

from __future__ import annotations

from dataclasses import dataclass, field
import threading

from repositories.todo_repository import TodoRepository
from repositories.user_repository import UserRepository


@dataclass
class AppState:
    """Stores owned by one app instance plus the lock serializing handler flows."""

    todos: TodoRepository = field(default_factory=TodoRepository)
    users: UserRepository = field(default_factory=UserRepository)
    lock: threading.RLock = field(default_factory=threading.RLock)

    @classmethod
    def create(cls, *, seed_admin: bool = True) -> "AppState":
        return cls(users=UserRepository(seed_admin=seed_admin))
