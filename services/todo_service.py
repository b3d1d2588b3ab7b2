"""Todo service - business logic layer."""

from __future__ import annotations

import logging
import threading
from typing import List, Optional

from core.errors import BadRequestError, ForbiddenError, NotFoundError, UnauthorizedError
from models.todo import Credentials, Todo, TodoQuery, TodoWrite
from repositories.todo_repository import TodoRepository
from services.user_service import UserService

logger = logging.getLogger(__name__)


class TodoService:
    """Service for todo business logic.

    Owner-scoped operations check, in order: required fields (400), the
    target todo (404), presence of owner and token (401), then the token
    and ownership (403). Nothing is mutated until every check passes.
    """

    def __init__(
        self,
        repository: Optional[TodoRepository] = None,
        users: Optional[UserService] = None,
        lock: Optional[threading.RLock] = None,
    ) -> None:
        self.repository = repository or TodoRepository()
        self._lock = lock or threading.RLock()
        self.users = users or UserService(lock=self._lock)

    def list_todo_ids(self, query: Optional[TodoQuery] = None) -> List[int]:
        """Ids of all todos, or of those matching ``query``, oldest first."""
        if query is not None and query.is_active():
            todos = self.repository.search(query.field, query.search)
        else:
            todos = self.repository.get_all()
        return [todo.id for todo in todos]

    def get_todo(self, todo_id: int) -> Todo:
        todo = self.repository.get_by_id(todo_id)
        if todo is None:
            raise NotFoundError(f"Todo {todo_id} not found")
        return todo.model_copy()

    def create_todo(self, payload: TodoWrite) -> Todo:
        """Create a todo owned by the authenticated user."""
        self._require_text(payload)
        with self._lock:
            self._authenticate(payload)
            todo = self.repository.create(
                owner=payload.owner,
                title=payload.title,
                content=payload.content,
            )
        logger.info("Todo %s created by %s", todo.id, todo.owner)
        return todo.model_copy()

    def update_todo(self, todo_id: int, payload: TodoWrite) -> Todo:
        """Replace title and content; id and owner never change."""
        self._require_text(payload)
        with self._lock:
            existing = self.get_todo(todo_id)
            self._authorize_owner(payload, existing)
            todo = self.repository.update(todo_id, title=payload.title, content=payload.content)
        logger.info("Todo %s updated by %s", todo_id, payload.owner)
        return todo.model_copy()

    def delete_todo(self, todo_id: int, credentials: Credentials) -> None:
        with self._lock:
            existing = self.get_todo(todo_id)
            self._authorize_owner(credentials, existing)
            self.repository.delete(todo_id)
        logger.info("Todo %s deleted by %s", todo_id, credentials.owner)

    @staticmethod
    def _require_text(payload: TodoWrite) -> None:
        if not payload.title or not payload.content:
            raise BadRequestError("title and content are required")

    def _authenticate(self, credentials: Credentials) -> None:
        if not credentials.owner or not credentials.idtoken:
            raise UnauthorizedError("owner and idtoken are required")
        if not self.users.verify(credentials.owner, credentials.idtoken):
            logger.warning("Rejected token for %s", credentials.owner)
            raise ForbiddenError("invalid credentials")

    def _authorize_owner(self, credentials: Credentials, todo: Todo) -> None:
        self._authenticate(credentials)
        if credentials.owner != todo.owner:
            logger.warning("%s may not modify todo %s owned by %s", credentials.owner, todo.id, todo.owner)
            raise ForbiddenError("not the owner")
