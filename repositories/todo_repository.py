"""Todo repository - data access layer."""

from __future__ import annotations

import threading
from typing import List, Optional

from models.todo import Todo


class TodoRepository:
    """Repository for todo data access with in-memory storage.

    Records are kept in insertion order. Ids come from a counter that only
    ever increases, so deleted ids are never handed out again.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()
        self._todos: List[Todo] = []
        self._next_id = 0

    def get_all(self) -> List[Todo]:
        """Get all todos, oldest first."""
        with self._lock:
            return list(self._todos)

    def get_by_id(self, todo_id: int) -> Optional[Todo]:
        """Get todo by ID."""
        with self._lock:
            for todo in self._todos:
                if todo.id == todo_id:
                    return todo
        return None

    def create(self, *, owner: str, title: str, content: str) -> Todo:
        """Create a new todo with the next id."""
        with self._lock:
            todo = Todo(owner=owner, title=title, content=content, id=self._next_id)
            self._todos.append(todo)
            self._next_id += 1
            return todo

    def update(self, todo_id: int, *, title: str, content: str) -> Optional[Todo]:
        """Replace title and content of an existing todo."""
        with self._lock:
            for todo in self._todos:
                if todo.id == todo_id:
                    todo.title = title
                    todo.content = content
                    return todo
        return None

    def delete(self, todo_id: int) -> bool:
        """Delete a todo."""
        with self._lock:
            for index, todo in enumerate(self._todos):
                if todo.id == todo_id:
                    del self._todos[index]
                    return True
        return False

    def search(self, field: str, query: str) -> List[Todo]:
        """Todos whose ``field`` contains ``query`` (case-sensitive)."""
        with self._lock:
            return [todo for todo in self._todos if query in getattr(todo, field)]

    def clear(self) -> None:
        """Clear all stored todos and reset the id counter (testing helper)."""
        with self._lock:
            self._todos.clear()
            self._next_id = 0
