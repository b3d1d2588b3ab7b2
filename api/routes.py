"""API routes for todo management."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, Response, status

from api.dependencies import (
    get_app_settings,
    get_credentials,
    get_todo_id,
    get_todo_service,
    get_todo_write,
)
from core.settings import Settings
from models.todo import Credentials, Todo, TodoQuery, TodoWrite
from services.todo_service import TodoService

router = APIRouter(tags=["todo"])


@router.get("/todo", response_model=List[str])
def list_todos(
    field: Optional[str] = Query(None, description="owner, title or content"),
    search: Optional[str] = Query(None, description="Substring to look for"),
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> List[str]:
    """URIs of all todos, optionally filtered by a field substring."""
    todo_ids = service.list_todo_ids(TodoQuery(field=field, search=search))
    return [settings.todo_uri(todo_id) for todo_id in todo_ids]


@router.post("/todo", response_model=str, status_code=status.HTTP_201_CREATED)
def create_todo(
    response: Response,
    payload: TodoWrite = Depends(get_todo_write),
    service: TodoService = Depends(get_todo_service),
    settings: Settings = Depends(get_app_settings),
) -> str:
    """Create a new todo item and return its URI."""
    todo = service.create_todo(payload)
    uri = settings.todo_uri(todo.id)
    response.headers["Location"] = uri
    return uri


@router.get("/todo/{todo_id}", response_model=Todo)
def get_todo(
    todo_id: int = Depends(get_todo_id),
    service: TodoService = Depends(get_todo_service),
) -> Todo:
    """Get a specific todo item by ID."""
    return service.get_todo(todo_id)


@router.put("/todo/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def update_todo(
    todo_id: int = Depends(get_todo_id),
    payload: TodoWrite = Depends(get_todo_write),
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Replace the title and content of a todo the caller owns."""
    service.update_todo(todo_id, payload)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.delete("/todo/{todo_id}", status_code=status.HTTP_204_NO_CONTENT)
def delete_todo(
    todo_id: int = Depends(get_todo_id),
    credentials: Credentials = Depends(get_credentials),
    service: TodoService = Depends(get_todo_service),
) -> Response:
    """Delete a todo the caller owns."""
    service.delete_todo(todo_id, credentials)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
