"""Dependency providers for the FastAPI app."""

from __future__ import annotations

import json
import re
from typing import Any, Dict, Type, TypeVar

from fastapi import Depends, Request
from pydantic import BaseModel, ValidationError

from core.errors import BadRequestError, NotFoundError, PayloadTooLargeError
from core.settings import Settings
from core.state import AppState
from models.todo import Credentials, TodoWrite
from models.user import AccountCreate, LoginRequest
from services.todo_service import TodoService
from services.user_service import UserService

ModelT = TypeVar("ModelT", bound=BaseModel)

TODO_ID_PATTERN = re.compile(r"[+-]?[0-9]+")


def get_app_state(request: Request) -> AppState:
    """Provide the stores owned by the running app."""
    return request.app.state.store


def get_app_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_user_service(state: AppState = Depends(get_app_state)) -> UserService:
    """Provide the account service."""
    return UserService(state.users, lock=state.lock)


def get_todo_service(
    state: AppState = Depends(get_app_state),
    users: UserService = Depends(get_user_service),
) -> TodoService:
    """Provide the todo service."""
    return TodoService(state.todos, users=users, lock=state.lock)


def get_todo_id(todo_id: str) -> int:
    """Parse the path id; anything that is not a plain decimal integer names no todo."""
    if not TODO_ID_PATTERN.fullmatch(todo_id):
        raise NotFoundError(f"Todo {todo_id!r} not found")
    return int(todo_id)


async def get_json_body(
    request: Request,
    settings: Settings = Depends(get_app_settings),
) -> Dict[str, Any]:
    """Decode the request body into a JSON object.

    Only ``application/json`` bodies are decoded; other payloads are read
    (up to the size limit) and ignored. Non-object JSON counts as empty.
    """
    declared_length = request.headers.get("content-length")
    if declared_length and declared_length.isdigit() and int(declared_length) > settings.max_body_bytes:
        raise PayloadTooLargeError("request body too large")
    raw = await request.body()
    if len(raw) > settings.max_body_bytes:
        raise PayloadTooLargeError("request body too large")

    media_type = request.headers.get("content-type", "").split(";")[0].strip().lower()
    if media_type != "application/json" or not raw.strip():
        return {}
    try:
        payload = json.loads(raw)
    except (UnicodeDecodeError, ValueError) as exc:
        raise BadRequestError("malformed JSON body") from exc
    return payload if isinstance(payload, dict) else {}


def _parse(model: Type[ModelT], payload: Dict[str, Any]) -> ModelT:
    try:
        return model.model_validate(payload)
    except ValidationError as exc:
        raise BadRequestError(str(exc)) from exc


def get_todo_write(payload: Dict[str, Any] = Depends(get_json_body)) -> TodoWrite:
    return _parse(TodoWrite, payload)


def get_credentials(payload: Dict[str, Any] = Depends(get_json_body)) -> Credentials:
    return _parse(Credentials, payload)


def get_account_create(payload: Dict[str, Any] = Depends(get_json_body)) -> AccountCreate:
    return _parse(AccountCreate, payload)


def get_login_request(payload: Dict[str, Any] = Depends(get_json_body)) -> LoginRequest:
    return _parse(LoginRequest, payload)
