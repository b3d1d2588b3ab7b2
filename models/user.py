"""User account models."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel


class User(BaseModel):
    name: str
    idtoken: str
    password_hash: str
    salt: str


class AccountCreate(BaseModel):
    """Body of POST /users."""

    username: Optional[str] = None
    password: Optional[str] = None


class LoginRequest(BaseModel):
    """Body of POST /users/{username}."""

    password: Optional[str] = None
