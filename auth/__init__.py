"""Credential hashing and token helpers."""

from .security import generate_salt, generate_token, hash_password, verify_password

__all__ = [
    "generate_salt",
    "generate_token",
    "hash_password",
    "verify_password",
]
