from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
import logging
import os

logger = logging.getLogger(__name__)

DEFAULT_PORT = 3000
DEFAULT_MAX_BODY_BYTES = 10 * 1024 * 1024


@dataclass(frozen=True)
class Settings:
    host: str
    port: int
    public_url: str
    max_body_bytes: int
    seed_admin: bool
    log_level: str

    def todo_uri(self, todo_id: int) -> str:
        return f"{self.public_url}/todo/{todo_id}"


def _int_env(name: str, default: int) -> int:
    raw_value = os.getenv(name)
    if raw_value is None or not raw_value.strip():
        return default
    try:
        return int(raw_value)
    except ValueError:
        logger.warning("Invalid %s value '%s'; defaulting to %s", name, raw_value, default)
        return default


def _bool_env(name: str, default: bool) -> bool:
    raw_value = os.getenv(name)
    if raw_value is None:
        return default
    return raw_value.strip().lower() in {"1", "true", "yes", "on"}


def load_settings() -> Settings:
    port = _int_env("TODO_API_PORT", DEFAULT_PORT)
    public_url = os.getenv("TODO_API_PUBLIC_URL") or f"http://localhost:{port}"
    return Settings(
        host=os.getenv("TODO_API_HOST", "0.0.0.0"),
        port=port,
        public_url=public_url.rstrip("/"),
        max_body_bytes=_int_env("TODO_API_MAX_BODY_BYTES", DEFAULT_MAX_BODY_BYTES),
        seed_admin=_bool_env("TODO_API_SEED_ADMIN", True),
        log_level=os.getenv("TODO_API_LOG_LEVEL", "INFO").upper(),
    )


@lru_cache
def get_settings() -> Settings:
    return load_settings()
