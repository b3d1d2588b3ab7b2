"""Test configuration for repo-root tests."""

import sys
from pathlib import Path

import pytest
from fastapi.testclient import TestClient

ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

from core.settings import Settings  # noqa: E402
from core.state import AppState  # noqa: E402
from todo_main import create_app  # noqa: E402


@pytest.fixture
def settings() -> Settings:
    """Settings matching the default deployment."""
    return Settings(
        host="127.0.0.1",
        port=3000,
        public_url="http://localhost:3000",
        max_body_bytes=10 * 1024 * 1024,
        seed_admin=True,
        log_level="INFO",
    )


@pytest.fixture
def state() -> AppState:
    """Fresh in-memory stores for each test."""
    return AppState.create()


@pytest.fixture
def client(settings: Settings, state: AppState) -> TestClient:
    """Provide a FastAPI test client bound to isolated state."""
    return TestClient(create_app(settings, state))
