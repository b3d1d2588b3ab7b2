"""Configuration and app factory tests."""

from fastapi.testclient import TestClient

from core.settings import DEFAULT_MAX_BODY_BYTES, Settings, load_settings
from todo_main import create_app


def test_defaults(monkeypatch) -> None:
    for name in (
        "TODO_API_HOST",
        "TODO_API_PORT",
        "TODO_API_PUBLIC_URL",
        "TODO_API_MAX_BODY_BYTES",
        "TODO_API_SEED_ADMIN",
        "TODO_API_LOG_LEVEL",
    ):
        monkeypatch.delenv(name, raising=False)

    settings = load_settings()

    assert settings.port == 3000
    assert settings.public_url == "http://localhost:3000"
    assert settings.max_body_bytes == DEFAULT_MAX_BODY_BYTES == 10 * 1024 * 1024
    assert settings.seed_admin is True
    assert settings.todo_uri(4) == "http://localhost:3000/todo/4"


def test_environment_overrides(monkeypatch) -> None:
    monkeypatch.setenv("TODO_API_PORT", "8081")
    monkeypatch.delenv("TODO_API_PUBLIC_URL", raising=False)
    monkeypatch.setenv("TODO_API_SEED_ADMIN", "false")

    settings = load_settings()

    assert settings.port == 8081
    assert settings.public_url == "http://localhost:8081"
    assert settings.seed_admin is False


def test_invalid_port_falls_back(monkeypatch) -> None:
    monkeypatch.setenv("TODO_API_PORT", "not-a-port")
    monkeypatch.setenv("TODO_API_PUBLIC_URL", "http://todo.example/")

    settings = load_settings()

    assert settings.port == 3000
    assert settings.public_url == "http://todo.example"


def test_apps_do_not_share_state(settings: Settings) -> None:
    first = TestClient(create_app(settings))
    second = TestClient(create_app(settings))

    first.post("/todo", json={"title": "a", "content": "b", "owner": "admin", "idtoken": "faketoken"})

    assert len(first.get("/todo").json()) == 1
    assert second.get("/todo").json() == []


def test_admin_seed_can_be_disabled(settings: Settings) -> None:
    unseeded = Settings(**{**settings.__dict__, "seed_admin": False})
    client = TestClient(create_app(unseeded))

    response = client.post("/todo", json={"title": "a", "content": "b", "owner": "admin", "idtoken": "faketoken"})

    assert response.status_code == 403
