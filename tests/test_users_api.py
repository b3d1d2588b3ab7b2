"""API tests for account endpoints."""

from fastapi.testclient import TestClient

from core.state import AppState


def test_create_account(client: TestClient, state: AppState) -> None:
    response = client.post("/users", json={"username": "alice", "password": "pw1"})

    assert response.status_code == 200
    assert response.headers["content-type"].startswith("application/json")
    token = response.json()
    assert isinstance(token, str)
    assert len(token) == 128
    assert state.users.get_by_name("alice").idtoken == token


def test_create_account_requires_fields(client: TestClient) -> None:
    assert client.post("/users", json={"username": "alice"}).status_code == 400
    assert client.post("/users", json={"password": "pw"}).status_code == 400
    assert client.post("/users", json={"username": "", "password": "pw"}).status_code == 400
    assert client.post("/users").status_code == 400


def test_duplicate_username_is_rejected(client: TestClient, state: AppState) -> None:
    token = client.post("/users", json={"username": "alice", "password": "pw1"}).json()
    stored = state.users.get_by_name("alice").model_copy()

    response = client.post("/users", json={"username": "alice", "password": "other"})

    assert response.status_code == 422
    assert response.content == b""
    assert state.users.get_by_name("alice") == stored
    assert state.users.get_by_name("alice").idtoken == token
    assert client.post("/users", json={"username": "admin", "password": "x"}).status_code == 422


def test_login_returns_new_token(client: TestClient) -> None:
    first = client.post("/users", json={"username": "alice", "password": "pw1"}).json()

    response = client.post("/users/alice", json={"password": "pw1"})

    assert response.status_code == 200
    second = response.json()
    assert second != first
    assert len(second) == 128
    stale = client.post("/todo", json={"title": "a", "content": "b", "owner": "alice", "idtoken": first})
    assert stale.status_code == 403
    fresh = client.post("/todo", json={"title": "a", "content": "b", "owner": "alice", "idtoken": second})
    assert fresh.status_code == 201


def test_login_failures(client: TestClient) -> None:
    client.post("/users", json={"username": "alice", "password": "pw1"})

    assert client.post("/users/alice", json={}).status_code == 400
    assert client.post("/users/alice", json={"password": "nope"}).status_code == 403
    assert client.post("/users/nobody", json={"password": "pw1"}).status_code == 403
    assert client.post("/users/admin", json={"password": "unhashedpassword"}).status_code == 403


def test_create_account_with_trailing_slash(client: TestClient, state: AppState) -> None:
    response = client.post("/users/", json={"username": "carol", "password": "pw"}, follow_redirects=False)

    assert response.status_code == 200
    assert state.users.get_by_name("carol").idtoken == response.json()
