"""
Tests for the execute endpoints and history recording.

The executor is routed through httpx.MockTransport so no network is used.
"""

import json
from contextlib import contextmanager

import httpx
import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from apiary.main import app
from apiary.database import Base, get_db
from apiary.routers import execute as execute_router
from apiary.services import http_executor


TEST_DATABASE_URL = "sqlite:///./test_execute_api.db"
test_engine = create_engine(
    TEST_DATABASE_URL,
    connect_args={"check_same_thread": False}
)


@event.listens_for(test_engine, "connect")
def set_sqlite_pragma(dbapi_connection, connection_record):
    """Enable foreign key constraints for SQLite connections."""
    cursor = dbapi_connection.cursor()
    cursor.execute("PRAGMA foreign_keys=ON")
    cursor.close()


TestSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=test_engine)


def override_get_db():
    """Override database dependency for testing."""
    db = TestSessionLocal()
    try:
        yield db
    finally:
        db.close()


@contextmanager
def get_test_client():
    """Context manager to create a test client with fresh database."""
    Base.metadata.create_all(bind=test_engine)
    app.dependency_overrides[get_db] = override_get_db

    try:
        with TestClient(app) as test_client:
            yield test_client
    finally:
        Base.metadata.drop_all(bind=test_engine)
        app.dependency_overrides.clear()


def server(request: httpx.Request) -> httpx.Response:
    if request.url.host == "down.example.com":
        raise httpx.ConnectError("Connection refused", request=request)
    payload = {
        "path": request.url.path,
        "query": request.url.query.decode(),
        "authorization": request.headers.get("Authorization"),
    }
    return httpx.Response(200, json=payload, headers={"X-Server": "mock"})


@pytest.fixture
def mock_network(monkeypatch):
    """Route every execution through the mock server."""
    async def execute_with_mock(request):
        return await http_executor.execute(request, transport=httpx.MockTransport(server))

    monkeypatch.setattr(execute_router, "execute", execute_with_mock)


class TestExecuteAdhoc:

    def test_success_returns_result_and_records_history(self, mock_network):
        with get_test_client() as client:
            response = client.post("/api/execute", json={
                "method": "GET",
                "url": "https://api.example.com/users",
                "headers": [
                    {"key": "Accept", "value": "application/json", "enabled": True},
                    {"key": "X-Off", "value": "1", "enabled": False},
                ],
                "query_params": [{"key": "page", "value": "2", "enabled": True}],
                "auth_type": "bearer",
                "auth_config": {"type": "bearer", "token": "abc"},
            })
            assert response.status_code == 200
            result = response.json()
            assert result["status"] == 200
            assert result["status_text"] == "OK"
            assert result["error"] is None
            body = json.loads(result["body"])
            assert body == {"path": "/users", "query": "page=2", "authorization": "Bearer abc"}
            assert result["size_bytes"] == len(result["body"].encode())

            history = client.get("/api/history").json()
            assert history["total"] == 1
            entry = history["items"][0]
            assert entry["request_id"] is None
            assert entry["method"] == "GET"
            assert entry["url"] == "https://api.example.com/users"
            assert entry["response_status"] == 200
            assert entry["response_body"] == result["body"]
            assert entry["error"] is None
            assert entry["duration_ms"] == int(result["timing"]["total_ms"])
            snapshot = json.loads(entry["request_snapshot"])
            assert snapshot["query_params"] == [{"key": "page", "value": "2", "enabled": True}]
            assert snapshot["auth_config"] == {"type": "bearer", "token": "abc"}

    def test_connection_failure_is_data_and_recorded(self, mock_network):
        with get_test_client() as client:
            response = client.post("/api/execute", json={"method": "GET", "url": "https://down.example.com/"})
            assert response.status_code == 200
            result = response.json()
            assert result["status"] == 0
            assert result["error"] == "Connection failed: Connection refused"

            entry = client.get("/api/history").json()["items"][0]
            assert entry["response_status"] is None
            assert entry["error"] == "Connection failed: Connection refused"

    def test_unknown_method_is_validation_error(self, mock_network):
        with get_test_client() as client:
            response = client.post("/api/execute", json={"method": "FETCH", "url": "https://api.example.com"})
            assert response.status_code == 422
            assert response.json()["error_code"] == "VALIDATION_ERROR"

    def test_unknown_auth_type_tag_is_validation_error(self, mock_network):
        with get_test_client() as client:
            response = client.post("/api/execute", json={
                "url": "https://api.example.com",
                "auth_config": {"type": "kerberos"},
            })
            assert response.status_code == 422


class TestExecuteSaved:

    def test_saved_request_is_executed_with_its_auth(self, mock_network):
        with get_test_client() as client:
            created = client.post("/api/requests", json={
                "name": "List users",
                "method": "get",
                "url": "https://api.example.com/users",
                "query_params": [
                    {"key": "page", "value": "1", "enabled": True},
                    {"key": "skip", "value": "x", "enabled": False},
                ],
                "auth_type": "api_key",
                "auth_config": {"type": "api_key", "key": "key", "value": "s3cret", "location": "query"},
            }).json()

            response = client.post(f"/api/execute/{created['id']}")
            assert response.status_code == 200
            body = json.loads(response.json()["body"])
            assert body["query"] == "page=1&key=s3cret"

            history = client.get("/api/history", params={"request_id": created["id"]}).json()
            assert history["total"] == 1
            assert history["items"][0]["request_id"] == created["id"]

    def test_saved_request_accepts_settings(self, mock_network):
        with get_test_client() as client:
            created = client.post("/api/requests", json={
                "name": "Ping", "url": "https://api.example.com/ping",
            }).json()
            response = client.post(f"/api/execute/{created['id']}", json={
                "timeout_ms": 5000, "follow_redirects": False, "max_redirects": 0,
            })
            assert response.status_code == 200
            snapshot = json.loads(client.get("/api/history").json()["items"][0]["request_snapshot"])
            assert snapshot["settings"] == {"timeout_ms": 5000, "follow_redirects": False, "max_redirects": 0}

    def test_missing_saved_request_is_404(self, mock_network):
        with get_test_client() as client:
            response = client.post("/api/execute/99999")
            assert response.status_code == 404
            data = response.json()
            assert data["error_code"] == "RESOURCE_NOT_FOUND"
            assert "99999" in data["detail"]

    def test_deleting_request_keeps_history(self, mock_network):
        with get_test_client() as client:
            created = client.post("/api/requests", json={"name": "A", "url": "https://api.example.com/a"}).json()
            client.post(f"/api/execute/{created['id']}")
            assert client.delete(f"/api/requests/{created['id']}").status_code == 204

            entry = client.get("/api/history").json()["items"][0]
            assert entry["request_id"] is None
            assert entry["url"] == "https://api.example.com/a"


class TestExport:

    def test_export_curl(self):
        with get_test_client() as client:
            response = client.post("/api/export", params={"format": "curl"}, json={
                "method": "DELETE", "url": "https://api.example.com/users/1",
            })
            assert response.status_code == 200
            assert response.json() == {
                "format": "curl",
                "snippet": "curl \\\n  -X DELETE \\\n  'https://api.example.com/users/1'",
            }

    def test_export_unknown_format_is_422(self):
        with get_test_client() as client:
            response = client.post("/api/export", params={"format": "ruby"}, json={"url": "https://x.example"})
            assert response.status_code == 422


def test_history_write_failure_does_not_change_result(mock_network, monkeypatch):
    from sqlalchemy.exc import OperationalError

    def failing_commit(self):
        raise OperationalError("INSERT INTO history", {}, Exception("database is locked"))

    with get_test_client() as client:
        monkeypatch.setattr("sqlalchemy.orm.Session.commit", failing_commit)
        response = client.post("/api/execute", json={"url": "https://api.example.com/users"})
        monkeypatch.undo()

        assert response.status_code == 200
        assert response.json()["status"] == 200
        assert response.json()["error"] is None
        assert client.get("/api/history").json()["total"] == 0
