"""
Property-based tests for saved request CRUD operations.

Saved requests keep disabled headers and query parameters, their body
type and their full auth configuration across a round trip.
"""

from contextlib import contextmanager

from hypothesis import given, strategies as st, settings
from fastapi.testclient import TestClient
from sqlalchemy import create_engine, event
from sqlalchemy.orm import sessionmaker

from apiary.main import app
from apiary.database import Base, get_db


TEST_DATABASE_URL = "sqlite:///./test_request_crud_properties.db"
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


http_method_strategy = st.sampled_from(["GET", "POST", "PUT", "DELETE", "PATCH", "HEAD", "OPTIONS"])

request_name_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789 _-"),
    min_size=1,
    max_size=50
)

url_strategy = st.text(
    alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ0123456789:/.?=&_-"),
    min_size=10,
    max_size=100
).map(lambda s: "https://api.example.com/" + s)

key_value_strategy = st.fixed_dictionaries({
    "key": st.text(alphabet=st.sampled_from("abcdefghijklmnopqrstuvwxyzABCDEFGHIJKLMNOPQRSTUVWXYZ-"), min_size=1, max_size=20),
    "value": st.text(max_size=30),
    "enabled": st.booleans(),
})

key_values_strategy = st.lists(key_value_strategy, max_size=5)

auth_config_strategy = st.one_of(
    st.just({"type": "none"}),
    st.builds(lambda t: {"type": "bearer", "token": t}, st.text(max_size=20)),
    st.builds(lambda u, p: {"type": "basic", "username": u, "password": p}, st.text(max_size=10), st.text(max_size=10)),
    st.builds(
        lambda k, v, loc: {"type": "api_key", "key": k, "value": v, "location": loc},
        st.text(max_size=10), st.text(max_size=10), st.sampled_from(["header", "query"]),
    ),
)

body_type_strategy = st.sampled_from(["none", "json", "text", "form_url_encoded", "multipart", "graphql"])


class TestRequestRoundTrip:
    """Creating a request and reading it back returns the same data."""

    @given(
        name=request_name_strategy,
        method=http_method_strategy,
        url=url_strategy,
        headers=key_values_strategy,
        query_params=key_values_strategy,
        body_type=body_type_strategy,
        auth_config=auth_config_strategy,
    )
    @settings(max_examples=50, deadline=None)
    def test_create_and_get_returns_same_data(
        self, name, method, url, headers, query_params, body_type, auth_config
    ):
        with get_test_client() as client:
            create_response = client.post("/api/requests", json={
                "name": name,
                "method": method,
                "url": url,
                "headers": headers,
                "query_params": query_params,
                "body_type": body_type,
                "body_content": "{}",
                "auth_type": auth_config["type"],
                "auth_config": auth_config,
            })
            assert create_response.status_code == 201
            created = create_response.json()

            get_response = client.get(f"/api/requests/{created['id']}")
            assert get_response.status_code == 200
            retrieved = get_response.json()

            assert retrieved["name"] == name
            assert retrieved["method"] == method
            assert retrieved["url"] == url
            assert retrieved["headers"] == headers
            assert retrieved["query_params"] == query_params
            assert retrieved["body_type"] == body_type
            assert retrieved["body_content"] == "{}"
            assert retrieved["auth_type"] == auth_config["type"]
            for field, value in auth_config.items():
                assert retrieved["auth_config"][field] == value

    def test_defaults_for_minimal_request(self):
        with get_test_client() as client:
            created = client.post("/api/requests", json={"name": "Min", "url": "https://x.example"}).json()
            assert created["method"] == "GET"
            assert created["headers"] == []
            assert created["body_type"] == "none"
            assert created["body_content"] is None
            assert created["auth_config"] == {"type": "none"}


class TestRequestUpdatePersistence:

    @given(
        original_name=request_name_strategy,
        updated_name=request_name_strategy,
        original_method=http_method_strategy,
        updated_method=http_method_strategy
    )
    @settings(max_examples=50, deadline=None)
    def test_update_persists_changes(
        self, original_name: str, updated_name: str,
        original_method: str, updated_method: str
    ):
        with get_test_client() as client:
            create_response = client.post("/api/requests", json={
                "name": original_name,
                "method": original_method,
                "url": "https://api.example.com/test"
            })
            assert create_response.status_code == 201
            request_id = create_response.json()["id"]

            update_response = client.put(f"/api/requests/{request_id}", json={
                "name": updated_name,
                "method": updated_method.lower()
            })
            assert update_response.status_code == 200

            retrieved = client.get(f"/api/requests/{request_id}").json()
            assert retrieved["name"] == updated_name
            assert retrieved["method"] == updated_method
            assert retrieved["url"] == "https://api.example.com/test"

    def test_update_auth_config(self):
        with get_test_client() as client:
            request_id = client.post("/api/requests", json={"name": "A", "url": "https://x.example"}).json()["id"]
            response = client.put(f"/api/requests/{request_id}", json={
                "auth_type": "oauth2",
                "auth_config": {"type": "oauth2", "access_token": "tok", "grant_type": "client_credentials"},
            })
            assert response.status_code == 200
            auth = response.json()["auth_config"]
            assert auth["type"] == "oauth2"
            assert auth["access_token"] == "tok"
            assert auth["grant_type"] == "client_credentials"

    def test_update_missing_request_is_404(self):
        with get_test_client() as client:
            response = client.put("/api/requests/424242", json={"name": "x"})
            assert response.status_code == 404


class TestRequestDeleteAndList:

    @given(name=request_name_strategy, method=http_method_strategy)
    @settings(max_examples=30, deadline=None)
    def test_deleted_request_returns_404(self, name: str, method: str):
        with get_test_client() as client:
            request_id = client.post("/api/requests", json={
                "name": name,
                "method": method,
                "url": "https://api.example.com/test"
            }).json()["id"]

            assert client.delete(f"/api/requests/{request_id}").status_code == 204
            assert client.get(f"/api/requests/{request_id}").status_code == 404

    @given(request_count=st.integers(min_value=1, max_value=8))
    @settings(max_examples=20, deadline=None)
    def test_list_contains_all_created_requests(self, request_count: int):
        with get_test_client() as client:
            created_ids = []
            for i in range(request_count):
                response = client.post("/api/requests", json={
                    "name": f"Request {i}",
                    "url": f"https://api.example.com/endpoint{i}"
                })
                assert response.status_code == 201
                created_ids.append(response.json()["id"])

            listed = client.get("/api/requests").json()
            assert [r["id"] for r in listed] == created_ids
