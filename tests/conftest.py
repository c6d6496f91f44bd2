"""
Pytest configuration for the LexDesk API tests.

Every test gets a fresh in-memory SQLite database wired into the app
through ``dependency_overrides`` and its own upload directory.
"""

import os

os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest  # noqa: E402
from fastapi.testclient import TestClient  # noqa: E402
from sqlalchemy.orm import sessionmaker  # noqa: E402

from main import app  # noqa: E402
from lexdesk.database import Base, build_engine, get_db  # noqa: E402
from lexdesk.documents import storage  # noqa: E402


@pytest.fixture
def db_session_factory():
    engine = build_engine("sqlite://")
    Base.metadata.create_all(bind=engine)
    factory = sessionmaker(autocommit=False, autoflush=False, bind=engine)
    yield factory
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(db_session_factory):
    session = db_session_factory()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def upload_dir(tmp_path, monkeypatch):
    directory = tmp_path / "uploads"
    monkeypatch.setattr(storage, "UPLOAD_DIR", str(directory))
    return directory


@pytest.fixture
def client(db_session_factory, upload_dir):
    def _override_get_db():
        session = db_session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = _override_get_db
    with TestClient(app) as test_client:
        yield test_client
    app.dependency_overrides.clear()


@pytest.fixture
def make_client(client):
    """Create a client record through the API and return its JSON."""
    counter = {"n": 0}

    def _make(**overrides):
        counter["n"] += 1
        payload = {
            "firstName": "Ada",
            "lastName": f"Client{counter['n']}",
            "email": f"client{counter['n']}@example.com",
        }
        payload.update(overrides)
        response = client.post("/api/clients", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_case(client, make_client):
    def _make(client_id=None, **overrides):
        if client_id is None:
            client_id = make_client()["id"]
        payload = {"clientId": client_id, "title": "Estate of Smith"}
        payload.update(overrides)
        response = client.post("/api/cases", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make


@pytest.fixture
def make_user(client):
    def _make(email="lawyer@example.com", password="s3cret!", **overrides):
        payload = {
            "email": email,
            "password": password,
            "firstName": "Grace",
            "lastName": "Counsel",
        }
        payload.update(overrides)
        response = client.post("/api/auth/register", json=payload)
        assert response.status_code == 201, response.text
        return response.json()

    return _make
