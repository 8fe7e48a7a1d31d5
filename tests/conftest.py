# tests/conftest.py

import itertools
import os
from datetime import datetime, timedelta

# Keep the module-level engine off the filesystem.
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("SECRET_KEY", "test-secret")

import pytest
from fastapi.testclient import TestClient

from taskboard.constants import Category, Priority
from taskboard.database import build_engine, create_tables, get_db, session_factory
from taskboard.main import app
from taskboard.models import Task

# A Monday, midday.
FIXED_NOW = datetime(2026, 10, 19, 12, 0, 0)


@pytest.fixture()
def now() -> datetime:
    return FIXED_NOW


@pytest.fixture()
def make_task():
    """Build unsaved Task rows; each new task is created an hour before the last."""
    counter = itertools.count()

    def _make(**overrides) -> Task:
        n = next(counter)
        fields = dict(
            title=f"Task {n}",
            description=None,
            category=Category.PERSONAL,
            priority=Priority.MEDIUM,
            completed=False,
            due_date=None,
            created_at=FIXED_NOW - timedelta(hours=n),
            updated_at=FIXED_NOW - timedelta(hours=n),
            user_id="owner-1",
        )
        fields.update(overrides)
        return Task(**fields)

    return _make


@pytest.fixture()
def client():
    """TestClient bound to a private in-memory database."""
    engine = build_engine("sqlite://")
    create_tables(engine)
    TestingSession = session_factory(engine)

    def override_get_db():
        db = TestingSession()
        try:
            yield db
        finally:
            db.close()

    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()
        engine.dispose()


def register(client, email="ada@example.com", password="secret123", name="Ada Lovelace") -> dict:
    """Register an account and return Bearer headers for it.

    Cookies set by the response are dropped so every request states its
    identity explicitly.
    """
    response = client.post(
        "/api/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    client.cookies.clear()
    return {"Authorization": f"Bearer {response.json()['access_token']}"}


@pytest.fixture()
def auth_headers(client) -> dict:
    return register(client)


@pytest.fixture()
def register_user(client):
    def _register(**kwargs) -> dict:
        return register(client, **kwargs)

    return _register
