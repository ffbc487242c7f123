"""
Pytest configuration and fixtures.

Every test gets a fresh in-memory SQLite database. The HTTP client and the
service-level ``db`` session share one connection (StaticPool), so don't keep
a ``db`` transaction open across client calls.
"""
from datetime import date

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from werkzeug.security import generate_password_hash

from teamdesk import models  # noqa: F401
from teamdesk.auth.dependencies import Identity
from teamdesk.database import Base, configure_sqlite, get_db
from teamdesk.main import app
from teamdesk.users.models import User

PASSWORD = "correct-horse-battery"


@pytest.fixture
def engine():
    eng = configure_sqlite(
        create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    )
    Base.metadata.create_all(bind=eng)
    yield eng
    Base.metadata.drop_all(bind=eng)
    eng.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(bind=engine, autocommit=False, autoflush=False)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def client(session_factory):
    def override_get_db():
        session = session_factory()
        try:
            yield session
        finally:
            session.close()

    app.dependency_overrides[get_db] = override_get_db
    yield TestClient(app)
    app.dependency_overrides.clear()


def register_and_login(client, email, name="Owner", password=PASSWORD):
    """Register a user and return bearer headers for them."""
    resp = client.post("/api/auth/register", json={"name": name, "email": email, "password": password})
    assert resp.status_code == 201, resp.text
    resp = client.post("/api/auth/login", json={"email": email, "password": password})
    assert resp.status_code == 200, resp.text
    # keep requests explicit: only the bearer header identifies the caller
    client.cookies.clear()
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def alice(client):
    return register_and_login(client, "alice@example.com", "Alice")


@pytest.fixture
def bob(client):
    return register_and_login(client, "bob@example.com", "Bob")


# ---------- service-level helpers ----------

def make_identity(db, email, name="Owner"):
    user = User(name=name, email=email, password_hash=generate_password_hash(PASSWORD))
    db.add(user)
    db.commit()
    return Identity(user_id=user.id, email=user.email, name=user.name)


@pytest.fixture
def owner(db):
    return make_identity(db, "owner@example.com")


@pytest.fixture
def other_owner(db):
    return make_identity(db, "other@example.com", "Other")


# ---------- HTTP helpers ----------

def create_employee(client, headers, name="Dana", basic_salary=5000, joining_date=None):
    resp = client.post(
        "/api/employees",
        json={
            "name": name,
            "joiningDate": (joining_date or date(2024, 1, 15)).isoformat(),
            "basicSalary": basic_salary,
        },
        headers=headers,
    )
    assert resp.status_code == 201, resp.text
    return resp.json()["employee"]


def create_project(client, headers, name="Website", description=None):
    body = {"name": name}
    if description is not None:
        body["description"] = description
    resp = client.post("/api/projects", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["project"]


def create_task(client, headers, project_id, **fields):
    body = {"title": fields.pop("title", "Write copy"), "projectId": project_id}
    body.update(fields)
    resp = client.post("/api/tasks", json=body, headers=headers)
    assert resp.status_code == 201, resp.text
    return resp.json()["task"]
