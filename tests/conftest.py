import os

# Point the process-level engine at SQLite before anything from jobs_api is imported.
os.environ.setdefault("DATABASE_URL", "sqlite+pysqlite:///:memory:")
os.environ.setdefault("JWT_SECRET", "test_jwt_secret")

from contextlib import contextmanager

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from jobs_api.core.config import Settings
from jobs_api.db.database import get_db
from jobs_api.db.models import Base
from jobs_api.main import create_app


@pytest.fixture(scope="session")
def db_engine():
    # In-memory SQLite shared by every connection thanks to StaticPool.
    engine = create_engine(
        "sqlite+pysqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    return engine


@pytest.fixture()
def db_session(db_engine):
    # The in-memory DB outlives a test, so reset the schema to keep tests independent.
    Base.metadata.drop_all(bind=db_engine)
    Base.metadata.create_all(bind=db_engine)

    TestingSessionLocal = sessionmaker(autocommit=False, autoflush=False, bind=db_engine)
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture()
def test_settings():
    return Settings(
        DATABASE_URL="sqlite+pysqlite:///:memory:",
        JWT_SECRET="test_jwt_secret",
        JWT_LIFETIME_MINUTES=60,
        RATE_LIMIT_ENABLED=False,
    )


@pytest.fixture()
def app(db_session, test_settings):
    fastapi_app = create_app(test_settings, run_startup=False)

    def override_get_db():
        yield db_session

    fastapi_app.dependency_overrides[get_db] = override_get_db
    yield fastapi_app
    fastapi_app.dependency_overrides.clear()


@pytest.fixture()
def client(app):
    with TestClient(app) as c:
        yield c


@pytest.fixture()
def register(client):
    """
    Registers an account and returns (token, response body).

    Usage:
        token, body = register("Ann", "ann@x.com")
    """

    def _register(name: str = "Ann", email: str = "ann@x.com", password: str = "secret1"):
        res = client.post(
            "/api/v1/auth/register",
            json={"name": name, "email": email, "password": password},
        )
        assert res.status_code == 201, res.text
        body = res.json()
        return body["token"], body

    return _register


@pytest.fixture()
def auth_headers():
    def _auth_headers(token: str) -> dict:
        return {"Authorization": f"Bearer {token}"}

    return _auth_headers


@pytest.fixture()
def users(register):
    """Two distinct registered accounts, as (token_a, token_b), for isolation tests."""
    token_a, _ = register("Ann", "ann@x.com")
    token_b, _ = register("Bob", "bob@x.com")
    return token_a, token_b


@pytest.fixture()
def client_for(client, auth_headers):
    """
    Context manager yielding the client with a given token already in its headers.

    Usage:
        with client_for(token) as c:
            ...
    """

    @contextmanager
    def _client_for(token: str):
        client.headers.update(auth_headers(token))
        try:
            yield client
        finally:
            client.headers.pop("Authorization", None)

    return _client_for
