"""
Pytest configuration for the family schedule backend.

The database is an in-memory SQLite shared through one connection, and bcrypt
runs at its minimum cost so the suite stays fast. Both must be set before the
application modules are imported.
"""
import os

os.environ["DATABASE_URL"] = "sqlite://"
os.environ["BCRYPT_ROUNDS"] = "4"
os.environ.setdefault("JWT_SECRET_KEY", "test-secret-key")

import httpx
import pytest
from httpx import ASGITransport

from core.database import SessionLocal, engine
from models.base import Base
from utils.owner_manager import OwnerManager
from utils.session_authenticator import SessionAuthenticator


@pytest.fixture
def anyio_backend():
    # Force asyncio; the trio backend is not installed.
    return "asyncio"


@pytest.fixture(autouse=True)
def fresh_tables():
    Base.metadata.drop_all(bind=engine)
    Base.metadata.create_all(bind=engine)
    yield


@pytest.fixture
def db():
    session = SessionLocal()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def owners(db):
    return OwnerManager(db, bcrypt_rounds=4)


@pytest.fixture
def authenticator():
    return SessionAuthenticator(secret_key="unit-test-secret", expire_minutes=60)


@pytest.fixture
def registered(owners):
    """Register alice and bob; return their Owner records."""
    owners.register("alice", "pw1")
    owners.register("bob", "pw2")
    return {
        "alice": owners.verify_login("alice", "pw1").value,
        "bob": owners.verify_login("bob", "pw2").value,
    }


@pytest.fixture
def app():
    import app as app_module

    yield app_module.app
    app_module.app.dependency_overrides.clear()


@pytest.fixture
async def client(app):
    async with httpx.AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as c:
        yield c
