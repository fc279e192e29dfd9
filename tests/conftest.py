"""
Shared pytest fixtures: an app per test on a fresh in-memory SQLite database.
"""
from typing import Generator

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.orm import Session

from inventory_app.config import Settings
from inventory_app.database import Database
from inventory_app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(DATABASE_URL="sqlite://", LOG_LEVEL="WARNING")


@pytest.fixture
def database(settings) -> Generator[Database, None, None]:
    db = Database(settings.database_url)
    db.create_all()
    try:
        yield db
    finally:
        db.dispose()


@pytest.fixture
def db_session(database) -> Generator[Session, None, None]:
    session = database.session()
    try:
        yield session
    finally:
        session.close()


@pytest.fixture
def client(settings, database) -> Generator[TestClient, None, None]:
    app = create_app(settings, database=database)
    # Entering the client runs the lifespan, which attaches the database
    with TestClient(app) as c:
        yield c


@pytest.fixture
def make_category(client):
    def _make(name: str) -> dict:
        resp = client.post("/categories", json={"name": name})
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make


@pytest.fixture
def make_product(client):
    def _make(**fields) -> dict:
        payload = {"name": "Widget", "price": 9.99, "quantity": 3}
        payload.update(fields)
        resp = client.post("/products", json=payload)
        assert resp.status_code == 201, resp.text
        return resp.json()

    return _make
