"""Shared fixtures: in-memory database, API client and item factory."""

from __future__ import annotations

import os
from datetime import datetime, timedelta
from itertools import count

# Must be set before the app (and its engine) is imported
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["ENVIRONMENT"] = "test"
os.environ["SQL_ECHO"] = "false"

import pytest
from fastapi.testclient import TestClient

from wardrobe_app.chat import RoomRegistry
from wardrobe_app.database import Base, SessionLocal, engine
from wardrobe_app.main import app
from wardrobe_app.models import WardrobeItem


@pytest.fixture(autouse=True)
def fresh_schema():
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
def client():
    app.state.chat_rooms = RoomRegistry()
    with TestClient(app) as test_client:
        yield test_client


@pytest.fixture
def make_item():
    """Build detached WardrobeItem rows for the pure recommendation functions.

    Each call gets the next id and a slightly older timestamp, so a list
    built in call order is newest-first like the store returns it. Pass
    created_at explicitly when recency matters.
    """
    ids = count(1)
    base = datetime(2025, 1, 1, 12, 0, 0)

    def _make(name: str, cloth_type: str, **fields) -> WardrobeItem:
        seq = next(ids)
        fields.setdefault("id", seq)
        fields.setdefault("created_at", base - timedelta(minutes=seq))
        return WardrobeItem(name=name, cloth_type=cloth_type, **fields)

    return _make
