"""Pytest configuration and fixtures for the test suite."""

import os

# must be set before weatherdash.core.config is imported
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("CREATE_TABLES_ON_STARTUP", "false")

from datetime import datetime

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from weatherdash.core.clock import utcnow
from weatherdash.core.deps import get_db
from weatherdash.db.base import Base
from weatherdash.main import app
from weatherdash.models.device import Device
from weatherdash.models.reading import Reading
from weatherdash.services.reading_service import compute_entry_hash

engine = create_engine(
    "sqlite://",
    connect_args={"check_same_thread": False},
    poolclass=StaticPool,
)
TestingSessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)


def override_get_db():
    db = TestingSessionLocal()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def db():
    """Fresh schema for every test."""
    Base.metadata.create_all(bind=engine)
    session = TestingSessionLocal()
    try:
        yield session
    finally:
        session.close()
        Base.metadata.drop_all(bind=engine)


@pytest.fixture
def client(db):
    app.dependency_overrides[get_db] = override_get_db
    try:
        yield TestClient(app)
    finally:
        app.dependency_overrides.clear()


@pytest.fixture
def add_device(db):
    def _add(device_id: str = "esp32-01", location: str = "Garden"):
        device = Device(id=device_id, location=location)
        db.add(device)
        db.commit()
        return device
    return _add


@pytest.fixture
def add_reading(db):
    def _add(device_id: str, param_id: int, value: float, device_timestamp: datetime, received_at: datetime = None):
        reading = Reading(
            device_id=device_id,
            param_id=param_id,
            value=value,
            device_timestamp=device_timestamp,
            received_at=received_at or utcnow(),
            entry_hash=compute_entry_hash(device_id, param_id, value, device_timestamp),
        )
        db.add(reading)
        db.commit()
        return reading
    return _add


@pytest.fixture
def base_time():
    return datetime(2025, 6, 1, 12, 0, 0)

