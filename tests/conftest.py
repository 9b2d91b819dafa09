# tests/conftest.py

import os
import uuid
from datetime import datetime

# settings are read at import time
os.environ["DATABASE_URL"] = "sqlite://"
os.environ["RUN_MIGRATIONS"] = "false"

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool
from starlette.testclient import TestClient

from crowdvibe.database import get_db
from crowdvibe.main import app
from crowdvibe.models.base import Base
from crowdvibe.models.event import Event
from crowdvibe.models.event_attendance import EventAttendance
from crowdvibe.models.profile import Profile
from crowdvibe.models.rating import Rating  # noqa: F401 (table metadata)


# --- In-memory SQLite, one connection shared by the test and the app ---
@pytest.fixture(scope="function")
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture(scope="function")
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture(scope="function")
def db(session_factory):
    # objects stay readable after commit + expunge_all in round-trip tests
    session = session_factory(expire_on_commit=False)
    yield session
    session.close()


@pytest.fixture(scope="function")
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


@pytest.fixture
def auth():
    """Headers of a request made by the given profile."""

    def _headers(profile) -> dict:
        return {"X-Profile-Id": str(profile.id)}

    return _headers


# --- Factories (rows are committed so every session sees them) ---
@pytest.fixture
def make_profile(db):
    def _make(**overrides):
        handle = uuid.uuid4().hex[:12]
        values = dict(user_name=f"user{handle}", email=f"{handle}@crowdvibe.test")
        values.update(overrides)
        profile = Profile(**values)
        db.add(profile)
        db.commit()
        return profile

    return _make


@pytest.fixture
def make_event(db):
    def _make(profile, **overrides):
        values = dict(
            profile_id=profile.id,
            detail="Tacos, music and a lot of people",
            lat=35.0844,
            lng=-106.6504,
            name="Taco Tuesday",
            price=5.0,
            start_date_time=datetime(2017, 11, 10, 18, 0, 0),
            end_date_time=datetime(2017, 11, 10, 22, 0, 0),
        )
        values.update(overrides)
        event = Event(**values)
        db.add(event)
        db.commit()
        return event

    return _make


@pytest.fixture
def make_attendance(db):
    def _make(event, profile, check_in=False, number_attending=1):
        attendance = EventAttendance(
            event_id=event.id,
            profile_id=profile.id,
            check_in=check_in,
            number_attending=number_attending,
        )
        db.add(attendance)
        db.commit()
        return attendance

    return _make
