"""
Pytest Configuration and Fixtures

Every test gets a fresh in-memory SQLite database and a ServiceContainer
bound to it.
"""

import os

# Must be set before fisherfans.config is imported
os.environ.setdefault("BCRYPT_ROUNDS", "4")
os.environ.setdefault("JWT_SECRET", "fisherfans-test-secret")
os.environ.setdefault("DATABASE_URL", "sqlite://")
os.environ.setdefault("DB_LOG_SLOW_QUERIES", "false")

import pytest
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from factories import (
    VALID_LICENSE,
    build_boat_create,
    build_occurrence_create,
    build_trip_create,
    build_user_create,
    identity_for,
    professional_fields,
)
from fisherfans import models  # noqa: F401
from fisherfans.database import Base
from fisherfans.domain.container import ServiceContainer


@pytest.fixture
def engine():
    """In-memory database shared by every session of the test"""
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(engine)
    yield engine
    Base.metadata.drop_all(engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return sessionmaker(autocommit=False, autoflush=False, bind=engine)


@pytest.fixture
def db(session_factory):
    session = session_factory()
    yield session
    session.close()


@pytest.fixture
def services(db):
    return ServiceContainer(db)


@pytest.fixture
def make_user(services):
    """Factory for persisted users"""

    def _make(**overrides):
        return services.user.create(build_user_create(**overrides))

    return _make


@pytest.fixture
def captain(make_user):
    """Professional guide with a valid boat license"""
    return make_user(
        nom="Leclerc",
        prenom="Martin",
        permisBateau=VALID_LICENSE,
        **professional_fields(),
    )


@pytest.fixture
def angler(make_user):
    """Individual user without a boat license"""
    return make_user()


@pytest.fixture
def make_boat(services):
    def _make(owner, **overrides):
        return services.boat.create(identity_for(owner), owner.id, build_boat_create(**overrides))

    return _make


@pytest.fixture
def boat(make_boat, captain):
    return make_boat(captain)


@pytest.fixture
def make_trip(services):
    def _make(owner, boat, **overrides):
        return services.trip.create(
            identity_for(owner), owner.id, build_trip_create(boat.id, **overrides)
        )

    return _make


@pytest.fixture
def trip(make_trip, captain, boat):
    """Per-person trip: 50 EUR per place, 6 places"""
    return make_trip(captain, boat)


@pytest.fixture
def occurrence(services, trip):
    return services.occurrence.create(build_occurrence_create(trip.id))
