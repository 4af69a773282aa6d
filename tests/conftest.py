"""
Shared test configuration.

Each test gets its own in-memory SQLite database with the parcel table
already created.
"""

import random

import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from parcel_tracker.db import Base, make_session_factory
from parcel_tracker.models import Parcel, ParcelStatus
from parcel_tracker.store import ParcelStore
from parcel_tracker.utils import format_created_at

TEST_DATABASE_URL = "sqlite:///:memory:"

# fixed seed keeps generated fixture values reproducible
rng = random.Random(20231018)


@pytest.fixture
def engine():
    engine = create_engine(
        TEST_DATABASE_URL,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    return make_session_factory(engine)


@pytest.fixture
def store(session_factory):
    return ParcelStore(session_factory)


@pytest.fixture
def make_parcel():
    """Factory for unsaved registered parcels."""
    def make(client: int = 1000, address: str = "test") -> Parcel:
        return Parcel(
            client=client,
            status=ParcelStatus.REGISTERED.value,
            address=address,
            created_at=format_created_at(),
        )
    return make


@pytest.fixture
def random_client():
    return lambda: rng.randrange(10_000_000)
