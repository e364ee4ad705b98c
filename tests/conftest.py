"""Pytest fixtures for GreenPro registration tests.

Services run against in-memory SQLite through aiosqlite. The sequence
allocator commits in its own transactions, so it gets a separate engine:
SQLite allows a single writer and the registration transaction is still
open while product and plant ids are allocated.
"""

from collections.abc import AsyncGenerator
from datetime import datetime, timedelta, timezone
from types import SimpleNamespace

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from greenpro.database.base import Base
from greenpro.models.category import Category
from greenpro.models.location import Country, State
from greenpro.models.manufacturer import Manufacturer
from greenpro.models.vendor import Vendor
from greenpro.modules.sequence.allocator import SequenceAllocator
from greenpro.seed_data.reference import (
    CATEGORIES,
    COUNTRIES,
    MANUFACTURERS,
    STATES,
    VENDORS,
)

TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


async def _memory_engine():
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    return engine


@pytest_asyncio.fixture
async def async_test_engine():
    engine = await _memory_engine()
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def async_test_session(async_test_engine) -> AsyncGenerator[AsyncSession, None]:
    session_factory = async_sessionmaker(
        async_test_engine, class_=AsyncSession, expire_on_commit=False
    )
    async with session_factory() as session:
        yield session


@pytest_asyncio.fixture
async def allocator_session_factory() -> AsyncGenerator[async_sessionmaker[AsyncSession], None]:
    engine = await _memory_engine()
    yield async_sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    await engine.dispose()


@pytest.fixture
def allocator(allocator_session_factory) -> SequenceAllocator:
    return SequenceAllocator(allocator_session_factory)


def _reference_rows() -> list:
    return [
        *(Country(**row) for row in COUNTRIES),
        *(State(**row) for row in STATES),
        *(Manufacturer(**row) for row in MANUFACTURERS),
        *(Vendor(**row) for row in VENDORS),
        *(Category(**row) for row in CATEGORIES),
    ]


@pytest.fixture
def reference_rows():
    """Builds fresh, unsaved ORM rows for the development reference data."""
    return _reference_rows


@pytest.fixture
def reference_ids() -> SimpleNamespace:
    return SimpleNamespace(
        india=COUNTRIES[0]["id"],
        sri_lanka=COUNTRIES[1]["id"],
        uae=COUNTRIES[2]["id"],
        maharashtra=STATES[0]["id"],
        dubai=STATES[1]["id"],
        tamil_nadu=STATES[2]["id"],
        western_province=STATES[3]["id"],
        karnataka=STATES[4]["id"],
        mangal=MANUFACTURERS[0]["id"],
        abc=MANUFACTURERS[1]["id"],
        mangal_vendor=VENDORS[0]["id"],
        abc_vendor=VENDORS[1]["id"],
        solar_panels=CATEGORIES[0]["id"],
        building_materials=CATEGORIES[1]["id"],
    )


@pytest_asyncio.fixture
async def reference_data(async_test_session: AsyncSession, reference_ids) -> SimpleNamespace:
    """Load the development reference data and expose the ids tests use most."""
    async_test_session.add_all(_reference_rows())
    await async_test_session.commit()
    return reference_ids


class StepClock:
    """Deterministic clock that moves forward one second per call."""

    def __init__(self, start: datetime | None = None) -> None:
        self.current = start or datetime(2024, 3, 15, 10, 30, 45, tzinfo=timezone.utc)

    def __call__(self) -> datetime:
        moment = self.current
        self.current += timedelta(seconds=1)
        return moment


@pytest.fixture
def step_clock() -> StepClock:
    return StepClock()
