"""Shared fixtures for API integration tests."""

import sys
from pathlib import Path
from typing import AsyncGenerator

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent.parent.parent))

from app.database import Base, get_db
from app.main import app
from app.models import Horse, PaymentMethod, Role, Schedule, SkillLevel, User

from tests.fixtures.factories import create_horse, create_schedule, create_user


@pytest.fixture(scope="function")
async def db_engine():
    """Create in-memory SQLite engine for tests."""
    engine = create_async_engine(
        "sqlite+aiosqlite:///:memory:",
        echo=False,
        future=True,
    )
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest.fixture(scope="function")
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session for tests."""
    session_factory = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )
    async with session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture(scope="function")
async def client(db_session) -> AsyncGenerator[AsyncClient, None]:
    """Create async HTTP client for API tests."""
    # Create a dependency override that uses the test session
    async def get_test_db():
        yield db_session

    app.dependency_overrides[get_db] = get_test_db

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac

    # Clean up override
    app.dependency_overrides.pop(get_db, None)


async def _save(session: AsyncSession, *rows):
    session.add_all(rows)
    await session.commit()
    for row in rows:
        await session.refresh(row)


@pytest.fixture
async def test_horse(db_session: AsyncSession) -> Horse:
    """Create a beginner horse with a post-ride meal."""
    horse = create_horse(
        name="Iskierka",
        level=SkillLevel.BEGINNER.value,
        post_training_meal="1 scoop of mash",
    )
    await _save(db_session, horse)
    return horse


@pytest.fixture
async def advanced_horse(db_session: AsyncSession) -> Horse:
    """Create an advanced horse without a post-ride meal."""
    horse = create_horse(name="Burza", level=SkillLevel.ADVANCED.value)
    await _save(db_session, horse)
    return horse


@pytest.fixture
async def test_horses(db_session: AsyncSession) -> list[Horse]:
    """Create a small stable, one horse inactive."""
    horses = [
        create_horse(name="Kasztan", level=SkillLevel.INTERMEDIATE.value),
        create_horse(name="Grom", level=SkillLevel.ADVANCED.value),
        create_horse(name="Mgiełka", level=SkillLevel.BEGINNER.value),
        create_horse(name="Wicher", level=SkillLevel.INTERMEDIATE.value, is_active=False),
    ]
    await _save(db_session, *horses)
    return horses


@pytest.fixture
async def test_rider(db_session: AsyncSession) -> User:
    """Create a beginner rider paying per session."""
    rider = create_user(
        email="piotr@example.com",
        name="Piotr",
        roles=[Role.RIDER.value],
        level=SkillLevel.BEGINNER.value,
        payment_method=PaymentMethod.SINGLE.value,
    )
    await _save(db_session, rider)
    return rider


@pytest.fixture
async def subscription_rider(db_session: AsyncSession) -> User:
    """Create an advanced rider with 10 prepaid hours."""
    rider = create_user(
        email="maria@example.com",
        name="Maria",
        roles=[Role.RIDER.value],
        level=SkillLevel.ADVANCED.value,
        payment_method=PaymentMethod.SUBSCRIPTION.value,
        subscription_hours=10.0,
    )
    await _save(db_session, rider)
    return rider


@pytest.fixture
async def test_trainer(db_session: AsyncSession) -> User:
    """Create a trainer who also rides."""
    trainer = create_user(
        email="anna@stable.example",
        name="Anna",
        roles=[Role.TRAINER.value, Role.RIDER.value],
        level=SkillLevel.ADVANCED.value,
        specialization="Dressage",
    )
    await _save(db_session, trainer)
    return trainer


@pytest.fixture
async def test_schedule(
    db_session: AsyncSession,
    test_horse: Horse,
    test_rider: User,
    test_trainer: User,
    ride_day,
) -> Schedule:
    """Create a 09:00-10:30 session for test_horse."""
    schedule = create_schedule(
        horse_id=test_horse.id,
        rider_id=test_rider.id,
        trainer_id=test_trainer.id,
        day=ride_day,
        start_time="09:00",
        duration=90,
    )
    await _save(db_session, schedule)
    return schedule
