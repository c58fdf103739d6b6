"""Shared test fixtures."""

import sys
from datetime import date
from pathlib import Path
from typing import AsyncGenerator

import pytest
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

# Add backend to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from app.database import Base
from app.models import Horse, PaymentMethod, Role, Schedule, SkillLevel, User

from tests.fixtures.factories import create_horse, create_schedule, create_user

RIDE_DAY = date(2024, 5, 14)


@pytest.fixture
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


@pytest.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create async session with transaction rollback."""
    async_session = async_sessionmaker(
        bind=db_engine,
        class_=AsyncSession,
        expire_on_commit=False,
        autocommit=False,
        autoflush=False,
    )

    async with async_session() as session:
        yield session
        await session.rollback()


@pytest.fixture
def ride_day() -> date:
    return RIDE_DAY


@pytest.fixture
async def test_horse(db_session: AsyncSession) -> Horse:
    """Create a sample horse (4h/day, 1h rest) with a post-ride meal."""
    horse = create_horse(
        name="Iskierka",
        level=SkillLevel.BEGINNER.value,
        post_training_meal="1 scoop of mash",
    )
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def advanced_horse(db_session: AsyncSession) -> Horse:
    """Create an advanced horse without a post-ride meal."""
    horse = create_horse(name="Burza", level=SkillLevel.ADVANCED.value)
    db_session.add(horse)
    await db_session.flush()
    return horse


@pytest.fixture
async def test_horses(db_session: AsyncSession) -> list[Horse]:
    """Create a small stable, one horse inactive."""
    horses = []
    for name, level, active in [
        ("Kasztan", SkillLevel.INTERMEDIATE.value, True),
        ("Grom", SkillLevel.ADVANCED.value, True),
        ("Mgiełka", SkillLevel.BEGINNER.value, True),
        ("Wicher", SkillLevel.INTERMEDIATE.value, False),
    ]:
        horse = create_horse(name=name, level=level, is_active=active)
        db_session.add(horse)
        horses.append(horse)
    await db_session.flush()
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
    db_session.add(rider)
    await db_session.flush()
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
    db_session.add(rider)
    await db_session.flush()
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
    db_session.add(trainer)
    await db_session.flush()
    return trainer


@pytest.fixture
async def test_schedule(
    db_session: AsyncSession,
    test_horse: Horse,
    test_rider: User,
    test_trainer: User,
) -> Schedule:
    """Create a 09:00-10:30 session for test_horse."""
    schedule = create_schedule(
        horse_id=test_horse.id,
        rider_id=test_rider.id,
        trainer_id=test_trainer.id,
        day=RIDE_DAY,
        start_time="09:00",
        duration=90,
    )
    db_session.add(schedule)
    await db_session.flush()
    return schedule
