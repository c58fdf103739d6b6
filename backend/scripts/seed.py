"""
Seed the database with a small demo stable.

Creates an admin, two trainers, three riders, a stable hand and five horses.
Existing records (matched by email / horse name) are left alone.

Usage:
    python scripts/seed.py
"""

import os
import sys

# Add parent directory to path
sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

import structlog
from sqlalchemy import select

from app.config import get_settings
from app.database import Base, SyncSessionLocal, ensure_sqlite_directory, sync_engine
from app.logging import setup_logging
from app.models import Horse, PaymentMethod, Role, SkillLevel, User

logger = structlog.get_logger("seed")

USERS = [
    {"email": "admin@stable.example", "name": "Administrator", "roles": [Role.ADMIN.value]},
    {
        "email": "anna@stable.example",
        "name": "Anna Kowalska",
        "roles": [Role.TRAINER.value],
        "specialization": "Dressage",
    },
    {
        "email": "jan@stable.example",
        "name": "Jan Nowak",
        "roles": [Role.RIDER.value, Role.TRAINER.value],
        "specialization": "Jumping",
        "level": SkillLevel.ADVANCED.value,
    },
    {
        "email": "maria@example.com",
        "name": "Maria Wiśniewska",
        "roles": [Role.RIDER.value],
        "level": SkillLevel.ADVANCED.value,
        "payment_method": PaymentMethod.SUBSCRIPTION.value,
        "subscription_hours": 10.0,
    },
    {
        "email": "piotr@example.com",
        "name": "Piotr Zieliński",
        "roles": [Role.RIDER.value],
        "level": SkillLevel.INTERMEDIATE.value,
        "payment_method": PaymentMethod.SINGLE.value,
    },
    {
        "email": "zosia@example.com",
        "name": "Zosia Lewandowska",
        "roles": [Role.RIDER.value],
        "level": SkillLevel.BEGINNER.value,
        "payment_method": PaymentMethod.SUBSCRIPTION.value,
        "subscription_hours": 4.0,
    },
    {"email": "tomek@stable.example", "name": "Tomek", "roles": [Role.STABLE_HAND.value]},
]

HORSES = [
    {
        "name": "Iskierka",
        "breed": "Polish Halfbred",
        "level": SkillLevel.BEGINNER.value,
        "max_work_hours": 4,
        "rest_after_work": 1,
        "post_training_meal": "1 scoop of mash, 50g carrots",
        "notes": "Calm mare, ideal for beginners",
    },
    {
        "name": "Burza",
        "breed": "Hanoverian",
        "level": SkillLevel.ADVANCED.value,
        "max_work_hours": 5,
        "rest_after_work": 1,
    },
    {
        "name": "Kasztan",
        "breed": "Wielkopolski",
        "level": SkillLevel.INTERMEDIATE.value,
        "max_work_hours": 4,
        "rest_after_work": 1,
        "post_training_meal": "Hay net, 2 apples",
    },
    {
        "name": "Grom",
        "breed": "Trakehner",
        "level": SkillLevel.ADVANCED.value,
        "max_work_hours": 3,
        "rest_after_work": 1.5,
    },
    {
        "name": "Mgiełka",
        "breed": "Haflinger",
        "level": SkillLevel.BEGINNER.value,
        "max_work_hours": 4,
        "rest_after_work": 1,
        "post_training_meal": "1 scoop of oats",
    },
]


def main():
    """Main entry point."""
    settings = get_settings()
    setup_logging(settings.log_level)
    ensure_sqlite_directory(settings.database_url)
    Base.metadata.create_all(sync_engine)

    created_users = created_horses = 0
    with SyncSessionLocal() as session:
        for data in USERS:
            exists = session.execute(
                select(User).where(User.email == data["email"])
            ).scalar_one_or_none()
            if exists is None:
                session.add(User(**data))
                created_users += 1

        for data in HORSES:
            exists = session.execute(
                select(Horse).where(Horse.name == data["name"])
            ).scalar_one_or_none()
            if exists is None:
                session.add(Horse(**data))
                created_horses += 1

        session.commit()

    logger.info("seed_complete", users=created_users, horses=created_horses)


if __name__ == "__main__":
    main()
