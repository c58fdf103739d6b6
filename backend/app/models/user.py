"""User model."""

import enum

from sqlalchemy import Float, Integer, String
from sqlalchemy.dialects.sqlite import JSON
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.base import TimestampMixin


class Role(str, enum.Enum):
    """Stable roles. A user may hold several."""

    ADMIN = "ADMIN"
    TRAINER = "TRAINER"
    RIDER = "RIDER"
    STABLE_HAND = "STABLE_HAND"


class PaymentMethod(str, enum.Enum):
    """How a rider pays for sessions."""

    SINGLE = "SINGLE"
    SUBSCRIPTION = "SUBSCRIPTION"


class User(Base, TimestampMixin):
    """User table model (riders, trainers, stable hands, admins)."""

    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    email: Mapped[str] = mapped_column(String(255), nullable=False, unique=True, index=True)
    name: Mapped[str] = mapped_column(String(100), nullable=False)
    roles: Mapped[list[str]] = mapped_column(JSON, nullable=False, default=list)
    level: Mapped[str | None] = mapped_column(String(20), nullable=True)  # riders
    specialization: Mapped[str | None] = mapped_column(String(100), nullable=True)  # trainers
    payment_method: Mapped[str | None] = mapped_column(String(20), nullable=True)
    subscription_hours: Mapped[float] = mapped_column(Float, nullable=False, default=0.0)

    def has_role(self, role: Role | str) -> bool:
        value = role.value if isinstance(role, Role) else role
        return value in set(self.roles or [])

    def __repr__(self) -> str:
        return f"<User(id={self.id}, name='{self.name}', roles={self.roles})>"
