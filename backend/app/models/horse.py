"""Horse model."""

import enum

from sqlalchemy import Boolean, Float, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.base import TimestampMixin


class SkillLevel(str, enum.Enum):
    """Skill level shared by horses and riders."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class Horse(Base, TimestampMixin):
    """Horse table model."""

    __tablename__ = "horses"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    name: Mapped[str] = mapped_column(String(50), nullable=False, index=True)
    breed: Mapped[str | None] = mapped_column(String(100), nullable=True)
    level: Mapped[str] = mapped_column(String(20), nullable=False)

    # Welfare limits, in hours
    max_work_hours: Mapped[float] = mapped_column(Float, nullable=False, default=4.0)
    rest_after_work: Mapped[float] = mapped_column(Float, nullable=False, default=1.0)

    post_training_meal: Mapped[str | None] = mapped_column(Text, nullable=True)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    is_active: Mapped[bool] = mapped_column(Boolean, nullable=False, default=True)

    # Relationships
    schedules = relationship("Schedule", back_populates="horse")

    @property
    def max_work_minutes_per_day(self) -> int:
        return round(self.max_work_hours * 60)

    @property
    def required_rest_minutes(self) -> int:
        return round(self.rest_after_work * 60)

    def __repr__(self) -> str:
        return f"<Horse(id={self.id}, name='{self.name}')>"
