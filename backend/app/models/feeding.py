"""Feeding task model."""

import datetime

from sqlalchemy import Boolean, Date, DateTime, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.base import TimestampMixin


class FeedingTask(Base, TimestampMixin):
    """Post-training meal reminder for stable hands."""

    __tablename__ = "feeding_tasks"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    schedule_id: Mapped[int | None] = mapped_column(
        Integer, ForeignKey("schedules.id"), nullable=True, index=True
    )
    horse_name: Mapped[str] = mapped_column(String(50), nullable=False)
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)  # when the ride ends
    meal_description: Mapped[str] = mapped_column(Text, nullable=False)
    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)

    completed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    completed_at: Mapped[datetime.datetime | None] = mapped_column(DateTime(timezone=True), nullable=True)
    completed_by: Mapped[str | None] = mapped_column(String(100), nullable=True)

    # Relationships
    schedule = relationship("Schedule", back_populates="feeding_tasks")

    def __repr__(self) -> str:
        return f"<FeedingTask(id={self.id}, horse='{self.horse_name}', done={self.completed})>"
