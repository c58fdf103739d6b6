"""Schedule (booked ride) model."""

import enum
import datetime

from sqlalchemy import Boolean, Date, Float, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.database import Base
from app.models.base import TimestampMixin


class ScheduleStatus(str, enum.Enum):
    """Schedule status enum."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


class Schedule(Base, TimestampMixin):
    """Schedule table model. One row per booked riding session."""

    __tablename__ = "schedules"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)
    horse_id: Mapped[int] = mapped_column(Integer, ForeignKey("horses.id"), nullable=False, index=True)
    rider_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)
    trainer_id: Mapped[int] = mapped_column(Integer, ForeignKey("users.id"), nullable=False)

    date: Mapped[datetime.date] = mapped_column(Date, nullable=False, index=True)
    start_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM
    end_time: Mapped[str] = mapped_column(String(5), nullable=False)  # HH:MM, stored at write time
    duration: Mapped[int] = mapped_column(Integer, nullable=False)  # minutes
    status: Mapped[str] = mapped_column(
        String(20), nullable=False, default=ScheduleStatus.SCHEDULED.value
    )

    price: Mapped[float | None] = mapped_column(Float, nullable=True)
    paid: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    notes: Mapped[str | None] = mapped_column(Text, nullable=True)
    feeding_done: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)

    # Relationships
    horse = relationship("Horse", back_populates="schedules")
    rider = relationship("User", foreign_keys=[rider_id])
    trainer = relationship("User", foreign_keys=[trainer_id])
    feeding_tasks = relationship("FeedingTask", back_populates="schedule")

    def __repr__(self) -> str:
        return (
            f"<Schedule(id={self.id}, horse_id={self.horse_id}, "
            f"date={self.date}, {self.start_time}-{self.end_time})>"
        )
