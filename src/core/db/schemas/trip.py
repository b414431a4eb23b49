"""SQLAlchemy ORM model for the trips table."""

from datetime import datetime
from uuid import UUID, uuid4

from sqlalchemy import Boolean, CheckConstraint, DateTime, String, Uuid, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from core.db.schemas.base import Base


class TripRecord(Base):
    __tablename__ = "trips"

    id: Mapped[UUID] = mapped_column(Uuid, primary_key=True, default=uuid4)
    destination: Mapped[str] = mapped_column(String(255), nullable=False)
    starts_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    ends_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False)
    is_confirmed: Mapped[bool] = mapped_column(Boolean, nullable=False, default=False)
    created_at: Mapped[datetime] = mapped_column(DateTime(timezone=True), nullable=False, server_default=func.now())

    participants: Mapped[list["ParticipantRecord"]] = relationship(back_populates="trip", cascade="all, delete-orphan")
    activities: Mapped[list["ActivityRecord"]] = relationship(
        back_populates="trip",
        cascade="all, delete-orphan",
        order_by="ActivityRecord.occurs_at",
    )
    links: Mapped[list["LinkRecord"]] = relationship(back_populates="trip", cascade="all, delete-orphan")

    __table_args__ = (CheckConstraint("starts_at <= ends_at", name="chk_trips_date_range"),)


# Avoid circular import — child records are resolved by string reference above
from core.db.schemas.activity import ActivityRecord  # noqa: E402, F401
from core.db.schemas.link import LinkRecord  # noqa: E402, F401
from core.db.schemas.participant import ParticipantRecord  # noqa: E402, F401
