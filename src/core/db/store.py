"""Relational trip store for trips, participants, activities and links."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from datetime import UTC, datetime
from typing import Protocol
from uuid import UUID

from sqlalchemy import select, text
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session, selectinload, sessionmaker

from core.db.schemas.activity import ActivityRecord
from core.db.schemas.link import LinkRecord
from core.db.schemas.participant import ParticipantRecord
from core.db.schemas.trip import TripRecord
from core.errors import ErrorCode, NotFoundError, StoreError
from core.models.trip import Activity, Link, Participant, Trip

logger = logging.getLogger(__name__)


class TripStore(Protocol):
    def get_trip(self, trip_id: UUID) -> Trip | None: ...
    def create_trip(
        self,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        owner_name: str,
        owner_email: str,
        emails_to_invite: list[str],
    ) -> tuple[Trip, Participant]: ...
    def update_trip(self, trip_id: UUID, destination: str, starts_at: datetime, ends_at: datetime) -> Trip: ...
    def mark_trip_confirmed(self, trip_id: UUID) -> Trip: ...
    def get_participant(self, participant_id: UUID) -> Participant | None: ...
    def list_participants(self, trip_id: UUID) -> list[Participant]: ...
    def create_participant(self, trip_id: UUID, email: str, name: str | None = None) -> Participant: ...
    def mark_participant_confirmed(self, participant_id: UUID) -> Participant: ...
    def create_activity(self, trip_id: UUID, title: str, occurs_at: datetime) -> Activity: ...
    def list_activities(self, trip_id: UUID) -> list[Activity]: ...
    def create_link(self, trip_id: UUID, title: str, url: str) -> Link: ...
    def list_links(self, trip_id: UUID) -> list[Link]: ...


def _as_utc(value: datetime) -> datetime:
    # SQLite drops tzinfo on the way back out
    if value.tzinfo is None:
        return value.replace(tzinfo=UTC)
    return value


def _to_activity(record: ActivityRecord) -> Activity:
    return Activity(
        id=record.id,
        trip_id=record.trip_id,
        title=record.title,
        occurs_at=_as_utc(record.occurs_at),
    )


def _to_trip(record: TripRecord) -> Trip:
    return Trip(
        id=record.id,
        destination=record.destination,
        starts_at=_as_utc(record.starts_at),
        ends_at=_as_utc(record.ends_at),
        is_confirmed=record.is_confirmed,
        activities=[_to_activity(a) for a in record.activities],
    )


class SqlTripStore:
    """TripStore backed by SQLAlchemy; one session and transaction per call."""

    def __init__(self, session_factory: sessionmaker[Session]) -> None:
        self._session_factory = session_factory

    @contextmanager
    def _session(self, action: str) -> Iterator[Session]:
        session = self._session_factory()
        try:
            yield session
            session.commit()
        except SQLAlchemyError as e:
            session.rollback()
            raise StoreError(f"Failed to {action}: {e}") from e
        except Exception:
            session.rollback()
            raise
        finally:
            session.close()

    def health_check(self) -> bool:
        try:
            with self._session("run health check") as session:
                session.execute(text("SELECT 1"))
            return True
        except StoreError:
            logger.exception("Trip store health check failed")
            return False

    def get_trip(self, trip_id: UUID) -> Trip | None:
        with self._session("load trip") as session:
            record = session.scalar(
                select(TripRecord).options(selectinload(TripRecord.activities)).where(TripRecord.id == trip_id)
            )
            return _to_trip(record) if record else None

    def create_trip(
        self,
        destination: str,
        starts_at: datetime,
        ends_at: datetime,
        owner_name: str,
        owner_email: str,
        emails_to_invite: list[str],
    ) -> tuple[Trip, Participant]:
        """Insert a trip with its owner (already confirmed) and pending invitees in one transaction."""
        with self._session("create trip") as session:
            owner = ParticipantRecord(name=owner_name, email=owner_email, is_owner=True, is_confirmed=True)
            invitees = [ParticipantRecord(email=email, is_owner=False, is_confirmed=False) for email in emails_to_invite]
            record = TripRecord(
                destination=destination,
                starts_at=starts_at,
                ends_at=ends_at,
                is_confirmed=False,
                participants=[owner, *invitees],
                activities=[],
            )
            session.add(record)
            session.flush()
            return _to_trip(record), Participant.model_validate(owner)

    def update_trip(self, trip_id: UUID, destination: str, starts_at: datetime, ends_at: datetime) -> Trip:
        with self._session("update trip") as session:
            record = self._locked_trip(session, trip_id)
            record.destination = destination
            record.starts_at = starts_at
            record.ends_at = ends_at
            session.flush()
            return _to_trip(record)

    def mark_trip_confirmed(self, trip_id: UUID) -> Trip:
        with self._session("confirm trip") as session:
            record = self._locked_trip(session, trip_id)
            record.is_confirmed = True
            session.flush()
            return _to_trip(record)

    @staticmethod
    def _locked_trip(session: Session, trip_id: UUID) -> TripRecord:
        record = session.get(TripRecord, trip_id, with_for_update=True)
        if record is None:
            raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
        return record

    def get_participant(self, participant_id: UUID) -> Participant | None:
        with self._session("load participant") as session:
            record = session.get(ParticipantRecord, participant_id)
            return Participant.model_validate(record) if record else None

    def list_participants(self, trip_id: UUID) -> list[Participant]:
        with self._session("list participants") as session:
            records = session.scalars(
                select(ParticipantRecord).where(ParticipantRecord.trip_id == trip_id).order_by(ParticipantRecord.email)
            )
            return [Participant.model_validate(r) for r in records]

    def create_participant(self, trip_id: UUID, email: str, name: str | None = None) -> Participant:
        with self._session("create participant") as session:
            record = ParticipantRecord(trip_id=trip_id, email=email, name=name, is_confirmed=False, is_owner=False)
            session.add(record)
            session.flush()
            return Participant.model_validate(record)

    def mark_participant_confirmed(self, participant_id: UUID) -> Participant:
        with self._session("confirm participant") as session:
            record = session.get(ParticipantRecord, participant_id, with_for_update=True)
            if record is None:
                raise NotFoundError(
                    f"Participant {participant_id} not found",
                    code=ErrorCode.PARTICIPANT_NOT_FOUND,
                )
            record.is_confirmed = True
            session.flush()
            return Participant.model_validate(record)

    def create_activity(self, trip_id: UUID, title: str, occurs_at: datetime) -> Activity:
        with self._session("create activity") as session:
            record = ActivityRecord(trip_id=trip_id, title=title, occurs_at=occurs_at)
            session.add(record)
            session.flush()
            return _to_activity(record)

    def list_activities(self, trip_id: UUID) -> list[Activity]:
        with self._session("list activities") as session:
            records = session.scalars(
                select(ActivityRecord).where(ActivityRecord.trip_id == trip_id).order_by(ActivityRecord.occurs_at)
            )
            return [_to_activity(r) for r in records]

    def create_link(self, trip_id: UUID, title: str, url: str) -> Link:
        with self._session("create link") as session:
            record = LinkRecord(trip_id=trip_id, title=title, url=url)
            session.add(record)
            session.flush()
            return Link.model_validate(record)

    def list_links(self, trip_id: UUID) -> list[Link]:
        with self._session("list links") as session:
            records = session.scalars(select(LinkRecord).where(LinkRecord.trip_id == trip_id))
            return [Link.model_validate(r) for r in records]
