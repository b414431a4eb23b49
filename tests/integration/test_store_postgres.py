"""Integration tests for SqlTripStore on PostgreSQL."""

from datetime import UTC, datetime
from uuid import uuid4

import pytest
from sqlalchemy.exc import IntegrityError

from core.db import ParticipantRecord, SqlTripStore, TripRecord
from core.errors import NotFoundError, StoreError
from core.mail import DevMailDispatcher
from core.services.invites import confirm_participant, create_invite
from core.services.trips import confirm_trip, create_trip


@pytest.fixture
def pg_store(pg_session_factory):
    return SqlTripStore(pg_session_factory)


@pytest.fixture
def pg_trip_id(pg_session_factory):
    with pg_session_factory() as session:
        record = TripRecord(
            destination="Florianópolis",
            starts_at=datetime(2024, 8, 4, tzinfo=UTC),
            ends_at=datetime(2024, 8, 10, tzinfo=UTC),
        )
        session.add(record)
        session.commit()
        return record.id


@pytest.mark.integration
def test_invite_and_confirm(pg_store, pg_trip_id, app_config):
    mailer = DevMailDispatcher()

    participant = create_invite(pg_trip_id, "a@b.com", pg_store, mailer, app_config)
    assert pg_store.get_participant(participant.id).is_confirmed is False

    confirm_participant(participant.id, pg_store)
    confirm_participant(participant.id, pg_store)

    assert pg_store.get_participant(participant.id).is_confirmed is True
    assert len(mailer.sent) == 1


@pytest.mark.integration
def test_unknown_trip_leaves_participants_untouched(pg_store, pg_session_factory, app_config):
    with pytest.raises(NotFoundError):
        create_invite(uuid4(), "a@b.com", pg_store, DevMailDispatcher(), app_config)

    with pg_session_factory() as session:
        assert session.query(ParticipantRecord).count() == 0


@pytest.mark.integration
def test_participant_fk_constraint(pg_store):
    with pytest.raises(StoreError) as exc_info:
        pg_store.create_participant(uuid4(), "a@b.com")
    assert isinstance(exc_info.value.__cause__, IntegrityError)


@pytest.mark.integration
def test_trip_date_range_constraint(pg_session_factory):
    with pg_session_factory() as session:
        session.add(
            TripRecord(
                destination="Recife",
                starts_at=datetime(2024, 8, 10, tzinfo=UTC),
                ends_at=datetime(2024, 8, 4, tzinfo=UTC),
            )
        )
        with pytest.raises(IntegrityError):
            session.commit()


@pytest.mark.integration
def test_timestamps_keep_timezone(pg_store, pg_trip_id):
    trip = pg_store.get_trip(pg_trip_id)
    assert trip.starts_at == datetime(2024, 8, 4, tzinfo=UTC)


@pytest.mark.integration
def test_create_and_confirm_trip(pg_store, app_config):
    mailer = DevMailDispatcher()

    trip = create_trip(
        "Recife",
        datetime(2024, 9, 1, tzinfo=UTC),
        datetime(2024, 9, 5, tzinfo=UTC),
        "Diego",
        "diego@example.com",
        ["a@b.com"],
        pg_store,
        mailer,
        app_config,
    )
    confirm_trip(trip.id, pg_store, mailer, app_config)

    assert pg_store.get_trip(trip.id).is_confirmed is True
    assert [m.recipient for m in mailer.sent] == ["diego@example.com", "a@b.com"]
