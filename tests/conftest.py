"""Shared test fixtures for the plann.er API."""

import os
import sys
from datetime import UTC, datetime
from pathlib import Path
from uuid import UUID, uuid4

import pytest
from dotenv import load_dotenv

# Load .env file for test configuration
load_dotenv()

# Add src directory to Python path for imports
src_path = Path(__file__).parent.parent / "src"
sys.path.insert(0, str(src_path))


FLORIANOPOLIS_STARTS_AT = datetime(2024, 8, 4, tzinfo=UTC)
FLORIANOPOLIS_ENDS_AT = datetime(2024, 8, 10, tzinfo=UTC)


class FakeTripStore:
    """In-memory TripStore for workflow tests."""

    def __init__(self):
        self.trips = {}
        self.participants = {}
        self.activities = []
        self.links = []

    def add_trip(self, destination="Florianópolis", starts_at=FLORIANOPOLIS_STARTS_AT, ends_at=FLORIANOPOLIS_ENDS_AT):
        from core.models import Trip

        trip = Trip(id=uuid4(), destination=destination, starts_at=starts_at, ends_at=ends_at)
        self.trips[trip.id] = trip
        return trip

    def get_trip(self, trip_id: UUID):
        trip = self.trips.get(trip_id)
        if trip is None:
            return None
        activities = sorted((a for a in self.activities if a.trip_id == trip_id), key=lambda a: a.occurs_at)
        return trip.model_copy(update={"activities": activities})

    def create_trip(self, destination, starts_at, ends_at, owner_name, owner_email, emails_to_invite):
        from core.models import Participant

        trip = self.add_trip(destination=destination, starts_at=starts_at, ends_at=ends_at)
        owner = Participant(
            id=uuid4(), trip_id=trip.id, email=owner_email, name=owner_name, is_owner=True, is_confirmed=True
        )
        self.participants[owner.id] = owner
        for email in emails_to_invite:
            self.create_participant(trip.id, email)
        return trip, owner

    def update_trip(self, trip_id: UUID, destination, starts_at, ends_at):
        return self._replace_trip(trip_id, destination=destination, starts_at=starts_at, ends_at=ends_at)

    def mark_trip_confirmed(self, trip_id: UUID):
        return self._replace_trip(trip_id, is_confirmed=True)

    def _replace_trip(self, trip_id, **changes):
        from core.errors import ErrorCode, NotFoundError

        if trip_id not in self.trips:
            raise NotFoundError("missing", code=ErrorCode.TRIP_NOT_FOUND)
        self.trips[trip_id] = self.trips[trip_id].model_copy(update=changes)
        return self.get_trip(trip_id)

    def get_participant(self, participant_id: UUID):
        return self.participants.get(participant_id)

    def list_participants(self, trip_id: UUID):
        return [p for p in self.participants.values() if p.trip_id == trip_id]

    def create_participant(self, trip_id: UUID, email: str, name=None):
        from core.models import Participant

        participant = Participant(id=uuid4(), trip_id=trip_id, email=email, name=name)
        self.participants[participant.id] = participant
        return participant

    def mark_participant_confirmed(self, participant_id: UUID):
        from core.errors import ErrorCode, NotFoundError

        if participant_id not in self.participants:
            raise NotFoundError("missing", code=ErrorCode.PARTICIPANT_NOT_FOUND)
        confirmed = self.participants[participant_id].model_copy(update={"is_confirmed": True})
        self.participants[participant_id] = confirmed
        return confirmed

    def create_activity(self, trip_id: UUID, title: str, occurs_at: datetime):
        from core.models import Activity

        activity = Activity(id=uuid4(), trip_id=trip_id, title=title, occurs_at=occurs_at)
        self.activities.append(activity)
        return activity

    def list_activities(self, trip_id: UUID):
        return sorted((a for a in self.activities if a.trip_id == trip_id), key=lambda a: a.occurs_at)

    def create_link(self, trip_id: UUID, title: str, url: str):
        from core.models import Link

        link = Link(id=uuid4(), trip_id=trip_id, title=title, url=url)
        self.links.append(link)
        return link

    def list_links(self, trip_id: UUID):
        return [link for link in self.links if link.trip_id == trip_id]


@pytest.fixture
def fake_store():
    return FakeTripStore()


@pytest.fixture
def trip(fake_store):
    """Florianópolis, 4-10 August 2024."""
    return fake_store.add_trip()


@pytest.fixture
def dev_mailer():
    from core.mail import DevMailDispatcher

    return DevMailDispatcher()


@pytest.fixture
def app_config():
    from core.config import Config

    return Config(
        api_base_url="https://api.example.com",
        web_base_url="https://app.example.com",
        port=3333,
        aws_region="us-east-1",
        database_url="sqlite://",
        mail_transport="dev",
        mail_sender_name="Equipe plann.er",
        mail_sender_address="oi@plann.er",
        date_locale="en",
        environment="test",
    )


# SQLite-backed store fixtures
@pytest.fixture
def session_factory():
    """Provide a session factory bound to a fresh in-memory SQLite database."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker
    from sqlalchemy.pool import StaticPool

    from core.db import Base

    engine = create_engine("sqlite://", connect_args={"check_same_thread": False}, poolclass=StaticPool)
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)
    engine.dispose()


@pytest.fixture
def sql_store(session_factory):
    from core.db import SqlTripStore

    return SqlTripStore(session_factory)


@pytest.fixture
def trip_record(session_factory):
    """Insert the Florianópolis trip and return its id."""
    from core.db import TripRecord

    with session_factory() as session:
        record = TripRecord(
            destination="Florianópolis",
            starts_at=FLORIANOPOLIS_STARTS_AT,
            ends_at=FLORIANOPOLIS_ENDS_AT,
        )
        session.add(record)
        session.commit()
        return record.id


# PostgreSQL fixtures
@pytest.fixture
def pg_session_factory():
    """Provide a session factory on the PostgreSQL database from DATABASE_URL."""
    from sqlalchemy import create_engine
    from sqlalchemy.orm import sessionmaker

    from core.db import Base

    url = os.environ.get("DATABASE_URL")
    if not url or not url.startswith("postgresql"):
        pytest.skip("DATABASE_URL must point at PostgreSQL")

    engine = create_engine(url)
    Base.metadata.create_all(engine)
    yield sessionmaker(bind=engine, expire_on_commit=False)

    # Cleanup: child rows go with their trips
    with engine.begin() as conn:
        conn.execute(Base.metadata.tables["trips"].delete())
    engine.dispose()
