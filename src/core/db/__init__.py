"""
Database ORM models and the trip store.

Importing this package registers all models on Base.metadata,
which create_all needs to see every table.
"""

from core.db.schemas.activity import ActivityRecord
from core.db.schemas.base import Base
from core.db.schemas.link import LinkRecord
from core.db.schemas.participant import ParticipantRecord
from core.db.schemas.trip import TripRecord
from core.db.session import get_engine, get_session_factory
from core.db.store import SqlTripStore, TripStore

__all__ = [
    "ActivityRecord",
    "Base",
    "LinkRecord",
    "ParticipantRecord",
    "SqlTripStore",
    "TripRecord",
    "TripStore",
    "get_engine",
    "get_session_factory",
]
