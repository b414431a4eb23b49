"""Trip activity scheduling."""

from datetime import datetime, timedelta
from uuid import UUID

from core.dates import to_utc
from core.db.store import TripStore
from core.errors import ErrorCode, ValidationError
from core.models.trip import Activity, DayActivities
from core.services.trips import get_trip_details


def create_activity(trip_id: UUID, title: str, occurs_at: datetime, store: TripStore) -> Activity:
    trip = get_trip_details(trip_id, store)

    occurs_at = to_utc(occurs_at)
    if not to_utc(trip.starts_at) <= occurs_at <= to_utc(trip.ends_at):
        raise ValidationError(
            f"Activity at {occurs_at.isoformat()} falls outside trip {trip_id}",
            code=ErrorCode.INVALID_ACTIVITY_DATE,
        )

    return store.create_activity(trip.id, title, occurs_at)


def list_activities(trip_id: UUID, store: TripStore) -> list[DayActivities]:
    """Group a trip's activities by UTC calendar day, one entry per trip day."""
    trip = get_trip_details(trip_id, store)
    activities = store.list_activities(trip_id)

    first_day = to_utc(trip.starts_at).date()
    last_day = to_utc(trip.ends_at).date()
    days = []
    day = first_day
    while day <= last_day:
        days.append(
            DayActivities(
                date=day,
                activities=[a for a in activities if to_utc(a.occurs_at).date() == day],
            )
        )
        day += timedelta(days=1)
    return days
