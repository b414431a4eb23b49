"""Trip links (bookings, documents, shared folders)."""

from uuid import UUID

from core.db.store import TripStore
from core.models.trip import Link
from core.services.trips import get_trip_details


def create_link(trip_id: UUID, title: str, url: str, store: TripStore) -> Link:
    trip = get_trip_details(trip_id, store)
    return store.create_link(trip.id, title, url)


def list_links(trip_id: UUID, store: TripStore) -> list[Link]:
    get_trip_details(trip_id, store)
    return store.list_links(trip_id)
