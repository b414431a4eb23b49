from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_path
from core.models import TripPath
from core.services.trips import get_trip_details


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    trip = get_trip_details(path.tripId, store=get_trip_store())
    return json_response(
        200,
        {"trip": trip.model_dump(mode="json", include={"id", "destination", "starts_at", "ends_at", "is_confirmed"})},
    )
