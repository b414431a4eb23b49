from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_body, parse_path
from core.models import TripPath, UpdateTripBody
from core.services.trips import update_trip


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    body = parse_body(event, UpdateTripBody)

    trip = update_trip(path.tripId, body.destination, body.starts_at, body.ends_at, store=get_trip_store())

    return json_response(200, {"tripId": str(trip.id)})
