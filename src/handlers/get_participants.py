from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_path
from core.models import TripPath
from core.services.trips import list_participants


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    participants = list_participants(path.tripId, store=get_trip_store())
    return json_response(
        200,
        {
            "participants": [
                p.model_dump(mode="json", include={"id", "name", "email", "is_confirmed"}) for p in participants
            ]
        },
    )
