from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_path
from core.models import TripPath
from core.services.activities import list_activities


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    days = list_activities(path.tripId, store=get_trip_store())
    return json_response(
        200,
        {
            "activities": [
                {
                    "date": day.date.isoformat(),
                    "activities": [a.model_dump(mode="json", include={"id", "title", "occurs_at"}) for a in day.activities],
                }
                for day in days
            ]
        },
    )
