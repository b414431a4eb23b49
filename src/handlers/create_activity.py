from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_body, parse_path
from core.models import CreateActivityBody, TripPath
from core.services.activities import create_activity


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    body = parse_body(event, CreateActivityBody)
    activity = create_activity(path.tripId, body.title, body.occurs_at, store=get_trip_store())
    return json_response(200, {"activityId": str(activity.id)})
