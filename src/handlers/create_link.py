from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_body, parse_path
from core.models import CreateLinkBody, TripPath
from core.services.links import create_link


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    body = parse_body(event, CreateLinkBody)
    link = create_link(path.tripId, body.title, str(body.url), store=get_trip_store())
    return json_response(200, {"linkId": str(link.id)})
