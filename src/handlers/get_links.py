from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_path
from core.models import TripPath
from core.services.links import list_links


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    links = list_links(path.tripId, store=get_trip_store())
    return json_response(200, {"links": [link.model_dump(mode="json", include={"id", "title", "url"}) for link in links]})
