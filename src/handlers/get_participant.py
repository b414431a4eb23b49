from typing import Any

from core.clients import get_trip_store
from core.http import api_handler, json_response, parse_path
from core.models import ParticipantPath
from core.services.trips import get_participant


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, ParticipantPath)
    participant = get_participant(path.participantId, store=get_trip_store())
    return json_response(
        200,
        {"participant": participant.model_dump(mode="json", include={"id", "name", "email", "is_confirmed"})},
    )
