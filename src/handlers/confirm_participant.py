"""GET /participants/{participantId}/confirm: confirm and redirect to the trip page."""

from typing import Any

from core.clients import get_trip_store
from core.config import get_config
from core.http import api_handler, parse_path, redirect_response
from core.models import ParticipantPath
from core.services.invites import confirm_participant


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, ParticipantPath)
    participant = confirm_participant(path.participantId, store=get_trip_store())

    config = get_config()
    return redirect_response(f"{config.web_base_url}/trips/{participant.trip_id}")
