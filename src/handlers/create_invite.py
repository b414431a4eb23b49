"""POST /trips/{tripId}/invites: invite a participant by email."""

from typing import Any

from core.clients import get_trip_store
from core.config import get_config
from core.http import api_handler, json_response, parse_body, parse_path
from core.mail import get_mail_dispatcher
from core.models import CreateInviteBody, TripPath
from core.services.invites import create_invite


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    body = parse_body(event, CreateInviteBody)

    participant = create_invite(
        path.tripId,
        body.email,
        store=get_trip_store(),
        mailer=get_mail_dispatcher(),
        config=get_config(),
    )

    return json_response(200, {"participantId": str(participant.id)})
