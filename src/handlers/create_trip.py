"""POST /trips: create a trip and email the owner a confirmation link."""

from typing import Any

from core.clients import get_trip_store
from core.config import get_config
from core.http import api_handler, json_response, parse_body
from core.mail import get_mail_dispatcher
from core.models import CreateTripBody
from core.services.trips import create_trip


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    body = parse_body(event, CreateTripBody)

    trip = create_trip(
        body.destination,
        body.starts_at,
        body.ends_at,
        body.owner_name,
        body.owner_email,
        list(body.emails_to_invite),
        store=get_trip_store(),
        mailer=get_mail_dispatcher(),
        config=get_config(),
    )

    return json_response(200, {"tripId": str(trip.id)})
