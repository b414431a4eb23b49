"""GET /trips/{tripId}/confirm: confirm a trip, invite its participants and redirect."""

from typing import Any

from core.clients import get_trip_store
from core.config import get_config
from core.http import api_handler, parse_path, redirect_response
from core.mail import get_mail_dispatcher
from core.models import TripPath
from core.services.trips import confirm_trip


@api_handler
def handler(event: dict[str, Any], context: object) -> dict[str, Any]:
    path = parse_path(event, TripPath)
    config = get_config()

    trip = confirm_trip(path.tripId, store=get_trip_store(), mailer=get_mail_dispatcher(), config=config)

    return redirect_response(f"{config.web_base_url}/trips/{trip.id}")
