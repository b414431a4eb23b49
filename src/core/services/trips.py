"""Trip lifecycle: creation, owner confirmation, updates and read-side lookups."""

import logging
from datetime import datetime
from uuid import UUID

from core.config import Config
from core.dates import to_utc
from core.db.store import TripStore
from core.errors import DispatchError, ErrorCode, NotFoundError, ValidationError
from core.mail.interface import MailDispatcher
from core.models.trip import Participant, Trip
from core.services.invites import dispatch, render_trip_email, send_invite

logger = logging.getLogger(__name__)

_TRIP_CONFIRMATION_HTML = """
<div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
  <p>
    Você solicitou a criação de uma viagem para <strong>{destination}</strong> nas datas
    de <strong>{starts_at}</strong> até <strong>{ends_at}</strong>.
  </p>
  <p></p>
  <p>Para confirmar sua viagem, clique no link abaixo:</p>
  <p></p>
  <p><a href="{confirmation_url}">Confirmar viagem</a></p>
  <p></p>
  <p>Caso você não saiba do que se trata esse e-mail, apenas ignore esse e-mail.</p>
</div>
""".strip()


def trip_confirmation_url(api_base_url: str, trip_id: UUID | str) -> str:
    return f"{api_base_url.rstrip('/')}/trips/{trip_id}/confirm"


def _check_dates(starts_at: datetime, ends_at: datetime) -> tuple[datetime, datetime]:
    starts_at, ends_at = to_utc(starts_at), to_utc(ends_at)
    if ends_at < starts_at:
        raise ValidationError(
            f"Trip ends at {ends_at.isoformat()}, before it starts at {starts_at.isoformat()}",
            code=ErrorCode.INVALID_TRIP_DATES,
        )
    return starts_at, ends_at


def get_trip_details(trip_id: UUID, store: TripStore) -> Trip:
    trip = store.get_trip(trip_id)
    if trip is None:
        raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)
    return trip


def create_trip(
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    owner_name: str,
    owner_email: str,
    emails_to_invite: list[str],
    store: TripStore,
    mailer: MailDispatcher,
    config: Config,
) -> Trip:
    """Create an unconfirmed trip and email its owner a confirmation link.

    The owner is stored already confirmed; invitees are stored pending and only
    receive their emails once the owner confirms the trip. A failed owner email
    leaves the trip in place and raises DispatchError.
    """
    starts_at, ends_at = _check_dates(starts_at, ends_at)

    trip, owner = store.create_trip(destination, starts_at, ends_at, owner_name, owner_email, emails_to_invite)
    logger.info("Trip %s created with %d invitee(s)", trip.id, len(emails_to_invite))

    link = trip_confirmation_url(config.api_base_url, trip.id)
    message = render_trip_email(_TRIP_CONFIRMATION_HTML, trip, owner.email, link, config)
    dispatch(message, mailer, trip.id)
    return trip


def confirm_trip(trip_id: UUID, store: TripStore, mailer: MailDispatcher, config: Config) -> Trip:
    """Confirm a trip and invite every participant other than the owner.

    Confirming an already confirmed trip sends nothing. Every invite is
    attempted; if any fail the trip stays confirmed and DispatchError names
    the participants that were not reached.
    """
    trip = get_trip_details(trip_id, store)
    if trip.is_confirmed:
        logger.info("Trip %s already confirmed", trip_id)
        return trip

    trip = store.mark_trip_confirmed(trip_id)

    failed: list[UUID] = []
    for participant in store.list_participants(trip_id):
        if participant.is_owner:
            continue
        try:
            send_invite(trip, participant, mailer, config)
        except DispatchError:
            failed.append(participant.id)

    if failed:
        raise DispatchError(f"Trip {trip_id} confirmed but {len(failed)} invite(s) failed: {failed}")
    return trip


def update_trip(
    trip_id: UUID,
    destination: str,
    starts_at: datetime,
    ends_at: datetime,
    store: TripStore,
) -> Trip:
    get_trip_details(trip_id, store)
    starts_at, ends_at = _check_dates(starts_at, ends_at)
    return store.update_trip(trip_id, destination, starts_at, ends_at)


def list_participants(trip_id: UUID, store: TripStore) -> list[Participant]:
    get_trip_details(trip_id, store)
    return store.list_participants(trip_id)


def get_participant(participant_id: UUID, store: TripStore) -> Participant:
    participant = store.get_participant(participant_id)
    if participant is None:
        raise NotFoundError(
            f"Participant {participant_id} not found",
            code=ErrorCode.PARTICIPANT_NOT_FOUND,
        )
    return participant
