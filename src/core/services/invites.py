"""Invite and confirmation workflows for trip participants."""

import html
import logging
from uuid import UUID

from core.config import Config
from core.dates import format_long_date
from core.db.store import TripStore
from core.errors import DispatchError, ErrorCode, NotFoundError
from core.mail.interface import DispatchReceipt, InviteMessage, MailAddress, MailDispatcher
from core.models.trip import Participant, Trip

logger = logging.getLogger(__name__)

_INVITE_SUBJECT = "Confirme sua viagem para {destination} em {starts_at}"

_INVITE_HTML = """
<div style="font-family: sans-serif; font-size: 16px; line-height: 1.6;">
  <p>
    Você foi convidado(a) para participar de uma viagem para <strong>{destination}</strong> nas datas
    de <strong>{starts_at}</strong> até <strong>{ends_at}</strong>.
  </p>
  <p></p>
  <p>Para confirmar sua presença na viagem, clique no link abaixo:</p>
  <p></p>
  <p><a href="{confirmation_url}">Confirmar viagem</a></p>
  <p></p>
  <p>Caso você não saiba do que se trata esse e-mail, apenas ignore esse e-mail.</p>
</div>
""".strip()


def confirmation_url(api_base_url: str, participant_id: UUID | str) -> str:
    return f"{api_base_url.rstrip('/')}/participants/{participant_id}/confirm"


def render_trip_email(
    template: str,
    trip: Trip,
    recipient: str,
    link: str,
    config: Config,
) -> InviteMessage:
    """Fill a trip email template; the destination is HTML-escaped in the body only."""
    starts_at = format_long_date(trip.starts_at, config.date_locale)
    ends_at = format_long_date(trip.ends_at, config.date_locale)

    return InviteMessage(
        sender=MailAddress(name=config.mail_sender_name, address=config.mail_sender_address),
        recipient=recipient,
        subject=_INVITE_SUBJECT.format(destination=trip.destination, starts_at=starts_at),
        html=template.format(
            destination=html.escape(trip.destination),
            starts_at=starts_at,
            ends_at=ends_at,
            confirmation_url=html.escape(link),
        ),
        confirmation_url=link,
    )


def build_invite_message(trip: Trip, participant: Participant, config: Config) -> InviteMessage:
    link = confirmation_url(config.api_base_url, participant.id)
    return render_trip_email(_INVITE_HTML, trip, participant.email, link, config)


def dispatch(message: InviteMessage, mailer: MailDispatcher, subject_id: UUID) -> DispatchReceipt:
    """Send a message, wrapping any dispatcher failure in DispatchError."""
    try:
        receipt = mailer.send(message)
    except DispatchError:
        logger.error("Email for %s was not sent", subject_id)
        raise
    except Exception as e:
        logger.exception("Mail dispatcher failed for %s", subject_id)
        raise DispatchError(f"Dispatch failed for {subject_id}: {e}") from e

    logger.info(
        "Email sent for %s (message_id=%s, preview=%s)",
        subject_id,
        receipt.message_id,
        receipt.preview_url,
    )
    return receipt


def send_invite(trip: Trip, participant: Participant, mailer: MailDispatcher, config: Config) -> DispatchReceipt:
    return dispatch(build_invite_message(trip, participant, config), mailer, participant.id)


def create_invite(
    trip_id: UUID,
    email: str,
    store: TripStore,
    mailer: MailDispatcher,
    config: Config,
) -> Participant:
    """Register a participant on a trip and email them a confirmation link.

    The participant row is kept even when dispatch fails, so the caller can
    retry the email without creating a duplicate.
    """
    trip = store.get_trip(trip_id)
    if trip is None:
        raise NotFoundError(f"Trip {trip_id} not found", code=ErrorCode.TRIP_NOT_FOUND)

    participant = store.create_participant(trip.id, email)
    send_invite(trip, participant, mailer, config)
    return participant


def confirm_participant(participant_id: UUID, store: TripStore) -> Participant:
    """Mark a participant as confirmed. Confirming twice is a no-op."""
    participant = store.get_participant(participant_id)
    if participant is None:
        raise NotFoundError(
            f"Participant {participant_id} not found",
            code=ErrorCode.PARTICIPANT_NOT_FOUND,
        )

    if participant.is_confirmed:
        logger.info("Participant %s already confirmed", participant_id)
        return participant

    return store.mark_participant_confirmed(participant_id)
