"""Mail dispatcher for local development. Logs messages instead of sending them."""

import logging
from uuid import uuid4

from .interface import DispatchReceipt, InviteMessage, MailDispatcher

logger = logging.getLogger(__name__)


class DevMailDispatcher(MailDispatcher):
    def __init__(self, body_preview_length: int = 100):
        self.sent: list[InviteMessage] = []
        self._body_preview_length = body_preview_length

    def send(self, message: InviteMessage) -> DispatchReceipt:
        message_id = f"dev-{uuid4().hex[:12]}"
        self.sent.append(message)

        preview = message.html[: self._body_preview_length]
        if len(message.html) > self._body_preview_length:
            preview += "..."
        logger.info(
            "EMAIL (dev): To=%s, From=%s, Subject=%s, Body=%s, MessageID=%s",
            message.recipient,
            message.sender,
            message.subject,
            preview,
            message_id,
        )
        return DispatchReceipt(message_id=message_id, preview_url=message.confirmation_url)
