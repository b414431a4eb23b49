from typing import Any

from botocore.exceptions import BotoCoreError, ClientError

from core.errors import DispatchError

from .interface import DispatchReceipt, InviteMessage, MailDispatcher


class SesMailDispatcher(MailDispatcher):
    """Sends invite emails through Amazon SES."""

    def __init__(self, ses_client: Any):
        self._client = ses_client

    def send(self, message: InviteMessage) -> DispatchReceipt:
        try:
            response = self._client.send_email(
                Source=str(message.sender),
                Destination={"ToAddresses": [message.recipient]},
                Message={
                    "Subject": {"Data": message.subject, "Charset": "UTF-8"},
                    "Body": {"Html": {"Data": message.html, "Charset": "UTF-8"}},
                },
            )
        except (ClientError, BotoCoreError) as e:
            raise DispatchError(f"SES rejected message to {message.recipient}: {e}") from e
        return DispatchReceipt(message_id=response["MessageId"])
