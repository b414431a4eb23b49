from abc import ABC, abstractmethod
from email.utils import formataddr

from pydantic import BaseModel, ConfigDict, EmailStr


class MailAddress(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str
    address: str

    def __str__(self) -> str:
        return formataddr((self.name, self.address))


class InviteMessage(BaseModel):
    model_config = ConfigDict(frozen=True)

    sender: MailAddress
    recipient: EmailStr
    subject: str
    html: str
    confirmation_url: str


class DispatchReceipt(BaseModel):
    message_id: str
    preview_url: str | None = None


class MailDispatcher(ABC):
    @abstractmethod
    def send(self, message: InviteMessage) -> DispatchReceipt: ...


def get_mail_dispatcher() -> MailDispatcher:
    from core.config import get_config

    config = get_config()
    if config.mail_transport == "ses":
        from core.clients import get_ses_client
        from core.mail.ses_dispatcher import SesMailDispatcher

        return SesMailDispatcher(get_ses_client())

    from core.mail.dev_dispatcher import DevMailDispatcher

    return DevMailDispatcher()
