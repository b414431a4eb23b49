"""Mail dispatch abstraction layer."""

from core.mail.dev_dispatcher import DevMailDispatcher
from core.mail.interface import DispatchReceipt, InviteMessage, MailAddress, MailDispatcher, get_mail_dispatcher
from core.mail.ses_dispatcher import SesMailDispatcher

__all__ = [
    "DevMailDispatcher",
    "DispatchReceipt",
    "InviteMessage",
    "MailAddress",
    "MailDispatcher",
    "SesMailDispatcher",
    "get_mail_dispatcher",
]
