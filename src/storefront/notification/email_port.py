"""Outbound account mail: the message, the delivery receipt and the port adapters implement."""

from abc import ABC, abstractmethod
from dataclasses import dataclass
from enum import Enum


class MailKind(Enum):
    WELCOME = "welcome"
    PASSWORD_RESET = "password_reset"


@dataclass(frozen=True)
class AccountEmail:
    to: str
    kind: MailKind
    subject: str
    body: str
    html_body: str | None = None


@dataclass(frozen=True)
class DeliveryReceipt:
    sent: bool
    message_id: str | None = None
    error: str | None = None


class EmailPort(ABC):
    @abstractmethod
    def send(self, email: AccountEmail) -> DeliveryReceipt:
        """Hand one account email to the mail service.

        Rejections by the service come back as an unsent receipt. Anything
        else (network failures, bad configuration) is raised.
        """
