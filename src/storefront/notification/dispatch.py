"""Account mail: welcome and password-reset emails.

Runs inside the unit of work in development and tests, and from the Engine
worker in production. Delivery failures are logged and never reach the
user who triggered them.
"""

import structlog
from protean.utils.mixins import handle

from storefront.domain import storefront
from storefront.notification import get_mail_settings, get_mailer
from storefront.notification.email_port import AccountEmail, MailKind
from storefront.notification.templates import PasswordResetTemplate, WelcomeTemplate
from storefront.user.events import PasswordResetRequested, UserRegistered
from storefront.user.user import User

logger = structlog.get_logger(__name__)


@storefront.event_handler(part_of=User)
class AccountMailer:
    @handle(UserRegistered)
    def on_user_registered(self, event: UserRegistered) -> None:
        message = WelcomeTemplate.render({"email": event.email})
        _deliver(AccountEmail(to=event.email, kind=MailKind.WELCOME, **message), user_id=str(event.user_id))

    @handle(PasswordResetRequested)
    def on_password_reset_requested(self, event: PasswordResetRequested) -> None:
        message = PasswordResetTemplate.render(
            {
                "base_url": get_mail_settings().base_url,
                "token": event.token,
            }
        )
        _deliver(AccountEmail(to=event.email, kind=MailKind.PASSWORD_RESET, **message), user_id=str(event.user_id))


def _deliver(email: AccountEmail, user_id: str) -> None:
    kind = email.kind.value
    try:
        receipt = get_mailer().send(email)
    except Exception as e:
        logger.error("Email dispatch failed", kind=kind, user_id=user_id, error=str(e))
        return

    if receipt.sent:
        logger.info("Email sent", kind=kind, user_id=user_id, message_id=receipt.message_id)
    else:
        logger.error("Email delivery failed", kind=kind, user_id=user_id, error=receipt.error)
