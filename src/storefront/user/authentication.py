"""Credential checks for login, and ending sessions on logout."""

import structlog
from protean import handle
from protean.exceptions import ValidationError
from protean.fields import Identifier
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.credentials import verify_password
from storefront.user.user import User

logger = structlog.get_logger(__name__)

INVALID_CREDENTIALS = "Invalid email or password!"


def authenticate(email, password):
    """Return the User owning these credentials.

    Unknown emails and wrong passwords fail the same way so callers cannot
    tell which one it was.
    """
    user = current_domain.repository_for(User).find_by_email(email)

    if user is None or not verify_password(password, user.password_hash):
        logger.info("Login rejected", email=email)
        raise ValidationError({"credentials": [INVALID_CREDENTIALS]})

    logger.info("Login accepted", user_id=str(user.id))
    return user


@storefront.command(part_of="User")
class EndSessions:
    user_id = Identifier(required=True)


@storefront.command_handler(part_of=User)
class SessionHandler:
    @handle(EndSessions)
    def end_sessions(self, command):
        repo = current_domain.repository_for(User)
        user = repo.get(command.user_id)
        user.end_sessions()
        repo.add(user)

        logger.info("Sessions ended", user_id=str(user.id), session_version=user.session_version)
