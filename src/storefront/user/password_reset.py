"""Password reset: request a token by email, then spend it on a new password."""

from protean import handle
from protean.exceptions import ObjectNotFoundError, ValidationError
from protean.fields import Identifier, String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User

INVALID_RESET_LINK = "Password reset link is invalid or has expired"


@storefront.command(part_of="User")
class RequestPasswordReset:
    email = String(required=True, max_length=254)


@storefront.command(part_of="User")
class ResetPassword:
    user_id = Identifier(required=True)
    token = String(required=True, max_length=64)
    password_hash = String(required=True, max_length=255)


def user_for_reset_token(token, user_id=None):
    """Return the user holding an unexpired reset token, or raise ObjectNotFoundError."""
    user = current_domain.repository_for(User).find_by_reset_token(token)
    if user is None or not user.has_valid_reset_token(token):
        raise ObjectNotFoundError(INVALID_RESET_LINK)
    if user_id is not None and str(user.id) != str(user_id):
        raise ObjectNotFoundError(INVALID_RESET_LINK)
    return user


@storefront.command_handler(part_of=User)
class PasswordResetHandler:
    @handle(RequestPasswordReset)
    def request_password_reset(self, command):
        repo = current_domain.repository_for(User)
        user = repo.find_by_email(command.email)
        if user is None:
            raise ValidationError({"email": ["No account with that email found!"]})

        user.issue_reset_token()
        repo.add(user)

    @handle(ResetPassword)
    def reset_password(self, command):
        user = user_for_reset_token(command.token, user_id=command.user_id)
        user.reset_password(command.token, command.password_hash)
        current_domain.repository_for(User).add(user)
