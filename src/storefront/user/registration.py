"""Sign up: command and handler."""

from protean import handle
from protean.exceptions import ValidationError
from protean.fields import String
from protean.utils.globals import current_domain

from storefront.domain import storefront
from storefront.user.user import User


@storefront.command(part_of="User")
class RegisterUser:
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)


@storefront.command_handler(part_of=User)
class RegisterUserHandler:
    @handle(RegisterUser)
    def register_user(self, command):
        repo = current_domain.repository_for(User)
        if repo.find_by_email(command.email) is not None:
            raise ValidationError({"email": ["Email exists already, please use a different one!"]})

        user = User.register(email=command.email, password_hash=command.password_hash)
        repo.add(user)
        return str(user.id)
