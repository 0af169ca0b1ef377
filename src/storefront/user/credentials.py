"""Password rules and hashing."""

import re

from passlib.context import CryptContext
from protean.exceptions import ValidationError

PASSWORD_PATTERN = re.compile(r"^[A-Za-z0-9]{4,}$")

pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto", bcrypt__rounds=12)


def check_password_rules(password, confirm_password=None):
    """Raise a ValidationError when a new password is unacceptable.

    Passwords need at least 4 characters, letters and digits only. When
    ``confirm_password`` is given it must match.
    """
    errors = {}
    if not PASSWORD_PATTERN.match(password or ""):
        errors["password"] = ["Please enter a password with only numbers and text and at least 4 characters."]
    if confirm_password is not None and password != confirm_password:
        errors["confirm_password"] = ["Passwords not matching!"]

    if errors:
        raise ValidationError(errors)


def hash_password(password):
    return pwd_context.hash(password)


def verify_password(password, password_hash):
    if not password or not password_hash:
        return False
    return pwd_context.verify(password, password_hash)
