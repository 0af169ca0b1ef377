"""Domain events for the User aggregate."""

from protean.fields import DateTime, Identifier, Integer, String

from storefront.domain import storefront


@storefront.event(part_of="User")
class UserRegistered:
    """A new account was created."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    registered_at = DateTime(required=True)


@storefront.event(part_of="User")
class PasswordResetRequested:
    """A single-use password reset token was issued."""

    __version__ = 1

    user_id = Identifier(required=True)
    email = String(required=True, max_length=254)
    token = String(required=True, max_length=64)
    expires_at = DateTime(required=True)


@storefront.event(part_of="User")
class PasswordChanged:
    __version__ = 1

    user_id = Identifier(required=True)
    changed_at = DateTime(required=True)


@storefront.event(part_of="User")
class CartItemAdded:
    """A product was put in the cart, or its quantity went up by one."""

    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)
    quantity = Integer(required=True)


@storefront.event(part_of="User")
class CartItemRemoved:
    __version__ = 1

    user_id = Identifier(required=True)
    product_id = Identifier(required=True)


@storefront.event(part_of="User")
class CartCleared:
    __version__ = 1

    user_id = Identifier(required=True)
    items_removed = Integer(required=True)


@storefront.event(part_of="User")
class SessionsEnded:
    """The user logged out; tokens carrying an older session version are void."""

    __version__ = 1

    user_id = Identifier(required=True)
    session_version = Integer(required=True)
    ended_at = DateTime(required=True)
