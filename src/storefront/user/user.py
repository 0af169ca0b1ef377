"""User aggregate: customer account with an embedded shopping cart.

The cart lives inside the user record: one line per product, with the
quantity bumped when the same product is added again. Password reset
tokens are single use and expire an hour after they are issued.
"""

import re
import secrets
from datetime import UTC, datetime, timedelta

from protean import atomic_change, invariant
from protean.exceptions import ValidationError
from protean.fields import DateTime, HasMany, Identifier, Integer, String

from storefront.domain import storefront
from storefront.user.events import (
    CartCleared,
    CartItemAdded,
    CartItemRemoved,
    PasswordChanged,
    PasswordResetRequested,
    SessionsEnded,
    UserRegistered,
)

RESET_TOKEN_TTL = timedelta(hours=1)

EMAIL_PATTERN = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def normalise_email(email):
    return (email or "").strip().lower()


def _as_utc(moment):
    # Naive timestamps come back from SQL providers without tzinfo
    if moment.tzinfo is None:
        return moment.replace(tzinfo=UTC)
    return moment


@storefront.entity(part_of="User")
class CartItem:
    product_id = Identifier(required=True)
    quantity = Integer(required=True, min_value=1)
    added_at = DateTime()


@storefront.aggregate
class User:
    email = String(required=True, max_length=254)
    password_hash = String(required=True, max_length=255)
    reset_token = String(max_length=64)
    reset_token_expiration = DateTime()
    session_version = Integer(default=0)
    cart_items = HasMany(CartItem)
    created_at = DateTime()

    @invariant.post
    def email_must_be_well_formed(self):
        if self.email and not EMAIL_PATTERN.match(self.email):
            raise ValidationError({"email": ["Please enter a valid email."]})

    @invariant.post
    def reset_token_and_expiration_go_together(self):
        if bool(self.reset_token) != bool(self.reset_token_expiration):
            raise ValidationError({"reset_token": ["A reset token needs an expiration time"]})

    # -------------------------------------------------------------------
    # Factory
    # -------------------------------------------------------------------
    @classmethod
    def register(cls, email, password_hash):
        now = datetime.now(UTC)
        user = cls(
            email=normalise_email(email),
            password_hash=password_hash,
            created_at=now,
        )
        user.raise_(
            UserRegistered(
                user_id=str(user.id),
                email=user.email,
                registered_at=now,
            )
        )
        return user

    # -------------------------------------------------------------------
    # Cart
    # -------------------------------------------------------------------
    def cart_item_for(self, product_id):
        return next((i for i in self.cart_items if str(i.product_id) == str(product_id)), None)

    def add_to_cart(self, product_id):
        """Put one unit of a product in the cart."""
        existing = self.cart_item_for(product_id)

        if existing:
            existing.quantity += 1
            quantity = existing.quantity
        else:
            self.add_cart_items(
                CartItem(
                    product_id=str(product_id),
                    quantity=1,
                    added_at=datetime.now(UTC),
                )
            )
            quantity = 1

        self.raise_(
            CartItemAdded(
                user_id=str(self.id),
                product_id=str(product_id),
                quantity=quantity,
            )
        )

    def remove_from_cart(self, product_id):
        """Drop the whole line for a product. Returns False when it was not in the cart."""
        item = self.cart_item_for(product_id)
        if item is None:
            return False

        self.remove_cart_items(item)
        self.raise_(CartItemRemoved(user_id=str(self.id), product_id=str(product_id)))
        return True

    def clear_cart(self):
        items = list(self.cart_items)
        for item in items:
            self.remove_cart_items(item)

        self.raise_(CartCleared(user_id=str(self.id), items_removed=len(items)))

    # -------------------------------------------------------------------
    # Password reset
    # -------------------------------------------------------------------
    def issue_reset_token(self, now=None):
        now = now or datetime.now(UTC)
        token = secrets.token_hex(32)

        with atomic_change(self):
            self.reset_token = token
            self.reset_token_expiration = now + RESET_TOKEN_TTL

        self.raise_(
            PasswordResetRequested(
                user_id=str(self.id),
                email=self.email,
                token=token,
                expires_at=self.reset_token_expiration,
            )
        )
        return token

    def has_valid_reset_token(self, token, now=None):
        if not token or not self.reset_token or not self.reset_token_expiration:
            return False
        if not secrets.compare_digest(self.reset_token, token):
            return False

        now = now or datetime.now(UTC)
        return _as_utc(self.reset_token_expiration) > now

    def reset_password(self, token, password_hash, now=None):
        now = now or datetime.now(UTC)
        if not self.has_valid_reset_token(token, now=now):
            raise ValidationError({"token": ["Password reset link is invalid or has expired"]})

        with atomic_change(self):
            self.password_hash = password_hash
            self.reset_token = None
            self.reset_token_expiration = None
            self.session_version = (self.session_version or 0) + 1

        self.raise_(PasswordChanged(user_id=str(self.id), changed_at=now))

    # -------------------------------------------------------------------
    # Sessions
    # -------------------------------------------------------------------
    def end_sessions(self, now=None):
        """Invalidate every session token issued so far."""
        now = now or datetime.now(UTC)
        self.session_version = (self.session_version or 0) + 1

        self.raise_(
            SessionsEnded(
                user_id=str(self.id),
                session_version=self.session_version,
                ended_at=now,
            )
        )
