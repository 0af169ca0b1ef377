from datetime import UTC, datetime, timedelta

import pytest
from protean.exceptions import ValidationError
from storefront.user.events import PasswordChanged, PasswordResetRequested, SessionsEnded, UserRegistered
from storefront.user.user import RESET_TOKEN_TTL, User


def _user():
    return User.register(email="  Shopper@Example.COM ", password_hash="old-hash")


class TestRegistration:
    def test_email_is_normalised(self):
        assert _user().email == "shopper@example.com"

    def test_registration_raises_user_registered(self):
        user = _user()

        assert len(user._events) == 1
        event = user._events[0]
        assert isinstance(event, UserRegistered)
        assert event.email == "shopper@example.com"

    def test_malformed_email_is_rejected(self):
        with pytest.raises(ValidationError) as exc:
            User.register(email="not-an-email", password_hash="hash")

        assert "email" in exc.value.messages

    def test_new_user_starts_with_an_empty_cart_and_no_reset_token(self):
        user = _user()

        assert len(user.cart_items) == 0
        assert user.reset_token is None
        assert user.reset_token_expiration is None


class TestResetToken:
    def test_issued_token_is_64_hex_chars_valid_for_an_hour(self):
        now = datetime.now(UTC)
        user = _user()

        token = user.issue_reset_token(now=now)

        assert len(token) == 64
        int(token, 16)
        assert user.reset_token == token
        assert user.reset_token_expiration == now + RESET_TOKEN_TTL

    def test_issuing_raises_password_reset_requested(self):
        user = _user()
        token = user.issue_reset_token()

        event = user._events[-1]
        assert isinstance(event, PasswordResetRequested)
        assert event.token == token
        assert event.email == "shopper@example.com"

    def test_token_is_valid_within_the_hour(self):
        issued = datetime.now(UTC)
        user = _user()
        token = user.issue_reset_token(now=issued)

        assert user.has_valid_reset_token(token, now=issued + timedelta(minutes=59))

    def test_token_expires_after_an_hour(self):
        issued = datetime.now(UTC)
        user = _user()
        token = user.issue_reset_token(now=issued)

        assert not user.has_valid_reset_token(token, now=issued + timedelta(hours=1, seconds=1))

    def test_wrong_token_is_not_valid(self):
        user = _user()
        user.issue_reset_token()

        assert not user.has_valid_reset_token("f" * 64)

    def test_new_token_replaces_the_previous_one(self):
        user = _user()
        first = user.issue_reset_token()
        second = user.issue_reset_token()

        assert not user.has_valid_reset_token(first)
        assert user.has_valid_reset_token(second)


class TestResetPassword:
    def test_reset_changes_the_hash_and_spends_the_token(self):
        user = _user()
        token = user.issue_reset_token()

        user.reset_password(token, "new-hash")

        assert user.password_hash == "new-hash"
        assert user.reset_token is None
        assert user.reset_token_expiration is None
        assert isinstance(user._events[-1], PasswordChanged)

    def test_token_cannot_be_used_twice(self):
        user = _user()
        token = user.issue_reset_token()
        user.reset_password(token, "new-hash")

        with pytest.raises(ValidationError):
            user.reset_password(token, "another-hash")

        assert user.password_hash == "new-hash"

    def test_expired_token_is_refused(self):
        issued = datetime.now(UTC) - timedelta(hours=2)
        user = _user()
        token = user.issue_reset_token(now=issued)

        with pytest.raises(ValidationError):
            user.reset_password(token, "new-hash")

        assert user.password_hash == "old-hash"

    def test_reset_ends_existing_sessions(self):
        user = _user()
        token = user.issue_reset_token()

        user.reset_password(token, "new-hash")

        assert user.session_version == 1


class TestEndSessions:
    def test_new_user_starts_at_session_version_zero(self):
        assert _user().session_version == 0

    def test_ending_sessions_bumps_the_version(self):
        user = _user()

        user.end_sessions()
        user.end_sessions()

        assert user.session_version == 2

    def test_ending_sessions_raises_sessions_ended(self):
        user = _user()

        user.end_sessions()

        event = user._events[-1]
        assert isinstance(event, SessionsEnded)
        assert event.session_version == 1
