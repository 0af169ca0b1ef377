import pytest
from protean.exceptions import ValidationError
from storefront.user.credentials import check_password_rules, hash_password, verify_password


class TestPasswordRules:
    @pytest.mark.parametrize("password", ["abcd", "secret1", "A1b2C3d4"])
    def test_letters_and_digits_of_four_or_more_pass(self, password):
        check_password_rules(password, password)

    @pytest.mark.parametrize("password", ["", "abc", "with space", "s3cr3t!"])
    def test_short_or_symbolic_passwords_fail(self, password):
        with pytest.raises(ValidationError) as exc:
            check_password_rules(password)

        assert "password" in exc.value.messages

    def test_confirmation_must_match(self):
        with pytest.raises(ValidationError) as exc:
            check_password_rules("secret1", "secret2")

        assert exc.value.messages["confirm_password"] == ["Passwords not matching!"]

    def test_confirmation_is_optional(self):
        check_password_rules("secret1")


class TestHashing:
    def test_hash_verifies_against_the_original_password(self):
        password_hash = hash_password("secret1")

        assert password_hash != "secret1"
        assert verify_password("secret1", password_hash)
        assert not verify_password("secret2", password_hash)

    def test_missing_values_never_verify(self):
        assert not verify_password("", hash_password("secret1"))
        assert not verify_password("secret1", None)
