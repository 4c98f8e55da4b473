"""Tests for validators."""

import pytest

from email_dispatch.models import EmailRequest
from email_dispatch.validators import (
    validate_email_address,
    validate_request,
    MISSING_FIELDS_REASON,
    INVALID_ADDRESS_REASON,
)


class TestEmailValidator:
    """Tests for address validation."""

    @pytest.mark.parametrize(
        "address",
        ["user@example.com", "first.last@sub.example.co", "a@b.c", "user+tag@example.org"],
    )
    def test_valid_email(self, address):
        assert validate_email_address(address) is True

    @pytest.mark.parametrize(
        "address",
        [
            "foo@bar",
            "foo.com",
            "@bar.com",
            "user@.com",
            "user name@example.com",
            "user@@example.com",
            "user@example.com\n",
            "",
        ],
    )
    def test_invalid_email(self, address):
        assert validate_email_address(address) is False

    @pytest.mark.parametrize("char", ["\x1c", "\x1f", "\x85", "\u200b"])
    def test_separator_controls_are_not_whitespace(self, char):
        assert validate_email_address(f"a{char}b@c.com") is True

    @pytest.mark.parametrize("char", ["\ufeff", "\xa0", "\u2028", "\u3000", "\x0b"])
    def test_unicode_whitespace_rejected(self, char):
        assert validate_email_address(f"a{char}b@c.com") is False


class TestRequestValidator:
    """Tests for request validation."""

    def test_valid_request(self, valid_request):
        """Test a complete request passes."""
        assert validate_request(valid_request) == (True, None)

    @pytest.mark.parametrize("missing", ["to", "subject", "body"])
    def test_missing_required_field(self, missing):
        """Any empty required field fails with the same reason."""
        fields = {"to": "user@example.com", "subject": "Hi", "body": "Body"}
        fields[missing] = ""

        is_valid, reason = validate_request(EmailRequest(**fields))

        assert is_valid is False
        assert reason == MISSING_FIELDS_REASON
        assert "missing required fields" in reason.lower()

    def test_missing_fields_checked_before_format(self):
        """An empty subject is reported even when the address is also bad."""
        is_valid, reason = validate_request(EmailRequest(to="bad", subject="", body="x"))

        assert is_valid is False
        assert reason == MISSING_FIELDS_REASON

    def test_invalid_address(self):
        """Test a malformed address is rejected."""
        is_valid, reason = validate_request(EmailRequest(to="foo@bar", subject="Hi", body="x"))

        assert is_valid is False
        assert reason == INVALID_ADDRESS_REASON
        assert "invalid address format" in reason.lower()
