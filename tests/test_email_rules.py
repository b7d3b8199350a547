"""Tests for the email rule family."""

from __future__ import annotations

import pytest
from hypothesis import given, settings

from validation_notifications import Notification, RuleSettings, ValidationRules

from .conftest import SignUp, emails_without_at, valid_emails


class TestIsEmailUnit:
    """Unit tests for is_email."""

    def test_invalid_email_message(self, rules: ValidationRules[SignUp]) -> None:
        """Test the message recorded for an address without '@'."""
        rules.is_email("Email", "email.com")

        assert rules.notifications == (
            Notification("The 'email.com' is not a valid email", key="Email"),
        )

    @pytest.mark.parametrize(
        "value",
        ["user@example.com", "first.last@example.co.uk", "a+tag@mail-server.org", "o'neil@x.io"],
    )
    def test_valid_addresses(self, rules: ValidationRules[SignUp], value: str) -> None:
        """Test addresses accepted by the default pattern."""
        rules.is_email("Email", value)

        assert rules.has_notifications is False

    @pytest.mark.parametrize(
        "value",
        ["user@example", "@example.com", "user@@example.com", "user@example.com ", "us er@x.com"],
    )
    def test_invalid_addresses(self, rules: ValidationRules[SignUp], value: str) -> None:
        """Test addresses rejected by the default pattern."""
        rules.is_email("Email", value)

        assert [n.message for n in rules.notifications] == [f"The '{value}' is not a valid email"]

    def test_trailing_newline_rejected(self, rules: ValidationRules[SignUp]) -> None:
        """Test that the whole value must match, newline included."""
        rules.is_email("Email", "user@example.com\n")

        assert rules.notification_count == 1

    @pytest.mark.parametrize("value", [None, ""])
    def test_missing_value_short_circuits(
        self, rules: ValidationRules[SignUp], value: str | None
    ) -> None:
        """Test that a missing value is not also reported as malformed."""
        rules.is_email("Email", value)

        assert rules.notifications == (
            Notification("The field 'Email' must not be null or empty", key="Email"),
        )

    def test_custom_message(self, rules: ValidationRules[SignUp]) -> None:
        """Test that a custom message replaces the catalog message."""
        rules.is_email("Email", "email.com", message="Please check your email")

        assert rules.notifications == (Notification("Please check your email", key="Email"),)

    def test_custom_message_not_used_for_missing_value(
        self, rules: ValidationRules[SignUp]
    ) -> None:
        """Test that the null-or-empty precondition keeps its catalog message."""
        rules.is_email("Email", "", message="Please check your email")

        assert rules.notifications[0].message == "The field 'Email' must not be null or empty"

    def test_returns_self(self, rules: ValidationRules[SignUp]) -> None:
        """Test fluent chaining on success and failure."""
        assert rules.is_email("Email", "user@example.com") is rules
        assert rules.is_email("Email", "nope") is rules

    def test_custom_pattern(self) -> None:
        """Test that the pattern comes from the rule settings."""
        rules = ValidationRules[SignUp](settings=RuleSettings(email_pattern=r"[a-z]+@corp\.com"))

        rules.is_email("Email", "ada@corp.com").is_email("Email", "ada@example.com")

        assert [n.message for n in rules.notifications] == [
            "The 'ada@example.com' is not a valid email"
        ]


class TestIsEmailProperties:
    """Property-based tests for is_email."""

    @given(value=valid_emails())
    @settings(max_examples=100)
    def test_valid_emails_add_nothing(self, value: str) -> None:
        """Well-formed addresses never add a notification."""
        rules = ValidationRules[SignUp]()

        rules.is_email("Email", value)

        assert rules.has_notifications is False

    @given(value=emails_without_at)
    @settings(max_examples=100)
    def test_addresses_without_at_add_one(self, value: str) -> None:
        """Any non-empty value without '@' adds exactly the email message."""
        rules = ValidationRules[SignUp]()

        rules.is_email("Email", value)

        assert rules.notifications == (
            Notification(f"The '{value}' is not a valid email", key="Email"),
        )
