"""Shared fixtures and Hypothesis strategies for tests."""

from __future__ import annotations

import string
from dataclasses import dataclass

import pytest
from hypothesis import strategies as st

from validation_notifications import NotifiableModel, Notification, Notifier, ValidationRules

# -----------------------------------------------------------------------------
# Hypothesis Strategies
# -----------------------------------------------------------------------------

# Strategy for field keys (letters and numbers only)
keys = st.text(
    min_size=1,
    max_size=30,
    alphabet=st.characters(whitelist_categories=("L", "N")),
)

# Strategy for optional keys (None marks object-level notifications)
optional_keys = st.one_of(st.none(), keys)

# Strategy for messages
messages = st.text(min_size=1, max_size=200)

# Strategy for notifications
notifications = st.builds(Notification, message=messages, key=optional_keys)

PASSWORD_SYMBOLS = "@$!%*?&"
PASSWORD_ALPHABET = string.ascii_letters + string.digits + PASSWORD_SYMBOLS


@st.composite
def valid_passwords(draw: st.DrawFn, min_length: int = 8) -> str:
    """Passwords with every required character class and enough length."""
    required = [
        draw(st.sampled_from(string.ascii_lowercase)),
        draw(st.sampled_from(string.ascii_uppercase)),
        draw(st.sampled_from(string.digits)),
        draw(st.sampled_from(PASSWORD_SYMBOLS)),
    ]
    filler = draw(
        st.lists(
            st.sampled_from(PASSWORD_ALPHABET),
            min_size=max(min_length - len(required), 0),
            max_size=20,
        )
    )
    return "".join(draw(st.permutations(required + filler)))


# Long enough but never contains an uppercase letter
passwords_without_uppercase = st.text(
    alphabet=string.ascii_lowercase + string.digits + PASSWORD_SYMBOLS,
    min_size=8,
    max_size=30,
)

# Non-blank passwords shorter than 8 characters
short_passwords = st.text(alphabet=PASSWORD_ALPHABET, min_size=1, max_size=7)

_email_part = st.text(alphabet=string.ascii_letters + string.digits, min_size=1, max_size=12)


@st.composite
def valid_emails(draw: st.DrawFn) -> str:
    """Plain user@domain.tld addresses."""
    return f"{draw(_email_part)}@{draw(_email_part)}.{draw(_email_part)}"


# Any non-empty string without "@" is never an email
emails_without_at = st.text(
    alphabet=st.characters(blacklist_characters="@"),
    min_size=1,
    max_size=50,
)


# -----------------------------------------------------------------------------
# Test Model Classes
# -----------------------------------------------------------------------------


@dataclass
class SignUp:
    """Plain object validated through ValidationRules."""

    email: str | None
    password: str | None


class Address(NotifiableModel):
    """Nested model for NotifiableModel tests."""

    city: str = ""


class Customer(NotifiableModel):
    """Model that validates itself through its own rules."""

    name: str
    email: str = ""
    address: Address | None = None
    previous_addresses: list[Address] = []

    def validate_fields(self) -> bool:
        self.add_notifications(
            self.rules().is_required("Name", self.name).is_email("Email", self.email)
        )
        return not self.has_notifications


# -----------------------------------------------------------------------------
# Pytest Fixtures
# -----------------------------------------------------------------------------


@pytest.fixture
def rules() -> ValidationRules[SignUp]:
    """Create a fresh ValidationRules instance."""
    return ValidationRules[SignUp]()


@pytest.fixture
def notifier() -> Notifier:
    """Create a fresh, empty Notifier."""
    return Notifier()


@pytest.fixture
def customer() -> Customer:
    """Create a valid Customer instance."""
    return Customer(name="Ada", email="ada@example.com")
