"""Catalog of canonical validation messages.

Pure functions mapping a field key and constraint parameters to the
message recorded in a notification. Inputs are not checked. Consumers
match on these strings verbatim, so the wording is part of the public
contract.
"""

from __future__ import annotations

__all__ = [
    "email",
    "invalid",
    "is_between",
    "is_bigger_than",
    "is_lower_than",
    "is_not_null",
    "is_not_null_or_empty",
    "is_not_null_or_white_space",
    "is_null",
    "is_null_or_empty",
    "is_null_or_white_space",
    "is_required",
    "max_length",
    "min_length",
]


def is_required(key: str) -> str:
    """Message for a missing required field."""
    return f"The field '{key}' is required"


def max_length(key: str, length: int) -> str:
    """Message for a value longer than ``length`` characters."""
    return f"The field '{key}' must have a maximum of {length} characters"


def min_length(key: str, length: int) -> str:
    """Message for a value shorter than ``length`` characters."""
    return f"The field '{key}' must have a minimum of {length} characters"


def email(value: str) -> str:
    """Message for a malformed email address.

    Unlike the other entries this one names the offending value, not the key.
    """
    return f"The '{value}' is not a valid email"


def invalid(key: str) -> str:
    """Generic message for a value failing its constraint."""
    return f"The value of field '{key}' is invalid"


def is_null(key: str) -> str:
    return f"The field '{key}' must be null"


def is_not_null(key: str) -> str:
    return f"The field '{key}' must not be null"


def is_bigger_than(key: str, value: object) -> str:
    """Message for a value not strictly greater than ``value``.

    Used for numbers and dates alike; ``value`` is rendered with ``str()``,
    so dates appear in ISO form.
    """
    return f"The field '{key}' must be bigger than {value}"


def is_lower_than(key: str, value: object) -> str:
    """Message for a value not strictly lower than ``value``."""
    return f"The field '{key}' must be lower than {value}"


def is_between(key: str, from_: object, to: object) -> str:
    """Message for a value outside the ``from_``..``to`` range."""
    return f"The value of field '{key}' must be between {from_} and {to}"


def is_null_or_empty(key: str) -> str:
    return f"The field '{key}' must be null or empty"


def is_not_null_or_empty(key: str) -> str:
    return f"The field '{key}' must not be null or empty"


def is_null_or_white_space(key: str) -> str:
    return f"The field '{key}' must be null or contain white space"


def is_not_null_or_white_space(key: str) -> str:
    return f"The field '{key}' must not be null or contain white space"
