"""Fluent rule chain.

Provides ValidationRules, the notifier that every rule family contributes
its checks to.
"""

from __future__ import annotations

from typing import Generic, TypeVar

from validation_notifications.rules.comparisons import ComparisonRules
from validation_notifications.rules.email import EmailRules
from validation_notifications.rules.password import PasswordRules
from validation_notifications.rules.strings import LengthRules, PresenceRules

__all__ = ["ValidationRules"]

T = TypeVar("T")


class ValidationRules(
    EmailRules,
    PasswordRules,
    PresenceRules,
    LengthRules,
    ComparisonRules,
    Generic[T],
):
    """Fluent set of named checks recording failures as notifications.

    Generic over T, the type of object being validated. T only documents
    the target; no behavior depends on it.

    Each rule method checks one constraint, appends at most one
    notification keyed by the field, and returns self. Create one instance
    per object and validation pass, then read ``has_notifications`` and
    ``notifications``.

    Example:
        from validation_notifications import ValidationRules

        rules = (
            ValidationRules[SignUp]()
            .is_required("Name", form.name)
            .is_email("Email", form.email)
            .is_password("Password", form.password, 8)
            .is_between("Age", form.age, 18, 120)
        )
        if rules.has_notifications:
            return {"errors": rules.to_dicts()}
    """
