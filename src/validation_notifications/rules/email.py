"""Email rule family."""

from __future__ import annotations

from validation_notifications import errors
from validation_notifications.rules.base import RuleBase, RulesT

__all__ = ["EmailRules"]


class EmailRules(RuleBase):
    """Rules for email address fields."""

    def is_email(
        self: RulesT,
        key: str,
        value: str | None,
        message: str | None = None,
    ) -> RulesT:
        """Validate that ``value`` is an email address.

        A missing value is reported as "must not be null or empty" and is
        never also reported as a malformed email.

        Args:
            key: Field key attached to the notification.
            value: The address to check.
            message: Custom message replacing the catalog's email message.

        Returns:
            Self for method chaining.
        """
        if not value:
            self._fail(key, errors.is_not_null_or_empty(key))
            return self
        if self.settings.email_regex.fullmatch(value) is None:
            self._fail(key, errors.email(value), message)
        return self
