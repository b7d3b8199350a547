"""Password rule family."""

from __future__ import annotations

from validation_notifications import errors
from validation_notifications.rules.base import RuleBase, RulesT, is_blank

__all__ = ["PasswordRules"]


class PasswordRules(RuleBase):
    """Rules for password fields."""

    def is_password(
        self: RulesT,
        key: str,
        password: str | None,
        min_length: int,
        message: str | None = None,
    ) -> RulesT:
        """Validate password length and complexity.

        Checks run in order and the first failure ends the call:

        1. None or empty: "must not be null or empty".
        2. Whitespace only: "must not be null or contain white space".
        3. Fewer than ``min_length`` characters: minimum length message.
        4. Missing a lowercase letter, an uppercase letter, a digit or one of
           the configured symbols, or containing any other character:
           invalid value message.

        A password of exactly ``min_length`` characters passes step 3, with
        or without a custom message.

        Args:
            key: Field key attached to the notification.
            password: The password to check.
            min_length: Minimum number of characters.
            message: Custom message replacing the catalog message of steps
                3 and 4.

        Returns:
            Self for method chaining.
        """
        if not password:
            self._fail(key, errors.is_not_null_or_empty(key))
            return self
        if is_blank(password):
            self._fail(key, errors.is_not_null_or_white_space(key))
            return self
        if len(password) < min_length:
            self._fail(key, errors.min_length(key, min_length), message)
            return self
        if self.settings.password_regex(min_length).fullmatch(password) is None:
            self._fail(key, errors.invalid(key), message)
        return self
