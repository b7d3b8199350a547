"""Presence, emptiness and length rule families."""

from __future__ import annotations

from collections.abc import Sized

from validation_notifications import errors
from validation_notifications.rules.base import RuleBase, RulesT, is_blank, is_empty

__all__ = ["PresenceRules", "LengthRules"]


class PresenceRules(RuleBase):
    """Rules about whether a value is present at all."""

    def is_required(
        self: RulesT,
        key: str,
        value: object,
        message: str | None = None,
    ) -> RulesT:
        """Fail when ``value`` is None or an empty string or collection."""
        if is_empty(value):
            self._fail(key, errors.is_required(key), message)
        return self

    def is_null(self: RulesT, key: str, value: object, message: str | None = None) -> RulesT:
        if value is not None:
            self._fail(key, errors.is_null(key), message)
        return self

    def is_not_null(self: RulesT, key: str, value: object, message: str | None = None) -> RulesT:
        if value is None:
            self._fail(key, errors.is_not_null(key), message)
        return self

    def is_null_or_empty(
        self: RulesT,
        key: str,
        value: str | None,
        message: str | None = None,
    ) -> RulesT:
        if value:
            self._fail(key, errors.is_null_or_empty(key), message)
        return self

    def is_not_null_or_empty(
        self: RulesT,
        key: str,
        value: str | None,
        message: str | None = None,
    ) -> RulesT:
        if not value:
            self._fail(key, errors.is_not_null_or_empty(key), message)
        return self

    def is_null_or_white_space(
        self: RulesT,
        key: str,
        value: str | None,
        message: str | None = None,
    ) -> RulesT:
        if not is_blank(value):
            self._fail(key, errors.is_null_or_white_space(key), message)
        return self

    def is_not_null_or_white_space(
        self: RulesT,
        key: str,
        value: str | None,
        message: str | None = None,
    ) -> RulesT:
        if is_blank(value):
            self._fail(key, errors.is_not_null_or_white_space(key), message)
        return self

    def is_true(
        self: RulesT,
        key: str,
        condition: bool,
        message: str | None = None,
    ) -> RulesT:
        """Record a notification when a caller-evaluated condition is false.

        Escape hatch for checks no rule family covers.
        """
        if not condition:
            self._fail(key, errors.invalid(key), message)
        return self

    def is_false(
        self: RulesT,
        key: str,
        condition: bool,
        message: str | None = None,
    ) -> RulesT:
        if condition:
            self._fail(key, errors.invalid(key), message)
        return self


class LengthRules(RuleBase):
    """Rules bounding the length of strings and collections.

    A None or empty value is reported as "must not be null or empty"
    before any length comparison.
    """

    def has_min_length(
        self: RulesT,
        key: str,
        value: Sized | None,
        length: int,
        message: str | None = None,
    ) -> RulesT:
        """Fail when ``value`` has fewer than ``length`` items."""
        if is_empty(value):
            self._fail(key, errors.is_not_null_or_empty(key))
            return self
        if len(value) < length:  # type: ignore[arg-type]
            self._fail(key, errors.min_length(key, length), message)
        return self

    def has_max_length(
        self: RulesT,
        key: str,
        value: Sized | None,
        length: int,
        message: str | None = None,
    ) -> RulesT:
        """Fail when ``value`` has more than ``length`` items."""
        if is_empty(value):
            self._fail(key, errors.is_not_null_or_empty(key))
            return self
        if len(value) > length:  # type: ignore[arg-type]
            self._fail(key, errors.max_length(key, length), message)
        return self
