"""Ordering rule family for numbers, decimals and dates."""

from __future__ import annotations

from typing import Any

from validation_notifications import errors
from validation_notifications.rules.base import RuleBase, RulesT

__all__ = ["ComparisonRules"]


class ComparisonRules(RuleBase):
    """Rules comparing a value against fixed bounds.

    Works for any mutually orderable values (int, float, Decimal, date,
    datetime). A None value is reported as "must not be null" and is not
    compared.
    """

    def is_bigger_than(
        self: RulesT,
        key: str,
        value: Any,
        comparer: Any,
        message: str | None = None,
    ) -> RulesT:
        """Fail unless ``value`` is strictly greater than ``comparer``."""
        if value is None:
            self._fail(key, errors.is_not_null(key))
            return self
        if not value > comparer:
            self._fail(key, errors.is_bigger_than(key, comparer), message)
        return self

    def is_lower_than(
        self: RulesT,
        key: str,
        value: Any,
        comparer: Any,
        message: str | None = None,
    ) -> RulesT:
        """Fail unless ``value`` is strictly lower than ``comparer``."""
        if value is None:
            self._fail(key, errors.is_not_null(key))
            return self
        if not value < comparer:
            self._fail(key, errors.is_lower_than(key, comparer), message)
        return self

    def is_between(
        self: RulesT,
        key: str,
        value: Any,
        from_: Any,
        to: Any,
        message: str | None = None,
    ) -> RulesT:
        """Fail unless ``from_ <= value <= to``. Both bounds are inclusive."""
        if value is None:
            self._fail(key, errors.is_not_null(key))
            return self
        if not from_ <= value <= to:
            self._fail(key, errors.is_between(key, from_, to), message)
        return self
