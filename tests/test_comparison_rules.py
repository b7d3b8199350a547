"""Tests for the comparison rule family."""

from __future__ import annotations

from datetime import date, datetime
from decimal import Decimal

import pytest
from hypothesis import given, settings
from hypothesis import strategies as st

from validation_notifications import Notification, ValidationRules

from .conftest import SignUp


class TestIsBiggerThan:
    """Tests for is_bigger_than."""

    def test_strictly_greater_passes(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_bigger_than("Age", 18, 17)

        assert rules.has_notifications is False

    def test_equal_fails(self, rules: ValidationRules[SignUp]) -> None:
        """Test that the comparison is strict."""
        rules.is_bigger_than("Age", 17, 17)

        assert rules.notifications == (
            Notification("The field 'Age' must be bigger than 17", key="Age"),
        )

    def test_dates(self, rules: ValidationRules[SignUp]) -> None:
        """Test the date variant and its ISO rendering."""
        rules.is_bigger_than("Start", date(2024, 1, 1), date(2024, 6, 1))

        assert rules.notifications[0].message == "The field 'Start' must be bigger than 2024-06-01"

    def test_datetimes(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_bigger_than("Start", datetime(2024, 6, 1, 9), datetime(2024, 6, 1, 8))

        assert rules.has_notifications is False

    def test_none_short_circuits(self, rules: ValidationRules[SignUp]) -> None:
        """Test that None is reported as missing, not compared."""
        rules.is_bigger_than("Age", None, 17, message="Too young")

        assert rules.notifications == (Notification("The field 'Age' must not be null", key="Age"),)

    def test_custom_message(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_bigger_than("Age", 10, 17, message="Too young")

        assert rules.notifications == (Notification("Too young", key="Age"),)


class TestIsLowerThan:
    """Tests for is_lower_than."""

    def test_strictly_lower_passes(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_lower_than("Price", Decimal("9.99"), Decimal("10"))

        assert rules.has_notifications is False

    def test_equal_fails(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_lower_than("Price", 10, 10)

        assert rules.notifications == (
            Notification("The field 'Price' must be lower than 10", key="Price"),
        )

    def test_none_short_circuits(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_lower_than("Price", None, 10)

        assert rules.notifications[0].message == "The field 'Price' must not be null"


class TestIsBetween:
    """Tests for is_between."""

    @pytest.mark.parametrize("value", [18, 50, 120])
    def test_inclusive_bounds(self, rules: ValidationRules[SignUp], value: int) -> None:
        """Test that both bounds are accepted."""
        rules.is_between("Age", value, 18, 120)

        assert rules.has_notifications is False

    @pytest.mark.parametrize("value", [17, 121])
    def test_outside_range(self, rules: ValidationRules[SignUp], value: int) -> None:
        rules.is_between("Age", value, 18, 120)

        assert rules.notifications == (
            Notification("The value of field 'Age' must be between 18 and 120", key="Age"),
        )

    def test_dates(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_between("Due", date(2025, 1, 1), date(2024, 1, 1), date(2024, 12, 31))

        assert rules.notifications[0].message == (
            "The value of field 'Due' must be between 2024-01-01 and 2024-12-31"
        )

    def test_none_short_circuits(self, rules: ValidationRules[SignUp]) -> None:
        rules.is_between("Age", None, 18, 120)

        assert rules.notifications[0].message == "The field 'Age' must not be null"


class TestComparisonProperties:
    """Property-based tests for the comparison rules."""

    @given(value=st.integers(), low=st.integers(), high=st.integers())
    @settings(max_examples=100)
    def test_between_matches_chained_comparison(self, value: int, low: int, high: int) -> None:
        """is_between records a notification exactly when the value is out of range."""
        rules = ValidationRules[SignUp]()

        rules.is_between("Value", value, low, high)

        assert rules.has_notifications == (not low <= value <= high)
        assert rules.notification_count <= 1
