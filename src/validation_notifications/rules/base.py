"""Shared plumbing for rule families."""

from __future__ import annotations

from collections.abc import Sized
from typing import TypeVar

from validation_notifications.notifier import Notifier
from validation_notifications.settings import RuleSettings

__all__ = ["RuleBase", "RulesT", "is_empty", "is_blank"]

RulesT = TypeVar("RulesT", bound="RuleBase")


def is_empty(value: object) -> bool:
    """True for None and for empty strings or collections."""
    if value is None:
        return True
    return isinstance(value, Sized) and len(value) == 0


def is_blank(value: str | None) -> bool:
    """True for None, empty, and whitespace-only strings."""
    return value is None or not value.strip()


class RuleBase(Notifier):
    """Notifier carrying the settings every rule family reads.

    Rule methods evaluate preconditions in order and stop at the first
    failing one, so one call records at most one notification.
    """

    def __init__(self, settings: RuleSettings | None = None) -> None:
        super().__init__()
        self._settings = settings or RuleSettings()

    @property
    def settings(self) -> RuleSettings:
        """Settings used by the rules of this instance."""
        return self._settings

    def _fail(self, key: str, default: str, message: str | None = None) -> None:
        """Record a failed constraint, preferring the caller's message."""
        self.add_notification(message or default, key=key)
