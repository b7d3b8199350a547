"""Rule families and the ValidationRules chain that combines them."""

from validation_notifications.rules.base import RuleBase
from validation_notifications.rules.comparisons import ComparisonRules
from validation_notifications.rules.email import EmailRules
from validation_notifications.rules.password import PasswordRules
from validation_notifications.rules.strings import LengthRules, PresenceRules
from validation_notifications.rules.validation_rules import ValidationRules

__all__ = [
    "ComparisonRules",
    "EmailRules",
    "LengthRules",
    "PasswordRules",
    "PresenceRules",
    "RuleBase",
    "ValidationRules",
]
