"""Rule configuration.

Provides RuleSettings, the frozen Pydantic model holding the patterns the
rule families match against.
"""

from __future__ import annotations

import re
from functools import cached_property, lru_cache

from pydantic import BaseModel, ConfigDict, Field, field_validator

__all__ = ["DEFAULT_EMAIL_PATTERN", "DEFAULT_PASSWORD_SYMBOLS", "RuleSettings"]

DEFAULT_EMAIL_PATTERN = r"^\w+([-+.']\w+)*@\w+([-.]\w+)*\.\w+([-.]\w+)*$"
DEFAULT_PASSWORD_SYMBOLS = "@$!%*?&"


class RuleSettings(BaseModel):
    """Settings shared by the rule families of a ValidationRules instance.

    Attributes:
        email_pattern: Regular expression an email must fully match.
        password_symbols: Symbols a password must draw at least one of.
            Together with ASCII letters and digits they form the only
            characters a password may contain.

    Example:
        settings = RuleSettings(password_symbols="#@!")
        rules = ValidationRules[User](settings=settings)
    """

    model_config = ConfigDict(frozen=True, extra="forbid")

    email_pattern: str = DEFAULT_EMAIL_PATTERN
    password_symbols: str = Field(default=DEFAULT_PASSWORD_SYMBOLS, min_length=1)

    @field_validator("email_pattern")
    @classmethod
    def _pattern_compiles(cls, value: str) -> str:
        try:
            re.compile(value)
        except re.error as e:
            raise ValueError(f"Invalid email pattern: {e}") from e
        return value

    @cached_property
    def email_regex(self) -> re.Pattern[str]:
        """Compiled email pattern."""
        return re.compile(self.email_pattern)

    def password_regex(self, min_length: int) -> re.Pattern[str]:
        """Compiled password complexity pattern for a minimum length.

        Requires one lowercase letter, one uppercase letter, one digit and
        one symbol, with at least ``min_length`` characters overall. Patterns
        are cached per symbol set and length.
        """
        return _password_pattern(self.password_symbols, max(min_length, 0))


@lru_cache(maxsize=128)
def _password_pattern(symbols: str, min_length: int) -> re.Pattern[str]:
    escaped = re.escape(symbols)
    return re.compile(
        rf"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[{escaped}])"
        rf"[A-Za-z\d{escaped}]{{{min_length},}}"
    )
