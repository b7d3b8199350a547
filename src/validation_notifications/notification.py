"""Notification record.

A single recorded validation failure: an optional field key and an
already-formatted message.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

__all__ = ["Notification"]


@dataclass(frozen=True)
class Notification:
    """A single validation failure.

    Attributes:
        message: Formatted, non-empty message.
        key: Field the failure relates to. None for object-level failures.

    Example:
        Notification("The field 'Name' is required", key="Name")
        Notification.create("Expected {0} items, got {1}", 3, 1)
    """

    message: str
    key: str | None = None

    def __post_init__(self) -> None:
        if not self.message:
            raise ValueError("Notification message must not be empty")

    @classmethod
    def create(cls, message: str, *args: object, key: str | None = None) -> Notification:
        """Build a notification, formatting the template once.

        Args:
            message: Message or ``str.format`` template.
            *args: Positional arguments for the template. When omitted the
                message is stored verbatim, braces included.
            key: Field the failure relates to.

        Returns:
            A new Notification.

        Raises:
            ValueError: If the resulting message is empty.
        """
        if args:
            message = message.format(*args)
        return cls(message=message, key=key)

    def to_dict(self) -> dict[str, str | None]:
        """Export as a plain dict with ``key`` and ``message``."""
        return asdict(self)
