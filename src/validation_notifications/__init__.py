"""Accumulate validation failures as notifications instead of raising."""

from validation_notifications import errors
from validation_notifications.events import (
    NotificationEvent,
    NotificationEventType,
    NotificationObserver,
    ObservableMixin,
)
from validation_notifications.log import LoggingObserver, configure_logging
from validation_notifications.model import NotifiableModel
from validation_notifications.notification import Notification
from validation_notifications.notifier import Notifier
from validation_notifications.rules import ValidationRules
from validation_notifications.settings import RuleSettings

# Lazy imports for optional dependencies (rich)
_RICH_NAMES = frozenset({"RichNotificationObserver", "render_notifications"})


def __getattr__(name: str) -> object:
    """Lazy import for optional dependencies.

    Rich components are only loaded when first accessed, avoiding import
    errors when rich is not installed.

    Args:
        name: The attribute name being accessed.

    Returns:
        The requested object from the rich_observers module.

    Raises:
        ImportError: If rich is not installed and a rich component is requested.
        AttributeError: If the requested attribute doesn't exist.
    """
    if name in _RICH_NAMES:
        try:
            import rich  # noqa: F401

            from validation_notifications import rich_observers
        except ImportError as e:
            raise ImportError(
                f"{name} requires rich. Install with: "
                "pip install validation-notifications[rich]"
            ) from e
        return getattr(rich_observers, name)
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    # Records and containers
    "Notification",
    "Notifier",
    # Message catalog
    "errors",
    # Rule chain
    "RuleSettings",
    "ValidationRules",
    # Pydantic base
    "NotifiableModel",
    # Observer pattern
    "NotificationEvent",
    "NotificationEventType",
    "NotificationObserver",
    "ObservableMixin",
    # Logging
    "LoggingObserver",
    "configure_logging",
    # Rich output (lazy-loaded, requires rich optional dependency)
    "RichNotificationObserver",
    "render_notifications",
]

__version__ = "0.1.0"
