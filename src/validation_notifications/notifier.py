"""Ordered notification container.

Provides Notifier, which accumulates Notification records for one
validation pass instead of raising on the first failure.
"""

from __future__ import annotations

from collections.abc import Iterable

from validation_notifications.events import (
    NotificationEvent,
    NotificationEventType,
    ObservableMixin,
)
from validation_notifications.notification import Notification

__all__ = ["Notifier"]


class Notifier(ObservableMixin):
    """Mutable, ordered collection of notifications.

    Insertion order is preserved and duplicates are kept. A notifier is
    meant for a single caller during one validation pass: there is no
    internal locking, so concurrent mutation of one instance from several
    threads must be prevented by the caller.

    Supports the Observer pattern - observers receive NOTIFICATION_ADDED,
    NOTIFICATIONS_MERGED and NOTIFICATIONS_CLEARED events.

    Example:
        notifier = Notifier()
        notifier.add_notification("The field 'Name' is required", key="Name")
        notifier.add_notification("Expected {0} items", 3)

        other = Notifier()
        other.add_notification("Broken")
        notifier.add_notifications(other)

        print(notifier.has_notifications)  # True
        print(notifier.to_dicts())
    """

    def __init__(self, notifications: Iterable[Notification] | None = None) -> None:
        """Initialize the notifier.

        Args:
            notifications: Initial notifications, appended in order.
        """
        self._notifications: list[Notification] = []
        if notifications is not None:
            self._notifications.extend(self._checked(notifications))

    @property
    def notifications(self) -> tuple[Notification, ...]:
        """Read-only ordered view of the recorded notifications."""
        return tuple(self._notifications)

    @property
    def has_notifications(self) -> bool:
        """Check if any notification has been recorded."""
        return len(self._notifications) > 0

    @property
    def notification_count(self) -> int:
        """Get the number of recorded notifications."""
        return len(self._notifications)

    def add_notification(
        self,
        notification: Notification | str,
        *args: object,
        key: str | None = None,
    ) -> None:
        """Append a notification.

        Args:
            notification: A ready Notification, or a message template.
            *args: Positional arguments formatted into the template.
            key: Field the notification relates to.

        Raises:
            TypeError: If args or key are given alongside a Notification.
            ValueError: If the formatted message is empty.

        Note:
            Emits a NOTIFICATION_ADDED event to all registered observers.
        """
        if isinstance(notification, Notification):
            if args or key is not None:
                raise TypeError("args and key cannot be combined with a Notification instance")
        else:
            notification = Notification.create(notification, *args, key=key)

        self._notifications.append(notification)

        self.notify(
            NotificationEvent(
                event_type=NotificationEventType.NOTIFICATION_ADDED,
                source=self,
                data={"key": notification.key, "message": notification.message},
            )
        )

    def add_notifications(self, source: Notifier | Iterable[Notification]) -> None:
        """Append every notification from another pass, preserving order.

        Args:
            source: Another Notifier or an iterable of Notification.

        Raises:
            TypeError: If source is None or yields anything other than
                Notification. Nothing is appended in that case.

        Note:
            Emits a NOTIFICATIONS_MERGED event to all registered observers.
        """
        if source is None:
            raise TypeError("Cannot merge notifications from None")

        items = source.notifications if isinstance(source, Notifier) else source
        merged = self._checked(items)
        self._notifications.extend(merged)

        self.notify(
            NotificationEvent(
                event_type=NotificationEventType.NOTIFICATIONS_MERGED,
                source=self,
                data={"count": len(merged)},
            )
        )

    def clear_notifications(self) -> None:
        """Remove all notifications. Useful for reusing the notifier.

        Note:
            Emits a NOTIFICATIONS_CLEARED event to all registered observers.
        """
        count = len(self._notifications)
        self._notifications.clear()

        self.notify(
            NotificationEvent(
                event_type=NotificationEventType.NOTIFICATIONS_CLEARED,
                source=self,
                data={"count": count},
            )
        )

    def get_notifications(self, key: str | None) -> list[Notification]:
        """Get the notifications recorded for a key, in order.

        Args:
            key: Field key. None selects object-level notifications.
        """
        return [n for n in self._notifications if n.key == key]

    def to_dicts(self) -> list[dict[str, str | None]]:
        """Export notifications as plain dicts, e.g. for a JSON response."""
        return [n.to_dict() for n in self._notifications]

    def copy(self) -> Notifier:
        """Return a notifier holding the same notifications.

        Observers are not carried over to the copy.
        """
        return Notifier(self._notifications)

    def __copy__(self) -> Notifier:
        return self.copy()

    def __deepcopy__(self, memo: dict[int, object]) -> Notifier:
        # Notifications are immutable, so sharing them is a deep copy.
        return self.copy()

    def __eq__(self, other: object) -> bool:
        """Notifiers are equal when they hold the same notifications in order."""
        if not isinstance(other, Notifier):
            return NotImplemented
        return self._notifications == other._notifications

    __hash__ = None  # type: ignore[assignment]

    @staticmethod
    def _checked(items: Iterable[Notification]) -> list[Notification]:
        checked = list(items)
        for item in checked:
            if not isinstance(item, Notification):
                raise TypeError(f"Expected Notification, got {type(item).__name__}")
        return checked

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(notifications={self.notification_count})"
