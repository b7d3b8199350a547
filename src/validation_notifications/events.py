"""Observer pattern implementation for notifier events.

Provides the event types a Notifier emits, the observer protocol, and the
mixin that keeps a notifier's observers.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum, auto
from typing import Any, Protocol, runtime_checkable

__all__ = [
    "NotificationEventType",
    "NotificationEvent",
    "NotificationObserver",
    "ObservableMixin",
]


class NotificationEventType(Enum):
    """Types of notifier events that can be observed."""

    NOTIFICATION_ADDED = auto()
    """Emitted when a single notification is appended."""

    NOTIFICATIONS_MERGED = auto()
    """Emitted when notifications from another source are appended."""

    NOTIFICATIONS_CLEARED = auto()
    """Emitted when a notifier is reset."""


@dataclass
class NotificationEvent:
    """A notifier event that can be observed.

    Attributes:
        event_type: The type of event that occurred.
        source: The notifier that emitted the event.
        data: Event-specific data dictionary.

    Example:
        event = NotificationEvent(
            event_type=NotificationEventType.NOTIFICATION_ADDED,
            source=rules,
            data={"key": "Email", "message": "The 'x' is not a valid email"},
        )
    """

    event_type: NotificationEventType
    source: object
    data: dict[str, Any] = field(default_factory=dict)


@runtime_checkable
class NotificationObserver(Protocol):
    """Protocol for notifier event observers.

    Implement this protocol to receive notifier events. Observers
    can be used for logging, metrics collection, console output, etc.

    Example:
        class PrintingObserver:
            def on_event(self, event: NotificationEvent) -> None:
                print(f"{event.event_type.name}: {event.data}")
    """

    def on_event(self, event: NotificationEvent) -> None:
        """Handle a notifier event.

        Args:
            event: The event to handle.
        """
        ...


class ObservableMixin:
    """Observer registry mixed into Notifier and every ValidationRules.

    Observers are called synchronously, in registration order, each time a
    notifier records, merges or clears notifications. The registry belongs
    to the notifier instance: Notifier.copy() starts with none, and
    merging one notifier into another does not move observers across.

    Example:
        rules = ValidationRules[User]()
        rules.add_observer(LoggingObserver())
        rules.is_email("Email", "nope")  # observer sees NOTIFICATION_ADDED
    """

    _observers: list[NotificationObserver]

    def _ensure_observers(self) -> None:
        # Notifier.__init__ does not create the registry.
        if not hasattr(self, "_observers") or self._observers is None:
            self._observers = []

    def add_observer(self, observer: NotificationObserver) -> None:
        """Register an observer for this notifier's events.

        Registering the same observer twice has no effect.

        Args:
            observer: An object implementing the NotificationObserver protocol.
        """
        self._ensure_observers()
        if observer not in self._observers:
            self._observers.append(observer)

    def remove_observer(self, observer: NotificationObserver) -> None:
        """Stop sending events to an observer. Unknown observers are ignored.

        Args:
            observer: The observer to remove.
        """
        self._ensure_observers()
        if observer in self._observers:
            self._observers.remove(observer)

    def notify(self, event: NotificationEvent) -> None:
        """Send a notifier event to every registered observer.

        Called by Notifier after its notification list has changed, so
        observers see the updated state. An exception raised by an
        observer propagates to the caller of the mutating method.

        Args:
            event: The event to send.
        """
        self._ensure_observers()
        for observer in self._observers:
            observer.on_event(event)

    @property
    def observers(self) -> list[NotificationObserver]:
        """Registered observers, as a copy safe to mutate."""
        self._ensure_observers()
        return self._observers.copy()

    def clear_observers(self) -> None:
        """Unregister all observers. Recorded notifications are kept."""
        self._ensure_observers()
        self._observers.clear()
